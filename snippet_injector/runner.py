"""
Codesnippet run orchestration.

Scans the codesnippet definitions once, injects them into every matching
source file and the README, and fails with a single error listing every
problem found across all files.

Usage:
    from snippet_injector import InjectionConfig, inject_codesnippets

    config = InjectionConfig.from_yaml(Path("codesnippets.yaml"))
    report = inject_codesnippets(config)
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from utils.exceptions import ConfigError, SnippetVerificationError
from utils.logging_config import DebugTimer
from utils.marker_parser import JAVADOC_MARKERS, README_MARKERS

from .config import InjectionConfig
from .definitions import get_all_snippets
from .discovery import glob_files, read_lines, split_lines
from .injection import SnippetRule, inject_snippets
from .models import CodesnippetDefinition, InjectionResult, RunReport

logger = logging.getLogger(__name__)


def max_line_length_rule(limit: int) -> SnippetRule:
    """Rule flagging an injected body with any line longer than ``limit``."""

    def check(definition: CodesnippetDefinition, rendered: List[str]) -> bool:
        return all(len(line) <= limit for line in rendered)

    return check


def _build_rules(config: InjectionConfig, rules: Optional[Sequence[SnippetRule]]) -> List[SnippetRule]:
    active = list(rules or ())
    if config.enforce_max_line_length:
        active.append(max_line_length_rule(config.max_line_length))
    return active


def _targets(config: InjectionConfig) -> List[tuple]:
    """Files to inject into, paired with the marker style each uses."""
    targets = []
    if config.include_sources:
        for path in glob_files(config.sources_root, config.sources_glob, required=True):
            targets.append((path, JAVADOC_MARKERS))
    if config.include_readme:
        if config.readme_path is None or not config.readme_path.is_file():
            raise ConfigError(f"Expected README '{config.readme_path}' to be a file but it wasn't.")
        targets.append((config.readme_path, README_MARKERS))
    return targets


def _is_changed(path: Path, result: InjectionResult) -> bool:
    if not result.updated:
        return False
    return split_lines(result.text) != read_lines(path)


def _run(
    config: InjectionConfig,
    write: bool,
    rules: Optional[Sequence[SnippetRule]] = None,
) -> RunReport:
    report = RunReport()

    if not config.include_sources and not config.include_readme:
        logger.debug("Neither sources nor README were included. No codesnippet updating will be done.")
        report.skipped = True
        return report

    with DebugTimer("codesnippets", logger) as timer:
        codesnippet_files = glob_files(config.codesnippet_root, config.codesnippet_glob)
        snippets: Dict[str, CodesnippetDefinition] = get_all_snippets(codesnippet_files)
        report.definitions = len(snippets)
        timer.checkpoint("definitions scanned")

        active_rules = _build_rules(config, rules)
        for path, markers in _targets(config):
            result = inject_snippets(path, markers, snippets, active_rules)
            report.merge(path, result)

            if not _is_changed(path, result):
                continue
            if write:
                result.update_source_file(path)
                report.files_updated.append(path)
            else:
                logger.info(f"Codesnippets out of date in {path}")
                report.files_out_of_date.append(path)
        timer.checkpoint("injection complete")

    if report.missing or report.bad or report.files_out_of_date:
        raise SnippetVerificationError(report.missing, report.bad, report.files_out_of_date)

    logger.info(
        f"Processed {len(report.files_processed)} file(s) with {report.definitions} "
        f"codesnippet(s); {len(report.files_updated)} updated"
    )
    return report


def inject_codesnippets(
    config: InjectionConfig,
    rules: Optional[Sequence[SnippetRule]] = None,
) -> RunReport:
    """
    Inject codesnippet definitions into Javadocs and the README.

    Every changed file is written, even when another site in the run
    references a missing codesnippet.

    Raises:
        ConfigError: If the sources directory or README doesn't exist.
        DuplicateDefinitionError: If an alias is defined more than once.
        SnippetVerificationError: If any site references a missing or bad codesnippet.
    """
    return _run(config, write=True, rules=rules)


def verify_codesnippets(
    config: InjectionConfig,
    rules: Optional[Sequence[SnippetRule]] = None,
) -> RunReport:
    """
    Check that every injected codesnippet is current, without writing.

    Raises:
        SnippetVerificationError: If any site is missing, bad, or out of date.
    """
    return _run(config, write=False, rules=rules)

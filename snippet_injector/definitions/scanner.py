"""
Codesnippet definition scanner.

Walks every codesnippet file line by line and collects the definitions
between ``// BEGIN: <alias>`` and ``// END: <alias>`` markers into one
alias -> definition map for the whole run.

An alias may be defined only once. Collisions inside a file or across
files put every definition involved in the duplicate list and drop the
alias from the map; ``get_all_snippets`` refuses to continue while any
duplicate exists.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

from utils.exceptions import DuplicateDefinitionError
from utils.logging_config import log_performance
from utils.marker_parser import match_definition_begin, match_definition_end

from ..discovery import read_lines
from ..models import CodesnippetDefinition
from .tracker import ActiveDefinitionTracker

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Definitions found in a run, and those that collided."""

    definitions: Dict[str, CodesnippetDefinition] = field(default_factory=dict)
    duplicates: List[CodesnippetDefinition] = field(default_factory=list)

    def add_duplicate(self, definition: CodesnippetDefinition) -> None:
        if definition not in self.duplicates:
            self.duplicates.append(definition)


def scan_lines(path: Path, lines: Iterable[str], result: ScanResult) -> Dict[str, CodesnippetDefinition]:
    """
    Scan one file's lines for definitions.

    Same-file duplicates are recorded on ``result``; the file's unique
    definitions are returned for merging.
    """
    tracker = ActiveDefinitionTracker(path)
    found: Dict[str, CodesnippetDefinition] = {}

    for line_number, line in enumerate(lines):
        alias = match_definition_begin(line)
        if alias is not None:
            tracker.begin(alias, line_number)
            continue

        alias = match_definition_end(line)
        if alias is not None:
            definition = tracker.finalize(alias, line_number)
            if definition is None:
                continue
            if alias in found:
                result.add_duplicate(found[alias])
                result.add_duplicate(definition)
            else:
                found[alias] = definition
            continue

        if tracker.is_active:
            tracker.add_line(line)

    if tracker.is_active:
        logger.warning(f"Unterminated codesnippet(s) {tracker.open_aliases} in {path}")

    return found


@log_performance(logger)
def scan_definitions(files: Iterable[Path]) -> ScanResult:
    """Scan the codesnippet files in order and build the alias map."""
    result = ScanResult()

    for path in files:
        logger.debug(f"Scanning {path} for codesnippet definitions")
        found = scan_lines(path, read_lines(path), result)

        for alias, definition in found.items():
            if alias in result.definitions:
                result.add_duplicate(result.definitions[alias])
                result.add_duplicate(definition)
            else:
                result.definitions[alias] = definition

    duplicate_aliases = {d.alias for d in result.duplicates}
    for alias in duplicate_aliases:
        result.definitions.pop(alias, None)

    logger.info(
        f"Found {len(result.definitions)} codesnippet definition(s), "
        f"{len(result.duplicates)} duplicate(s)"
    )
    return result


def get_all_snippets(files: Iterable[Path]) -> Dict[str, CodesnippetDefinition]:
    """
    Scan the codesnippet files and return the alias map.

    Raises:
        DuplicateDefinitionError: If any alias is defined more than once.
    """
    result = scan_definitions(files)
    if result.duplicates:
        raise DuplicateDefinitionError(result.duplicates)
    return result.definitions

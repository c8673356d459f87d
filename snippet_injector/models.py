"""
Data holders shared by the scanner, the injection engine and the runner.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)

UNSET_LINE = -1


@dataclass(eq=False)
class CodesnippetDefinition:
    """A named body of lines captured between BEGIN/END markers.

    Line numbers are 0-based. ``end_line`` stays at ``UNSET_LINE`` until the
    END marker is seen. Compared by identity, since two definitions with the
    same alias are exactly what duplicate detection has to keep apart.
    """

    definition_file: Path
    alias: str
    begin_line: int
    end_line: int = UNSET_LINE
    codesnippet: List[str] = field(default_factory=list)

    @property
    def is_finalized(self) -> bool:
        return self.end_line != UNSET_LINE

    def add_line(self, line: str) -> None:
        if self.is_finalized:
            raise ValueError(f"Codesnippet '{self.alias}' is already finalized")
        self.codesnippet.append(line)

    def finalize(self, end_line: int) -> None:
        if self.is_finalized:
            raise ValueError(f"Codesnippet '{self.alias}' is already finalized")
        if end_line < self.begin_line:
            raise ValueError(
                f"End line {end_line} precedes begin line {self.begin_line} for '{self.alias}'"
            )
        self.end_line = end_line


@dataclass(frozen=True)
class VerifyResult:
    """One unresolved or rule-violating injection reference."""

    source_file: Path
    line_number: int  # 0-based, the end marker of the site
    alias: str


@dataclass
class InjectionResult:
    """Outcome of injecting codesnippets into one target file."""

    text: str
    updated: bool
    missing: List[VerifyResult] = field(default_factory=list)
    bad: List[VerifyResult] = field(default_factory=list)

    def update_source_file(self, path: Path) -> bool:
        """Write the rewritten text back to ``path`` if anything was injected.

        Returns:
            True if the file was written.
        """
        if not self.updated:
            return False
        path.write_text(self.text, encoding="utf-8")
        logger.info(f"Updated codesnippets in {path}")
        return True


@dataclass
class RunReport:
    """Summary of one inject or verify run, for display by the CLI."""

    definitions: int = 0
    files_processed: List[Path] = field(default_factory=list)
    files_updated: List[Path] = field(default_factory=list)
    files_out_of_date: List[Path] = field(default_factory=list)
    missing: List[VerifyResult] = field(default_factory=list)
    bad: List[VerifyResult] = field(default_factory=list)
    skipped: bool = False

    def merge(self, path: Path, result: InjectionResult) -> None:
        self.files_processed.append(path)
        self.missing.extend(result.missing)
        self.bad.extend(result.bad)

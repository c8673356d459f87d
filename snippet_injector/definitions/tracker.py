"""
Per-file tracker of the codesnippet definitions currently open.

Definitions may nest or interleave: every line seen while any definition is
open is appended to all of them.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..models import CodesnippetDefinition

logger = logging.getLogger(__name__)


class ActiveDefinitionTracker:
    """Open definitions of a single file, keyed by alias."""

    def __init__(self, definition_file: Path):
        self.definition_file = definition_file
        self._open: Dict[str, CodesnippetDefinition] = {}

    @property
    def is_active(self) -> bool:
        return bool(self._open)

    @property
    def open_aliases(self) -> List[str]:
        return list(self._open)

    def begin(self, alias: str, line_number: int) -> bool:
        """Open a definition for ``alias``; a second BEGIN for an open alias is a no-op."""
        if alias in self._open:
            return False
        self._open[alias] = CodesnippetDefinition(self.definition_file, alias, line_number)
        return True

    def add_line(self, line: str) -> None:
        for definition in self._open.values():
            definition.add_line(line)

    def finalize(self, alias: str, line_number: int) -> Optional[CodesnippetDefinition]:
        """Close the definition for ``alias`` and hand it over.

        Returns:
            The finalized definition, or None if ``alias`` wasn't open.
        """
        definition = self._open.pop(alias, None)
        if definition is None:
            logger.warning(
                f"END marker for '{alias}' without a matching BEGIN "
                f"in {self.definition_file}:{line_number}"
            )
            return None
        definition.finalize(line_number)
        return definition

"""
Codesnippet definitions.

Finds the named samples marked with ``// BEGIN: <alias>`` / ``// END: <alias>``
comments in source files.
"""

from .scanner import ScanResult, get_all_snippets, scan_definitions, scan_lines
from .tracker import ActiveDefinitionTracker

__all__ = [
    "ActiveDefinitionTracker",
    "ScanResult",
    "get_all_snippets",
    "scan_definitions",
    "scan_lines",
]

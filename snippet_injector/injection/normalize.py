"""Strip the common leading indentation from a codesnippet body."""

import re
from typing import List, Optional, Sequence

LEADING_WHITESPACE = re.compile(r"\s*", re.ASCII)


def minimal_indent(lines: Sequence[str]) -> Optional[str]:
    """Shortest leading-whitespace run over the non-blank lines, or None if all are blank."""
    indent = None
    for line in lines:
        if not line.strip():
            continue
        lead = LEADING_WHITESPACE.match(line).group(0)
        if indent is None or len(lead) < len(indent):
            indent = lead
    return indent


def respace_lines(lines: Sequence[str]) -> List[str]:
    """Remove the minimal indentation from every line.

    The first occurrence of the indent string is removed, so blank lines
    shorter than the indent pass through untouched.
    """
    indent = minimal_indent(lines)
    if not indent:
        return list(lines)
    return [line.replace(indent, "", 1) for line in lines]

"""HTML entity escaping for codesnippets injected into Javadoc comments."""

from typing import Sequence, Tuple

# Applied in order; "&" goes first or the entities below would be escaped again.
REPLACEMENTS: Sequence[Tuple[str, str]] = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    (">", "&gt;"),
    ("<", "&lt;"),
    ("@", "&#64;"),
    ("{", "&#123;"),
    ("}", "&#125;"),
    ("(", "&#40;"),
    (")", "&#41;"),
    ("/", "&#47;"),
    ("\\", "&#92;"),
)


def escape_line(line: str) -> str:
    """Escape one line; empty and whitespace-only lines are returned unchanged."""
    if not line.strip():
        return line
    for literal, entity in REPLACEMENTS:
        line = line.replace(literal, entity)
    return line

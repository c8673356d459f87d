"""
Codesnippet injection.

Replaces the body of Javadoc (``<!-- src_embed <alias> -->``) and README
(```` ```java <alias> ````) injection sites with the referenced definition.
"""

from .engine import SiteState, SnippetRule, inject_lines, inject_snippets, render_snippet
from .escape import REPLACEMENTS, escape_line
from .normalize import minimal_indent, respace_lines

__all__ = [
    "SiteState",
    "SnippetRule",
    "inject_lines",
    "inject_snippets",
    "render_snippet",
    "REPLACEMENTS",
    "escape_line",
    "minimal_indent",
    "respace_lines",
]

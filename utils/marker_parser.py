"""
Line-level marker grammar for codesnippet definitions and injection sites.

Definitions live in source files between single-line comments:
    // BEGIN: com.example.client.instantiation
    Client client = new ClientBuilder().build();
    // END: com.example.client.instantiation

Javadoc injection sites sit inside a block comment:
    * <!-- src_embed com.example.client.instantiation -->
    * <!-- end com.example.client.instantiation -->

README injection sites are fenced code blocks tagged with the alias:
    ```java com.example.client.instantiation
    ```

Every pattern must match the whole line; markers embedded in other text
are ignored.
"""

import re
from dataclasses import dataclass
from typing import Optional

ALIAS = r"([a-zA-Z0-9.#\-_]*)"

DEFINITION_BEGIN = re.compile(r"\s*//\s*BEGIN:\s*" + ALIAS + r"\s*", re.ASCII)
DEFINITION_END = re.compile(r"\s*//\s*END:\s*" + ALIAS + r"\s*", re.ASCII)
SRC_EMBED_BEGIN = re.compile(r"(\s*)\*\s*<!--\s*src_embed\s+" + ALIAS + r"\s*-->", re.ASCII)
SRC_EMBED_END = re.compile(r"(\s*)\*\s*<!--\s*end\s+" + ALIAS + r"\s*-->", re.ASCII)
README_BEGIN = re.compile(r"```(\s*)?java\s+" + ALIAS + r"\s*", re.ASCII)
README_END = re.compile(r"```")


@dataclass(frozen=True)
class MarkerPair:
    """Begin/end markers for one style of injection site, plus how to render into it."""

    name: str
    begin: re.Pattern
    end: re.Pattern
    pre_fence: str = ""
    post_fence: str = ""
    prefix_group: int = -1  # Group of the end marker holding the line prefix, < 1 for none
    additional_prefix: str = ""
    escape: bool = False


JAVADOC_MARKERS = MarkerPair(
    name="javadoc",
    begin=SRC_EMBED_BEGIN,
    end=SRC_EMBED_END,
    pre_fence="<pre>",
    post_fence="</pre>",
    prefix_group=1,
    additional_prefix="* ",
    escape=True,
)

README_MARKERS = MarkerPair(
    name="readme",
    begin=README_BEGIN,
    end=README_END,
)


def match_definition_begin(line: str) -> Optional[str]:
    """Return the alias if the line opens a codesnippet definition."""
    match = DEFINITION_BEGIN.fullmatch(line)
    return match.group(1) if match else None


def match_definition_end(line: str) -> Optional[str]:
    """Return the alias if the line closes a codesnippet definition."""
    match = DEFINITION_END.fullmatch(line)
    return match.group(1) if match else None


def match_site_begin(line: str, markers: MarkerPair) -> Optional[str]:
    """Return the referenced alias if the line opens an injection site."""
    match = markers.begin.fullmatch(line)
    return match.group(2) if match else None


def match_site_end(line: str, markers: MarkerPair) -> Optional[re.Match]:
    """Return the match if the line closes an injection site."""
    return markers.end.fullmatch(line)


def line_prefix(match: re.Match, group: int, additional_prefix: str) -> str:
    """Build the prefix for injected lines from the end-marker match."""
    if group < 1:
        return additional_prefix
    return (match.group(group) or "") + additional_prefix


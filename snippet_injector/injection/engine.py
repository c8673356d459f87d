"""
Codesnippet injection engine.

Rewrites the injection sites of one target file. Everything between a
site's begin and end markers is thrown away and replaced by the current
body of the referenced definition, so running the engine twice gives the
same text.

For each resolved site the engine emits, in order:
1. the pre-fence line (``<pre>`` for Javadoc), if any
2. the body with its common indentation removed, optionally escaped
3. the post-fence line (``</pre>`` for Javadoc), if any
4. the end marker line, unchanged

Every emitted line carries the prefix captured from the end marker (the
comment's ``* `` continuation for Javadoc, nothing for README fences).
"""

import logging
from enum import Enum, auto
from pathlib import Path
from typing import Callable, List, Mapping, Sequence

from utils.marker_parser import MarkerPair, line_prefix, match_site_begin, match_site_end
from utils.state_machine import StateMachine

from ..discovery import read_lines
from ..models import CodesnippetDefinition, InjectionResult, VerifyResult
from .escape import escape_line
from .normalize import respace_lines

logger = logging.getLogger(__name__)

# A rule gets the definition and its rendered body lines; False marks the site bad.
SnippetRule = Callable[[CodesnippetDefinition, List[str]], bool]


class SiteState(Enum):
    NOT_IN_SITE = auto()
    IN_SITE = auto()


SITE_TRANSITIONS = {
    SiteState.NOT_IN_SITE: [SiteState.IN_SITE],
    SiteState.IN_SITE: [SiteState.NOT_IN_SITE],
}


def render_snippet(definition: CodesnippetDefinition, prefix: str, escape: bool) -> List[str]:
    """Normalize, escape and prefix the body of a definition."""
    rendered = []
    for line in respace_lines(definition.codesnippet):
        if escape:
            line = escape_line(line)
        rendered.append(prefix.rstrip() if not line else prefix + line)
    return rendered


def inject_lines(
    path: Path,
    lines: Sequence[str],
    markers: MarkerPair,
    snippets: Mapping[str, CodesnippetDefinition],
    rules: Sequence[SnippetRule] = (),
) -> InjectionResult:
    """
    Inject codesnippets into the lines of one file.

    Args:
        path: File the lines came from, used in verification results.
        lines: File content without line terminators.
        markers: Injection site style (Javadoc or README).
        snippets: Alias -> definition map from the scanner.
        rules: Checks applied to each injected body; a failing rule is
            reported as a bad codesnippet but doesn't change the output.

    Returns:
        InjectionResult with the rewritten text.
    """
    output: List[str] = []
    missing: List[VerifyResult] = []
    bad: List[VerifyResult] = []
    updated = False
    alias = ""
    sm = StateMachine(initial_state=SiteState.NOT_IN_SITE, allowed_transitions=SITE_TRANSITIONS)

    for line_number, line in enumerate(lines):
        begin_alias = match_site_begin(line, markers)
        if begin_alias is not None:
            output.append(line)
            alias = begin_alias
            sm.transition_to(SiteState.IN_SITE, reason=f"begin '{alias}' at line {line_number}")
            continue

        end_match = match_site_end(line, markers)
        if end_match is None:
            # Lines inside a site are the stale body being replaced
            if sm.state == SiteState.NOT_IN_SITE:
                output.append(line)
            continue

        if sm.state == SiteState.NOT_IN_SITE:
            output.append(line)
            continue

        updated = True
        sm.transition_to(SiteState.NOT_IN_SITE, reason=f"end '{alias}' at line {line_number}")

        definition = snippets.get(alias)
        if definition is None:
            logger.debug(f"Missing codesnippet '{alias}' referenced in {path}:{line_number}")
            missing.append(VerifyResult(path, line_number, alias))
            continue

        prefix = line_prefix(end_match, markers.prefix_group, markers.additional_prefix)
        body = render_snippet(definition, prefix, markers.escape)

        if not all(rule(definition, body) for rule in rules):
            bad.append(VerifyResult(path, line_number, alias))

        if markers.pre_fence:
            output.append(prefix + markers.pre_fence)
        output.extend(body)
        if markers.post_fence:
            output.append(prefix + markers.post_fence)
        output.append(line)

    if sm.state == SiteState.IN_SITE:
        logger.warning(
            f"Unterminated injection site '{alias}' in {path}; "
            f"lines after its begin marker were dropped"
        )

    text = "".join(f"{line}\n" for line in output)
    return InjectionResult(text=text, updated=updated, missing=missing, bad=bad)


def inject_snippets(
    path: Path,
    markers: MarkerPair,
    snippets: Mapping[str, CodesnippetDefinition],
    rules: Sequence[SnippetRule] = (),
) -> InjectionResult:
    """Read ``path`` and inject codesnippets into it (without writing)."""
    return inject_lines(path, read_lines(path), markers, snippets, rules)

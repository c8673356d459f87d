"""
snippet_injector — Codesnippet injection for Javadocs and READMEs

Keeps documentation samples compiled and current: samples are written once
in source files between ``// BEGIN: <alias>`` and ``// END: <alias>``
comments and copied verbatim into every Javadoc and README site that
references the alias.

Main components:
- definitions: Scanning source files for codesnippet definitions
- injection: Rewriting injection sites (normalizing, escaping, fencing)
- runner: Whole-run inject/verify with consolidated error reporting
- cli: Command-line interface
"""

from .config import InjectionConfig
from .models import CodesnippetDefinition, InjectionResult, RunReport, VerifyResult
from .runner import inject_codesnippets, max_line_length_rule, verify_codesnippets

__version__ = "0.1.0"

__all__ = [
    "InjectionConfig",
    "CodesnippetDefinition",
    "InjectionResult",
    "RunReport",
    "VerifyResult",
    "inject_codesnippets",
    "verify_codesnippets",
    "max_line_length_rule",
]

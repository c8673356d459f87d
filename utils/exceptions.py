"""
Custom exception hierarchy for snippet_injector.

All project-specific exceptions inherit from SnippetInjectorError.
"""

import os
from typing import Iterable


class SnippetInjectorError(Exception):
    """Base exception for snippet_injector."""

    pass


class ConfigError(SnippetInjectorError):
    """Invalid or missing configuration."""

    pass


class FileReadError(SnippetInjectorError):
    """A definition or target file could not be decoded."""

    pass


class DuplicateDefinitionError(SnippetInjectorError):
    """An alias was defined more than once across the codesnippet files."""

    def __init__(self, duplicates: Iterable):
        # Sorted by alias, then location, so the message is stable across runs
        self.duplicates = sorted(
            duplicates,
            key=lambda d: (d.alias, str(d.definition_file), d.begin_line),
        )
        lines = [
            f"Duplicate codesnippet definition {d.alias} detected in "
            f"{d.definition_file}:{d.begin_line}."
            for d in self.duplicates
        ]
        super().__init__(
            "Duplicate codesnippet definitions detected:" + os.linesep + os.linesep.join(lines)
        )


class SnippetVerificationError(SnippetInjectorError):
    """Missing, rule-violating, or out-of-date codesnippet references."""

    def __init__(self, missing: Iterable = (), bad: Iterable = (), out_of_date: Iterable = ()):
        self.missing = list(missing)
        self.bad = list(bad)
        self.out_of_date = list(out_of_date)

        lines = []
        for result in self.missing:
            lines.append(
                f"Unable to locate codesnippet with alias '{result.alias}' referenced in "
                f"'{result.source_file}:{result.line_number}'."
            )
        for result in self.bad:
            lines.append(
                f"Codesnippet with alias '{result.alias}' referenced in "
                f"'{result.source_file}:{result.line_number}' didn't follow codesnippet rules."
            )
        for path in self.out_of_date:
            lines.append(f"File '{path}' has codesnippets that are out of date.")

        super().__init__(
            "Codesnippet injection encountered errors:" + os.linesep + os.linesep.join(lines)
        )

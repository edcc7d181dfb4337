from __future__ import annotations

"""
Domain Exceptions.

Fatal conditions that abort a run. Soft conditions (files without hits,
prune paths that cannot be navigated, unknown destructured names) are not
represented here because they are never surfaced as errors.
"""

from typing import Optional


class LocalesweepError(Exception):
    """Base class for every fatal analyzer error."""


class CorpusReadError(LocalesweepError):
    """The source corpus root is missing or a directory could not be listed."""


class LocaleReadError(LocalesweepError):
    """A locale or type file could not be read from disk."""


class LocaleParseError(LocalesweepError):
    """
    A locale source does not hold a recognizable exported object literal.

    Attributes:
        line: 1-based line of the offending token, if known.
        col: 1-based column of the offending token, if known.
    """

    def __init__(self, message: str, line: Optional[int] = None, col: Optional[int] = None) -> None:
        self.line = line
        self.col = col
        if line is not None:
            message = f"{message} (line {line}, column {col})"
        super().__init__(message)

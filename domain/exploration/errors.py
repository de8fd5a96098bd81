"""Exploration Bounded Context - Error Hierarchy.

Custom exceptions for exploration operations. Parsing errors also derive from
ValueError so callers expecting the built-in parse failure keep working.
"""

from __future__ import annotations


class ExplorationError(Exception):
    """Base error for exploration operations."""


class InvalidInitialPositionError(ExplorationError, ValueError):
    """Initial position text is not ``"<int> <int> <facing>"``.

    Attributes:
        text: The offending raw position string
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        super().__init__(f"Invalid initial position {text!r}: {reason}")


class InvalidThreatRecordError(ExplorationError, ValueError):
    """A threat record could not be parsed.

    Attributes:
        line_number: 1-based line in the source, or None when parsed standalone
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)

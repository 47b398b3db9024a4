"""Exceptions raised while reading the inputs of a comparison.

The comparison engine itself cannot fail on valid JSON values.  Only the
loader does, and it reports exactly two kinds of failure, each naming the
offending file and chaining the underlying cause.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "DiffInputError",
    "InputUnparseableError",
    "InputUnreadableError",
]


class DiffInputError(Exception):
    """Base class for failures to obtain an input value.

    Attributes:
        path:  The input that could not be used.
        cause: The underlying exception.
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        return f"Failed to use '{self.path}': {self.cause}"


class InputUnreadableError(DiffInputError):
    """Raised when an input file cannot be read or decoded as UTF-8."""

    def _describe(self) -> str:
        return f"Failed to load '{self.path}': {self.cause}"


class InputUnparseableError(DiffInputError):
    """Raised when an input file is not valid JSON."""

    def _describe(self) -> str:
        return f"Failed to parse '{self.path}' as JSON: {self.cause}"


"""Exception types for the MONAD evaluator.

`MonadInputError` and `ProgramFormatError` also derive from `ValueError` so
callers that only care about "bad input" can catch the builtin.
"""

from __future__ import annotations

from typing import Optional


class MonadError(Exception):
    """Base class for evaluator and program errors."""


class MonadInputError(MonadError, ValueError):
    """Raised when digits do not line up with the program or fall out of range."""

    def __init__(self, message: str, *, index: Optional[int] = None) -> None:
        self.index = index
        super().__init__(message)


class ProgramFormatError(MonadError, ValueError):
    """Raised when a structured program record cannot be decoded."""

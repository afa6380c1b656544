"""Exception hierarchy for possibly."""

from __future__ import annotations


class PossiblyError(Exception):
    """Base exception for all possibly errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class NullValueError(PossiblyError, ValueError):
    """A container was constructed with an absent value or failure.

    This is a programming error at the call site, reported when the
    container is built rather than deferred into its state.
    """


class ConfigurationError(PossiblyError):
    """Settings validation or resolution failed."""

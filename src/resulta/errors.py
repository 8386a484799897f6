"""Exception hierarchy for resulta."""

from __future__ import annotations

ACCESS_ERROR_MESSAGE = "Tried to access result value that is not ok"


class ResultaError(Exception):
    """Base exception for all resulta errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ResultAccessError(ResultaError):
    """A result value was extracted from an ``Err``.

    Raised only by ``value_exn``. The wrapped error is deliberately not
    attached: callers that need it should ``match`` instead.
    """

    _tag = "ResultAccessErr"

    def __init__(
        self, message: str = ACCESS_ERROR_MESSAGE, *, hint: str | None = None
    ) -> None:
        super().__init__(message, hint=hint)


class ResultShapeError(ResultaError, ValueError):
    """A status/payload pair does not describe a well-formed Result."""

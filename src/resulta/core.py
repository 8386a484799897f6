"""The Result record, its constructors, and its predicates.

A Result is a single frozen record tagged by ``status``. There are no variant
subclasses: an ``Ok`` and an ``Err`` are the same class with a different
discriminant, which keeps the value plain data that survives pickling,
copying, and ``to_dict`` round trips without relying on class identity.

Example:
    ```python
    from resulta import ok, err, is_ok

    parsed = ok(42)
    failed = err(ValueError("not a number"))
    assert is_ok(parsed) and not is_ok(failed)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from resulta._flags import trace_captures_enabled
from resulta.errors import ResultShapeError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

A = TypeVar("A")
E = TypeVar("E")


class ResultStatus(IntEnum):
    """Discriminant of a Result. Values are bit flags, stable on the wire."""

    OK = 1 << 0
    ERR = 1 << 1


@dataclass(frozen=True, slots=True)
class Result(Generic[A, E]):
    """Immutable outcome of a computation: a value or an error, never both.

    Build instances with ``ok()`` and ``err()``. Direct construction is
    validated so the inactive slot is always ``None``.
    """

    status: ResultStatus
    #: Populated iff ``status`` is ``OK``.
    value: A | None = None
    #: Populated iff ``status`` is ``ERR``.
    err: E | None = None

    def __post_init__(self) -> None:
        """Reject status/payload pairs that do not describe one variant."""
        try:
            status = ResultStatus(self.status)
        except ValueError:
            raise ResultShapeError(
                f"Unknown result status: {self.status!r}",
                hint="Use ok(...) or err(...) to build results.",
            ) from None
        object.__setattr__(self, "status", status)

        if status is ResultStatus.OK and self.err is not None:
            raise ResultShapeError(
                "Ok result cannot carry an error",
                hint="Use err(...) for failures.",
            )
        if status is ResultStatus.ERR and self.value is not None:
            raise ResultShapeError(
                "Err result cannot carry a value",
                hint="Use ok(...) for successes.",
            )

    def __repr__(self) -> str:
        if self.status is ResultStatus.OK:
            return f"Ok({self.value!r})"
        return f"Err({self.err!r})"


def ok(value: A) -> Result[A, Any]:
    """Construct an ``Ok`` wrapping *value* verbatim."""
    return Result(ResultStatus.OK, value, None)


def err(error: E) -> Result[Any, E]:
    """Construct an ``Err`` wrapping *error* verbatim."""
    return Result(ResultStatus.ERR, None, error)


def result(value: Any = None) -> Result[Any, Any]:
    """Construct an ``Ok`` if *value* is truthy and not an exception, else an ``Err``.

    This is a lossy convenience. Calling it with no argument, with a falsy
    value (``0``, ``""``, ``[]``, ``False``, ``None``), or with an exception
    instance all produce ``Err``, and in the first two cases the error slot
    holds something that is not an exception at all. Prefer ``ok``/``err``
    whenever the caller knows which variant it means.
    """
    if value and not isinstance(value, BaseException):
        return ok(value)
    return err(value)


def is_ok(res: Result[A, E]) -> bool:
    """Return True iff *res* is an ``Ok``."""
    return res.status is ResultStatus.OK


def is_err(res: Result[A, E]) -> bool:
    """Return True iff *res* is an ``Err``."""
    return res.status is ResultStatus.ERR


def _log_capture(exc: Exception, thunk: Callable[..., Any]) -> None:
    origin = getattr(thunk, "__qualname__", None) or repr(thunk)
    logger.debug(
        "Captured %s from %s: %s",
        type(exc).__name__,
        origin,
        exc,
        exc_info=exc if trace_captures_enabled() else None,
    )


def of_throwable(thunk: Callable[[], A]) -> Result[A, Exception]:
    """Run *thunk* once and capture its outcome.

    Returns ``Ok`` with the return value, or ``Err`` with the raised
    exception. Only ``Exception`` subclasses are captured; ``KeyboardInterrupt``
    and other ``BaseException`` types propagate.
    """
    try:
        value = thunk()
    except Exception as e:
        _log_capture(e, thunk)
        return err(e)
    return ok(value)


async def of_promise(thunk: Callable[[], Awaitable[A]]) -> Result[A, Exception]:
    """Call *thunk* once, await its awaitable once, and capture the outcome.

    A failure inside the awaitable (or raised by *thunk* before it returns
    one) becomes ``Err`` and is never re-raised. Cancellation is not a domain
    failure: ``asyncio.CancelledError`` propagates to the caller.
    """
    try:
        value = await thunk()
    except Exception as e:
        _log_capture(e, thunk)
        return err(e)
    return ok(value)

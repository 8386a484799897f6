"""Combinators: pure transformations from one Result to another.

None of these functions catch exceptions. An ``Err`` passes through
untouched (the same object is returned), and an exception raised by a
caller-supplied function propagates to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from resulta.core import Result, err, is_ok, ok

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
F = TypeVar("F")
U = TypeVar("U")


def map(res: Result[A, E], tx: Callable[[A], B]) -> Result[B, E]:  # noqa: A001
    """Transform the value with *tx* if ``Ok``, otherwise return the ``Err`` as is."""
    if is_ok(res):
        return ok(tx(res.value))  # type: ignore[arg-type]
    return res  # type: ignore[return-value]


def map_err(res: Result[A, E], tx: Callable[[E], F]) -> Result[A, F]:
    """Transform the error with *tx* if ``Err``, otherwise return the ``Ok`` as is."""
    if is_ok(res):
        return res  # type: ignore[return-value]
    return err(tx(res.err))  # type: ignore[arg-type]


def and_then(res: Result[A, E], tx: Callable[[A], Result[B, E]]) -> Result[B, E]:
    """Feed the value into *tx* if ``Ok``, otherwise return the ``Err`` as is.

    Also known as ``bind`` or ``flat_map``. Because *tx* returns a Result,
    a chain of ``and_then`` calls stops at the first ``Err``: every later step
    is skipped and the original error object (including its exception class)
    is what comes out the end.

    Example:
        ```python
        and_then(and_then(ok(5), lambda x: ok(x * 2)), lambda x: ok(x + 1))
        # Ok(11)
        ```
    """
    if is_ok(res):
        return tx(res.value)  # type: ignore[arg-type]
    return res  # type: ignore[return-value]


def combine(results: Iterable[Result[A, E]]) -> Result[tuple[A, ...], E]:
    """Collapse many results into one.

    Returns ``Ok`` of a tuple holding every value in input order, or the first
    ``Err`` encountered. The scan stops at that ``Err``, so a lazy iterable is
    consumed only up to it. An empty input gives ``Ok(())``.
    """
    values: list[A] = []
    for res in results:
        if not is_ok(res):
            return res  # type: ignore[return-value]
        values.append(res.value)  # type: ignore[arg-type]
    return ok(tuple(values))


def match(res: Result[A, E], *, ok: Callable[[A], U], err: Callable[[E], U]) -> U:
    """Unwrap *res* by handling each case.

    Exactly one handler runs, exactly once, and its return value is returned
    unchanged.
    """
    if is_ok(res):
        return ok(res.value)  # type: ignore[arg-type]
    return err(res.err)  # type: ignore[arg-type]

"""Extractors: turn a Result back into a plain value."""

from __future__ import annotations

from typing import TypeVar

from resulta.core import Result, is_ok
from resulta.errors import ResultAccessError

A = TypeVar("A")
E = TypeVar("E")


def value_or(res: Result[A, E], fallback: A) -> A:
    """Return the value if ``Ok``, else *fallback*."""
    if is_ok(res):
        return res.value  # type: ignore[return-value]
    return fallback


def value_exn(res: Result[A, E]) -> A:
    """Return the value if ``Ok``, else raise ``ResultAccessError``.

    This is the escape hatch back into exception-based control flow, for call
    sites that treat failure as unrecoverable. The wrapped error is neither
    raised nor chained; inspect it with ``match`` before calling this if it
    matters.
    """
    if is_ok(res):
        return res.value  # type: ignore[return-value]
    raise ResultAccessError(
        hint="Check is_ok() first, or use value_or()/match() to handle Err."
    )

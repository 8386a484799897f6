"""resulta: errors as values.

A ``Result`` is an immutable record holding either a success value or an
error. Fallible steps return Results instead of raising, and callers branch
on the outcome explicitly.

Public API:
    - ok(), err(), result(): Constructors
    - of_throwable(), of_promise(): Capture a raising sync/async computation
    - is_ok(), is_err(): Predicates
    - map(), map_err(), and_then(), combine(), match(): Combinators
    - value_or(), value_exn(): Extractors
    - to_dict(), from_dict(): Plain-record form for serialization boundaries
"""

from __future__ import annotations

import logging

from resulta.combinators import and_then, combine, map, map_err, match
from resulta.core import (
    Result,
    ResultStatus,
    err,
    is_err,
    is_ok,
    of_promise,
    of_throwable,
    ok,
    result,
)
from resulta.errors import ResultAccessError, ResultaError, ResultShapeError
from resulta.extract import value_exn, value_or
from resulta.wire import ResultRecord, from_dict, to_dict

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resulta")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resulta").addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Core type
    "Result",
    "ResultStatus",
    # Constructors
    "ok",
    "err",
    "result",
    "of_throwable",
    "of_promise",
    # Predicates
    "is_ok",
    "is_err",
    # Combinators
    "map",
    "map_err",
    "and_then",
    "combine",
    "match",
    # Extractors
    "value_or",
    "value_exn",
    # Wire form
    "ResultRecord",
    "to_dict",
    "from_dict",
    # Exceptions
    "ResultaError",
    "ResultAccessError",
    "ResultShapeError",
]

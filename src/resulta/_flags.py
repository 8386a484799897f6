"""Internal helpers for environment toggles.

Centralizes how opt-in behavior is read from the environment so semantics
stay consistent across modules.
"""

from __future__ import annotations

import os

__all__ = ["strict_wire_enabled", "trace_captures_enabled"]


def trace_captures_enabled(*, override: bool | None = None) -> bool:
    """Return True when capture-point logs should include tracebacks.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when ``RESULTA_TRACE_CAPTURES`` is exactly ``"1"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("RESULTA_TRACE_CAPTURES") == "1"


def strict_wire_enabled(*, override: bool | None = None) -> bool:
    """Return True when wire decoding rejects a populated inactive slot.

    Semantics:
    - If ``override`` is provided, it takes precedence.
    - Otherwise strict mode is on unless ``RESULTA_STRICT_WIRE`` is ``"0"``.
    """
    if override is not None:
        return bool(override)
    return os.getenv("RESULTA_STRICT_WIRE") != "0"

"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, and small call-tracking
doubles shared by the suites. Environment fixtures are autouse.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import Any

import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Spy:
    """Callable test double that records every argument it is called with.

    Wraps an optional function; without one it returns its argument. Use to
    assert how many times a combinator invoked a callback, and with what.
    """

    fn: Any = None
    calls: list[Any] = field(default_factory=list)

    def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        if self.fn is None:
            return arg
        return self.fn(arg)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture(scope="session")
def spy():
    """Return the ``Spy`` class; call it to get a fresh double.

    Session-scoped so hypothesis-driven tests can request it.
    """
    return Spy


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_resulta_env(request, monkeypatch):
    """Ensure RESULTA_* toggles from the host shell do not leak into tests.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return

    for key in list(os.environ.keys()):
        if key.startswith("RESULTA_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("hypothesis").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "allow_env_pollution: keep RESULTA_* variables from the host"
    )

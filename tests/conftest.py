"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration and a failure
recorder test double. Isolation fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import logging
import os

import pytest

from possibly.config import default_settings

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FailureRecorder:
    """Handler test double that remembers every failure it is given."""

    failures: list[Exception] = field(default_factory=list)

    def __call__(self, failure: Exception) -> None:
        self.failures.append(failure)

    @property
    def count(self) -> int:
        return len(self.failures)

    @property
    def messages(self) -> list[str]:
        return [str(f) for f in self.failures]


@pytest.fixture
def recorder() -> FailureRecorder:
    """Return a fresh FailureRecorder."""
    return FailureRecorder()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    monkeypatch.setattr("possibly.config._DOTENV_LOADED", False)
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "possibly.config.load_dotenv", lambda *_args, **_kwargs: False
        )


@pytest.fixture(autouse=True)
def isolate_possibly_env(request, monkeypatch):
    """Clear POSSIBLY_* env vars to prevent test pollution.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("POSSIBLY_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_default_settings():
    """Drop cached settings so each test resolves its own environment."""
    default_settings.cache_clear()
    yield
    default_settings.cache_clear()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def adapter_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG and above from the adapters logger."""
    caplog.set_level(logging.DEBUG, logger="possibly")
    return caplog

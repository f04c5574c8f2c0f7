"""Pytest configuration and shared fixtures for klaw-sampling tests."""

import random

import pytest
from klaw_sampling import StdlibSource, clear_log_hooks


@pytest.fixture
def rng() -> StdlibSource:
    """Seeded source for statistical tests; fixed so results are reproducible."""
    return StdlibSource(random.Random(20240611))


@pytest.fixture
def reset_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start the test without a stored configuration."""
    import klaw_sampling._config

    monkeypatch.setattr(klaw_sampling._config, '_config', None)


@pytest.fixture
def cleanup_hooks():
    """Clear log hooks before and after a test."""
    clear_log_hooks()
    yield
    clear_log_hooks()

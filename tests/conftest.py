"""Pytest configuration and shared fixtures for oxide tests."""

import pytest

from oxide import config
from oxide._logging import clear_log_hooks


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from oxide import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from oxide import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from oxide import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from oxide import Nothing

    return Nothing


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test from an uninitialized config and a clean environment."""
    for name in ('OXIDE_LOG_LEVEL', 'OXIDE_LOG_JSON', 'OXIDE_TRACE_GUARDS'):
        monkeypatch.delenv(name, raising=False)
    config.reset()
    clear_log_hooks()
    yield
    config.reset()
    clear_log_hooks()

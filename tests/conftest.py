"""Pytest configuration and shared fixtures for optionals tests."""

import logging

import pytest
import structlog

import optionals._config as config_module
from optionals._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Each test starts uninitialized, with no policy in the environment."""
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.delenv(config_module.POLICY_ENV_VAR, raising=False)
    yield


@pytest.fixture
def log_hooks():
    """Clear log hooks, structlog config and root handlers around a test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from optionals import Some

    return Some("Ol' Man Jenkins")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from optionals import Nothing

    return Nothing

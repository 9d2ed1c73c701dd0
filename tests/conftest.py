"""Shared pytest fixtures for domwait tests."""

from __future__ import annotations

import pytest

from domwait.config.runtime_config import reset_config
from domwait.dom.node import Document

_ENV_KEYS = (
    "DOMWAIT_CONFIG_FILE",
    "DOMWAIT_TIMEOUT_MS",
    "DOMWAIT_INTERVAL_MS",
    "DOMWAIT_TEST_ID_ATTRIBUTE",
    "DOMWAIT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    """Every test starts from the built-in defaults (no env, no file)."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def document() -> Document:
    """A fresh, empty document."""
    return Document()

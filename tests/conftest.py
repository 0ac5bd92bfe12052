"""Shared pytest fixtures for depinj tests."""

import pytest

from depinj.connections import InMemoryConnection, MockConnection, RealConnection


@pytest.fixture()
def real_connection() -> RealConnection:
    """Connection standing in for production."""
    return RealConnection()


@pytest.fixture()
def mock_connection() -> MockConnection:
    """Connection used as a test double."""
    return MockConnection()


@pytest.fixture()
def in_memory_connection() -> InMemoryConnection:
    """Connection serving a fixed in-memory value."""
    return InMemoryConnection(21)


@pytest.fixture(autouse=True)
def _clear_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DEPINJ_CONNECTION", "DEPINJ_ANSWER", "DEPINJ_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

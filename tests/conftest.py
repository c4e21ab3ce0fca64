"""Pytest fixtures shared across the test suite.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket

import pytest

from pay_equity_engine.domain.jobs import JobRecord
from tests.fakes import InMemoryFileSystem
from tests.support.errors import NetworkIsolationError
from tests.support.jobs import linear_jobs

# =============================================================================
# Network Isolation - Block all socket connections in tests
# =============================================================================


def _blocked_socket_connect(self, *args, **kwargs):
    """Raise an error if any test tries to make a real network connection."""
    raise NetworkIsolationError(str(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch):
    """Block all network access in tests."""
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)
    yield


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep developer PAY_EQUITY_* variables and .env files out of config tests."""
    for name in (
        "PAY_EQUITY_JOBS_PATH",
        "PAY_EQUITY_CONTRIBUTIONS_PATH",
        "PAY_EQUITY_OUTPUT_DIR",
        "PAY_EQUITY_COMPARABLE_VALUE_FRACTION",
        "PAY_EQUITY_COMPARABLE_VALUE_RANGE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("pay_equity_engine.config.load_dotenv", lambda *_args, **_kw: False)
    yield


@pytest.fixture
def in_memory_fs() -> InMemoryFileSystem:
    """Provide an in-memory filesystem for tests."""
    return InMemoryFileSystem()


@pytest.fixture
def perfectly_linear_jobs() -> list[JobRecord]:
    """Jobs with max_salary exactly 10 * points + 2000."""
    return linear_jobs()

"""Shared fixtures for all test levels."""

from __future__ import annotations

from typing import Any

import pytest

from memcache_harness.core.config import MemcacheConfig
from memcache_harness.core.types import ClientHandle, HandleState


# ---------------------------------------------------------------------------
# In-memory client
# ---------------------------------------------------------------------------

class FakeCacheClient:
    """CacheClient backed by a dict shared between instances, like one server."""

    def __init__(self, server: dict[str, Any]) -> None:
        self.server = server
        self.address: tuple[str, int] | None = None
        self.closed = False
        self.calls: list[str] = []
        self.set_result = True
        self.last_set: tuple[str, Any, int] | None = None

    def connect(self, host: str, port: int) -> None:
        self.calls.append("connect")
        self.address = (host, port)

    def get(self, key: str) -> Any:
        self.calls.append("get")
        return self.server.get(key)

    def set(self, key: str, value: Any, expiration: int = 0) -> bool:
        self.calls.append("set")
        self.last_set = (key, value, expiration)
        if not self.set_result:
            return False
        self.server[key] = value
        return True

    def flush(self) -> bool:
        self.calls.append("flush")
        self.server.clear()
        return True

    def close(self) -> None:
        self.calls.append("close")
        self.closed = True


@pytest.fixture(scope="session")
def fake_server() -> dict[str, Any]:
    """Key/value storage shared by every FakeCacheClient in the run."""
    return {}


@pytest.fixture(scope="session")
def memcache_client_factory(fake_server):
    """Route the plugin fixtures to the in-memory client."""
    return lambda: FakeCacheClient(fake_server)


@pytest.fixture()
def fake_client_factory(fake_server):
    """Factory producing a new FakeCacheClient on the shared server per call."""
    return lambda: FakeCacheClient(fake_server)


@pytest.fixture()
def fake_client(fake_server) -> FakeCacheClient:
    fake_server.clear()
    return FakeCacheClient(fake_server)


@pytest.fixture()
def open_handle(fake_client) -> ClientHandle:
    """A connected handle over a fresh in-memory client."""
    fake_client.connect("localhost", 11211)
    return ClientHandle(
        client=fake_client,
        config=MemcacheConfig(),
        state=HandleState.CONNECTED,
    )

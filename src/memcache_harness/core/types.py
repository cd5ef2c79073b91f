"""Core data types for memcache-harness."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from memcache_harness.core.config import MemcacheConfig
from memcache_harness.core.protocols import CacheClient


class HandleState(enum.Enum):
    """Lifecycle of a client handle within a single test."""

    UNINITIALIZED = "uninitialized"
    CONNECTED = "connected"
    CLOSED = "closed"


@dataclass
class ClientHandle:
    """One memcached connection, owned by exactly one test.

    Created by ``SessionController.set_up()`` and released by
    ``SessionController.tear_down()``.
    """

    client: CacheClient
    config: MemcacheConfig = field(default_factory=MemcacheConfig)
    state: HandleState = HandleState.UNINITIALIZED

    @property
    def is_open(self) -> bool:
        return self.state is HandleState.CONNECTED

    @property
    def address(self) -> str:
        return f"{self.config.host}:{self.config.port}"

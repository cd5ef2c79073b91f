"""Core types, protocols, config, and errors for memcache-harness."""

from memcache_harness.core.config import MemcacheConfig, load_config
from memcache_harness.core.errors import (
    AssertionFailure,
    ConfigurationError,
    MemcacheHarnessError,
    PreconditionError,
    UnsupportedClientError,
)
from memcache_harness.core.protocols import CacheClient
from memcache_harness.core.types import ClientHandle, HandleState

__all__ = [
    "AssertionFailure",
    "CacheClient",
    "ClientHandle",
    "ConfigurationError",
    "HandleState",
    "MemcacheConfig",
    "MemcacheHarnessError",
    "PreconditionError",
    "UnsupportedClientError",
    "load_config",
]

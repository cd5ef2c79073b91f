"""memcache-harness: memcached fixtures and assertions for pytest suites."""

from memcache_harness.assertions import (
    MemcacheHelpers,
    assert_absent_or_mismatched,
    assert_present,
    clear,
    grab_value,
    store,
)
from memcache_harness.core import (
    AssertionFailure,
    CacheClient,
    ClientHandle,
    ConfigurationError,
    HandleState,
    MemcacheConfig,
    MemcacheHarnessError,
    PreconditionError,
    UnsupportedClientError,
    load_config,
)
from memcache_harness.session import SessionController

__all__ = [
    "AssertionFailure",
    "CacheClient",
    "ClientHandle",
    "ConfigurationError",
    "HandleState",
    "MemcacheConfig",
    "MemcacheHarnessError",
    "MemcacheHelpers",
    "PreconditionError",
    "SessionController",
    "UnsupportedClientError",
    "assert_absent_or_mismatched",
    "assert_present",
    "clear",
    "grab_value",
    "load_config",
    "store",
]

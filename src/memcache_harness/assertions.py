"""Assertion helpers over an open memcached handle.

Every helper takes the handle explicitly::

    handle = controller.set_up()
    store(handle, "users_count", 200)
    assert_present(handle, "users_count", 200)

Inside pytest the ``memcache`` fixture returns a ``MemcacheHelpers`` bound to
the test's handle, so the same calls read ``memcache.store("users_count", 200)``.

A missing key reads as ``None``; a stored ``None`` cannot be told apart from
a miss, so an expected value of ``None`` only checks whether the key exists.
"""

from __future__ import annotations

import logging
from typing import Any

from memcache_harness.core.errors import (
    AssertionFailure,
    PreconditionError,
    UnsupportedClientError,
)
from memcache_harness.core.protocols import CacheClient
from memcache_harness.core.types import ClientHandle, HandleState

log = logging.getLogger(__name__)

ABSENT = None


def _require_open(handle: ClientHandle | None) -> ClientHandle:
    if handle is None:
        raise PreconditionError("No memcache handle; call set_up() first")
    if handle.state is not HandleState.CONNECTED:
        raise PreconditionError(f"Memcache handle is {handle.state.value}, not connected")
    return handle


def _read(handle: ClientHandle | None, key: str) -> Any:
    value = _require_open(handle).client.get(key)
    log.debug("Value for '%s': %r", key, value)
    return value


def grab_value(handle: ClientHandle | None, key: str) -> Any:
    """Return the value stored under *key*, or None if it is absent."""
    return _read(handle, key)


def assert_present(handle: ClientHandle | None, key: str, value: Any = None) -> None:
    """Fail unless *key* exists (and, if *value* is given, equals it)."""
    actual = _read(handle, key)
    if value is None:
        if actual is ABSENT:
            raise AssertionFailure(f"Cannot find key '{key}' in Memcached")
    elif actual != value:
        raise AssertionFailure(
            f"Cannot find key '{key}' in Memcached with the provided value: "
            f"expected {value!r}, got {actual!r}"
        )


def assert_absent_or_mismatched(
    handle: ClientHandle | None, key: str, value: Any = None
) -> None:
    """Fail if *key* exists; with *value*, an absent key always passes.

    When the key is present and *value* is given, the stored value is compared
    for equality, not inequality. Existing suites depend on that behaviour.
    """
    actual = _read(handle, key)
    if value is None:
        if actual is not ABSENT:
            raise AssertionFailure(f"The key '{key}' exists in Memcached: {actual!r}")
    elif actual is not ABSENT and actual != value:
        raise AssertionFailure(
            f"The key '{key}' exists in Memcached with the provided value: "
            f"expected {value!r}, got {actual!r}"
        )


def store(handle: ClientHandle | None, key: str, value: Any, expiration: int = 0) -> None:
    """Write *value* under *key*; *expiration* is in seconds, 0 means never."""
    client = _require_open(handle).client
    if not isinstance(client, CacheClient):
        raise UnsupportedClientError(
            f"Cannot store '{key}': {type(client).__qualname__} is not a supported memcache client"
        )
    if not client.set(key, value, expiration):
        raise AssertionFailure(f"Memcached refused to store key '{key}'")


def clear(handle: ClientHandle | None) -> None:
    """Flush all memcached data."""
    _require_open(handle).client.flush()


class MemcacheHelpers:
    """The helpers above, bound to one handle."""

    def __init__(self, handle: ClientHandle) -> None:
        self._handle = handle

    @property
    def handle(self) -> ClientHandle:
        return self._handle

    def grab_value(self, key: str) -> Any:
        return grab_value(self._handle, key)

    def assert_present(self, key: str, value: Any = None) -> None:
        assert_present(self._handle, key, value)

    def assert_absent_or_mismatched(self, key: str, value: Any = None) -> None:
        assert_absent_or_mismatched(self._handle, key, value)

    def store(self, key: str, value: Any, expiration: int = 0) -> None:
        store(self._handle, key, value, expiration)

    def clear(self) -> None:
        clear(self._handle)

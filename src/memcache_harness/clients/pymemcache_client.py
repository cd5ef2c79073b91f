"""CacheClient adapter over pymemcache.

Values are pickled with ``pymemcache.serde.pickle_serde`` so tests can store
ints, dicts and other Python objects, not just bytes.  ``Client`` connects on
first use, so ``connect()`` never touches the network.
"""

from __future__ import annotations

import logging
from typing import Any

from pymemcache import serde
from pymemcache.client.base import Client

from memcache_harness.core.errors import PreconditionError

log = logging.getLogger(__name__)


class PymemcacheClient:
    """Adapter for a single-server ``pymemcache`` client."""

    variant = "pymemcache"

    def __init__(self) -> None:
        self._client: Client | None = None

    def _require(self) -> Client:
        if self._client is None:
            raise PreconditionError("pymemcache client not connected; call connect() first")
        return self._client

    # -- lifecycle -----------------------------------------------------------

    def connect(self, host: str, port: int) -> None:
        self._client = Client((host, port), serde=serde.pickle_serde)
        log.info("Configured pymemcache client for %s:%d", host, port)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    # -- cache operations ----------------------------------------------------

    def get(self, key: str) -> Any:
        return self._require().get(key)

    def set(self, key: str, value: Any, expiration: int = 0) -> bool:
        return bool(self._require().set(key, value, expire=expiration, noreply=False))

    def flush(self) -> bool:
        return bool(self._require().flush_all(noreply=False))

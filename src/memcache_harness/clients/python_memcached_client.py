"""CacheClient adapter over python-memcached (the ``memcache`` module)."""

from __future__ import annotations

import logging
from typing import Any

import memcache

from memcache_harness.core.errors import PreconditionError

log = logging.getLogger(__name__)


class PythonMemcachedClient:
    """Adapter for ``memcache.Client`` from python-memcached."""

    variant = "python-memcached"

    def __init__(self) -> None:
        self._client: memcache.Client | None = None

    def _require(self) -> memcache.Client:
        if self._client is None:
            raise PreconditionError("python-memcached client not connected; call connect() first")
        return self._client

    # -- lifecycle -----------------------------------------------------------

    def connect(self, host: str, port: int) -> None:
        self._client = memcache.Client([f"{host}:{port}"])
        log.info("Configured python-memcached client for %s:%d", host, port)

    def close(self) -> None:
        if self._client is not None:
            self._client.disconnect_all()
            self._client = None

    # -- cache operations ----------------------------------------------------

    def get(self, key: str) -> Any:
        return self._require().get(key)

    def set(self, key: str, value: Any, expiration: int = 0) -> bool:
        # Returns 0 on failure, a truthy int otherwise.
        return bool(self._require().set(key, value, time=expiration))

    def flush(self) -> bool:
        self._require().flush_all()
        return True

"""SessionController — opens a memcached handle before a test and cleans up after.

Each test gets a fresh handle:

    UNINITIALIZED -> CONNECTED -> CLOSED

``tear_down`` flushes the whole server before closing, so every test starts
from an empty cache.  Point it at a disposable memcached, never production.
"""

from __future__ import annotations

import contextlib
import logging
from typing import Iterator

from memcache_harness.clients.selector import ClientFactory, select_client_factory
from memcache_harness.core.config import MemcacheConfig
from memcache_harness.core.types import ClientHandle, HandleState

log = logging.getLogger(__name__)


class SessionController:
    """Creates and releases per-test client handles.

    *client_factory* defaults to the variant chosen by
    ``select_client_factory(config)``; it is resolved here, once, so a
    missing client library fails before any test body runs.
    """

    def __init__(
        self,
        config: MemcacheConfig | None = None,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config or MemcacheConfig()
        self._factory = client_factory or select_client_factory(self._config)

    @property
    def config(self) -> MemcacheConfig:
        return self._config

    # -- lifecycle -----------------------------------------------------------

    def set_up(self) -> ClientHandle:
        """Create a client and point it at the configured server.

        Reachability is not checked: clients connect lazily, so an unreachable
        server surfaces on the first cache operation.
        """
        handle = ClientHandle(client=self._factory(), config=self._config)
        try:
            handle.client.connect(self._config.host, self._config.port)
        except Exception:
            self._close_quietly(handle)
            raise
        handle.state = HandleState.CONNECTED
        log.info("Memcache handle opened for %s", handle.address)
        return handle

    def tear_down(self, handle: ClientHandle | None) -> None:
        """Flush all data and close *handle*.  Safe to call with None or twice."""
        if handle is None or handle.state is not HandleState.CONNECTED:
            return

        try:
            handle.client.flush()
        except Exception as exc:
            log.warning("Memcache flush failed on %s: %s", handle.address, exc)
        self._close_quietly(handle)
        log.info("Memcache handle closed for %s", handle.address)

    def _close_quietly(self, handle: ClientHandle) -> None:
        try:
            handle.client.close()
        except Exception as exc:
            log.warning("Memcache close failed on %s: %s", handle.address, exc)
        handle.state = HandleState.CLOSED

    @contextlib.contextmanager
    def session(self) -> Iterator[ClientHandle]:
        """Yield an open handle, tearing it down on every exit path."""
        handle = self.set_up()
        try:
            yield handle
        finally:
            self.tear_down(handle)

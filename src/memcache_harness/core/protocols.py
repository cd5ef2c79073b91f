"""PEP 544 structural protocols for memcache-harness components."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheClient(Protocol):
    """The capability every memcached client adapter provides."""

    def connect(self, host: str, port: int) -> None:
        """Point the client at *host*:*port* (may connect lazily)."""
        ...

    def get(self, key: str) -> Any:
        """Return the stored value, or ``None`` when *key* is absent."""
        ...

    def set(self, key: str, value: Any, expiration: int = 0) -> bool:
        """Store *value* under *key*; return True when the server accepted it."""
        ...

    def flush(self) -> bool:
        """Remove every key from the server."""
        ...

    def close(self) -> None:
        """Release the connection."""
        ...

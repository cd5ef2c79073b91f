"""Memcached client adapters and variant selection."""

from memcache_harness.clients.selector import (
    ClientFactory,
    available_variants,
    load_adapter,
    select_client_factory,
)

__all__ = [
    "ClientFactory",
    "available_variants",
    "load_adapter",
    "select_client_factory",
]

"""Client variant selection.

The adapter class is chosen once, when the session controller is built, and
handed to it as a factory.  ``auto`` prefers pymemcache and falls back to
python-memcached.
"""

from __future__ import annotations

import importlib
import logging
from typing import Callable

from memcache_harness.core.config import MemcacheConfig
from memcache_harness.core.errors import ConfigurationError
from memcache_harness.core.protocols import CacheClient

log = logging.getLogger(__name__)

ClientFactory = Callable[[], CacheClient]

# variant -> (adapter module, adapter class, distribution to install)
_VARIANTS: dict[str, tuple[str, str, str]] = {
    "pymemcache": (
        "memcache_harness.clients.pymemcache_client",
        "PymemcacheClient",
        "pymemcache",
    ),
    "python-memcached": (
        "memcache_harness.clients.python_memcached_client",
        "PythonMemcachedClient",
        "python-memcached",
    ),
}

_AUTO_ORDER = ("pymemcache", "python-memcached")


def load_adapter(variant: str) -> type:
    """Import and return the adapter class for *variant*.

    Raises ImportError when the underlying library is not installed.
    """
    if variant not in _VARIANTS:
        raise ConfigurationError(
            f"Unknown memcache client '{variant}'. "
            f"Valid clients: {', '.join(sorted(_VARIANTS))}"
        )
    module_name, class_name, _ = _VARIANTS[variant]
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def available_variants() -> list[str]:
    """Return the variants whose client library can be imported, in preference order."""
    found = []
    for variant in _AUTO_ORDER:
        try:
            load_adapter(variant)
        except ImportError:
            continue
        found.append(variant)
    return found


def select_client_factory(config: MemcacheConfig) -> ClientFactory:
    """Resolve ``config.client`` to a factory producing fresh adapters."""
    candidates = _AUTO_ORDER if config.client == "auto" else (config.client,)
    missing: list[str] = []
    for variant in candidates:
        try:
            adapter_cls = load_adapter(variant)
        except ImportError as exc:
            log.debug("Memcache client '%s' unavailable: %s", variant, exc)
            missing.append(_VARIANTS[variant][2])
            continue
        log.info("Using memcache client '%s'", variant)
        return adapter_cls

    raise ConfigurationError(
        "No memcache client library available; install "
        + " or ".join(f"'{name}'" for name in missing)
    )

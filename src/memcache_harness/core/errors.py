"""Custom exception hierarchy for memcache-harness."""


class MemcacheHarnessError(Exception):
    """Base exception for all memcache-harness errors."""


class ConfigurationError(MemcacheHarnessError):
    """No usable memcached client, or the harness configuration is invalid."""


class PreconditionError(MemcacheHarnessError):
    """A helper was called without an open client handle."""


class UnsupportedClientError(MemcacheHarnessError):
    """The handle's client does not expose a recognised call signature."""


class AssertionFailure(MemcacheHarnessError, AssertionError):
    """An expectation about cache contents was not met."""

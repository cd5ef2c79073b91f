"""Integration test: real memcached (set MEMCACHE_HARNESS_LIVE=1)."""

from __future__ import annotations

import os

import pytest

from memcache_harness.assertions import MemcacheHelpers
from memcache_harness.clients.selector import available_variants, select_client_factory
from memcache_harness.core.config import MemcacheConfig
from memcache_harness.core.errors import AssertionFailure
from memcache_harness.session import SessionController

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("MEMCACHE_HARNESS_LIVE", "0") != "1",
        reason="memcached not available (set MEMCACHE_HARNESS_LIVE=1)",
    ),
]


def _config(variant: str) -> MemcacheConfig:
    return MemcacheConfig(
        host=os.environ.get("MEMCACHE_HARNESS_HOST", "127.0.0.1"),
        port=int(os.environ.get("MEMCACHE_HARNESS_PORT", "11211")),
        client=variant,
    )


@pytest.fixture(params=available_variants())
def controller(request):
    """Live controller, once per installed client library."""
    cfg = _config(request.param)
    return SessionController(cfg, client_factory=select_client_factory(cfg))


class TestLiveMemcached:
    def test_round_trip(self, controller):
        with controller.session() as handle:
            helpers = MemcacheHelpers(handle)
            helpers.store("users_count", 200)
            assert helpers.grab_value("users_count") == 200
            helpers.assert_present("users_count", 200)

    def test_miss(self, controller):
        with controller.session() as handle:
            helpers = MemcacheHelpers(handle)
            assert helpers.grab_value("never_written") is None
            helpers.assert_absent_or_mismatched("never_written")
            with pytest.raises(AssertionFailure):
                helpers.assert_present("never_written")

    def test_structured_value(self, controller):
        with controller.session() as handle:
            helpers = MemcacheHelpers(handle)
            helpers.store("profile", {"name": "ada", "roles": ["admin"]})
            helpers.assert_present("profile", {"name": "ada", "roles": ["admin"]})

    def test_teardown_flushes(self, controller):
        with controller.session() as handle:
            MemcacheHelpers(handle).store("users_count", 200, expiration=60)
        with controller.session() as handle:
            MemcacheHelpers(handle).assert_absent_or_mismatched("users_count")

    def test_clear(self, controller):
        with controller.session() as handle:
            helpers = MemcacheHelpers(handle)
            helpers.store("a", 1)
            helpers.clear()
            assert helpers.grab_value("a") is None

"""pytest plugin: memcached fixtures for acceptance and functional tests.

Loaded automatically through the ``pytest11`` entry point.  Configure it with
command-line options, ini keys, or a YAML suite file::

    [pytest]
    memcache_host = localhost
    memcache_port = 11211

Then request the ``memcache`` fixture::

    def test_counter(memcache):
        memcache.store("users_count", 200)
        memcache.assert_present("users_count", 200)

The server is flushed after every test that used the fixture.
"""

from __future__ import annotations

import logging
from typing import Iterator

import pytest

from memcache_harness.assertions import MemcacheHelpers
from memcache_harness.clients.selector import ClientFactory, select_client_factory
from memcache_harness.core.config import MemcacheConfig, load_config
from memcache_harness.core.types import ClientHandle
from memcache_harness.session import SessionController

log = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("memcache", "memcached test harness")
    group.addoption(
        "--memcache-config",
        dest="memcache_config",
        default=None,
        help="YAML suite file with memcache settings.",
    )
    group.addoption("--memcache-host", dest="memcache_host", default=None, help="Memcached host.")
    group.addoption(
        "--memcache-port", dest="memcache_port", type=int, default=None, help="Memcached port."
    )
    group.addoption(
        "--memcache-client",
        dest="memcache_client",
        default=None,
        choices=["auto", "pymemcache", "python-memcached"],
        help="Client library to use (default: auto).",
    )

    parser.addini("memcache_config", "YAML suite file with memcache settings.", default=None)
    parser.addini("memcache_host", "Memcached host.", default=None)
    parser.addini("memcache_port", "Memcached port.", default=None)
    parser.addini("memcache_client", "Client library to use.", default=None)


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", "integration: test needs a live memcached server"
    )


def _ini(config: pytest.Config, name: str) -> str | None:
    value = config.getini(name)
    return value or None


def resolve_config(config: pytest.Config) -> MemcacheConfig:
    """Build MemcacheConfig from suite file, ini keys, then command-line options."""
    # Command-line paths are relative to the invocation directory, ini paths to rootdir.
    cli_path = config.getoption("memcache_config")
    ini_path = _ini(config, "memcache_config")
    if cli_path:
        base = load_config(config.invocation_params.dir / cli_path)
    elif ini_path:
        base = load_config(config.rootpath / ini_path)
    else:
        base = MemcacheConfig()

    from_ini = base.merged(
        host=_ini(config, "memcache_host"),
        port=_ini(config, "memcache_port"),
        client=_ini(config, "memcache_client"),
    )
    return from_ini.merged(
        host=config.getoption("memcache_host"),
        port=config.getoption("memcache_port"),
        client=config.getoption("memcache_client"),
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def memcache_config(pytestconfig: pytest.Config) -> MemcacheConfig:
    """Memcache settings for this run."""
    return resolve_config(pytestconfig)


@pytest.fixture(scope="session")
def memcache_client_factory(memcache_config: MemcacheConfig) -> ClientFactory:
    """Factory for client adapters; override in conftest.py to inject one."""
    return select_client_factory(memcache_config)


@pytest.fixture(scope="session")
def memcache_controller(
    memcache_config: MemcacheConfig, memcache_client_factory: ClientFactory
) -> SessionController:
    return SessionController(memcache_config, client_factory=memcache_client_factory)


@pytest.fixture()
def memcache_handle(memcache_controller: SessionController) -> Iterator[ClientHandle]:
    """An open handle, flushed and closed after the test whatever its outcome."""
    with memcache_controller.session() as handle:
        yield handle


@pytest.fixture()
def memcache(memcache_handle: ClientHandle) -> MemcacheHelpers:
    """Assertion helpers bound to this test's handle."""
    return MemcacheHelpers(memcache_handle)

"""MemcacheConfig — connection settings for a test run, plus YAML suite loading.

A suite file may either carry a top-level ``memcache`` section::

    memcache:
      host: localhost
      port: 11211

or list the harness under ``modules`` the way acceptance suites do::

    modules:
      - Memcache:
          host: localhost
          port: 11211
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from memcache_harness.core.errors import ConfigurationError

log = logging.getLogger(__name__)

ClientVariant = Literal["auto", "pymemcache", "python-memcached"]

_SECTION_NAMES = ("memcache", "Memcache", "memcached", "Memcached")


class MemcacheConfig(BaseModel):
    """Immutable memcached settings for the whole test run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = "localhost"
    port: int = Field(default=11211, ge=1, le=65535)
    client: ClientVariant = "auto"

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> MemcacheConfig:
        """Validate *data*, turning pydantic errors into ConfigurationError."""
        try:
            return cls(**(data or {}))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid memcache configuration: {exc}") from exc

    def merged(self, **overrides: Any) -> MemcacheConfig:
        """Return a new config with every non-None override applied."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return MemcacheConfig.from_mapping(data)


def _extract_section(data: Any) -> dict[str, Any]:
    """Find the memcache settings inside a parsed suite document."""
    if not isinstance(data, dict):
        raise ConfigurationError("Suite config must be a mapping at the top level")

    for name in _SECTION_NAMES:
        if name in data:
            section = data[name] or {}
            if not isinstance(section, dict):
                raise ConfigurationError(f"'{name}' section must be a mapping")
            return section

    for entry in data.get("modules") or []:
        if isinstance(entry, dict):
            for name in _SECTION_NAMES:
                if name in entry:
                    return entry[name] or {}
        elif entry in _SECTION_NAMES:
            return {}

    return {}


def load_config(path: str | Path) -> MemcacheConfig:
    """Load a MemcacheConfig from a YAML suite file."""
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read suite config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc

    config = MemcacheConfig.from_mapping(_extract_section(data or {}))
    log.info("Loaded memcache config from %s (%s:%d)", path.name, config.host, config.port)
    return config

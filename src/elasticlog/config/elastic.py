"""Elasticsearch connection config — parsed from the host's untyped config map.

The host hands every provider an already-decrypted ``dict``.  Parsing is
lenient (wrongly typed entries are skipped); validation only rejects a
config with no way to reach a cluster.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from elasticlog.adapters.base.exceptions import ConfigError

DEFAULT_INDEX_PATTERN = "logs-*"


class ElasticConfig(BaseModel):
    """Typed Elasticsearch connection configuration."""

    addresses: list[str] = Field(default_factory=list, description="Cluster node URLs")
    username: str = Field(default="", description="Basic-auth username")
    password: str = Field(default="", repr=False, description="Basic-auth password")
    api_key: str = Field(default="", repr=False, description="API key, preferred over basic auth")
    cloud_id: str = Field(default="", description="Elastic Cloud deployment ID, preferred over addresses")
    index_pattern: str = Field(default=DEFAULT_INDEX_PATTERN, description="Index pattern searched by queries")

    def validate_connection(self) -> None:
        """Check that at least one connection method is configured.

        Raises:
            ConfigError: If both ``addresses`` and ``cloud_id`` are empty.
        """
        if not self.addresses and not self.cloud_id:
            raise ConfigError("either 'addresses' or 'cloudID' must be provided")


def _string(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    return value if isinstance(value, str) else ""


def parse_config(raw: dict[str, Any] | None) -> ElasticConfig:
    """Extract an :class:`ElasticConfig` from an untyped config map.

    Args:
        raw: Config map using the host's camelCase keys (``addresses``,
            ``username``, ``password``, ``apiKey``, ``cloudID``,
            ``indexPattern``).

    Returns:
        The parsed config.  It is not validated; call
        :meth:`ElasticConfig.validate_connection` for that.
    """
    raw = raw or {}

    addresses: list[str] = []
    raw_addresses = raw.get("addresses")
    if isinstance(raw_addresses, list):
        addresses = [addr for addr in raw_addresses if isinstance(addr, str)]

    return ElasticConfig(
        addresses=addresses,
        username=_string(raw, "username"),
        password=_string(raw, "password"),
        api_key=_string(raw, "apiKey"),
        cloud_id=_string(raw, "cloudID"),
        index_pattern=_string(raw, "indexPattern") or DEFAULT_INDEX_PATTERN,
    )

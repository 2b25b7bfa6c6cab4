"""Elasticsearch provider — Answers canonical log queries from Elasticsearch (v8+).

Uses the official ``elasticsearch`` async client.  Construction validates
the config, builds the client and pings the cluster; once that succeeds
the provider is ready and its client is only read from then on.

Usage::

    provider = await new_provider({"addresses": ["http://localhost:9200"]})
    entries = await provider.query(LogQuery(limit=10), timeout=5.0)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from elasticsearch import AsyncElasticsearch, ConnectionTimeout

from elasticlog.adapters.base.adapter import LogProvider
from elasticlog.adapters.base.exceptions import ConstructionError, QueryError, QueryTimeoutError
from elasticlog.adapters.elasticsearch.normalizer import normalize_hit
from elasticlog.adapters.elasticsearch.query_builder import build_query
from elasticlog.config.elastic import ElasticConfig, parse_config
from elasticlog.models.entry import LogEntry
from elasticlog.models.query import LogQuery

logger = logging.getLogger(__name__)

PROVIDER_NAME = "elastic"


class ElasticsearchProvider(LogProvider):
    """Log provider backed by an Elasticsearch cluster.

    Connection precedence: ``cloud_id`` over ``addresses``, and ``api_key``
    over username/password.

    Args:
        config: Parsed connection config.
        **kwargs: Additional keyword arguments forwarded to ``AsyncElasticsearch``.
    """

    def __init__(self, config: ElasticConfig, **kwargs: Any) -> None:
        self._config = config
        self._extra_kwargs = kwargs
        self._client: AsyncElasticsearch | None = None

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    @property
    def config(self) -> ElasticConfig:
        return self._config

    @property
    def ready(self) -> bool:
        return self._client is not None

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments used to build the ``AsyncElasticsearch`` client."""
        cfg = self._config
        kwargs: dict[str, Any] = {}
        if cfg.cloud_id:
            kwargs["cloud_id"] = cfg.cloud_id
        else:
            kwargs["hosts"] = list(cfg.addresses)

        if cfg.api_key:
            kwargs["api_key"] = cfg.api_key
        elif cfg.username or cfg.password:
            kwargs["basic_auth"] = (cfg.username, cfg.password)

        kwargs.update(self._extra_kwargs)
        return kwargs

    async def initialize(self) -> None:
        """Validate the config, create the client and ping the cluster."""
        if self._client is not None:
            return
        self._config.validate_connection()

        try:
            client = AsyncElasticsearch(**self.client_kwargs())
        except Exception as e:
            raise ConstructionError(f"Failed to create Elasticsearch client: {e}") from e

        try:
            alive = await client.ping()
        except Exception as e:
            await client.close()
            raise ConstructionError(f"Failed to connect to Elasticsearch: {e}") from e
        if not alive:
            await client.close()
            raise ConstructionError("Failed to connect to Elasticsearch: ping failed")

        self._client = client
        logger.info("Connected to Elasticsearch, index pattern: %s", self._config.index_pattern)

    async def shutdown(self) -> None:
        """Close the Elasticsearch client."""
        if self._client:
            await self._client.close()
            self._client = None

    async def query(self, query: LogQuery, timeout: float | None = None) -> list[LogEntry]:
        """Execute a log query and normalize the hits, preserving their order."""
        if self._client is None:
            raise QueryError("Elasticsearch client not initialized.")

        body = build_query(query)
        try:
            response = await asyncio.wait_for(
                self._client.search(index=self._config.index_pattern, track_total_hits=True, **body),
                timeout=timeout,
            )
        except (TimeoutError, ConnectionTimeout) as e:
            raise QueryTimeoutError("Elasticsearch query exceeded its deadline") from e
        except Exception as e:
            raise QueryError(f"Elasticsearch query failed: {e}") from e

        try:
            result = getattr(response, "body", response)
            hits = result["hits"]["hits"]
            entries = [normalize_hit(hit) for hit in hits]
            total = result["hits"].get("total")
            logger.debug(
                "Elasticsearch returned %d of %s hits in %sms",
                len(entries),
                total.get("value", "?") if isinstance(total, dict) else total,
                result.get("took", "?"),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise QueryError(f"Failed to parse Elasticsearch response: {e}") from e
        return entries


async def new_provider(config: dict[str, Any]) -> ElasticsearchProvider:
    """Construct a ready provider from the host's untyped config map.

    Raises:
        ConfigError: If neither ``addresses`` nor ``cloudID`` is set.
        ConstructionError: If the cluster cannot be reached.
    """
    provider = ElasticsearchProvider(parse_config(config))
    await provider.initialize()
    return provider

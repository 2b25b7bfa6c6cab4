"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from elasticlog.adapters.elasticsearch.adapter import ElasticsearchProvider
from elasticlog.config.elastic import parse_config


class FakeElasticsearch:
    """In-memory stand-in for ``AsyncElasticsearch``.

    Understands just enough of the query DSL for the provider tests:
    ``query_string`` (``OR``-separated terms matched against ``message``),
    ``term`` and ``terms``.  Other clauses match everything.
    """

    def __init__(self, hits: list[dict[str, Any]]) -> None:
        self.hits = hits
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self.closed = True

    async def search(self, **kwargs: Any) -> dict[str, Any]:
        self.calls.append(kwargs)
        must = kwargs.get("query", {}).get("bool", {}).get("must", [])
        matched = [hit for hit in self.hits if all(self._matches(clause, hit["_source"]) for clause in must)]
        size = kwargs.get("size", 10)
        return {
            "took": 1,
            "hits": {"total": {"value": len(matched)}, "hits": matched[:size]},
        }

    @staticmethod
    def _matches(clause: dict[str, Any], source: dict[str, Any]) -> bool:
        if "query_string" in clause:
            terms = [t.strip().lower() for t in clause["query_string"]["query"].split(" OR ")]
            message = str(source.get("message", "")).lower()
            return any(term in message for term in terms)
        if "term" in clause:
            ((field, value),) = clause["term"].items()
            return source.get(field) == value
        if "terms" in clause:
            ((field, values),) = clause["terms"].items()
            return source.get(field) in values
        return True


@pytest.fixture
def error_hit() -> dict[str, Any]:
    """A hit whose message matches 'error OR warning'."""
    return {
        "_index": "logs-app-2024.06.15",
        "_id": "doc-a",
        "_score": 1.5,
        "_source": {
            "@timestamp": "2024-06-15T10:00:00Z",
            "message": "payment error: card declined",
            "severity": "error",
            "service": "checkout",
            "environment": "production",
            "host": "web-01",
            "http": {"status": 402},
            "retries": 3,
        },
    }


@pytest.fixture
def info_hit() -> dict[str, Any]:
    """A hit whose message does not match 'error OR warning'."""
    return {
        "_index": "logs-app-2024.06.15",
        "_id": "doc-b",
        "_score": 0.7,
        "_source": {
            "@timestamp": "2024-06-15T09:59:00Z",
            "message": "order placed",
            "level": "info",
            "service": "checkout",
            "environment": "production",
        },
    }


@pytest.fixture
def fake_backend(error_hit: dict[str, Any], info_hit: dict[str, Any]) -> FakeElasticsearch:
    return FakeElasticsearch([error_hit, info_hit])


@pytest.fixture
def valid_config() -> dict[str, Any]:
    return {"addresses": ["http://localhost:9200"], "indexPattern": "logs-app-*"}


@pytest.fixture
def provider(valid_config: dict[str, Any], fake_backend: FakeElasticsearch) -> ElasticsearchProvider:
    """A ready provider whose client is the in-memory fake backend."""
    p = ElasticsearchProvider(parse_config(valid_config))
    p._client = fake_backend  # type: ignore[assignment]
    return p


@pytest.fixture
def backend_factory() -> type[FakeElasticsearch]:
    """The fake backend class, for tests that need their own hit sets."""
    return FakeElasticsearch

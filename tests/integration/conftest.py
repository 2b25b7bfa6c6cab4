"""Integration test fixtures — a live Elasticsearch seeded with log documents.

Expects Elasticsearch to be reachable at ``localhost:9200`` (e.g.
``docker run -p 9200:9200 -e discovery.type=single-node -e xpack.security.enabled=false elasticsearch:8.11.1``).
Tests are skipped when it is not.
"""

from __future__ import annotations

import asyncio
import time
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from elasticsearch import AsyncElasticsearch, Elasticsearch

ES_HOST = "http://localhost:9200"
INDEX = "logs-integ-test"


def _mock_logs() -> list[dict[str, Any]]:
    now = datetime.now(UTC).replace(microsecond=0)
    return [
        {
            "@timestamp": (now - timedelta(minutes=5)).isoformat(),
            "message": "payment error: card declined",
            "severity": "error",
            "service": "checkout",
            "environment": "production",
            "host": "web-01",
        },
        {
            "@timestamp": (now - timedelta(minutes=10)).isoformat(),
            "message": "slow response warning from upstream",
            "level": "warning",
            "service": "api-gateway",
            "environment": "production",
            "host": "web-02",
        },
        {
            "@timestamp": (now - timedelta(minutes=15)).isoformat(),
            "message": "order placed",
            "severity": "info",
            "service": "checkout",
            "environment": "staging",
            "host": "web-03",
        },
        {
            "@timestamp": (now - timedelta(minutes=20)).isoformat(),
            "message": "disk usage critical on /var",
            "severity": "critical",
            "service": "infra",
            "environment": "production",
            "host": "db-01",
        },
    ]


def _wait_for_service(host: str, timeout: float = 30.0) -> bool:
    """Block until the cluster answers a ping, or timeout."""
    client = Elasticsearch(hosts=[host])
    deadline = time.monotonic() + timeout
    try:
        while time.monotonic() < deadline:
            if client.ping():
                return True
            time.sleep(2)
        return False
    finally:
        client.close()


async def _seed(host: str = ES_HOST, index: str = INDEX) -> None:
    client = AsyncElasticsearch(hosts=[host])
    try:
        await client.options(ignore_status=404).indices.delete(index=index)
        await client.indices.create(
            index=index,
            mappings={
                "properties": {
                    "@timestamp": {"type": "date"},
                    "message": {"type": "text"},
                    "severity": {"type": "keyword"},
                    "level": {"type": "keyword"},
                    "service": {"type": "keyword"},
                    "environment": {"type": "keyword"},
                    "host": {"type": "keyword"},
                }
            },
        )
        for i, doc in enumerate(_mock_logs()):
            await client.index(index=index, id=f"log-{i}", document=doc)
        await client.indices.refresh(index=index)
    finally:
        await client.close()


@pytest.fixture(scope="session")
def elasticsearch_ready() -> str:
    """Ensure Elasticsearch is running and seeded."""
    if not _wait_for_service(ES_HOST):
        pytest.skip(f"Elasticsearch not available at {ES_HOST}")
    asyncio.run(_seed())
    return ES_HOST

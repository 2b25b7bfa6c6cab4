"""Query builder — Translates a canonical ``LogQuery`` into an Elasticsearch
search body.

The body is a single ``bool.must`` list, so every clause is ANDed.  Clause
order is fixed: time range, free text, severity, structured filters, scope,
then metadata.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from elasticlog.models.query import LogFilter, LogQuery

logger = logging.getLogger(__name__)

TIMESTAMP_FIELD = "@timestamp"
SEVERITY_FIELD = "severity"
DEFAULT_SIZE = 1000


def format_timestamp(value: datetime) -> str:
    """Format a datetime as RFC 3339 with second precision (naive means UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    text = value.isoformat(timespec="seconds")
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def build_filter_clause(log_filter: LogFilter) -> dict[str, Any] | None:
    """Convert a structured filter to an Elasticsearch clause.

    ``contains`` and ``regex`` values are passed through unescaped, so
    wildcard or regex metacharacters in the value keep their meaning.

    Returns:
        The clause, or ``None`` for an unsupported operator.
    """
    field, value = log_filter.field, log_filter.value
    operator = log_filter.operator
    if operator == "=":
        return {"term": {field: value}}
    if operator == "!=":
        return {"bool": {"must_not": {"term": {field: value}}}}
    if operator == "contains":
        return {"wildcard": {field: {"value": f"*{value}*"}}}
    if operator == "regex":
        return {"regexp": {field: {"value": value}}}
    return None


def build_query(query: LogQuery) -> dict[str, Any]:
    """Build the Elasticsearch search body for ``query``.

    Args:
        query: The canonical log query.

    Returns:
        A body with ``query``, ``sort`` (newest first) and ``size`` keys.
    """
    must: list[dict[str, Any]] = []

    if query.start is not None or query.end is not None:
        bounds: dict[str, str] = {}
        if query.start is not None:
            bounds["gte"] = format_timestamp(query.start)
        if query.end is not None:
            bounds["lte"] = format_timestamp(query.end)
        must.append({"range": {TIMESTAMP_FIELD: bounds}})

    expression = query.expression
    if expression is not None:
        if expression.search:
            must.append({"query_string": {"query": expression.search}})

        if expression.severity_in:
            must.append({"terms": {SEVERITY_FIELD: list(expression.severity_in)}})

        for log_filter in expression.filters:
            clause = build_filter_clause(log_filter)
            if clause is None:
                logger.warning(
                    "Ignoring filter on '%s' with unsupported operator '%s'",
                    log_filter.field,
                    log_filter.operator,
                )
                continue
            must.append(clause)

    for field in ("service", "environment", "team"):
        value = getattr(query.scope, field)
        if value:
            must.append({"term": {field: value}})

    for key, value in query.metadata.items():
        must.append({"term": {key: value}})

    return {
        "query": {"bool": {"must": must}},
        "sort": [{TIMESTAMP_FIELD: {"order": "desc"}}],
        "size": query.limit if query.limit > 0 else DEFAULT_SIZE,
    }

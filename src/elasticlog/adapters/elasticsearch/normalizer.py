"""Result normalizer — Maps an Elasticsearch hit to a canonical ``LogEntry``."""

from __future__ import annotations

import contextlib
from datetime import datetime
from typing import Any

from elasticlog.models.entry import LogEntry

PROMOTED_FIELDS = frozenset({"@timestamp", "message", "severity", "level", "service"})

METADATA_INDEX = "_index"
METADATA_ID = "_id"
METADATA_SCORE = "_score"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an RFC 3339 timestamp; anything else yields ``None``."""
    if not isinstance(value, str) or "T" not in value:
        return None
    parsed = None
    with contextlib.suppress(ValueError):
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00").replace("z", "+00:00"))
    if parsed is None or parsed.tzinfo is None:
        return None
    return parsed


def _string(source: dict[str, Any], key: str) -> str | None:
    value = source.get(key)
    return value if isinstance(value, str) else None


def normalize_hit(hit: dict[str, Any]) -> LogEntry:
    """Map one search hit to a ``LogEntry``.

    ``severity`` wins over ``level`` when both are strings.  Every
    non-promoted ``_source`` field lands in ``fields``; the string-valued
    ones are also copied to ``labels``.  The hit's index, id and score go
    to ``metadata``.
    """
    source = hit.get("_source")
    if not isinstance(source, dict):
        source = {}

    severity = _string(source, "severity")
    if severity is None:
        severity = _string(source, "level")

    fields = {key: value for key, value in source.items() if key not in PROMOTED_FIELDS}
    labels = {key: value for key, value in fields.items() if isinstance(value, str)}

    score = hit.get("_score")
    return LogEntry(
        timestamp=parse_timestamp(source.get("@timestamp")),
        message=_string(source, "message") or "",
        severity=severity or "",
        service=_string(source, "service") or "",
        labels=labels,
        fields=fields,
        metadata={
            METADATA_INDEX: hit.get("_index", ""),
            METADATA_ID: hit.get("_id", ""),
            METADATA_SCORE: float(score) if score is not None else 0.0,
        },
    )

"""Log entry model — the backend-agnostic result shape."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class LogEntry(BaseModel):
    """Normalized log entry returned by every provider.

    ``labels`` holds the string-valued subset of ``fields``.  Neither map
    contains the promoted attributes (timestamp, message, severity/level,
    service).  ``metadata`` carries backend provenance only.
    """

    timestamp: datetime | None = Field(default=None, description="Event time, None when absent or unparsable")
    message: str = Field(default="", description="Log message")
    severity: str = Field(default="", description="Severity, taken from 'severity' or else 'level'")
    service: str = Field(default="", description="Emitting service")
    labels: dict[str, str] = Field(default_factory=dict, description="String-valued extra fields")
    fields: dict[str, Any] = Field(default_factory=dict, description="All extra fields")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Backend provenance (index, id, score)")

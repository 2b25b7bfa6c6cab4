"""Log query models — the backend-agnostic request shape."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)


class LogFilter(BaseModel):
    """A structured field filter.

    ``operator`` is kept as a plain string so that operators unknown to a
    provider survive decoding and can be ignored at build time.
    """

    field: str = Field(description="Document field the filter applies to")
    operator: str = Field(description="One of '=', '!=', 'contains', 'regex'")
    value: str = Field(default="", description="Value compared against the field")


class LogExpression(BaseModel):
    """Search expression: free text, severity membership and structured filters."""

    model_config = ConfigDict(populate_by_name=True)

    search: str = Field(default="", description="Free-text query-string expression")
    severity_in: list[str] = Field(
        default_factory=list,
        alias="severityIn",
        description="Severities an entry must match (any of)",
    )
    filters: list[LogFilter] = Field(default_factory=list, description="Structured filters, applied in order")

    @field_validator("search", mode="before")
    @classmethod
    def _none_search(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("severity_in", "filters", mode="before")
    @classmethod
    def _none_list(cls, v: Any) -> Any:
        return [] if v is None else v


class QueryScope(BaseModel):
    """Ownership scope narrowing a query."""

    service: str = ""
    environment: str = ""
    team: str = ""

    @field_validator("service", "environment", "team", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class LogQuery(BaseModel):
    """Canonical log query.

    ``start`` and ``end`` are inclusive bounds; ``None`` leaves that side
    unbounded.  ``start <= end`` is the caller's responsibility and is not
    checked here.  A non-positive ``limit`` means "use the provider default".
    """

    start: datetime | None = Field(default=None, description="Inclusive lower time bound")
    end: datetime | None = Field(default=None, description="Inclusive upper time bound")
    expression: LogExpression | None = Field(default=None, description="Search expression")
    scope: QueryScope = Field(default_factory=QueryScope, description="Service/environment/team scope")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Extra exact-match field constraints")
    limit: int = Field(default=0, description="Maximum number of entries, <= 0 means provider default")

    @field_validator("start", "end", mode="after")
    @classmethod
    def _zero_time_is_unset(cls, v: datetime | None) -> datetime | None:
        # hosts encode an unset time as 0001-01-01T00:00:00Z
        if v is None:
            return None
        instant = v if v.tzinfo is not None else v.replace(tzinfo=UTC)
        return None if instant == ZERO_TIME else v

    @field_validator("scope", mode="before")
    @classmethod
    def _none_scope(cls, v: Any) -> Any:
        return QueryScope() if v is None else v

    @field_validator("metadata", mode="before")
    @classmethod
    def _none_metadata(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("limit", mode="before")
    @classmethod
    def _none_limit(cls, v: Any) -> Any:
        return 0 if v is None else v

"""Wire records of the plugin protocol.

Each request and each response is one JSON object on its own line::

    {"method": "log.query", "config": {...}, "payload": {...}}
    {"result": [...]}            # success
    {"error": "message"}         # failure
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

METHOD_LOG_QUERY = "log.query"


class RpcRequest(BaseModel):
    """A request record.  ``config`` is sent with every request."""

    method: str = Field(default="", description="Method name, e.g. 'log.query'")
    config: dict[str, Any] = Field(default_factory=dict, description="Decrypted provider config")
    payload: Any = Field(default=None, description="Method-specific payload")

    @field_validator("config", mode="before")
    @classmethod
    def _none_config(cls, v: Any) -> Any:
        return {} if v is None else v


class RpcResponse(BaseModel):
    """A response record; exactly one of ``result`` and ``error`` is emitted."""

    result: Any = None
    error: str | None = None

    @classmethod
    def success(cls, result: Any) -> RpcResponse:
        return cls(result=result)

    @classmethod
    def failure(cls, error: Exception | str) -> RpcResponse:
        return cls(error=str(error) or type(error).__name__)

    def to_json(self) -> str:
        record = {"error": self.error} if self.error is not None else {"result": self.result}
        return json.dumps(record, ensure_ascii=False, separators=(",", ":"))


def describe_validation_error(error: ValidationError) -> str:
    """Summarize a validation error without echoing the offending input."""
    parts = []
    for item in error.errors(include_input=False, include_url=False):
        location = ".".join(str(loc) for loc in item["loc"]) or "record"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)

"""Canonical query and log-entry models shared by every log provider."""

from elasticlog.models.entry import LogEntry
from elasticlog.models.query import LogExpression, LogFilter, LogQuery, QueryScope

__all__ = ["LogEntry", "LogExpression", "LogFilter", "LogQuery", "QueryScope"]

"""Base log provider — Abstract interface for all log backend connectors.

Every log backend must implement this interface to be served by the plugin.
The provider is responsible for:
  1. Connecting to the backend and probing it once during construction
  2. Translating canonical queries to the backend's native query language
  3. Mapping raw results to the canonical ``LogEntry`` schema
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from elasticlog.models.entry import LogEntry
from elasticlog.models.query import LogQuery


class LogProvider(ABC):
    """Abstract base class for log providers.

    A provider is constructed once, after which it only reads its client
    handle; queries may share it without locking.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registered provider name (e.g., 'elastic')."""

    @abstractmethod
    async def initialize(self) -> None:
        """Connect to the backend and verify it is reachable.

        Raises:
            ConstructionError: If the backend cannot be reached.
        """

    @abstractmethod
    async def shutdown(self) -> None:
        """Close connections and release resources."""

    @abstractmethod
    async def query(self, query: LogQuery, timeout: float | None = None) -> list[LogEntry]:
        """Execute a log query.

        Args:
            query: The canonical log query.
            timeout: Deadline for the backend round trip in seconds.
                ``None`` waits indefinitely.

        Returns:
            Normalized entries in backend result order.  An empty list is a
            valid outcome.

        Raises:
            QueryError: If execution or response parsing fails.
            QueryTimeoutError: If the deadline is exceeded.
        """

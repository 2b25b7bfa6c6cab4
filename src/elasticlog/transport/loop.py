"""Transport loop — Read a request, dispatch it, write the response, repeat.

The loop handles one request at a time, including its backend round trip.
The provider is built lazily from the ``config`` carried by the first
request that reaches construction, then reused for the life of the loop.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, TextIO

from pydantic import ValidationError

from elasticlog.adapters.base.adapter import LogProvider
from elasticlog.adapters.base.exceptions import AdapterError, ProtocolError
from elasticlog.adapters.base.registry import ProviderFactory
from elasticlog.models.query import LogQuery
from elasticlog.transport.protocol import (
    METHOD_LOG_QUERY,
    RpcRequest,
    RpcResponse,
    describe_validation_error,
)

logger = logging.getLogger(__name__)


class ProviderHolder:
    """Single-assignment cache for the served provider.

    First construction is guarded by a lock; a failed construction leaves
    the holder empty so a later request can try again.
    """

    def __init__(self, factory: ProviderFactory) -> None:
        self._factory = factory
        self._provider: LogProvider | None = None
        self._lock = asyncio.Lock()

    @property
    def provider(self) -> LogProvider | None:
        return self._provider

    async def get(self, config: dict[str, Any]) -> LogProvider:
        """Return the provider, constructing it from ``config`` on first use."""
        if self._provider is not None:
            return self._provider
        async with self._lock:
            if self._provider is None:
                self._provider = await self._factory(config)
                logger.info("Provider ready: %s", self._provider.name)
        return self._provider

    async def close(self) -> None:
        if self._provider is not None:
            await self._provider.shutdown()
            self._provider = None


class TransportLoop:
    """Serve a provider over newline-delimited JSON streams.

    Args:
        factory: Async provider constructor taking the request ``config``.
        reader: Text stream requests are read from (one JSON object per line).
        writer: Text stream responses are written to.
        timeout: Per-query deadline in seconds, ``None`` for no deadline.
    """

    def __init__(
        self,
        factory: ProviderFactory,
        reader: TextIO,
        writer: TextIO,
        timeout: float | None = None,
    ) -> None:
        self._holder = ProviderHolder(factory)
        self._reader = reader
        self._writer = writer
        self._timeout = timeout

    @property
    def holder(self) -> ProviderHolder:
        return self._holder

    async def serve(self) -> int:
        """Run until end of stream or an undecodable record.

        Returns:
            0 after a clean end of stream, 1 after a decode failure.
        """
        try:
            while True:
                try:
                    line = await asyncio.to_thread(self._reader.readline)
                    if not line:
                        logger.info("End of request stream")
                        return 0
                    if not line.strip():
                        continue
                    raw = json.loads(line)
                except (json.JSONDecodeError, UnicodeDecodeError) as e:
                    logger.error("Undecodable request record: %s", e)
                    self._write(RpcResponse.failure(ProtocolError(f"malformed request record: {e}")))
                    return 1

                self._write(await self.handle(raw))
        finally:
            await self._holder.close()

    async def handle(self, raw: Any) -> RpcResponse:
        """Dispatch one decoded request record."""
        try:
            request = RpcRequest.model_validate(raw)
        except ValidationError as e:
            return RpcResponse.failure(ProtocolError(f"invalid request: {describe_validation_error(e)}"))

        try:
            provider = await self._holder.get(request.config)
        except AdapterError as e:
            logger.warning("Provider construction failed for %s: %s", request.method, e)
            return RpcResponse.failure(e)
        except Exception as e:
            logger.exception("Provider construction crashed for %s", request.method)
            return RpcResponse.failure(e)

        if request.method == METHOD_LOG_QUERY:
            return await self._log_query(provider, request.payload)
        return RpcResponse.failure(ProtocolError(f"unknown method: {request.method}"))

    async def _log_query(self, provider: LogProvider, payload: Any) -> RpcResponse:
        try:
            query = LogQuery.model_validate(payload if payload is not None else {})
        except ValidationError as e:
            return RpcResponse.failure(ProtocolError(f"invalid log.query payload: {describe_validation_error(e)}"))

        try:
            entries = await provider.query(query, timeout=self._timeout)
        except AdapterError as e:
            logger.warning("Query failed: %s", e)
            return RpcResponse.failure(e)
        except Exception as e:
            logger.exception("Query crashed")
            return RpcResponse.failure(e)

        logger.debug("Query returned %d entries", len(entries))
        return RpcResponse.success([entry.model_dump(mode="json") for entry in entries])

    def _write(self, response: RpcResponse) -> None:
        self._writer.write(response.to_json() + "\n")
        self._writer.flush()

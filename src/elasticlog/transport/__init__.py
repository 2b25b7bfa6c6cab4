"""Out-of-process transport — serves a provider over newline-delimited JSON."""

from elasticlog.transport.loop import ProviderHolder, TransportLoop
from elasticlog.transport.protocol import METHOD_LOG_QUERY, RpcRequest, RpcResponse

__all__ = ["METHOD_LOG_QUERY", "ProviderHolder", "RpcRequest", "RpcResponse", "TransportLoop"]

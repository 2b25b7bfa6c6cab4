"""Base provider interface — Abstract classes for log backend connectors."""

from elasticlog.adapters.base.adapter import LogProvider
from elasticlog.adapters.base.registry import ProviderFactory, ProviderRegistry

__all__ = ["LogProvider", "ProviderFactory", "ProviderRegistry"]

"""Composition root for the built-in providers."""

from __future__ import annotations

from elasticlog.adapters.base.registry import ProviderRegistry
from elasticlog.adapters.elasticsearch.adapter import PROVIDER_NAME, new_provider


def build_registry() -> ProviderRegistry:
    """Create a registry with every built-in provider registered."""
    registry = ProviderRegistry()
    registry.register(PROVIDER_NAME, new_provider)
    return registry

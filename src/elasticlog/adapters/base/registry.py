"""Provider Registry — Maps provider names to their constructors.

The registry is an explicit object owned by the composition root (see
:func:`elasticlog.adapters.registry.build_registry`), so construction order
is deterministic and tests can build isolated registries.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from elasticlog.adapters.base.adapter import LogProvider
from elasticlog.adapters.base.exceptions import ProviderNotFoundError

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[dict[str, Any]], Awaitable[LogProvider]]
"""Async constructor: untyped config map -> initialized provider."""


class ProviderRegistry:
    """Registry of log provider constructors.

    Example:
        >>> registry = ProviderRegistry()
        >>> registry.register("elastic", new_provider)
        >>> provider = await registry.create("elastic", {"addresses": [...]})
    """

    def __init__(self) -> None:
        self._factories: dict[str, ProviderFactory] = {}

    def register(self, name: str, factory: ProviderFactory) -> None:
        """Register a provider constructor.

        Registering the same constructor twice is a no-op.

        Args:
            name: Unique provider name.
            factory: Async constructor taking the untyped config map.

        Raises:
            ValueError: If a different constructor is already registered
                under ``name``.
        """
        existing = self._factories.get(name)
        if existing is factory:
            return
        if existing is not None:
            raise ValueError(f"Provider '{name}' is already registered")
        self._factories[name] = factory
        logger.info("Registered provider: %s", name)

    def get_factory(self, name: str) -> ProviderFactory:
        """Get the constructor registered under ``name``.

        Raises:
            ProviderNotFoundError: If no provider is registered under this name.
        """
        if name not in self._factories:
            raise ProviderNotFoundError(
                f"No provider registered with name '{name}'. "
                f"Available providers: {list(self._factories.keys())}"
            )
        return self._factories[name]

    async def create(self, name: str, config: dict[str, Any]) -> LogProvider:
        """Construct and initialize a provider.

        Args:
            name: The registered provider name.
            config: Untyped config map passed to the constructor.

        Returns:
            The initialized provider.
        """
        provider = await self.get_factory(name)(config)
        logger.info("Initialized provider: %s", name)
        return provider

    @property
    def registered_providers(self) -> list[str]:
        """List all registered provider names."""
        return list(self._factories.keys())

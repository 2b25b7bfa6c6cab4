"""Provider exceptions."""


class AdapterError(Exception):
    """Base exception for provider errors."""


class ConfigError(AdapterError):
    """Raised when provider configuration is missing required connection fields."""


class ConstructionError(AdapterError):
    """Raised when the provider cannot reach the search backend during construction."""


class QueryError(AdapterError):
    """Raised when a query fails to execute or its response cannot be parsed."""


class QueryTimeoutError(QueryError):
    """Raised when a query exceeds its deadline or is cancelled."""


class ProtocolError(AdapterError):
    """Raised when a transport request record is malformed."""


class ProviderNotFoundError(AdapterError):
    """Raised when a requested provider is not registered."""

"""Elasticsearch log provider — translates canonical log queries to the
Elasticsearch query DSL and normalizes hits back into canonical log entries."""

__version__ = "0.1.0"

ADAPTER_VERSION = __version__
REQUIRES_CORE = ">=0.1.0"

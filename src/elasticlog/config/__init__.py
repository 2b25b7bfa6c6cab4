"""Configuration: backend connection config and process settings."""

from elasticlog.config.elastic import DEFAULT_INDEX_PATTERN, ElasticConfig, parse_config
from elasticlog.config.settings import Settings

__all__ = ["DEFAULT_INDEX_PATTERN", "ElasticConfig", "Settings", "parse_config"]

"""Plugin settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if specified)
  2. Environment variables (ELASTICLOG_ prefix)
  3. Default values

Backend connection details are not part of these settings: the host sends
them with every request (see :mod:`elasticlog.config.elastic`).
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root plugin settings.

    Configuration is loaded from environment variables with the ELASTICLOG_ prefix.
    Nested settings use double underscores: ELASTICLOG_OBSERVABILITY__LOG_LEVEL=debug

    Example:
        ELASTICLOG_REQUEST_TIMEOUT=10
        ELASTICLOG_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "ELASTICLOG_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    provider: str = Field(default="elastic", description="Registered provider served by the plugin")
    request_timeout: float = Field(default=30.0, gt=0, description="Per-query deadline in seconds")
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

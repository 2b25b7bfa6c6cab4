"""CLI entry point for the log provider plugin.

The host starts this process and exchanges newline-delimited JSON records
with it over stdin/stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point for the plugin process."""
    parser = argparse.ArgumentParser(
        prog="elasticlog-plugin",
        description="Elasticsearch log provider plugin (newline-delimited JSON over stdio)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML settings file",
    )
    parser.add_argument(
        "--timeout",
        "-t",
        type=float,
        default=None,
        help="Per-query deadline in seconds (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        choices=["json", "console"],
        default=None,
        help="Log format (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"elasticlog {_get_version()}",
    )

    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")

    from elasticlog.config.settings import Settings

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            return 1
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    # Apply CLI overrides
    if args.timeout is not None:
        settings.request_timeout = args.timeout
    if args.log_level:
        settings.observability.log_level = args.log_level
    if args.log_format:
        settings.observability.log_format = args.log_format

    from elasticlog.adapters.registry import build_registry
    from elasticlog.observability.logging import setup_logging
    from elasticlog.transport.loop import TransportLoop

    setup_logging(settings.observability)

    from elasticlog.adapters.base.exceptions import ProviderNotFoundError

    try:
        factory = build_registry().get_factory(settings.provider)
    except ProviderNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    loop = TransportLoop(factory, sys.stdin, sys.stdout, timeout=settings.request_timeout)
    return asyncio.run(loop.serve())


def _get_version() -> str:
    """Get the package version."""
    from elasticlog import __version__

    return __version__


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import uvicorn

from cinebyarr.infrastructure.config import load_config
from cinebyarr.infrastructure.logging.setup import configure_logging
from cinebyarr.interfaces.app import create_app

log = structlog.get_logger(__name__)


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="cinebyarr")

    # Server options
    parser.add_argument("--host", default=None, help="Bind host (overrides HOST env).")
    parser.add_argument(
        "--port", default=None, type=int, help="Bind port (overrides PORT env)."
    )

    # Config wiring flags (no business logic)
    parser.add_argument("--config", default=None, help="Path to YAML config file.")
    parser.add_argument("--dotenv", default=None, help="Path to .env file.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )
    parser.add_argument(
        "--tmdb-api-key",
        default=None,
        help="TMDB API key (overrides CINEBYARR_TMDB_API_KEY).",
    )

    return parser.parse_args(list(argv) if argv is not None else None)


def build_cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect only the flags that were actually given."""
    overrides: dict[str, Any] = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    if args.tmdb_api_key:
        overrides["tmdb_api_key"] = args.tmdb_api_key
    return overrides


def start(argv: Iterable[str] | None = None) -> None:
    """Process entrypoint: load config once, configure logging, serve."""
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    host = args.host or os.getenv("HOST", "0.0.0.0")
    port = int(args.port or os.getenv("PORT", "7000"))

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=build_cli_overrides(args),
    )

    log_config = configure_logging(config)
    log.info("server_starting", host=host, port=port)

    uvicorn.run(
        create_app(config),
        host=host,
        port=port,
        log_config=log_config,
    )


if __name__ == "__main__":
    raise SystemExit(start())

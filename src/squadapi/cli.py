"""Command-line entry point that serves the player API."""

from __future__ import annotations

import argparse
import copy
from dataclasses import replace
from pathlib import Path
from typing import Any

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from squadapi.api import create_app
from squadapi.config import load_settings
from squadapi.ingest import SeedDataError, load_players
from squadapi.persistence import PlayerStore


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the in-memory football player API")
    parser.add_argument("--host", default=None, help="Interface to bind (default from SQUADAPI_HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port to listen on (default from SQUADAPI_PORT)")
    parser.add_argument("--seed", type=Path, default=None, help="Path to the players JSON seed file")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["critical", "error", "warning", "info", "debug", "trace"],
        help="Uvicorn log level",
    )
    return parser.parse_args()


def build_log_config(log_level: str) -> dict[str, Any]:
    """Uvicorn's logging config with the ``squadapi`` loggers routed through its handler."""

    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"]["squadapi"] = {
        "handlers": ["default"],
        "level": log_level.upper(),
        "propagate": False,
    }
    return config


def main() -> None:
    args = _parse_args()
    settings = load_settings()
    overrides = {
        "host": args.host,
        "port": args.port,
        "seed_path": args.seed,
        "log_level": args.log_level,
    }
    settings = replace(settings, **{key: value for key, value in overrides.items() if value is not None})

    try:
        players = load_players(settings.seed_path)
        store = PlayerStore(players)
    except (SeedDataError, ValueError) as exc:
        raise SystemExit(f"Unable to start: {exc}") from exc

    print(f"Loaded {len(store)} players from {settings.seed_path}")
    app = create_app(store=store, settings=settings)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        log_config=build_log_config(settings.log_level),
    )


if __name__ == "__main__":
    main()

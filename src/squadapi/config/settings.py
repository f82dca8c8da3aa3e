"""Environment-driven settings for the HTTP service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

_SEED_PATH_ENV = "SQUADAPI_SEED_PATH"
_HOST_ENV = "SQUADAPI_HOST"
_PORT_ENV = "SQUADAPI_PORT"
_LOG_LEVEL_ENV = "SQUADAPI_LOG_LEVEL"

_SEED_PATH_DEFAULT = "players.json"
_HOST_DEFAULT = "127.0.0.1"
_PORT_DEFAULT = 8000
_LOG_LEVEL_DEFAULT = "info"
_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


@dataclass(frozen=True)
class Settings:
    seed_path: Path
    host: str
    port: int
    log_level: str


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _log_level() -> str:
    level = _env_str(_LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT).lower()
    if level not in _LOG_LEVELS:
        logger.warning("Invalid log level for %s: %s; using default %s", _LOG_LEVEL_ENV, level, _LOG_LEVEL_DEFAULT)
        return _LOG_LEVEL_DEFAULT
    return level


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""

    return Settings(
        seed_path=Path(_env_str(_SEED_PATH_ENV, _SEED_PATH_DEFAULT)),
        host=_env_str(_HOST_ENV, _HOST_DEFAULT),
        port=_env_int(_PORT_ENV, _PORT_DEFAULT, min_value=1),
        log_level=_log_level(),
    )

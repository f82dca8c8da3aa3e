"""Load the starting player collection from a JSON seed file."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

from pydantic import ValidationError

from squadapi.models import PlayerRecord


logger = logging.getLogger(__name__)


class SeedDataError(RuntimeError):
    """The seed file is missing or does not describe a list of players."""


def parse_players(payload: Any, *, source: str = "<memory>") -> List[PlayerRecord]:
    """Validate decoded seed JSON into records, naming ``source`` in errors."""

    if not isinstance(payload, list):
        raise SeedDataError(f"{source}: expected a JSON array of players, got {type(payload).__name__}")
    records: List[PlayerRecord] = []
    for index, entry in enumerate(payload):
        try:
            records.append(PlayerRecord.model_validate(entry))
        except ValidationError as exc:
            raise SeedDataError(f"{source}: invalid player at index {index}: {exc}") from exc
    return records


def load_players(path: Path | str) -> List[PlayerRecord]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SeedDataError(
            f"Failed to read {path} - ensure the seed file exists in the working directory"
        ) from exc
    except OSError as exc:
        raise SeedDataError(f"Failed to read {path}: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SeedDataError(f"Failed to parse {path} - check JSON syntax: {exc}") from exc

    records = parse_players(payload, source=str(path))
    logger.info("Loaded %s players from %s", len(records), path)
    return records

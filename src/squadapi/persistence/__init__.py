"""In-memory record store for player records."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from squadapi.models import PlayerFields, PlayerRecord


logger = logging.getLogger(__name__)

_INITIAL_ID = 1


class PlayerNotFoundError(KeyError):
    """No record matches the requested identifier or squad number."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SquadNumberConflictError(ValueError):
    def __init__(self, squad_number: int, holder_id: int):
        message = f"Squad number {squad_number} is already taken by player {holder_id}"
        super().__init__(message)
        self.squad_number = squad_number
        self.holder_id = holder_id
        self.message = message


class PlayerStore:
    """Ordered player collection guarded by a single lock.

    Every public method takes the lock for its whole body, so readers never see
    a half-applied mutation. Records are frozen models; callers get the stored
    instances (or new lists of them) and cannot alter what the store holds.
    """

    def __init__(self, players: Iterable[PlayerRecord] = ()):
        records = list(players)
        seen_ids: set[int] = set()
        seen_numbers: set[int] = set()
        for record in records:
            if record.id in seen_ids:
                raise ValueError(f"Duplicate player id {record.id} in initial players")
            if record.squad_number in seen_numbers:
                raise ValueError(f"Duplicate squad number {record.squad_number} in initial players")
            seen_ids.add(record.id)
            seen_numbers.add(record.squad_number)
        self._players: List[PlayerRecord] = records
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._players)

    def list(self) -> List[PlayerRecord]:
        with self._lock:
            return list(self._players)

    def find_by_id(self, player_id: int) -> Optional[PlayerRecord]:
        with self._lock:
            index = self._index_of(player_id)
            return None if index is None else self._players[index]

    def find_by_squad_number(self, squad_number: int) -> Optional[PlayerRecord]:
        with self._lock:
            for record in self._players:
                if record.squad_number == squad_number:
                    return record
            return None

    def insert(self, fields: PlayerFields) -> PlayerRecord:
        with self._lock:
            self._ensure_squad_number_free(fields.squad_number)
            player_id = max((p.id for p in self._players), default=_INITIAL_ID - 1) + 1
            record = PlayerRecord.from_fields(player_id, fields)
            self._players.append(record)
        logger.info("Created player %s with squad number %s", record.id, record.squad_number)
        return record

    def replace(self, player_id: int, fields: PlayerFields) -> PlayerRecord:
        with self._lock:
            index = self._index_of(player_id)
            if index is None:
                raise PlayerNotFoundError(f"Player {player_id} not found")
            self._ensure_squad_number_free(fields.squad_number, exclude_id=player_id)
            record = PlayerRecord.from_fields(player_id, fields)
            self._players[index] = record
        logger.info("Updated player %s with squad number %s", record.id, record.squad_number)
        return record

    def remove(self, player_id: int) -> None:
        with self._lock:
            index = self._index_of(player_id)
            if index is None:
                raise PlayerNotFoundError(f"Player {player_id} not found")
            del self._players[index]
        logger.info("Removed player %s", player_id)

    # The helpers below assume the caller already holds ``self._lock``.

    def _index_of(self, player_id: int) -> Optional[int]:
        for index, record in enumerate(self._players):
            if record.id == player_id:
                return index
        return None

    def _ensure_squad_number_free(self, squad_number: int, *, exclude_id: Optional[int] = None) -> None:
        for record in self._players:
            if record.squad_number == squad_number and record.id != exclude_id:
                logger.debug(
                    "Rejected squad number %s; already held by player %s", squad_number, record.id
                )
                raise SquadNumberConflictError(squad_number, record.id)


__all__ = [
    "PlayerNotFoundError",
    "PlayerStore",
    "SquadNumberConflictError",
]

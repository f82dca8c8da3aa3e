"""CRUD and lookup operations composed from store access and DTO mapping."""

from __future__ import annotations

import logging
from typing import List

from squadapi.schemas import (
    PlayerCreateRequest,
    PlayerResponse,
    PlayerUpdateRequest,
    record_to_response,
    request_to_fields,
)
from squadapi.persistence import PlayerNotFoundError, PlayerStore


logger = logging.getLogger(__name__)


class PlayerService:
    """Maps requests onto the store and store records onto responses.

    Store failures (``PlayerNotFoundError`` and ``SquadNumberConflictError``)
    propagate unchanged so the HTTP layer can translate them to status codes.
    """

    def __init__(self, store: PlayerStore):
        self.store = store

    def create(self, request: PlayerCreateRequest) -> PlayerResponse:
        record = self.store.insert(request_to_fields(request))
        return record_to_response(record)

    def read_all(self) -> List[PlayerResponse]:
        return [record_to_response(record) for record in self.store.list()]

    def read_by_id(self, player_id: int) -> PlayerResponse:
        record = self.store.find_by_id(player_id)
        if record is None:
            logger.debug("Lookup miss for player id %s", player_id)
            raise PlayerNotFoundError(f"Player {player_id} not found")
        return record_to_response(record)

    def read_by_squad_number(self, squad_number: int) -> PlayerResponse:
        record = self.store.find_by_squad_number(squad_number)
        if record is None:
            logger.debug("Lookup miss for squad number %s", squad_number)
            raise PlayerNotFoundError(f"No player with squad number {squad_number}")
        return record_to_response(record)

    def update(self, player_id: int, request: PlayerUpdateRequest) -> PlayerResponse:
        record = self.store.replace(player_id, request_to_fields(request))
        return record_to_response(record)

    def delete(self, player_id: int) -> None:
        self.store.remove(player_id)

"""One-directional conversions between API payloads and stored records."""

from __future__ import annotations

from squadapi.models import PlayerFields, PlayerRecord

from .player import PlayerCreateRequest, PlayerResponse, PlayerUpdateRequest


def request_to_fields(request: PlayerCreateRequest | PlayerUpdateRequest) -> PlayerFields:
    return PlayerFields(
        first_name=request.first_name,
        middle_name=request.middle_name,
        last_name=request.last_name,
        date_of_birth=request.date_of_birth,
        squad_number=request.squad_number,
        position=request.position,
        abbr_position=request.abbr_position,
        team=request.team,
        league=request.league,
        starting11=request.starting11,
    )


def record_to_response(record: PlayerRecord) -> PlayerResponse:
    return PlayerResponse(
        id=record.id,
        first_name=record.first_name,
        middle_name=record.middle_name,
        last_name=record.last_name,
        date_of_birth=record.date_of_birth,
        squad_number=record.squad_number,
        position=record.position,
        abbr_position=record.abbr_position,
        team=record.team,
        league=record.league,
        starting11=record.starting11,
    )

"""Canonical player entities held by the record store."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


# Squad numbers and ids are unsigned 32-bit values on the wire.
MAX_UNSIGNED = 2**32 - 1


class PlayerFields(BaseModel):
    """Every descriptive player field; the shape of a record before it has an id."""

    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    date_of_birth: str
    squad_number: int = Field(..., ge=0, le=MAX_UNSIGNED)
    position: str
    abbr_position: str
    team: str
    league: str
    starting11: bool

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class PlayerRecord(PlayerFields):
    """Stored player. Frozen so snapshots handed out of the store stay untouched."""

    id: int = Field(..., ge=0, le=MAX_UNSIGNED)

    @classmethod
    def from_fields(cls, player_id: int, fields: PlayerFields) -> "PlayerRecord":
        return cls(id=player_id, **fields.model_dump())

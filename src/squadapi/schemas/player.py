from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

from squadapi.models import MAX_UNSIGNED


class _PlayerPayload(BaseModel):
    """Request body; strict so "10", 10.0 or true are rejected rather than coerced."""

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

    model_config = ConfigDict(strict=True, alias_generator=to_camel, populate_by_name=True)


class PlayerCreateRequest(_PlayerPayload):
    pass


class PlayerUpdateRequest(_PlayerPayload):
    """Full replacement of every field except the identifier."""


class PlayerResponse(BaseModel):
    id: int
    first_name: str
    middle_name: Optional[str] = None
    last_name: str
    date_of_birth: str
    squad_number: int
    position: str
    abbr_position: str
    team: str
    league: str
    starting11: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

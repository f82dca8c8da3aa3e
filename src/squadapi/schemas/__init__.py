"""Pydantic models for API I/O."""

from .player import PlayerCreateRequest, PlayerResponse, PlayerUpdateRequest
from .mapping import record_to_response, request_to_fields

__all__ = [
    "PlayerCreateRequest",
    "PlayerUpdateRequest",
    "PlayerResponse",
    "record_to_response",
    "request_to_fields",
]

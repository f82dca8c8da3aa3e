"""Internal player entities owned by the record store."""

from .player import MAX_UNSIGNED, PlayerFields, PlayerRecord

__all__ = ["MAX_UNSIGNED", "PlayerFields", "PlayerRecord"]

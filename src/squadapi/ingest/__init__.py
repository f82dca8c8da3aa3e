"""Input adapters that turn seed files into player records."""

from .seed import SeedDataError, load_players, parse_players

__all__ = [
    "SeedDataError",
    "load_players",
    "parse_players",
]

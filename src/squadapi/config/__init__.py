"""Runtime configuration for the squadapi service."""

from .settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
]

"""Core engine package for Le Borderland."""

__all__ = [
    "cards",
    "deck",
    "penalty",
    "rotation",
    "players",
    "state",
    "game",
    "service",
    "roster",
    "i18n",
    "config",
]

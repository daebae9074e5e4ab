"""Durable player list, kept apart from the per-session game state."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Sequence, Union

from .players import Player, deserialize_player, serialize_player

logger = logging.getLogger(__name__)


class RosterError(RuntimeError):
    """Raised when the stored roster cannot be read back."""


class Roster:
    """In-memory roster; subclasses persist the list somewhere durable."""

    def __init__(self) -> None:
        self._players: List[Player] = []

    def load(self) -> List[Player]:
        return list(self._players)

    def save(self, players: Sequence[Player]) -> None:
        self._players = list(players)


class JsonRoster(Roster):
    """Roster stored as a JSON list of ``{id, name, active}`` records."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> List[Player]:
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RosterError(f"Roster file {self.path} is not valid JSON.") from exc
        if not isinstance(payload, list):
            raise RosterError(f"Roster file {self.path} must hold a list of players.")
        try:
            players = [deserialize_player(entry) for entry in payload]
        except (KeyError, TypeError, AttributeError) as exc:
            raise RosterError(f"Roster file {self.path} holds a malformed player entry.") from exc
        logger.debug("Loaded %d players from %s.", len(players), self.path)
        return players

    def save(self, players: Sequence[Player]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [serialize_player(player) for player in players]
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")

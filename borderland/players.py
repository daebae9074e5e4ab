"""Player records and name handling."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from typing import Callable, Iterable, List, Mapping, Optional

DEFAULT_MAX_NAME_LENGTH = 20

IdFactory = Callable[[], str]


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    active: bool = True


def sanitize_name(name: str, max_length: int = DEFAULT_MAX_NAME_LENGTH) -> str:
    """Trim, cap the length and strip markup brackets from a display name."""
    cleaned = name.strip()[:max_length]
    return cleaned.replace("<", "").replace(">", "").strip()


def sanitize_names(names: Iterable[str], max_length: int = DEFAULT_MAX_NAME_LENGTH) -> List[str]:
    sanitized = (sanitize_name(name, max_length) for name in names)
    return [name for name in sanitized if name]


def new_player_id() -> str:
    return f"player-{uuid.uuid4().hex[:12]}"


def create_player(name: str, id_factory: Optional[IdFactory] = None) -> Player:
    factory = id_factory or new_player_id
    return Player(id=factory(), name=name, active=True)


def deactivate(players: Iterable[Player], player_id: str) -> List[Player]:
    return [replace(player, active=False) if player.id == player_id else player for player in players]


def serialize_player(player: Player) -> dict[str, object]:
    return {"id": player.id, "name": player.name, "active": player.active}


def deserialize_player(payload: Mapping[str, object]) -> Player:
    return Player(
        id=str(payload["id"]),
        name=str(payload["name"]),
        active=bool(payload.get("active", True)),
    )

"""Turn rotation for Le Borderland."""

from __future__ import annotations

from typing import Sequence

from .players import Player


def next_player_index(current_index: int, players: Sequence[Player]) -> int:
    """Return the index of the next active player after ``current_index``.

    Inactive players are skipped. The search stops on ``current_index`` once
    the table has been walked, and falls back to 0 when nobody is active.
    """
    if not any(player.active for player in players):
        return 0

    count = len(players)
    next_index = (current_index + 1) % count
    while not players[next_index].active and next_index != current_index:
        next_index = (next_index + 1) % count
    return next_index

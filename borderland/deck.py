"""Deck creation and shuffling utilities for Le Borderland."""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence

from .cards import Card, RANK_ORDER, SUIT_ORDER

DECK_SIZE = 52

RandInt = Callable[[int, int], int]


def create_deck() -> List[Card]:
    """Return the ordered 52-card deck."""
    return [Card(suit, rank) for suit in SUIT_ORDER for rank in RANK_ORDER]


def shuffle(cards: Sequence[Card], randint: Optional[RandInt] = None) -> List[Card]:
    """Return a Fisher-Yates shuffled copy of ``cards``.

    ``randint`` follows :func:`random.randint` (both bounds inclusive) and
    defaults to it.
    """
    if randint is None:
        randint = random.randint
    shuffled = list(cards)
    for i in range(len(shuffled) - 1, 0, -1):
        j = randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled

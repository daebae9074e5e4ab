"""Card-related data structures and helpers for Le Borderland."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class Suit(Enum):
    CLUBS = "clubs"
    DIAMONDS = "diamonds"
    HEARTS = "hearts"
    SPADES = "spades"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self) -> str:
        return self.value


class PenaltyUnit(Enum):
    SHOT = "SHOT"
    STANDARD_SIP = "STANDARD_SIP"

    def __str__(self) -> str:
        return self.value


# Canonical deck order.
SUIT_ORDER: list[Suit] = [Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES]

RANK_ORDER: list[Rank] = [
    Rank.ACE,
    Rank.TWO,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
]

RANK_VALUES: dict[Rank, int] = {rank: index + 1 for index, rank in enumerate(RANK_ORDER)}

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


def unit_for_rank(rank: Rank) -> PenaltyUnit:
    """Aces cost a shot, every other rank a standard sip."""
    return PenaltyUnit.SHOT if rank is Rank.ACE else PenaltyUnit.STANDARD_SIP


@dataclass(frozen=True)
class Card:
    """Immutable playing card; value and unit follow from the rank."""

    suit: Suit
    rank: Rank
    value: int = field(init=False, compare=False)
    unit: PenaltyUnit = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", RANK_VALUES[self.rank])
        object.__setattr__(self, "unit", unit_for_rank(self.rank))

    @property
    def id(self) -> str:
        return f"{self.suit.value}-{self.rank.value}"


def serialize_card(card: Card) -> dict[str, object]:
    return {
        "id": card.id,
        "suit": card.suit.value,
        "rank": card.rank.value,
        "value": card.value,
        "unit": card.unit.value,
    }


def deserialize_card(payload: Mapping[str, object]) -> Card:
    try:
        suit = Suit(payload["suit"])
        rank = Rank(payload["rank"])
    except KeyError as exc:
        raise ValueError(f"Card payload missing {exc.args[0]!r}.") from exc
    return Card(suit, rank)


def card_label(card: Card) -> str:
    return f"{card.rank.value}{SUIT_SYMBOLS[card.suit]}"

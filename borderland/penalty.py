"""Penalty helpers for contested cards."""

from __future__ import annotations

from dataclasses import dataclass

from .cards import PenaltyUnit

MAX_CONTEST_LEVEL = 3

# Level 0 is an uncontested card, level 1 the opening challenge.
CONTEST_MULTIPLIERS: dict[int, int] = {
    0: 1,
    1: 1,
    2: 2,
    3: 4,
}


@dataclass(frozen=True)
class PenaltyResult:
    amount: int
    unit: PenaltyUnit
    display_text: str


def multiplier(level: int) -> int:
    try:
        return CONTEST_MULTIPLIERS[level]
    except KeyError as exc:
        raise ValueError(f"Contest level must be between 0 and {MAX_CONTEST_LEVEL}, got {level}.") from exc


def format_penalty(amount: int, unit: PenaltyUnit) -> str:
    if unit is PenaltyUnit.SHOT:
        return f"{amount} SHOT{'S' if amount > 1 else ''}"
    return f"{amount} sip{'s' if amount > 1 else ''}"


def calculate_penalty(base_amount: int, level: int, unit: PenaltyUnit) -> PenaltyResult:
    """Scale ``base_amount`` by the contest multiplier; the unit never changes."""
    amount = base_amount * multiplier(level)
    return PenaltyResult(amount=amount, unit=unit, display_text=format_penalty(amount, unit))

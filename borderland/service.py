"""Convenience service layer for UI consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .cards import Card, card_label, serialize_card
from .deck import DECK_SIZE
from .game import GameStore
from .i18n import penalty_text
from .penalty import CONTEST_MULTIPLIERS, MAX_CONTEST_LEVEL, PenaltyResult, calculate_penalty
from .players import Player, serialize_player


@dataclass
class CardView:
    card: dict
    label: str


@dataclass
class RuleView:
    title: str
    description: str


@dataclass
class ContestView:
    active: bool
    level: int
    multiplier: int
    next_multiplier: Optional[int]
    can_escalate: bool
    challenger: Optional[dict]
    base_card: Optional[CardView]


@dataclass
class PenaltyView:
    amount: int
    unit: str
    display_text: str
    localized_text: str


@dataclass
class GameView:
    phase: str
    players: list[dict]
    current_player: Optional[dict]
    current_card: Optional[CardView]
    current_rule: Optional[RuleView]
    cards_remaining: int
    total_cards: int
    discard_count: int
    contest: ContestView
    penalty_preview: Optional[PenaltyView]
    is_game_over: bool


class GameService:
    """Facade around GameStore for UI consumers."""

    def __init__(self, store: Optional[GameStore] = None) -> None:
        self.store = store or GameStore()

    @property
    def language(self) -> str:
        return self.store.config.language

    # Session lifecycle -------------------------------------------------

    def start(self, names: Sequence[str]) -> bool:
        return self.store.init_game(names)

    def reset(self) -> GameView:
        self.store.reset_game()
        return self.get_view()

    # Players -----------------------------------------------------------

    def add_player(self, name: str) -> Optional[dict]:
        player = self.store.add_player(name)
        return serialize_player(player) if player else None

    def remove_player(self, player_id: str) -> GameView:
        self.store.remove_player(player_id)
        return self.get_view()

    def deactivate_player(self, player_id: str) -> GameView:
        self.store.deactivate_player(player_id)
        return self.get_view()

    # Actions -----------------------------------------------------------

    def draw(self) -> Optional[CardView]:
        card = self.store.draw_card()
        return self._card_view(card) if card else None

    def contest(self) -> bool:
        """Open a contest on the drawn card in the current player's name."""
        player = self.store.current_player()
        if player is None:
            return False
        before = self.store.state
        self.store.start_contest(player)
        return self.store.state is not before

    def escalate(self, challenger: Optional[Player] = None) -> bool:
        challenger = challenger or self.store.current_player()
        if challenger is None:
            return False
        return self.store.escalate_contest(challenger)

    def accept(self, loser: Optional[Player] = None) -> Optional[PenaltyView]:
        """Settle the contest and clear it, returning what the loser drinks."""
        loser = loser or self.store.current_player()
        if loser is None:
            return None
        penalty = self.store.resolve_contest(loser)
        if penalty is None:
            return None
        self.store.cancel_contest()
        return self._penalty_view(penalty)

    def dismiss_contest(self) -> GameView:
        self.store.cancel_contest()
        return self.get_view()

    def next_turn(self) -> GameView:
        self.store.next_turn()
        return self.get_view()

    # Views -------------------------------------------------------------

    def get_view(self) -> GameView:
        state = self.store.state
        current = self.store.current_player()
        rule = self.store.current_rule(self.language)
        contest = state.contest_state

        penalty_preview = None
        if contest.active and contest.base_card is not None:
            card = contest.base_card
            penalty_preview = self._penalty_view(calculate_penalty(card.value, contest.level, card.unit))

        can_escalate = contest.active and contest.level < MAX_CONTEST_LEVEL
        contest_view = ContestView(
            active=contest.active,
            level=contest.level,
            multiplier=CONTEST_MULTIPLIERS[contest.level],
            next_multiplier=CONTEST_MULTIPLIERS[contest.level + 1] if can_escalate else None,
            can_escalate=can_escalate,
            challenger=serialize_player(contest.challenger) if contest.challenger else None,
            base_card=self._card_view(contest.base_card) if contest.base_card else None,
        )

        return GameView(
            phase=state.game_phase.value,
            players=[serialize_player(player) for player in state.players],
            current_player=serialize_player(current) if current else None,
            current_card=self._card_view(state.current_card) if state.current_card else None,
            current_rule=RuleView(title=rule.title, description=rule.description) if rule else None,
            cards_remaining=self.store.cards_remaining(),
            total_cards=DECK_SIZE,
            discard_count=len(state.discard_pile),
            contest=contest_view,
            penalty_preview=penalty_preview,
            is_game_over=self.store.is_game_over(),
        )

    # Helpers -----------------------------------------------------------

    def _card_view(self, card: Card) -> CardView:
        return CardView(card=serialize_card(card), label=card_label(card))

    def _penalty_view(self, penalty: PenaltyResult) -> PenaltyView:
        return PenaltyView(
            amount=penalty.amount,
            unit=penalty.unit.value,
            display_text=penalty.display_text,
            localized_text=penalty_text(penalty.unit, penalty.amount, self.language),
        )

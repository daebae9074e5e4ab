"""High-level game orchestration for Le Borderland."""

from __future__ import annotations

from random import Random
from typing import Callable, List, Optional, Sequence

from . import state as transitions
from .cards import Card
from .config import GameConfig
from .i18n import SuitRule, suit_rule
from .penalty import PenaltyResult
from .players import IdFactory, Player
from .roster import JsonRoster, Roster
from .state import GameState

Listener = Callable[[GameState], None]


def open_roster(config: GameConfig) -> Optional[Roster]:
    if config.roster_path is None:
        return None
    return JsonRoster(config.roster_path)


class GameStore:
    """Owner of the live :class:`GameState`.

    Each operation runs one pure transition and swaps the result in as the
    new state. Listeners hear about every change; an attached roster is kept
    in step with the player list. A new store always starts in ``setup``,
    with only the roster's players restored.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[Random] = None,
        roster: Optional[Roster] = None,
        id_factory: Optional[IdFactory] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rng = rng or Random()
        self.roster = roster
        self.id_factory = id_factory
        self._listeners: List[Listener] = []
        restored = roster.load() if roster is not None else []
        self._state = transitions.initial_state(restored)

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Setup -------------------------------------------------------------

    def init_game(self, names: Sequence[str]) -> bool:
        new_state, started = transitions.init_game(
            self._state,
            names,
            config=self.config,
            randint=self.rng.randint,
            id_factory=self.id_factory,
        )
        self._apply(new_state)
        return started

    def reset_game(self) -> None:
        # The saved roster outlives the session it was used in.
        self._apply(transitions.reset_game(self._state), save_roster=False)

    # Players -----------------------------------------------------------

    def add_player(self, name: str) -> Optional[Player]:
        new_state, player = transitions.add_player(
            self._state, name, config=self.config, id_factory=self.id_factory
        )
        self._apply(new_state)
        return player

    def remove_player(self, player_id: str) -> None:
        self._apply(transitions.remove_player(self._state, player_id))

    def deactivate_player(self, player_id: str) -> None:
        self._apply(transitions.deactivate_player(self._state, player_id))

    # Turn flow ---------------------------------------------------------

    def draw_card(self) -> Optional[Card]:
        new_state, card = transitions.draw_card(self._state)
        self._apply(new_state)
        return card

    def next_turn(self) -> None:
        self._apply(transitions.next_turn(self._state))

    # Contest -----------------------------------------------------------

    def start_contest(self, challenger: Player) -> None:
        self._apply(transitions.start_contest(self._state, challenger))

    def escalate_contest(self, challenger: Player) -> bool:
        new_state, escalated = transitions.escalate_contest(self._state, challenger)
        self._apply(new_state)
        return escalated

    def resolve_contest(self, loser: Player) -> Optional[PenaltyResult]:
        new_state, penalty = transitions.resolve_contest(self._state, loser)
        self._apply(new_state)
        return penalty

    def cancel_contest(self) -> None:
        self._apply(transitions.cancel_contest(self._state))

    # Projections -------------------------------------------------------

    def current_player(self) -> Optional[Player]:
        return transitions.current_player(self._state)

    def cards_remaining(self) -> int:
        return transitions.cards_remaining(self._state)

    def is_game_over(self) -> bool:
        return transitions.is_game_over(self._state)

    def current_rule(self, language: Optional[str] = None) -> Optional[SuitRule]:
        card = self._state.current_card
        if card is None:
            return None
        return suit_rule(card.suit, language or self.config.language)

    # Helpers -----------------------------------------------------------

    def _apply(self, new_state: GameState, *, save_roster: bool = True) -> None:
        if new_state is self._state:
            return
        previous = self._state
        self._state = new_state
        if save_roster and self.roster is not None and new_state.players != previous.players:
            self.roster.save(new_state.players)
        for listener in list(self._listeners):
            listener(new_state)

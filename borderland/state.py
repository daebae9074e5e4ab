"""Game state and pure transitions for Le Borderland.

Every transition takes the current :class:`GameState` and returns a new one;
nothing here mutates its input. Rejected operations hand back the state they
were given, together with a ``None``/``False`` result where the operation has
one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from .cards import Card
from .config import GameConfig
from .deck import RandInt, create_deck, shuffle
from .penalty import MAX_CONTEST_LEVEL, PenaltyResult, calculate_penalty
from .players import IdFactory, Player, create_player, deactivate, sanitize_name, sanitize_names
from .rotation import next_player_index

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    CONTEST = "contest"
    RESOLUTION = "resolution"
    ENDED = "ended"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ContestState:
    active: bool = False
    level: int = 0
    base_card: Optional[Card] = None
    challenger: Optional[Player] = None


EMPTY_CONTEST = ContestState()


@dataclass(frozen=True)
class GameState:
    deck: Tuple[Card, ...] = ()
    discard_pile: Tuple[Card, ...] = ()
    players: Tuple[Player, ...] = ()
    current_player_index: int = 0
    current_card: Optional[Card] = None
    contest_state: ContestState = EMPTY_CONTEST
    game_phase: GamePhase = GamePhase.SETUP


def initial_state(players: Iterable[Player] = ()) -> GameState:
    """Return the ``setup`` state, optionally seeded with a restored roster."""
    return GameState(players=tuple(players))


# Setup ---------------------------------------------------------------


def init_game(
    state: GameState,
    names: Sequence[str],
    *,
    config: Optional[GameConfig] = None,
    randint: Optional[RandInt] = None,
    id_factory: Optional[IdFactory] = None,
) -> Tuple[GameState, bool]:
    config = config or GameConfig()
    cleaned = sanitize_names(names, config.max_name_length)
    if len(cleaned) < config.min_players:
        logger.warning("At least %d players required, got %d valid names.", config.min_players, len(cleaned))
        return state, False
    if len(cleaned) > config.max_players:
        logger.warning("At most %d players allowed, got %d.", config.max_players, len(cleaned))
        return state, False

    players = tuple(create_player(name, id_factory) for name in cleaned)
    new_state = GameState(
        deck=tuple(shuffle(create_deck(), randint)),
        discard_pile=(),
        players=players,
        current_player_index=0,
        current_card=None,
        contest_state=EMPTY_CONTEST,
        game_phase=GamePhase.PLAYING,
    )
    logger.info("Game started with %d players.", len(players))
    return new_state, True


def reset_game(state: GameState) -> GameState:
    return initial_state()


# Players -------------------------------------------------------------


def add_player(
    state: GameState,
    name: str,
    *,
    config: Optional[GameConfig] = None,
    id_factory: Optional[IdFactory] = None,
) -> Tuple[GameState, Optional[Player]]:
    config = config or GameConfig()
    cleaned = sanitize_name(name, config.max_name_length)
    if not cleaned:
        logger.debug("Ignoring blank player name.")
        return state, None
    if len(state.players) >= config.max_players:
        logger.warning("Cannot add %r: table already has %d players.", cleaned, len(state.players))
        return state, None
    player = create_player(cleaned, id_factory)
    return replace(state, players=state.players + (player,)), player


def remove_player(state: GameState, player_id: str) -> GameState:
    index = next((i for i, player in enumerate(state.players) if player.id == player_id), None)
    if index is None:
        logger.debug("No player with id %s to remove.", player_id)
        return state

    players = state.players[:index] + state.players[index + 1 :]
    current = state.current_player_index
    if index < current:
        current -= 1
    if current >= len(players):
        current = 0
    return replace(state, players=players, current_player_index=current)


def deactivate_player(state: GameState, player_id: str) -> GameState:
    if not any(player.id == player_id for player in state.players):
        logger.debug("No player with id %s to deactivate.", player_id)
        return state
    return replace(state, players=tuple(deactivate(state.players, player_id)))


# Turn flow -----------------------------------------------------------


def draw_card(state: GameState) -> Tuple[GameState, Optional[Card]]:
    if state.game_phase is not GamePhase.PLAYING:
        logger.debug("draw_card rejected in phase %s.", state.game_phase)
        return state, None
    if not state.deck:
        logger.info("Deck exhausted, game over.")
        return replace(state, game_phase=GamePhase.ENDED), None

    drawn, remaining = state.deck[0], state.deck[1:]
    return replace(state, deck=remaining, current_card=drawn), drawn


def next_turn(state: GameState) -> GameState:
    if state.game_phase in (GamePhase.SETUP, GamePhase.ENDED):
        logger.debug("next_turn rejected in phase %s.", state.game_phase)
        return state

    discard = state.discard_pile
    if state.current_card is not None:
        discard = discard + (state.current_card,)

    # Only undrawn cards decide the end of the game.
    if not state.deck:
        logger.info("Last card played, game over.")
        return replace(
            state,
            discard_pile=discard,
            current_card=None,
            contest_state=EMPTY_CONTEST,
            game_phase=GamePhase.ENDED,
        )

    return replace(
        state,
        discard_pile=discard,
        current_player_index=next_player_index(state.current_player_index, state.players),
        current_card=None,
        contest_state=EMPTY_CONTEST,
        game_phase=GamePhase.PLAYING,
    )


# Contest -------------------------------------------------------------


def start_contest(state: GameState, challenger: Player) -> GameState:
    if state.game_phase is not GamePhase.PLAYING or state.current_card is None:
        logger.debug("start_contest rejected in phase %s.", state.game_phase)
        return state
    contest = ContestState(active=True, level=1, base_card=state.current_card, challenger=challenger)
    return replace(state, contest_state=contest, game_phase=GamePhase.CONTEST)


def escalate_contest(state: GameState, challenger: Player) -> Tuple[GameState, bool]:
    contest = state.contest_state
    if not contest.active or contest.level >= MAX_CONTEST_LEVEL:
        logger.debug("escalate_contest rejected at level %d.", contest.level)
        return state, False
    escalated = replace(contest, level=contest.level + 1, challenger=challenger)
    return replace(state, contest_state=escalated), True


def resolve_contest(state: GameState, loser: Player) -> Tuple[GameState, Optional[PenaltyResult]]:
    """Compute the contest penalty and move to ``resolution``.

    The contest itself stays in place until :func:`cancel_contest` so the
    result can be shown first. ``loser`` does not change the outcome.
    """
    contest = state.contest_state
    if not contest.active or contest.base_card is None:
        logger.debug("resolve_contest rejected without an active contest.")
        return state, None

    card = contest.base_card
    penalty = calculate_penalty(card.value, contest.level, card.unit)
    logger.info("Contest on %s resolved at level %d for %s: %s.", card.id, contest.level, loser.name, penalty.display_text)
    return replace(state, game_phase=GamePhase.RESOLUTION), penalty


def cancel_contest(state: GameState) -> GameState:
    if state.game_phase in (GamePhase.SETUP, GamePhase.ENDED):
        return state
    return replace(state, contest_state=EMPTY_CONTEST, game_phase=GamePhase.PLAYING)


# Projections ---------------------------------------------------------


def current_player(state: GameState) -> Optional[Player]:
    if 0 <= state.current_player_index < len(state.players):
        return state.players[state.current_player_index]
    return None


def cards_remaining(state: GameState) -> int:
    return len(state.deck)


def is_game_over(state: GameState) -> bool:
    return state.game_phase is GamePhase.ENDED or not state.deck

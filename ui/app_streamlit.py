"""Streamlit table for Le Borderland."""

from __future__ import annotations

import logging

import streamlit as st

from borderland.config import load_config
from borderland.game import GameStore, open_roster
from borderland.i18n import translate
from borderland.roster import RosterError
from borderland.service import GameService, GameView

logger = logging.getLogger(__name__)


def get_service() -> GameService:
    if "game_service" not in st.session_state:
        config = load_config()
        try:
            store = GameStore(config, roster=open_roster(config))
        except RosterError as exc:
            logger.warning("Ignoring saved roster: %s", exc)
            store = GameStore(config)
        st.session_state["game_service"] = GameService(store)
    return st.session_state["game_service"]


def t(service: GameService, key: str, **params: object) -> str:
    return translate(key, service.language, **params)


def render_setup(service: GameService, view: GameView) -> None:
    config = service.store.config
    st.subheader(t(service, "borderland.subtitle"))
    saved = [player["name"] for player in view.players]
    count = st.number_input(
        t(service, "common.minMaxPlayers", min=config.min_players, max=config.max_players),
        min_value=config.min_players,
        max_value=config.max_players,
        value=max(config.min_players, min(len(saved), config.max_players)),
        step=1,
    )
    names = []
    for index in range(int(count)):
        default = saved[index] if index < len(saved) else ""
        names.append(
            st.text_input(
                t(service, "common.playerPlaceholder", number=index + 1),
                value=default,
                max_chars=config.max_name_length,
                key=f"player_name_{index}",
            )
        )
    if st.button(t(service, "common.play")):
        if service.start(names):
            st.rerun()
        else:
            st.warning(t(service, "common.minMaxPlayers", min=config.min_players, max=config.max_players))


def render_contest(service: GameService, view: GameView) -> None:
    contest = view.contest
    st.subheader(f"{t(service, 'rules.contest.title')} x{contest.multiplier}")
    if contest.challenger:
        st.write(contest.challenger["name"])
    if view.penalty_preview:
        st.write(view.penalty_preview.localized_text)

    cols = st.columns(3)
    if contest.can_escalate and cols[0].button(f"{t(service, 'game.escalate')} x{contest.next_multiplier}"):
        service.escalate()
        st.rerun()
    if cols[1].button(t(service, "game.accept")):
        penalty = service.accept()
        if penalty:
            st.session_state["last_penalty"] = penalty.localized_text
        st.rerun()
    if cols[2].button(t(service, "game.dismiss")):
        service.dismiss_contest()
        st.rerun()


def render_turn(service: GameService, view: GameView) -> None:
    if view.current_card is None:
        if st.button(t(service, "game.draw")):
            service.draw()
            st.rerun()
        return

    st.markdown(f"## {view.current_card.label}")
    if view.current_rule:
        st.markdown(f"**{view.current_rule.title}**")
        st.write(view.current_rule.description)

    if view.contest.active:
        render_contest(service, view)
        return

    cols = st.columns(2)
    if cols[0].button(t(service, "game.contest")):
        service.contest()
        st.rerun()
    if cols[1].button(t(service, "game.nextPlayer")):
        service.next_turn()
        st.rerun()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    st.set_page_config(page_title="Le Borderland", layout="centered")

    service = get_service()
    view = service.get_view()
    st.title(t(service, "borderland.title"))

    st.sidebar.caption(t(service, "common.drinkResponsibly"))
    if st.sidebar.button(t(service, "game.playAgain")):
        service.reset()
        st.rerun()

    if view.phase == "setup":
        render_setup(service, view)
        return

    if view.phase == "ended":
        st.header(t(service, "game.gameOver"))
        return

    if view.current_player:
        st.sidebar.write(t(service, "game.turnOf", name=view.current_player["name"]))
    st.sidebar.write(t(service, "game.cardsRemaining", count=view.cards_remaining))

    last_penalty = st.session_state.pop("last_penalty", None)
    if last_penalty:
        st.error(last_penalty)

    render_turn(service, view)


if __name__ == "__main__":
    main()

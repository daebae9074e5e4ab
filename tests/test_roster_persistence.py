import json

import pytest

from borderland.config import GameConfig
from borderland.game import GameStore, open_roster
from borderland.players import Player
from borderland.roster import JsonRoster, Roster, RosterError
from borderland.state import GamePhase


def test_players_survive_a_new_session(tmp_path):
    path = tmp_path / "roster.json"
    store = GameStore(roster=JsonRoster(path))
    store.init_game(["Alice", "Bob"])
    store.draw_card()
    store.deactivate_player(store.state.players[1].id)

    restored = GameStore(roster=JsonRoster(path))

    state = restored.state
    assert state.game_phase is GamePhase.SETUP
    assert state.deck == ()
    assert state.discard_pile == ()
    assert state.current_card is None
    assert [(player.name, player.active) for player in state.players] == [("Alice", True), ("Bob", False)]
    assert state.players == store.state.players


def test_only_player_fields_are_written(tmp_path):
    path = tmp_path / "roster.json"
    store = GameStore(roster=JsonRoster(path))
    store.init_game(["Alice", "Bob"])

    payload = json.loads(path.read_text(encoding="utf-8"))

    assert [sorted(entry) for entry in payload] == [["active", "id", "name"]] * 2


def test_reset_keeps_saved_roster(tmp_path):
    roster = JsonRoster(tmp_path / "roster.json")
    store = GameStore(roster=roster)
    store.init_game(["Alice", "Bob"])

    store.reset_game()

    assert store.state.players == ()
    assert [player.name for player in roster.load()] == ["Alice", "Bob"]


def test_missing_file_loads_empty(tmp_path):
    assert JsonRoster(tmp_path / "nothing.json").load() == []


@pytest.mark.parametrize(
    "content",
    ["not json", json.dumps({"id": "p0"}), json.dumps([{"name": "Alice"}])],
)
def test_malformed_roster_rejected(tmp_path, content):
    path = tmp_path / "roster.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(RosterError):
        JsonRoster(path).load()


def test_memory_roster_round_trip():
    roster = Roster()
    players = [Player(id="p0", name="Alice"), Player(id="p1", name="Bob", active=False)]

    roster.save(players)

    assert roster.load() == players
    assert roster.load() is not players


def test_open_roster_follows_config(tmp_path):
    assert open_roster(GameConfig()) is None

    roster = open_roster(GameConfig(roster_path=tmp_path / "saved.json"))
    assert isinstance(roster, JsonRoster)
    assert roster.path == tmp_path / "saved.json"

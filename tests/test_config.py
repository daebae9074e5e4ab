import json

import pytest
from pydantic import ValidationError

from borderland.config import CONFIG_ENV_VAR, GameConfig, load_config


def test_defaults():
    config = GameConfig()

    assert config.min_players == 2
    assert config.max_players == 8
    assert config.max_name_length == 20
    assert config.language == "fr"
    assert config.roster_path is None


def test_language_is_normalized():
    assert GameConfig(language="EN-us").language == "en"


def test_invalid_values_rejected():
    with pytest.raises(ValidationError):
        GameConfig(min_players=1)
    with pytest.raises(ValidationError):
        GameConfig(min_players=4, max_players=3)
    with pytest.raises(ValidationError):
        GameConfig(language="de")


def test_load_config_from_file(tmp_path):
    path = tmp_path / "borderland.json"
    path.write_text(json.dumps({"max_players": 6, "language": "en", "roster_path": "roster.json"}), encoding="utf-8")

    config = load_config(path)

    assert config.max_players == 6
    assert config.language == "en"
    assert config.roster_path.name == "roster.json"


def test_load_config_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"max_name_length": 12}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().max_name_length == 12


def test_load_config_defaults_without_source(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert load_config() == GameConfig()

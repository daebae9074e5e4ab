"""Validated configuration for a Le Borderland table."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

CONFIG_ENV_VAR = "BORDERLAND_CONFIG"


class GameConfig(BaseModel):
    min_players: int = Field(2, ge=2, description="Smallest table that may start a game.")
    max_players: int = Field(8, ge=2, description="Largest table the setup screen accepts.")
    max_name_length: int = Field(20, ge=1, description="Player names are cut to this many characters.")
    language: Literal["fr", "en"] = Field("fr", description="Language used for rules and labels.")
    roster_path: Optional[Path] = Field(None, description="JSON file holding the saved player list.")

    @field_validator("language", mode="before")
    @classmethod
    def normalize_language(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower().split("-")[0]
        return value

    @model_validator(mode="after")
    def check_player_bounds(self) -> "GameConfig":
        if self.max_players < self.min_players:
            raise ValueError("max_players must be at least min_players.")
        return self


def load_config(path: Optional[Union[str, Path]] = None) -> GameConfig:
    """Read a JSON config file; no path (and no env override) means defaults."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return GameConfig()
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return GameConfig.model_validate(payload)

"""Display strings for Le Borderland.

The engine only knows unit kinds and counts; everything a player reads comes
from these tables. French is the reference language and the fallback for
missing keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .cards import PenaltyUnit, Suit

DEFAULT_LANGUAGE = "fr"
SUPPORTED_LANGUAGES = ("fr", "en")

LANGUAGE_NAMES: dict[str, str] = {
    "fr": "Francais",
    "en": "English",
}

TRANSLATIONS: dict[str, dict[str, Any]] = {
    "fr": {
        "common": {
            "play": "JOUER",
            "rules": "REGLES DU JEU",
            "addPlayer": "Ajouter un joueur",
            "playerPlaceholder": "Joueur {number}",
            "minMaxPlayers": "Minimum {min} joueurs, maximum {max}",
            "drinkResponsibly": "A consommer avec moderation",
        },
        "borderland": {
            "title": "Le Borderland",
            "subtitle": "52 cartes - 4 regles - 0 pitie",
        },
        "rules": {
            "aceRule": "Les As valent un SHOT.",
            "contest": {
                "title": "Le Contest",
                "description": (
                    "Tu peux contester une carte pour doubler la mise ! Le joueur suivant peut "
                    "accepter ou escalader (x2, puis x4). Celui qui accepte boit tout."
                ),
            },
            "suits": {
                "clubs": {
                    "title": "Le Guess",
                    "description": (
                        "La carte est FACE CACHEE. Demande a un joueur de deviner sa valeur exacte. "
                        "S'il a juste, tu distribues. Sinon, il boit."
                    ),
                },
                "diamonds": {
                    "title": "L'Action",
                    "description": "Donne une action au joueur de ton choix.",
                },
                "hearts": {
                    "title": "La Question",
                    "description": "Pose une question au joueur de ton choix.",
                },
                "spades": {
                    "title": "La Contrainte",
                    "description": "Donne une contrainte a accomplir au joueur de ton choix.",
                },
            },
        },
        "game": {
            "sip": "gorgee",
            "sips": "gorgees",
            "shot": "SHOT",
            "shots": "SHOTS",
            "draw": "TIRER",
            "contest": "CONTESTER",
            "accept": "ACCEPTER",
            "escalate": "ESCALADER",
            "dismiss": "Annuler",
            "nextPlayer": "Joueur suivant",
            "cardsRemaining": "{count} cartes restantes",
            "turnOf": "Au tour de {name}",
            "gameOver": "Partie terminee !",
            "playAgain": "Rejouer",
        },
    },
    "en": {
        "common": {
            "play": "PLAY",
            "rules": "GAME RULES",
            "addPlayer": "Add a player",
            "playerPlaceholder": "Player {number}",
            "minMaxPlayers": "Minimum {min} players, maximum {max}",
            "drinkResponsibly": "Please drink responsibly",
        },
        "borderland": {
            "title": "Le Borderland",
            "subtitle": "52 cards - 4 rules - 0 mercy",
        },
        "rules": {
            "aceRule": "Aces are worth a SHOT.",
            "contest": {
                "title": "The Contest",
                "description": (
                    "Contest a card to double the stakes! The next player may accept or escalate "
                    "(x2, then x4). Whoever accepts drinks it all."
                ),
            },
            "suits": {
                "clubs": {
                    "title": "The Guess",
                    "description": (
                        "The card is FACE DOWN. Ask a player to guess its exact value. "
                        "Right, you hand out sips. Wrong, they drink."
                    ),
                },
                "diamonds": {
                    "title": "The Action",
                    "description": "Give an action to the player of your choice.",
                },
                "hearts": {
                    "title": "The Question",
                    "description": "Ask the player of your choice a question.",
                },
                "spades": {
                    "title": "The Constraint",
                    "description": "Give the player of your choice a constraint to follow.",
                },
            },
        },
        "game": {
            "sip": "sip",
            "sips": "sips",
            "shot": "SHOT",
            "shots": "SHOTS",
            "draw": "DRAW",
            "contest": "CONTEST",
            "accept": "ACCEPT",
            "escalate": "ESCALATE",
            "dismiss": "Dismiss",
            "nextPlayer": "Next player",
            "cardsRemaining": "{count} cards left",
            "turnOf": "{name}'s turn",
            "gameOver": "Game over!",
            "playAgain": "Play again",
        },
    },
}


@dataclass(frozen=True)
class SuitRule:
    title: str
    description: str


def normalize_language(language: Optional[str]) -> str:
    if not language:
        return DEFAULT_LANGUAGE
    short = language.strip().lower().split("-")[0]
    return short if short in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def _lookup(table: Mapping[str, Any], key: str) -> Optional[str]:
    node: Any = table
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


def translate(key: str, language: Optional[str] = None, **params: object) -> str:
    """Resolve a dotted key, falling back to French and then to the key."""
    text = _lookup(TRANSLATIONS[normalize_language(language)], key)
    if text is None:
        text = _lookup(TRANSLATIONS[DEFAULT_LANGUAGE], key)
    if text is None:
        return key
    return text.format(**params) if params else text


def suit_rule(suit: Suit, language: Optional[str] = None) -> SuitRule:
    prefix = f"rules.suits.{suit.value}"
    return SuitRule(
        title=translate(f"{prefix}.title", language),
        description=translate(f"{prefix}.description", language),
    )


def unit_label(unit: PenaltyUnit, amount: int, language: Optional[str] = None) -> str:
    plural = amount > 1
    if unit is PenaltyUnit.SHOT:
        key = "game.shots" if plural else "game.shot"
    else:
        key = "game.sips" if plural else "game.sip"
    return translate(key, language)


def penalty_text(unit: PenaltyUnit, amount: int, language: Optional[str] = None) -> str:
    return f"{amount} {unit_label(unit, amount, language)}"

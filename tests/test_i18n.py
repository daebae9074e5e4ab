from borderland.cards import PenaltyUnit, Suit
from borderland.i18n import penalty_text, suit_rule, translate, unit_label


def test_every_suit_has_a_rule_in_each_language():
    for language in ("fr", "en"):
        for suit in Suit:
            rule = suit_rule(suit, language)
            assert rule.title
            assert rule.description
            assert "." not in rule.title


def test_suit_rule_titles():
    assert suit_rule(Suit.HEARTS).title == "La Question"
    assert suit_rule(Suit.SPADES, "en").title == "The Constraint"


def test_unsupported_language_falls_back_to_french():
    assert translate("game.draw", "de") == "TIRER"
    assert translate("game.draw", "en-GB") == "DRAW"


def test_unknown_key_returns_key():
    assert translate("game.missing", "en") == "game.missing"


def test_parameters_are_interpolated():
    assert translate("game.turnOf", "en", name="Alice") == "Alice's turn"
    assert translate("common.playerPlaceholder", "fr", number=3) == "Joueur 3"


def test_unit_labels_pluralize():
    assert unit_label(PenaltyUnit.SHOT, 1, "fr") == "SHOT"
    assert unit_label(PenaltyUnit.SHOT, 2, "fr") == "SHOTS"
    assert unit_label(PenaltyUnit.STANDARD_SIP, 1, "en") == "sip"
    assert penalty_text(PenaltyUnit.STANDARD_SIP, 3, "fr") == "3 gorgees"

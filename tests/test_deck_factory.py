import pytest

from borderland.cards import Card, PenaltyUnit, Rank, Suit, deserialize_card, serialize_card
from borderland.deck import DECK_SIZE, create_deck


def test_deck_has_52_unique_cards():
    deck = create_deck()

    assert len(deck) == DECK_SIZE == 52
    assert len({card.id for card in deck}) == 52


def test_only_aces_are_shots():
    deck = create_deck()

    shots = [card for card in deck if card.unit is PenaltyUnit.SHOT]
    sips = [card for card in deck if card.unit is PenaltyUnit.STANDARD_SIP]

    assert len(shots) == 4
    assert {card.suit for card in shots} == set(Suit)
    assert all(card.rank is Rank.ACE for card in shots)
    assert len(sips) == 48


def test_canonical_order_and_values():
    deck = create_deck()

    assert deck[0].id == "clubs-A"
    assert deck[12].id == "clubs-K"
    assert deck[-1].id == "spades-K"
    assert [card.value for card in deck[:13]] == list(range(1, 14))


def test_deck_is_deterministic():
    assert create_deck() == create_deck()


def test_unit_follows_rank_not_value():
    queen = Card(Suit.HEARTS, Rank.QUEEN)
    ace = Card(Suit.HEARTS, Rank.ACE)

    assert queen.value == 12
    assert queen.unit is PenaltyUnit.STANDARD_SIP
    assert ace.value == 1
    assert ace.unit is PenaltyUnit.SHOT


def test_card_payload_rebuilds_unit_from_rank():
    payload = serialize_card(Card(Suit.SPADES, Rank.ACE))
    assert payload == {"id": "spades-A", "suit": "spades", "rank": "A", "value": 1, "unit": "SHOT"}

    tampered = dict(payload, unit="STANDARD_SIP")
    assert deserialize_card(tampered).unit is PenaltyUnit.SHOT


def test_card_payload_with_unknown_rank_rejected():
    with pytest.raises(ValueError):
        deserialize_card({"suit": "spades", "rank": "1"})

    with pytest.raises(ValueError):
        deserialize_card({"rank": "A"})

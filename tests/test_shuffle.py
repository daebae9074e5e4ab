from collections import Counter
from random import Random

from borderland.deck import create_deck, shuffle


def test_shuffle_is_a_permutation():
    deck = create_deck()
    shuffled = shuffle(deck, Random(3).randint)

    assert len(shuffled) == len(deck)
    assert Counter(card.id for card in shuffled) == Counter(card.id for card in deck)


def test_shuffle_leaves_input_untouched():
    deck = create_deck()
    snapshot = list(deck)

    shuffled = shuffle(deck, Random(11).randint)

    assert deck == snapshot
    assert shuffled is not deck


def test_shuffle_uses_injected_source():
    cards = create_deck()[:3]
    a, b, c = cards
    calls = []

    def always_zero(low, high):
        calls.append((low, high))
        return low

    assert shuffle(cards, always_zero) == [b, c, a]
    assert calls == [(0, 2), (0, 1)]


def test_upper_bound_choice_keeps_order():
    deck = create_deck()
    assert shuffle(deck, lambda low, high: high) == deck


def test_every_card_can_lead_the_deck():
    deck = create_deck()
    rng = Random(2024)
    leaders = {shuffle(deck, rng.randint)[0].id for _ in range(3000)}

    assert leaders == {card.id for card in deck}


def test_empty_and_single_card_shuffle():
    assert shuffle([]) == []
    single = create_deck()[:1]
    assert shuffle(single) == single

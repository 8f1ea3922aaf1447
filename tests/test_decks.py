import random

import pytest

from memoarrr.decks import CardDeck, Deck, RewardDeck
from memoarrr.models import REWARD_LIST, FaceAnimal, FaceBackground, Letter, Number


@pytest.fixture
def deck():
    return CardDeck.create(random.Random(1))


def test_card_deck_holds_every_combination_once(deck):
    combos = {(card.animal, card.color) for card in deck}
    assert len(deck) == 25
    assert combos == {(a, c) for a in FaceAnimal for c in FaceBackground}


def test_cards_know_their_positions(deck):
    for letter in Letter:
        for number in Number:
            card = deck.at(letter, number)
            assert (card.letter, card.number) == (letter, number)


def test_edge_and_volcano_availability(deck):
    assert not deck.at(Letter.A, Number.TWO).top_available
    assert not deck.at(Letter.E, Number.TWO).bottom_available
    assert not deck.at(Letter.B, Number.ONE).left_available
    assert not deck.at(Letter.B, Number.FIVE).right_available
    assert not deck.at(Letter.B, Number.THREE).bottom_available
    assert not deck.at(Letter.C, Number.TWO).right_available
    assert not deck.at(Letter.C, Number.FOUR).left_available
    assert not deck.at(Letter.D, Number.THREE).top_available
    inner = deck.at(Letter.B, Number.TWO)
    assert inner.top_available and inner.bottom_available
    assert inner.left_available and inner.right_available


def test_same_seed_same_layout():
    first = CardDeck.create(random.Random(7))
    second = CardDeck.create(random.Random(7))
    assert [(c.animal, c.color) for c in first] == [(c.animal, c.color) for c in second]


def test_reshuffle_reindexes_and_keeps_cards(deck):
    before = {id(card) for card in deck}
    deck.reshuffle()
    assert {id(card) for card in deck} == before
    for index in range(len(deck)):
        card = deck.by_index(index)
        assert int(card.letter) * 5 + int(card.number) == index


def test_out_of_range_positions_raise(deck):
    with pytest.raises(IndexError):
        deck.by_index(25)
    with pytest.raises(IndexError):
        deck.by_index(-1)
    with pytest.raises(IndexError):
        deck.at(6, 0)


def test_empty_deck_raises():
    empty = Deck([])
    assert empty.is_empty()
    with pytest.raises(IndexError):
        empty.next()
    with pytest.raises(IndexError):
        empty.at(Letter.A, Number.ONE)


def test_set_at_replaces_item(deck):
    card = deck.at(Letter.E, Number.FIVE)
    deck.set_at(Letter.A, Number.ONE, card)
    assert deck.at(Letter.A, Number.ONE) is card


def test_swap_exchanges_slots(deck):
    a = deck.at(Letter.A, Number.ONE)
    b = deck.at(Letter.B, Number.ONE)
    deck.swap(a, b)
    assert deck.at(Letter.A, Number.ONE) is b
    assert deck.at(Letter.B, Number.ONE) is a


def test_reward_deck_contents_and_dealing():
    rewards = RewardDeck.create(random.Random(3))
    dealt = [rewards.next().rubies for _ in range(len(REWARD_LIST))]
    assert sorted(dealt) == sorted(REWARD_LIST)
    with pytest.raises(IndexError):
        rewards.next()


def test_next_deals_in_order():
    plain = Deck(["x", "y"])
    assert [plain.next(), plain.next()] == ["x", "y"]
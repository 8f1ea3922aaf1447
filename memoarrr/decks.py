"""Decks of cards and rewards."""

from __future__ import annotations

import random
from typing import Generic, Iterable, Iterator, TypeVar

from .models import (
    BOARD_SIZE,
    REWARD_LIST,
    Card,
    FaceAnimal,
    FaceBackground,
    Letter,
    Number,
    Reward,
)

T = TypeVar("T")


class Deck(Generic[T]):
    """An ordered collection addressable by index or by board position."""

    def __init__(self, items: Iterable[T] | None = None, rng: random.Random | None = None):
        self._items: list[T] = list(items) if items is not None else []
        self._rng = rng if rng is not None else random.Random()
        self._cursor = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def shuffle(self) -> None:
        self._rng.shuffle(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def next(self) -> T:
        """Deal the next item; raise IndexError once the deck is used up."""
        if self._cursor >= len(self._items):
            raise IndexError("out of range")
        item = self._items[self._cursor]
        self._cursor += 1
        return item

    def _check_not_empty(self) -> None:
        if not self._items:
            raise IndexError("empty deck")

    def by_index(self, index: int) -> T:
        self._check_not_empty()
        if not 0 <= index < len(self._items):
            raise IndexError("out of range")
        return self._items[index]

    def _slot(self, letter, number) -> int:
        self._check_not_empty()
        row, col = int(letter), int(number)
        index = row * BOARD_SIZE + col
        if not (0 <= row <= BOARD_SIZE and 0 <= col <= BOARD_SIZE and 0 <= index < len(self._items)):
            raise IndexError("out of range")
        return index

    def at(self, letter, number) -> T:
        return self._items[self._slot(letter, number)]

    def set_at(self, letter, number, item: T) -> None:
        self._items[self._slot(letter, number)] = item

    def swap(self, original, swapee) -> None:
        """Exchange the slots of two items, located by their own positions."""
        i = self._slot(original.letter, original.number)
        j = self._slot(swapee.letter, swapee.number)
        self._items[i], self._items[j] = self._items[j], self._items[i]


def _block_volcano_sides(card: Card) -> None:
    position = (card.letter, card.number)
    if position == (Letter.B, Number.THREE):
        card.bottom_available = False
    if position == (Letter.C, Number.TWO):
        card.right_available = False
    if position == (Letter.C, Number.FOUR):
        card.left_available = False
    if position == (Letter.D, Number.THREE):
        card.top_available = False


class CardDeck(Deck[Card]):
    """The 25 animal cards laid out on the 5x5 grid."""

    @classmethod
    def create(cls, rng: random.Random | None = None) -> "CardDeck":
        cards = [Card(animal, color) for animal in FaceAnimal for color in FaceBackground]
        deck = cls(cards, rng)
        deck.reshuffle()
        return deck

    def reshuffle(self) -> None:
        """Shuffle the cards and give each its new grid position."""
        self.shuffle()
        for index, card in enumerate(self._items):
            row, col = divmod(index, BOARD_SIZE)
            card.reset_availability()
            card.set_index(Letter(row), Number(col))
            _block_volcano_sides(card)


class RewardDeck(Deck[Reward]):
    """The shuffled rubies handed to round winners."""

    @classmethod
    def create(cls, rng: random.Random | None = None) -> "RewardDeck":
        deck = cls((Reward(rubies) for rubies in REWARD_LIST), rng)
        deck.shuffle()
        return deck
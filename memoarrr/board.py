"""The 5x5 board with its volcano in the centre."""

from __future__ import annotations

import random

from .decks import CardDeck
from .models import BOARD_SIZE, VOLCANO, Card, Letter, Number

_DOUBLE_RULE = "======================"
_SINGLE_RULE = "----------------------"


def _index(letter, number) -> int:
    return int(letter) * BOARD_SIZE + int(number)


class Board:
    """Tracks which cards are face up and draws the board."""

    def __init__(self, deck: CardDeck | None = None, rng: random.Random | None = None, expert: bool = False):
        self.deck = deck if deck is not None else CardDeck.create(rng)
        self.face_up_positions: list[int] = []
        self.expert = expert

    def is_face_up(self, letter, number) -> bool:
        return self.deck.at(letter, number).face_up

    def turn_face_up(self, letter, number) -> None:
        self.deck.at(letter, number).turn_face(True)
        self.face_up_positions.append(_index(letter, number))

    def turn_face_down(self, letter, number) -> None:
        self.deck.at(letter, number).turn_face(False)
        position = _index(letter, number)
        self.face_up_positions[:] = [p for p in self.face_up_positions if p != position]

    def reset(self) -> None:
        """Turn every card face down."""
        for letter in Letter:
            for number in Number:
                self.turn_face_down(letter, number)

    def get_card(self, letter, number) -> Card:
        return self.deck.at(letter, number)

    def set_card(self, letter, number, card: Card) -> None:
        card.set_index(letter, number)
        self.deck.set_at(letter, number, card)

    def render(self, expert: bool | None = None) -> str:
        """Draw the full grid, or in expert mode only the face-up cards."""
        if expert is None:
            expert = self.expert
        return self._render_expert() if expert else self._render_grid()

    def __str__(self) -> str:
        return self.render()

    def _render_grid(self) -> str:
        parts = [_DOUBLE_RULE + "\n"]
        if self.deck.is_empty():
            parts.append("deck empty\n")
        else:
            n_rows = self.deck.at(Letter.A, Number.ONE).n_rows
            for letter in Letter:
                for r in range(n_rows):
                    label = letter.name if r == 1 else " "
                    cells = (
                        "    " if (letter, number) == VOLCANO else self.deck.at(letter, number).row(r)
                        for number in Number
                    )
                    parts.append(label + "".join(cells) + "\n")
                parts.append("\n")
            parts.append("   1   2   3   4   5\n")
        parts.append(_SINGLE_RULE + "\n")
        return "".join(parts)

    @staticmethod
    def _render_strip(cards: list[Card], n_rows: int) -> str:
        lines = ["".join(card.row(r) for card in cards) + "\n" for r in range(n_rows)]
        labels = "".join(f" {card.position_string()} " for card in cards)
        return "".join(lines) + labels

    def _render_expert(self) -> str:
        parts = []
        if not self.face_up_positions:
            parts.append("No card has been turned yet\n")
        else:
            parts.append("\n" + _DOUBLE_RULE + "\n")
            n_rows = self.deck.by_index(0).n_rows
            cards = [self.deck.by_index(p) for p in self.face_up_positions]
            full = len(cards) - len(cards) % BOARD_SIZE
            for start in range(0, full, BOARD_SIZE):
                parts.append(self._render_strip(cards[start:start + BOARD_SIZE], n_rows))
                parts.append("\n" + _SINGLE_RULE + "\n")
            parts.append(self._render_strip(cards[full:], n_rows))
        parts.append("\n" + _DOUBLE_RULE + "\n")
        return "".join(parts)
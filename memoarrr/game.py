"""Game state: players, the board, and the special powers of each animal."""

from __future__ import annotations

import random
import re
from typing import Callable

from .board import Board
from .models import (
    BOARD_SIZE,
    VOLCANO,
    Card,
    Letter,
    Number,
    Player,
    Side,
)

_INT_PATTERN = re.compile(r"[+-]?\d+")
_WORD_PATTERN = re.compile(r"\S+")

_REVEALED = {
    Side.TOP: ((Letter.A, Number.TWO), (Letter.A, Number.THREE), (Letter.A, Number.FOUR)),
    Side.BOTTOM: ((Letter.E, Number.TWO), (Letter.E, Number.THREE), (Letter.E, Number.FOUR)),
    Side.LEFT: ((Letter.B, Number.ONE), (Letter.C, Number.ONE), (Letter.D, Number.ONE)),
    Side.RIGHT: ((Letter.B, Number.FIVE), (Letter.C, Number.FIVE), (Letter.D, Number.FIVE)),
}

_DIRECTIONS = {
    0: ("top_available", -1, 0, "top"),
    1: ("bottom_available", 1, 0, "bottom"),
    2: ("left_available", 0, -1, "left"),
    3: ("right_available", 0, 1, "right"),
}


class _Scanner:
    """Reads characters, integers and words from a line source, like a console stream."""

    def __init__(self, read: Callable[[], str]):
        self._read = read
        self._buffer = ""

    def _fill(self) -> None:
        while True:
            stripped = self._buffer.lstrip()
            if stripped:
                self._buffer = stripped
                return
            self._buffer = self._read()

    def char(self) -> str:
        self._fill()
        c, self._buffer = self._buffer[0], self._buffer[1:]
        return c

    def integer(self) -> int:
        """Read an integer; raise ValueError if the next token does not start with one."""
        self._fill()
        match = _INT_PATTERN.match(self._buffer)
        if match is None:
            raise ValueError("not an integer")
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def word(self) -> str:
        self._fill()
        match = _WORD_PATTERN.match(self._buffer)
        self._buffer = self._buffer[match.end():]
        return match.group()

    def skip_line(self) -> None:
        self._buffer = ""


def _position(card: Card) -> int:
    return int(card.letter) * BOARD_SIZE + int(card.number)


class Game:
    """One game of Memoarrr: the board, its players and the round in progress."""

    def __init__(
        self,
        board: Board | None = None,
        *,
        rng: random.Random | None = None,
        read: Callable[[], str] | None = None,
        expert: bool = False,
        automatic: bool = False,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.board = board if board is not None else Board(rng=self.rng, expert=expert)
        self.scanner = _Scanner(read if read is not None else input)
        self.automatic = automatic
        self.prev_card: Card | None = None
        self.current_card: Card | None = None
        self.round = 1
        self.skipping = False
        self.blocked_letter = Letter.C
        self.blocked_number = Number.THREE
        self.num_players = 0
        self.players: dict[Side, Player] = {}

    @property
    def expert(self) -> bool:
        return self.board.expert

    def next_round(self) -> None:
        self.round += 1

    def add_player(self, player: Player) -> None:
        """Seat a player and briefly show them the three cards in front of them."""
        self.players[Side(player.side)] = player
        self.reveal_cards_for_player(player)

    def player(self, side) -> Player:
        return self.players[Side(side)]

    def _read_position(self) -> tuple[Letter, Number]:
        while True:
            r = self.scanner.char().upper()
            if r in "ABCDE":
                break
            self.scanner.skip_line()
            print("Input invalid, try again")
        letter = Letter[r]
        while True:
            try:
                c = self.scanner.integer()
            except ValueError:
                c = None
            if c is not None and 1 <= c <= BOARD_SIZE:
                break
            self.scanner.skip_line()
            print("Input invalid, try again")
        return letter, Number(c - 1)

    def choose_card(self) -> Card:
        """Ask for a board position other than the volcano and return its card."""
        if not self.automatic:
            print("Please input the position(eg: A1 or a1): ")
        while True:
            if self.automatic:
                letter = Letter(self.rng.randrange(BOARD_SIZE))
                number = Number(self.rng.randrange(BOARD_SIZE))
            else:
                letter, number = self._read_position()
            if (letter, number) != VOLCANO:
                return self.board.get_card(letter, number)
            if not self.automatic:
                print("You have entered an invalid card position, please retry......")

    def reveal_cards_for_player(self, player: Player) -> None:
        side = Side(player.side)
        if not self.automatic:
            print(f"Please input any character to continue for player on the {side.name.capitalize()} side")
            self.scanner.word()
        for letter, number in _REVEALED[side]:
            self.board.turn_face_up(letter, number)
        print(self.board.render())
        self.board.reset()

    def penguin(self, player: Player) -> None:
        """Let the player turn one face-up card back down."""
        print(f"Player {player.name} you have turned up a Penguin")
        print("You can turn an face-up card to face down.")
        chosen = self.choose_card()
        while not self.board.is_face_up(chosen.letter, chosen.number):
            if not self.automatic:
                print("PLease re-enter a card position as the card in position is still face down")
            chosen = self.choose_card()
        self.board.turn_face_down(chosen.letter, chosen.number)

    def walrus(self, player: Player) -> None:
        """Let the player block a face-down card for the next player."""
        print(f"Player {player.name} you have turned up a Walrus!!!!!")
        print(" You can Block a Card.")
        chosen = self.choose_card()
        while self.board.is_face_up(chosen.letter, chosen.number):
            print("PLease re-enter a card position as the card in position is face up")
            chosen = self.choose_card()
        self.blocked_letter = chosen.letter
        self.blocked_number = chosen.number
        print(f"The card: {int(chosen.letter)} {int(chosen.number)} is blocked for next player! ..")

    def crab(self, player: Player) -> Card:
        """Make the player turn up another face-down card and return it."""
        print(f"Player {player.name}  you have turned up a Crab")
        print(" You need to turn up an another card now")
        chosen = self.choose_card()
        while self.board.is_face_up(chosen.letter, chosen.number):
            if not self.automatic:
                print("PLease re-enter a card position as the card in position is already face up")
            chosen = self.choose_card()
        self.board.turn_face_up(chosen.letter, chosen.number)
        return self.board.get_card(chosen.letter, chosen.number)

    def turtle(self) -> None:
        self.skipping = True

    def octopus(self, card: Card, player: Player) -> None:
        """Swap the card with a randomly chosen neighbour it may move to."""
        print(f"Player {player.name}, you have turned up an octopus")
        print("Your chosen card will be swapped with a randomly chosen adjacent card")
        print("(It will not go over the edges, corners and the volcano card)")
        print()
        while not self.swap(self.rng.randrange(len(_DIRECTIONS)), card):
            pass

    def swap(self, direction: int, swapper: Card) -> bool:
        """Swap with the neighbour in a direction (0 top, 1 bottom, 2 left, 3 right).

        Returns False when that side of the card is closed.
        """
        if direction not in _DIRECTIONS:
            return False
        flag, d_row, d_col, name = _DIRECTIONS[direction]
        if not getattr(swapper, flag):
            return False
        old_letter, old_number = swapper.letter, swapper.number
        new_letter = Letter(int(old_letter) + d_row)
        new_number = Number(int(old_number) + d_col)
        swapee = self.board.deck.at(new_letter, new_number)
        self.switch_position(swapee, swapper)
        swapper.reset_availability()
        swapee.reset_availability()
        self.board.deck.swap(swapper, swapee)
        swapee.set_index(old_letter, old_number)
        swapper.set_index(new_letter, new_number)
        self.adjust_swap_mid_availability(swapee)
        self.adjust_swap_mid_availability(swapper)
        print(f"It swapped with {name} side")
        return True

    def switch_position(self, swappee: Card, swapper: Card) -> None:
        """Update the face-up record for two cards about to trade places."""
        positions = self.board.face_up_positions
        swapper_pos = _position(swapper)
        swappee_pos = _position(swappee)
        positions[:] = [p for p in positions if p != swapper_pos]
        if swappee.face_up:
            positions[positions.index(swappee_pos)] = swapper_pos
        positions.append(swappee_pos)

    def round_finish(self) -> bool:
        """True when exactly one seated player is still active."""
        seated = [Side.TOP, Side.BOTTOM, Side.LEFT, Side.RIGHT]
        if self.num_players <= 2:
            seated = seated[:2]
        elif self.num_players == 3:
            seated = seated[:3]
        return sum(self.player(side).active for side in seated) == 1

    def set_current_card(self, card: Card) -> None:
        self.prev_card = self.current_card
        self.current_card = self.board.get_card(card.letter, card.number)

    def adjust_swap_mid_availability(self, card: Card) -> None:
        """Close the side of a card that faces the volcano."""
        position = (card.letter, card.number)
        if position == (Letter.B, Number.THREE):
            card.bottom_available = False
        if position == (Letter.C, Number.TWO):
            card.right_available = False
        if position == (Letter.C, Number.FOUR):
            card.left_available = False
        if position == (Letter.D, Number.THREE):
            card.top_available = False

    def __str__(self) -> str:
        order = [Side.TOP, Side.BOTTOM, Side.LEFT, Side.RIGHT]
        shown = order[: self.num_players] if 1 <= self.num_players <= 4 else []
        return self.board.render() + "".join(f"{self.player(side)}\n" for side in shown)
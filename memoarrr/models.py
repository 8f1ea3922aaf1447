"""Cards, rewards, players and the enumerations that describe the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

BOARD_SIZE = 5
REWARD_LIST = (1, 1, 1, 2, 2, 3, 4)


class Side(IntEnum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3


class FaceAnimal(IntEnum):
    CRAB = 0
    PENGUIN = 1
    OCTOPUS = 2
    TURTLE = 3
    WALRUS = 4


class FaceBackground(IntEnum):
    RED = 0
    GREEN = 1
    PURPLE = 2
    BLUE = 3
    YELLOW = 4


class Letter(IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4


class Number(IntEnum):
    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4


VOLCANO = (Letter.C, Number.THREE)

_ANIMAL_SYMBOLS = {
    FaceAnimal.CRAB: "C",
    FaceAnimal.PENGUIN: "P",
    FaceAnimal.OCTOPUS: "O",
    FaceAnimal.TURTLE: "T",
    FaceAnimal.WALRUS: "W",
}

_COLOR_SYMBOLS = {
    FaceBackground.RED: "r",
    FaceBackground.GREEN: "g",
    FaceBackground.PURPLE: "p",
    FaceBackground.BLUE: "b",
    FaceBackground.YELLOW: "y",
}


@dataclass(eq=False)
class Card:
    """A board card: an animal on a coloured background at a grid position."""

    animal: FaceAnimal
    color: FaceBackground
    letter: Letter | None = None
    number: Number | None = None
    face_up: bool = False
    n_rows: int = 3
    top_available: bool = True
    bottom_available: bool = True
    right_available: bool = True
    left_available: bool = True

    def set_index(self, letter, number) -> None:
        """Place the card at a position, closing the sides that face the edge."""
        letter = Letter(letter)
        number = Number(number)
        if letter is Letter.A:
            self.top_available = False
        if letter is Letter.E:
            self.bottom_available = False
        if number is Number.ONE:
            self.left_available = False
        if number is Number.FIVE:
            self.right_available = False
        self.letter = letter
        self.number = number

    def position_string(self) -> str:
        letter = self.letter.name if self.letter is not None else " "
        number = str(int(self.number) + 1) if self.number is not None else " "
        return letter + number

    def animal_str(self) -> str:
        return _ANIMAL_SYMBOLS.get(self.animal, " ")

    def color_str(self) -> str:
        return _COLOR_SYMBOLS.get(self.color, " ")

    def turn_face(self, up: bool) -> None:
        self.face_up = up

    def row(self, i: int) -> str:
        """Return text row ``i`` of the card as drawn on the board."""
        if not self.face_up:
            return " zzz"
        color = self.color_str()
        if i == 1:
            return " " + color + self.animal_str() + color
        return " " + color * 3

    def reset_availability(self) -> None:
        self.top_available = True
        self.bottom_available = True
        self.left_available = True
        self.right_available = True


@dataclass(frozen=True)
class Reward:
    """A reward worth a number of rubies."""

    rubies: int

    def __str__(self) -> str:
        return str(self.rubies)


@dataclass
class Player:
    """A player seated at one side of the board."""

    name: str
    side: Side
    rubies: int = 0
    active: bool = True
    display: bool = False

    def side_string(self) -> str:
        return Side(self.side).name

    def add_reward(self, reward: Reward) -> None:
        print(f"{self.name}: you have been rewarded {reward.rubies} rubies")
        self.rubies += reward.rubies

    def __str__(self) -> str:
        if self.display:
            return f"{self.name}: {self.rubies} rubies"
        state = "ACTIVE" if self.active else "INACTIVE"
        return f"{self.name}: {self.side_string()} ({state})"
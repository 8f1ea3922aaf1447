import pytest

from memoarrr.models import (
    Card,
    FaceAnimal,
    FaceBackground,
    Letter,
    Number,
    Player,
    Reward,
    Side,
)


def test_face_down_card_row_is_hidden():
    card = Card(FaceAnimal.CRAB, FaceBackground.RED)
    assert [card.row(i) for i in range(card.n_rows)] == [" zzz"] * 3


def test_face_up_card_rows():
    card = Card(FaceAnimal.CRAB, FaceBackground.RED)
    card.turn_face(True)
    assert card.face_up
    assert card.row(1) == " rCr"
    assert card.row(0) == card.row(2) == " rrr"


@pytest.mark.parametrize(
    "animal, symbol",
    [
        (FaceAnimal.CRAB, "C"),
        (FaceAnimal.PENGUIN, "P"),
        (FaceAnimal.OCTOPUS, "O"),
        (FaceAnimal.TURTLE, "T"),
        (FaceAnimal.WALRUS, "W"),
    ],
)
def test_animal_str(animal, symbol):
    assert Card(animal, FaceBackground.BLUE).animal_str() == symbol


@pytest.mark.parametrize(
    "color, symbol",
    [
        (FaceBackground.RED, "r"),
        (FaceBackground.GREEN, "g"),
        (FaceBackground.PURPLE, "p"),
        (FaceBackground.BLUE, "b"),
        (FaceBackground.YELLOW, "y"),
    ],
)
def test_color_str(color, symbol):
    assert Card(FaceAnimal.TURTLE, color).color_str() == symbol


def test_set_index_closes_top_left_corner():
    card = Card(FaceAnimal.WALRUS, FaceBackground.GREEN)
    card.set_index(Letter.A, Number.ONE)
    assert (card.letter, card.number) == (Letter.A, Number.ONE)
    assert not card.top_available
    assert not card.left_available
    assert card.bottom_available and card.right_available
    assert card.position_string() == "A1"


def test_set_index_closes_bottom_right_corner():
    card = Card(FaceAnimal.WALRUS, FaceBackground.GREEN)
    card.set_index(Letter.E, Number.FIVE)
    assert not card.bottom_available
    assert not card.right_available
    assert card.top_available and card.left_available


def test_position_string_middle():
    card = Card(FaceAnimal.PENGUIN, FaceBackground.YELLOW)
    card.set_index(Letter.C, Number.THREE)
    assert card.position_string() == "C3"


def test_position_string_unplaced():
    assert Card(FaceAnimal.PENGUIN, FaceBackground.YELLOW).position_string() == "  "


def _availability(card):
    return (
        card.top_available,
        card.bottom_available,
        card.left_available,
        card.right_available,
    )


def test_reset_availability():
    card = Card(FaceAnimal.OCTOPUS, FaceBackground.PURPLE)
    card.set_index(Letter.A, Number.FIVE)
    assert _availability(card) == (False, True, True, False)
    card.reset_availability()
    assert _availability(card) == (True, True, True, True)


def test_reward_str():
    assert str(Reward(4)) == "4"


@pytest.mark.parametrize(
    "side, text",
    [(Side.TOP, "TOP"), (Side.BOTTOM, "BOTTOM"), (Side.LEFT, "LEFT"), (Side.RIGHT, "RIGHT")],
)
def test_side_string(side, text):
    assert Player("p", side).side_string() == text


def test_player_str_active_and_inactive():
    player = Player("Ann", Side.TOP)
    assert str(player) == "Ann: TOP (ACTIVE)"
    player.active = False
    assert str(player).endswith("(INACTIVE)")


def test_add_reward_accumulates_and_displays(capsys):
    player = Player("Ann", Side.LEFT)
    player.add_reward(Reward(3))
    player.add_reward(Reward(4))
    out = capsys.readouterr().out
    assert "Ann: you have been rewarded 3 rubies" in out
    assert player.rubies == 7
    player.display = True
    assert str(player) == "Ann: 7 rubies"
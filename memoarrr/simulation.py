"""Self-playing games: four scripted players choose cards at random."""

from __future__ import annotations

import argparse
import random

from .cli import play_expert, play_normal
from .game import Game
from .models import Player, Side
from .rules import Rules

_TEST_PLAYERS = (
    (Side.TOP, "testTOP"),
    (Side.BOTTOM, "testBOT"),
    (Side.LEFT, "testLEFT"),
    (Side.RIGHT, "testRIGHT"),
)
_BANNER = "========================================="


def _no_input() -> str:
    raise EOFError("a simulated game reads no input")


def _print_banner(message: str) -> None:
    print(_BANNER)
    print(_BANNER)
    print(message)
    print(_BANNER)
    print(_BANNER)


def simulate(expert: bool = False, seed: int | None = None) -> list[Player]:
    """Play a complete four-player game without input; return the players."""
    game = Game(
        rng=random.Random(seed),
        read=_no_input,
        expert=expert,
        automatic=True,
    )
    rules = Rules()
    print("Testing expert mode" if expert else "Testing normal mode")
    print("Testing 4 players: ")
    game.num_players = len(_TEST_PLAYERS)
    for side, name in _TEST_PLAYERS:
        print(f"Please enter the name for Player at {side.name.lower()}:")
        game.add_player(Player(name, side))
    for _ in range(3):
        print(" ")
    print("========GAME START========")
    print(" ")

    def no_pause() -> None:
        return None

    if expert:
        players = play_expert(game, rules, no_pause)
        _print_banner("test expert mode end")
    else:
        players = play_normal(game, rules, no_pause)
        _print_banner("test normal mode end")
    return players


def _ask_mode() -> str:
    print("Enter E for testing expert mode; N for testing normal mode")
    while True:
        answer = input().strip()
        if answer and answer[0].upper() in "EN":
            return answer[0].upper()
        print("Input invalid, try again")


def main(argv=None) -> int:
    """Run one simulated game, in expert (E) or normal (N) mode."""
    parser = argparse.ArgumentParser(
        prog="memoarrr-simulate",
        description="Let four scripted players play a game of Memoarrr.",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        type=str.upper,
        choices=("E", "N"),
        help="E for expert mode, N for normal mode",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for all random choices")
    args = parser.parse_args(argv)
    try:
        mode = args.mode if args.mode is not None else _ask_mode()
    except EOFError:
        return 1
    simulate(expert=mode == "E", seed=args.seed)
    return 0
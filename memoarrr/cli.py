"""Console front end: set up a game from the keyboard and play it to the end."""

from __future__ import annotations

import argparse
import random
from typing import Callable

from .decks import RewardDeck
from .game import Game
from .models import VOLCANO, FaceAnimal, Letter, Number, Player, Side
from .rules import Rules

_SEATS = (Side.TOP, Side.BOTTOM, Side.LEFT, Side.RIGHT)
_RESHUFFLE_AT = 23


def _seated(game: Game) -> list[Side]:
    return [side for side in _SEATS[: game.num_players] if side in game.players]


def _activate_all(game: Game) -> None:
    for side in _seated(game):
        game.player(side).active = True


def _face_down(game: Game, exclude=None) -> list[tuple[Letter, Number]]:
    """Positions that can still be turned up, optionally leaving one out."""
    return [
        (letter, number)
        for letter in Letter
        for number in Number
        if (letter, number) != VOLCANO
        and (letter, number) != exclude
        and not game.board.is_face_up(letter, number)
    ]


def _reshuffle(game: Game) -> None:
    print("shuffling all cards")
    game.board.deck.reshuffle()
    game.board.reset()


def _pauser(game: Game, read: Callable[[], object] | None) -> Callable[[], object]:
    return read if read is not None else game.scanner.char


def _show_final_scores(game: Game) -> list[Player]:
    players = [game.player(side) for side in _seated(game)]
    for player in players:
        player.display = True
    print(game)
    return players


def play_normal(game: Game, rules: Rules, read: Callable[[], object] | None = None) -> list[Player]:
    """Play all rounds with the full board shown; return the seated players."""
    pause = _pauser(game, read)
    rewards = RewardDeck.create(game.rng)
    face_up_count = 0
    while not rules.game_over(game):
        print(f"Enter any key to start round: {game.round}")
        pause()
        print(f"********Round {game.round} start********")
        print(game)
        cards_in_round = 0
        _activate_all(game)
        active_count = game.num_players

        while not rules.round_over(game):
            print()
            print()
            playing = rules.next_player(game)
            print(f"--------Player {playing.name} start--------")
            current = game.choose_card()
            if game.board.is_face_up(current.letter, current.number):
                print("Already face up")
            else:
                game.board.turn_face_up(current.letter, current.number)
                face_up_count += 1
                cards_in_round += 1
                game.set_current_card(current)
                print(game)
                if cards_in_round > 1:
                    if rules.is_valid(game):
                        print("It is a match!")
                        print(f"--------Player {playing.name} finish--------")
                    else:
                        playing.active = False
                        print(f"It is not a match. {playing.name} is out.")
                        print(f"--------Player {playing.name} finish--------")
                        active_count -= 1
                        if active_count < 2:
                            winner = rules.next_player(game)
                            print()
                            print()
                            print(f"Congratulations! The winner for this round is: {winner.name}")
                            winner.add_reward(rewards.next())
                            print(f"********Round: {game.round} finish********")
                            game.round_finish()
                            game.next_round()
                            print()
                            print()
                            cards_in_round = 0
            if face_up_count > _RESHUFFLE_AT:
                _reshuffle(game)
                print(game)
                face_up_count = 0

    print("##########GAME OVER##########")
    print("7 rounds NORMAL mode end")
    players = _show_final_scores(game)
    print("##########GAME OVER##########")
    return players


def play_expert(game: Game, rules: Rules, read: Callable[[], object] | None = None) -> list[Player]:
    """Play all rounds with animal powers and only face-up cards shown."""
    pause = _pauser(game, read)
    rewards = RewardDeck.create(game.rng)
    face_up_count = 0
    while not rules.game_over(game):
        print(f"EXPERT: Enter any key to start round: {game.round}")
        pause()
        print(f"********EXPERT: Round {game.round} start********")
        cards_in_round = 0
        _activate_all(game)
        active_count = game.num_players
        blocking = False

        while not rules.round_over(game):
            print()
            print()
            playing = rules.next_player(game)
            if game.skipping:
                print(f"EXPERT: skipping the next player  {playing.name}")
                playing = rules.next_player(game)
                game.skipping = False
            print()
            print()
            print(game)
            print(f"--------EXPERT: Player {playing.name} start--------")

            blocked = (game.blocked_letter, game.blocked_number)
            if blocking and not _face_down(game, exclude=blocked):
                blocking = False
            if not blocking:
                current = game.choose_card()
                while game.board.is_face_up(current.letter, current.number):
                    print("Already face up")
                    current = game.choose_card()
            else:
                print(f"EXPERT: The card : {int(blocked[0])} {int(blocked[1])} is blocked")
                while True:
                    current = game.choose_card()
                    if game.board.is_face_up(current.letter, current.number):
                        print("EXPERT: Already face up")
                    elif (current.letter, current.number) == blocked:
                        print("EXPERT: The card is blocked! Please choose another card!")
                    else:
                        blocking = False
                        break

            game.board.turn_face_up(current.letter, current.number)
            face_up_count += 1
            cards_in_round += 1
            animal = current.animal
            game.set_current_card(current)
            print()
            print()
            print(f"--------Player: {playing.name} skills--------")
            print(game)

            while True:
                if animal is FaceAnimal.CRAB:
                    if not _face_down(game):
                        break
                    game.set_current_card(current)
                    current = game.crab(playing)
                    face_up_count += 1
                    cards_in_round += 1
                    game.set_current_card(current)
                    animal = current.animal
                    continue
                if animal is FaceAnimal.PENGUIN:
                    if face_up_count > 1:
                        game.penguin(playing)
                        face_up_count -= 1
                    else:
                        print("You have a penguin but its the first card in round, you cannot flip a card")
                elif animal is FaceAnimal.WALRUS:
                    if face_up_count < _RESHUFFLE_AT + 1 and _face_down(game):
                        game.walrus(playing)
                    blocking = True
                elif animal is FaceAnimal.TURTLE:
                    game.turtle()
                elif animal is FaceAnimal.OCTOPUS:
                    game.octopus(current, playing)
                break

            if cards_in_round < 2:
                print(f"--------Player: {playing.name} finished--------")
            elif rules.is_valid(game):
                print(game)
                print("EXPERT: It is a match!")
                print(f"--------Player: {playing.name} finished--------")
            else:
                playing.active = False
                print(game)
                print(f"EXPERT: It is not a match. {playing.name} is out.")
                print(f"--------Player: {playing.name} finished--------")
                active_count -= 1
                if active_count < 2:
                    winner = rules.next_player(game)
                    print()
                    print()
                    print(f"EXPERT: Congratulations! The winner for this round is: {winner.name}")
                    winner.add_reward(rewards.next())
                    print(f"********EXPERT: Round {game.round} finish********")
                    print()
                    print()
                    game.round_finish()
                    game.next_round()
                    game.skipping = False
                    cards_in_round = 0

            if face_up_count > _RESHUFFLE_AT:
                _reshuffle(game)
                face_up_count = 0

    print("##########EXPERT: GAME OVER##########")
    print("EXPERT: 7 rounds expert mode end")
    players = _show_final_scores(game)
    print("##########EXPERT: GAME OVER##########")
    return players


def _read_player_count(game: Game) -> int:
    while True:
        try:
            count = game.scanner.integer()
        except ValueError:
            count = None
        if count is not None and 2 <= count <= 4:
            return count
        game.scanner.skip_line()
        print("Input invalid, try again")


def main(argv=None) -> int:
    """Run an interactive game on the console."""
    parser = argparse.ArgumentParser(prog="memoarrr", description="Play Memoarrr on the console.")
    parser.add_argument("--seed", type=int, default=None, help="seed for shuffling")
    args = parser.parse_args(argv)

    game = Game(rng=random.Random(args.seed))
    rules = Rules()
    try:
        print('Please input "expert" for expert mode or any for normal mode: ')
        game.board.expert = game.scanner.word() == "expert"
        print("Please enter the number of players (2-4): ")
        game.num_players = _read_player_count(game)
        for side in _SEATS[: game.num_players]:
            print(f"Please enter the name for Player at {side.name.lower()}:")
            game.add_player(Player(game.scanner.word(), side))
        for _ in range(3):
            print(" ")
        print("========GAME START========")
        print(" ")
        if game.expert:
            play_expert(game, rules)
        else:
            play_normal(game, rules)
    except EOFError:
        print()
        return 1
    return 0
import builtins
import random

import pytest

from memoarrr.cli import main, play_expert, play_normal
from memoarrr.game import Game
from memoarrr.models import REWARD_LIST, Player, Side
from memoarrr.rules import MAX_ROUNDS, Rules

NAMES = {Side.TOP: "ann", Side.BOTTOM: "bo", Side.LEFT: "cy", Side.RIGHT: "di"}


def _make_game(seed, players, expert):
    game = Game(rng=random.Random(seed), automatic=True, expert=expert)
    game.num_players = players
    for side in list(Side)[:players]:
        game.add_player(Player(NAMES[side], side))
    return game


class _Counter:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return "x"


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.mark.parametrize("players", [2, 3, 4])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_normal_game_runs_all_rounds(seed, players):
    game = _make_game(seed, players, expert=False)
    rules = Rules()
    pause = _Counter()
    result = play_normal(game, rules, read=pause)
    assert game.round == MAX_ROUNDS + 1
    assert rules.end_of_game is True
    assert pause.calls == MAX_ROUNDS
    assert sum(p.rubies for p in result) == sum(REWARD_LIST)
    assert [p.name for p in result] == [NAMES[s] for s in list(Side)[:players]]


@pytest.mark.parametrize("players", [2, 3, 4])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_expert_game_runs_all_rounds(seed, players):
    game = _make_game(seed, players, expert=True)
    rules = Rules()
    pause = _Counter()
    result = play_expert(game, rules, read=pause)
    assert game.round == MAX_ROUNDS + 1
    assert pause.calls == MAX_ROUNDS
    assert sum(p.rubies for p in result) == sum(REWARD_LIST)
    assert len(result) == players


def test_final_scores_are_shown_in_ruby_mode(capsys):
    game = _make_game(5, 2, expert=False)
    players = play_normal(game, Rules(), read=lambda: "x")
    assert all(p.display for p in players)
    assert all(str(p) == f"{p.name}: {p.rubies} rubies" for p in players)
    out = capsys.readouterr().out
    assert out.count("##########GAME OVER##########") == 2
    assert "7 rounds NORMAL mode end" in out


def test_expert_banners(capsys):
    game = _make_game(7, 3, expert=True)
    play_expert(game, Rules(), read=lambda: "x")
    out = capsys.readouterr().out
    assert out.count("##########EXPERT: GAME OVER##########") == 2
    assert "EXPERT: 7 rounds expert mode end" in out
    assert "********EXPERT: Round 1 start********" in out


def test_each_round_reports_a_winner(capsys):
    game = _make_game(3, 4, expert=False)
    play_normal(game, Rules(), read=lambda: "x")
    out = capsys.readouterr().out
    assert out.count("Congratulations! The winner for this round is: ") == MAX_ROUNDS


def test_main_retries_bad_player_count(monkeypatch, capsys):
    _feed(monkeypatch, ["normal", "7", "x", "2", "alice", "go", "bob", "go"])
    assert main(["--seed", "1"]) == 1
    out = capsys.readouterr().out
    assert out.count("Input invalid, try again") == 2
    assert "========GAME START========" in out
    assert "Enter any key to start round: 1" in out


def test_main_expert_mode(monkeypatch, capsys):
    _feed(monkeypatch, ["expert", "2", "alice", "go", "bob", "go"])
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "EXPERT: Enter any key to start round: 1" in out
    assert "Please enter the name for Player at bottom:" in out


def test_main_without_input_fails(monkeypatch):
    _feed(monkeypatch, [])
    assert main([]) == 1
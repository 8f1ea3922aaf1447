"""Rules deciding matches, the end of rounds and games, and whose turn it is."""

from __future__ import annotations

from .game import Game
from .models import Player, Side

MAX_ROUNDS = 7


class Rules:
    """Referee for a game; remembers whose turn comes next."""

    def __init__(self) -> None:
        self.next_index = 0
        self.end_of_game = False

    def is_valid(self, game: Game) -> bool:
        """True when the last two cards share an animal or a background."""
        prev, current = game.prev_card, game.current_card
        if prev is None or current is None:
            raise ValueError("two cards must be turned before a match can be checked")
        return prev.animal == current.animal or prev.color == current.color

    def game_over(self, game: Game) -> bool:
        self.end_of_game = game.round > MAX_ROUNDS
        return self.end_of_game

    def round_over(self, game: Game) -> bool:
        return game.round_finish()

    def next_player(self, game: Game) -> Player:
        """Return the next active player in seat order and advance the turn."""
        for _ in range(len(Side) + max(game.num_players, 1)):
            index = self.next_index
            candidate = game.players.get(Side(index)) if 0 <= index < len(Side) else None
            self.next_index += 1
            if self.next_index == game.num_players:
                self.next_index = 0
            if candidate is not None and candidate.active:
                return candidate
        raise RuntimeError("no active player")
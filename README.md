# memoarrr

A memory-matching card game for two to four players, played in the terminal.

Twenty-five cards lie face down on a 5×5 board, in rows A to E and columns 1
to 5. Each card shows one of five animals on one of five background colours.
The animals are crab, penguin, octopus, turtle and walrus. The colours are
red, green, purple, blue and yellow. The centre position, C3, is the volcano
and cannot be chosen.

Players take turns to turn up a card. From the second card of a round on,
each new card must share its animal or its colour with the card turned
before it. A player whose card does not match is out for the round. When
only one player is left, that player wins the round and takes a reward from
a shuffled reward deck. The deck holds rewards worth 1, 1, 1, 2, 2, 3 and 4
rubies. After seven rounds the game ends and each player's rubies are shown.

When a player is seated, the three cards on that player's side of the board
are shown face up once and then turned back down. Once more than 23 cards
have been turned up, all cards are reshuffled and turned face down.

## Modes

- **Normal**: the whole board is drawn, with face-down cards shown as `zzz`.
  If a player picks a card that is already face up, the turn passes on.
- **Expert**: only the face-up cards are drawn, in the order they were
  turned, each labelled with its position. Each animal also has a power:
  - crab: the player must turn up another face-down card straight away.
  - penguin: the player turns one face-up card back down. This only works
    if more than one card is face up.
  - octopus: the card is swapped with a randomly chosen neighbour. It never
    goes past the edge of the board or onto the volcano.
  - turtle: the next player is skipped.
  - walrus: the player blocks a face-down card, and the next player may not
    choose it.

## Installing

```
pip install .
```

## Playing

```
memoarrr [--seed N]
```

The game first asks for the mode. Type `expert` for expert mode, or any
other word for normal mode. It then asks for the number of players, from 2
to 4, and a one-word name for each seat: top, bottom, then left and right.
To choose a card, type a letter followed by a number, for example `A1`,
`a1` or `b 4`. `--seed` fixes the shuffling, so a game can be repeated.

## Watching a simulated game

```
memoarrr-simulate [E|N] [--seed N]
```

Four automatic players, `testTOP`, `testBOT`, `testLEFT` and `testRIGHT`,
play a whole game by picking positions at random. Every step is printed.
`E` plays expert mode and `N` plays normal mode. If no mode is given, the
command asks for one. `--seed` makes every random choice repeatable.

From Python:

```python
from memoarrr.simulation import simulate

players = simulate(expert=True, seed=42)
for player in players:
    print(player.name, player.rubies)
```

## Using the pieces

- `memoarrr.models` holds `Card`, `Reward` and `Player`, along with the
  enumerations `Side`, `FaceAnimal`, `FaceBackground`, `Letter` and `Number`.
- `memoarrr.decks` holds `Deck`, `CardDeck` and `RewardDeck`. Each deck can
  take a `random.Random` for shuffling.
- `memoarrr.board.Board` tracks which cards are face up. Its `render()`
  draws the board in either mode.
- `memoarrr.game.Game` holds the players, the round and the animal powers.
- `memoarrr.rules.Rules` decides matches, the end of a round and of the
  game, and whose turn it is.
- `memoarrr.cli.play_normal` and `memoarrr.cli.play_expert` play a prepared
  game through to the end.

## What it does not do

The game is played by several people at one terminal. There is no network
play, no saving or loading of games, and no record of scores between runs.

## Running the tests

```
pip install .[test]
pytest
```
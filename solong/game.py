"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from solong.maps import GameMap

TEXT_COLOR = 0x310C29
STEPS_TEXT_POS = (18, 54)
KEYS_TEXT_POS = (11, 150)
KEY_ESCAPE = 53


class Tile(Enum):
    """Images that can be drawn on a map cell, valued by their file path."""

    GROUND = "img/ground.xpm"
    WALL = "img/wall.xpm"
    PLAYER1 = "img/player1.xpm"
    PLAYER2 = "img/player2.xpm"
    KEY = "img/key.xpm"
    EXIT = "img/exit.xpm"
    DANGER = "img/danger.xpm"


class Direction(Enum):
    """A move of one cell, valued by its ``(dx, dy)`` offset."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @classmethod
    def from_key(cls, keycode: int) -> Optional["Direction"]:
        """Return the direction bound to a keyboard code, or None."""
        return _KEY_DIRECTIONS.get(keycode)


_KEY_DIRECTIONS = {
    13: Direction.UP,
    2: Direction.RIGHT,
    1: Direction.DOWN,
    0: Direction.LEFT,
}


class Outcome(Enum):
    """What a single move led to."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Draw:
    """Draw ``tile`` on the map cell at ``(x, y)``."""

    tile: Tile
    x: int
    y: int


@dataclass(frozen=True)
class TextDraw:
    """Draw ``text`` at pixel position ``(x, y)`` in ``color``."""

    text: str
    x: int
    y: int
    color: int = TEXT_COLOR


Command = Union[Draw, TextDraw]

_CELL_TILES = {
    "0": (Tile.GROUND,),
    "1": (Tile.GROUND, Tile.WALL),
    "C": (Tile.GROUND, Tile.KEY),
    "E": (Tile.GROUND, Tile.EXIT),
    "D": (Tile.GROUND, Tile.DANGER),
}


@dataclass
class Game:
    """A running game on a copy of ``game_map``.

    Moves append drawing commands to ``commands`` and, outside bonus mode,
    console lines to ``messages``.
    """

    game_map: GameMap
    bonus: bool = False
    collectibles: int = field(init=False)
    player: tuple[int, int] = field(init=False)
    steps: int = field(init=False, default=0)
    on_exit: bool = field(init=False, default=False)
    outcome: Optional[Outcome] = field(init=False, default=None)
    commands: list[Command] = field(init=False, default_factory=list)
    messages: list[str] = field(init=False, default_factory=list)

    def __init__(self, game_map: GameMap, bonus: bool = False) -> None:
        self.game_map = GameMap([list(row) for row in game_map.rows])
        self.bonus = bonus
        self.collectibles = self.game_map.count("C")
        self.player = self.game_map.player_position()
        self.steps = 0
        self.on_exit = False
        self.outcome = None
        self.commands = []
        self.messages = []

    @property
    def finished(self) -> bool:
        return self.outcome in (Outcome.WON, Outcome.LOST)

    def initial_frame(self) -> list[Draw]:
        """Return the commands that draw the whole map at the start."""
        start_player = Tile.PLAYER1 if self.bonus else Tile.PLAYER2
        frame = []
        for y, row in enumerate(self.game_map.rows):
            for x, cell in enumerate(row):
                tiles = (Tile.GROUND, start_player) if cell == "P" else _CELL_TILES.get(cell, ())
                frame.extend(Draw(tile, x, y) for tile in tiles)
        return frame

    def _player_tile(self) -> Tile:
        if self.bonus and self.steps % 2 != 0:
            return Tile.PLAYER1
        return Tile.PLAYER2

    def step(self, dx: int, dy: int) -> Outcome:
        """Try to move the player by ``(dx, dy)`` and return what happened."""
        if self.finished:
            return self.outcome
        px, py = self.player
        nx, ny = px + dx, py + dy
        rows = self.game_map.rows
        target = rows[ny][nx]
        if target == "1":
            self.outcome = Outcome.BLOCKED
            return self.outcome
        if self.bonus and target == "D":
            self.outcome = Outcome.LOST
            return self.outcome
        if target == "E" and not self.on_exit and self.collectibles == 0:
            self.outcome = Outcome.WON
            return self.outcome

        if target == "C":
            keys_text = f"{self.collectibles - 1} keys left"
            self.collectibles -= 1
            if self.bonus:
                self.commands.append(Draw(Tile.WALL, 0, 1))
                self.commands.append(TextDraw(keys_text, *KEYS_TEXT_POS))

        leaving = Tile.EXIT if self.on_exit else Tile.GROUND
        entering = Tile.EXIT if target == "E" else Tile.GROUND
        rows[py][px] = "E" if self.on_exit else "0"
        rows[ny][nx] = "P"
        self.on_exit = target == "E"

        self.commands.extend(
            (
                Draw(entering, nx, ny),
                Draw(self._player_tile(), nx, ny),
                Draw(leaving, px, py),
            )
        )
        self.player = (nx, ny)
        self.steps += 1
        if self.bonus:
            self.commands.append(Draw(Tile.WALL, 0, 0))
            self.commands.append(TextDraw(f"Steps: {self.steps}", *STEPS_TEXT_POS))
        else:
            self.messages.append(f"step {self.steps}")
        self.outcome = Outcome.MOVED
        return self.outcome

    def press(self, direction: Direction) -> Outcome:
        """Move the player one cell in ``direction``."""
        return self.step(*direction.value)
"""Reading map files and checking that they describe a playable map."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Union

MAP_EXTENSION = ".ber"

BASE_SYMBOLS = frozenset("PCE01")
BONUS_SYMBOLS = BASE_SYMBOLS | {"D"}

_NOT_VALID = "Error! Map not valid!"

PathArg = Union[str, "PathLike[str]"]


class MapError(Exception):
    """Raised when a map file cannot be read or is not a valid map."""


@dataclass
class GameMap:
    """A rectangular grid of map symbols, stored row by row."""

    rows: list[list[str]]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def count(self, symbol: str) -> int:
        """Return how many cells hold ``symbol``."""
        return sum(row.count(symbol) for row in self.rows)

    def player_position(self) -> tuple[int, int]:
        """Return the ``(x, y)`` position of the player."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell == "P":
                    return x, y
        raise MapError("Error! There must be only 1 Player on the map!")

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def check_file_extension(path: PathArg) -> None:
    """Raise MapError unless the text after the last dot starts with ``.ber``."""
    name = str(path)
    dot = name.rfind(".")
    if dot < 0 or name[dot:dot + len(MAP_EXTENSION)] != MAP_EXTENSION:
        raise MapError("Error! Extension not valid")


def read_map_text(path: PathArg) -> str:
    """Read a map file, rejecting empty files and empty lines."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("Error! Impossible to read the map!") from exc
    if not text or text.startswith("\n") or "\n\n" in text:
        raise MapError(_NOT_VALID)
    return text


def _check_boundaries(game_map: GameMap) -> None:
    top, bottom = game_map.rows[0], game_map.rows[-1]
    for upper, lower in zip(top, bottom):
        if upper != "1":
            raise MapError("Error! The Upper boundary isn`t correct!")
        if lower != "1":
            raise MapError("Error! The Lower boundary isn`t correct!")
    for row in game_map.rows[1:]:
        if row[0] != "1":
            raise MapError("Error! The Left boundary isn`t correct!")
        if row[-1] != "1":
            raise MapError("Error! The Right boundary isn`t correct!")


def _check_number_elements(game_map: GameMap) -> None:
    if game_map.count("C") < 1:
        raise MapError("Error! There must be 1 or more Coins on the map!")
    if game_map.count("P") != 1:
        raise MapError("Error! There must be only 1 Player on the map!")
    if game_map.count("E") < 1:
        raise MapError("Error! There must be 1 or more Exits on the map!")


def _check_symbols(game_map: GameMap, bonus: bool) -> None:
    allowed = BONUS_SYMBOLS if bonus else BASE_SYMBOLS
    if any(cell not in allowed for row in game_map.rows for cell in row):
        raise MapError("Error! Invalid simbol(s) on the map!")


def parse_map(text: str, bonus: bool = False) -> GameMap:
    """Build a GameMap from map text and run every structural check on it."""
    if not text or text[0] == "\n" or text[-1] == "\n":
        raise MapError(_NOT_VALID)
    rows = [list(line) for line in text.split("\n") if line]
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError(_NOT_VALID)
    game_map = GameMap(rows)
    _check_boundaries(game_map)
    _check_number_elements(game_map)
    _check_symbols(game_map, bonus)
    return game_map


def load_map(path: PathArg, bonus: bool = False) -> GameMap:
    """Check the file name, read the file and parse it into a GameMap."""
    check_file_extension(path)
    return parse_map(read_map_text(path), bonus)
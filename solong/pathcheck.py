"""Checking that the player can reach every coin and an exit."""

from __future__ import annotations

from solong.maps import GameMap, MapError


def _blocked(game_map: GameMap, x: int, y: int, bonus: bool) -> bool:
    if not (0 <= y < game_map.height and 0 <= x < len(game_map.rows[y])):
        return True
    cell = game_map.rows[y][x]
    return cell == "1" or (bonus and cell == "D")


def reachable_cells(
    game_map: GameMap, start: tuple[int, int], bonus: bool = False
) -> set[tuple[int, int]]:
    """Return every ``(x, y)`` cell reachable from ``start`` without crossing walls.

    In bonus mode danger tiles block the way too. The start cell is always included.
    """
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for nx, ny in ((x, y - 1), (x + 1, y), (x, y + 1), (x - 1, y)):
            if (nx, ny) not in seen and not _blocked(game_map, nx, ny, bonus):
                seen.add((nx, ny))
                stack.append((nx, ny))
    return seen


def validate_path(game_map: GameMap, bonus: bool = False) -> set[tuple[int, int]]:
    """Raise MapError unless every coin and at least one exit can be reached.

    Returns the set of reachable cells.
    """
    cells = reachable_cells(game_map, game_map.player_position(), bonus)
    symbols = [game_map.rows[y][x] for x, y in cells]
    if "E" not in symbols or symbols.count("C") != game_map.count("C"):
        raise MapError("Map not valid!")
    return cells
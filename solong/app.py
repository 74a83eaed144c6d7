"""Command-line entry point and the window that shows a running game."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from solong.game import Direction, Draw, Game, Outcome, TextDraw, Tile
from solong.maps import GameMap, MapError, load_map
from solong.pathcheck import validate_path
from solong.xpm import XpmError, load_xpm

TILE_SIZE = 100
WINDOW_TITLE = "SO_LONG"
FONT_SIZE = 24
FRAME_RATE = 60
BONUS_FLAG = "--bonus"

USAGE_ERROR = "Error! Add the map or check the start command!"
FAREWELL = "<<<<<<<<<< SEE YOU !!! >>>>>>>>>>"


def window_size(game_map: GameMap) -> tuple[int, int]:
    """Return the window size in pixels for ``game_map``."""
    return game_map.width * TILE_SIZE, game_map.height * TILE_SIZE


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def run(game: Game, assets_dir: Union[str, "os.PathLike[str]"] = "img") -> Optional[Outcome]:
    """Open a window for ``game`` and play it until it ends or is closed.

    Tile images are read from ``assets_dir``. Returns the game's outcome when
    it was won or lost, or the last outcome when the player quit.
    """
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    assets = Path(assets_dir)
    key_directions = {
        pygame.K_w: Direction.UP,
        pygame.K_d: Direction.RIGHT,
        pygame.K_s: Direction.DOWN,
        pygame.K_a: Direction.LEFT,
    }

    pygame.init()
    try:
        screen = pygame.display.set_mode(window_size(game.game_map))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        surfaces: dict[Tile, "pygame.Surface"] = {}

        def surface_for(tile: Tile) -> "pygame.Surface":
            if tile not in surfaces:
                image = load_xpm(assets / Path(tile.value).name)
                surfaces[tile] = pygame.image.frombuffer(
                    image.to_rgba(), (image.width, image.height), "RGBA"
                ).convert_alpha()
            return surfaces[tile]

        def draw(command: Union[Draw, TextDraw]) -> None:
            if isinstance(command, Draw):
                screen.blit(
                    surface_for(command.tile),
                    (command.x * TILE_SIZE, command.y * TILE_SIZE),
                )
            else:
                text = font.render(command.text, True, _rgb(command.color))
                screen.blit(text, (command.x, command.y))

        for command in game.initial_frame():
            draw(command)
        pygame.display.flip()

        drawn = len(game.commands)
        printed = len(game.messages)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return game.outcome
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return game.outcome
                    direction = key_directions.get(event.key)
                    if direction is not None:
                        game.press(direction)
            for command in game.commands[drawn:]:
                draw(command)
            drawn = len(game.commands)
            for message in game.messages[printed:]:
                print(message)
            printed = len(game.messages)
            if game.finished:
                return game.outcome
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and play it.

    ``--bonus`` enables danger tiles and the on-screen counters. Every ending
    prints a message and gives exit status 1, as the game always has.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = BONUS_FLAG in args
    args = [arg for arg in args if arg != BONUS_FLAG]
    if len(args) != 1:
        print(USAGE_ERROR)
        return 1
    try:
        game_map = load_map(args[0], bonus)
        validate_path(game_map, bonus)
    except MapError as exc:
        print(exc)
        return 1
    try:
        run(Game(game_map, bonus))
    except XpmError as exc:
        print(f"Error! {exc}")
        return 1
    print(FAREWELL)
    return 1


if __name__ == "__main__":
    sys.exit(main())
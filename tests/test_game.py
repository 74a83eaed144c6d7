import pytest

from solong.game import (
    KEY_ESCAPE,
    Direction,
    Draw,
    Game,
    Outcome,
    TextDraw,
    Tile,
)
from solong.maps import parse_map

SIMPLE = "11111\n1PCE1\n11111"
TWO_COINS = "111111\n1PCEC1\n111111"
TWO_EXITS = "1111111\n1PEEC01\n1111111"
DANGER = "111111\n1DPCE1\n111111"


def make(text, bonus=False):
    return Game(parse_map(text, bonus), bonus)


def test_wall_blocks_and_counts_no_step():
    game = make(SIMPLE)
    assert game.press(Direction.UP) == Outcome.BLOCKED
    assert game.steps == 0
    assert game.player == (1, 1)
    assert game.commands == []
    assert game.messages == []


def test_collect_then_win():
    game = make(SIMPLE)
    assert game.press(Direction.RIGHT) == Outcome.MOVED
    assert game.collectibles == 0
    assert game.player == (2, 1)
    assert game.messages == ["step 1"]
    assert str(game.game_map).split("\n")[1] == "10PE1"
    assert game.press(Direction.RIGHT) == Outcome.WON
    assert game.steps == 1


def test_original_map_is_not_changed():
    game_map = parse_map(SIMPLE)
    game = Game(game_map)
    game.press(Direction.RIGHT)
    assert str(game_map) == SIMPLE


def test_exit_with_coins_left_is_walkable():
    game = make(TWO_COINS)
    game.press(Direction.RIGHT)
    assert game.press(Direction.RIGHT) == Outcome.MOVED
    assert game.on_exit
    assert game.collectibles == 1
    assert str(game.game_map).split("\n")[1] == "100PC1"
    assert game.press(Direction.RIGHT) == Outcome.MOVED
    assert not game.on_exit
    assert game.collectibles == 0
    assert str(game.game_map).split("\n")[1] == "100EP1"
    assert game.press(Direction.LEFT) == Outcome.WON


def test_leaving_exit_draws_exit_behind():
    game = make(TWO_COINS)
    game.press(Direction.RIGHT)
    game.press(Direction.RIGHT)
    game.commands.clear()
    game.press(Direction.RIGHT)
    assert game.commands == [
        Draw(Tile.GROUND, 4, 1),
        Draw(Tile.PLAYER2, 4, 1),
        Draw(Tile.EXIT, 3, 1),
    ]


def test_exit_to_exit_keeps_both_exits():
    game = make(TWO_EXITS)
    game.press(Direction.RIGHT)
    game.commands.clear()
    assert game.press(Direction.RIGHT) == Outcome.MOVED
    assert game.on_exit
    assert game.commands == [
        Draw(Tile.EXIT, 3, 1),
        Draw(Tile.PLAYER2, 3, 1),
        Draw(Tile.EXIT, 2, 1),
    ]
    assert str(game.game_map).split("\n")[1] == "10EPC01"


def test_move_onto_ground_draws_ground_both_sides():
    game = make(SIMPLE)
    game.press(Direction.RIGHT)
    assert game.commands == [
        Draw(Tile.GROUND, 2, 1),
        Draw(Tile.PLAYER2, 2, 1),
        Draw(Tile.GROUND, 1, 1),
    ]


def test_bonus_danger_loses():
    game = make(DANGER, bonus=True)
    assert game.press(Direction.LEFT) == Outcome.LOST
    assert game.finished
    assert game.press(Direction.RIGHT) == Outcome.LOST
    assert game.steps == 0


def test_bonus_text_and_sprite_alternation():
    game = make(DANGER, bonus=True)
    game.press(Direction.RIGHT)
    assert game.commands == [
        Draw(Tile.WALL, 0, 1),
        TextDraw("0 keys left", 11, 150, 0x310C29),
        Draw(Tile.GROUND, 3, 1),
        Draw(Tile.PLAYER2, 3, 1),
        Draw(Tile.GROUND, 2, 1),
        Draw(Tile.WALL, 0, 0),
        TextDraw("Steps: 1", 18, 54, 0x310C29),
    ]
    assert game.messages == []
    game.commands.clear()
    game.press(Direction.LEFT)
    assert Draw(Tile.PLAYER1, 2, 1) in game.commands


def test_initial_frame_mandatory_and_bonus():
    frame = make(SIMPLE).initial_frame()
    assert Draw(Tile.PLAYER2, 1, 1) in frame
    assert Draw(Tile.KEY, 2, 1) in frame
    assert Draw(Tile.EXIT, 3, 1) in frame
    walls = [d for d in frame if d.tile == Tile.WALL]
    assert len(walls) == 12
    grounds = [d for d in frame if d.tile == Tile.GROUND]
    assert len(grounds) == 15

    bonus_frame = make(DANGER, bonus=True).initial_frame()
    assert Draw(Tile.PLAYER1, 2, 1) in bonus_frame
    assert Draw(Tile.DANGER, 1, 1) in bonus_frame


@pytest.mark.parametrize(
    "keycode, direction",
    [(13, Direction.UP), (2, Direction.RIGHT), (1, Direction.DOWN), (0, Direction.LEFT)],
)
def test_direction_from_key(keycode, direction):
    assert Direction.from_key(keycode) is direction


def test_escape_is_not_a_direction():
    assert Direction.from_key(KEY_ESCAPE) is None


def test_step_matches_press():
    a = make(TWO_COINS)
    b = make(TWO_COINS)
    for direction in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.RIGHT):
        assert a.press(direction) == b.step(*direction.value)
    assert a.player == b.player
    assert str(a.game_map) == str(b.game_map)


def test_frame_uses_image_paths():
    frame = make(DANGER, bonus=True).initial_frame()
    paths = {draw.tile.value for draw in frame}
    assert paths == {
        "img/ground.xpm",
        "img/wall.xpm",
        "img/player1.xpm",
        "img/key.xpm",
        "img/exit.xpm",
        "img/danger.xpm",
    }
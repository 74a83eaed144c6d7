import pytest

from solong.maps import MapError, parse_map
from solong.pathcheck import reachable_cells, validate_path

VALID = "11111\n1PCE1\n11111"


def _symbols(game_map, cells):
    return [game_map.rows[y][x] for x, y in cells]


def test_valid_map_reaches_everything():
    game_map = parse_map(VALID)
    cells = validate_path(game_map)
    assert len(cells) == 3
    assert set(_symbols(game_map, cells)) == {"P", "C", "E"}


def test_reachable_cells_never_contain_walls():
    game_map = parse_map("1111111\n1P0C0E1\n1011101\n1000001\n1111111")
    cells = reachable_cells(game_map, game_map.player_position())
    assert "1" not in _symbols(game_map, cells)
    assert game_map.player_position() in cells


def test_start_always_included():
    game_map = parse_map(VALID)
    start = game_map.player_position()
    assert start in reachable_cells(game_map, start)


def test_unreachable_exit():
    game_map = parse_map("1111111\n1PC1E01\n1111111")
    with pytest.raises(MapError, match="^Map not valid!$"):
        validate_path(game_map)


def test_unreachable_coin():
    game_map = parse_map("1111111\n1PE1C01\n1111111")
    with pytest.raises(MapError, match="^Map not valid!$"):
        validate_path(game_map)


def test_path_through_exit_reaches_coin():
    game_map = parse_map("111111\n1PEC01\n111111")
    cells = validate_path(game_map)
    assert _symbols(game_map, cells).count("C") == game_map.count("C")


def test_danger_blocks_only_in_bonus():
    game_map = parse_map("1111111\n1PCDE01\n1111111", bonus=True)
    start = game_map.player_position()
    plain = reachable_cells(game_map, start, bonus=False)
    guarded = reachable_cells(game_map, start, bonus=True)
    assert guarded < plain
    assert "E" in _symbols(game_map, plain)
    assert "E" not in _symbols(game_map, guarded)
    assert "D" not in _symbols(game_map, guarded)


def test_bonus_validate_fails_behind_danger():
    game_map = parse_map("1111111\n1PCDE01\n1111111", bonus=True)
    with pytest.raises(MapError, match="^Map not valid!$"):
        validate_path(game_map, bonus=True)


def test_bonus_validate_passes_around_danger():
    game_map = parse_map("1111111\n1PCDE01\n1000001\n1111111", bonus=True)
    cells = validate_path(game_map, bonus=True)
    assert "D" not in _symbols(game_map, cells)
    assert "E" in _symbols(game_map, cells)
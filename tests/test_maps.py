import pytest

from solong.maps import (
    GameMap,
    MapError,
    check_file_extension,
    load_map,
    parse_map,
    read_map_text,
)

VALID = "11111\n1PCE1\n11111"


def test_parse_valid_map_round_trips():
    game_map = parse_map(VALID)
    assert str(game_map) == VALID
    assert game_map.rows == [list(line) for line in VALID.split("\n")]


def test_dimensions_match_rows():
    game_map = parse_map(VALID)
    lines = VALID.split("\n")
    assert game_map.width == len(lines[0])
    assert game_map.height == len(lines)


def test_count_matches_text():
    game_map = parse_map(VALID)
    for symbol in "PCE01":
        assert game_map.count(symbol) == VALID.count(symbol)


def test_player_position():
    assert parse_map(VALID).player_position() == (1, 1)


def test_player_position_missing_raises():
    with pytest.raises(MapError, match="only 1 Player"):
        GameMap([list("111"), list("101"), list("111")]).player_position()


@pytest.mark.parametrize("text", ["", "\n" + VALID, VALID + "\n"])
def test_leading_or_trailing_newline_is_invalid(text):
    with pytest.raises(MapError, match="Error! Map not valid!"):
        parse_map(text)


def test_ragged_rows_are_invalid():
    with pytest.raises(MapError, match="Error! Map not valid!"):
        parse_map("11111\n1PCE1\n1111")


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("10111\n1PCE1\n11111", "Error! The Upper boundary isn`t correct!"),
        ("11111\n1PCE1\n11011", "Error! The Lower boundary isn`t correct!"),
        ("11111\n0PCE1\n11111", "Error! The Left boundary isn`t correct!"),
        ("11111\n1PCE0\n11111", "Error! The Right boundary isn`t correct!"),
        ("11111\n1P0E1\n11111", "Error! There must be 1 or more Coins on the map!"),
        ("111111\n1PPCE1\n111111", "Error! There must be only 1 Player on the map!"),
        ("11111\n1PC01\n11111", "Error! There must be 1 or more Exits on the map!"),
        ("111111\n1PCEX1\n111111", "Error! Invalid simbol(s) on the map!"),
    ],
)
def test_structural_errors(text, message):
    with pytest.raises(MapError) as info:
        parse_map(text)
    assert str(info.value) == message


def test_upper_checked_before_lower_in_first_column():
    with pytest.raises(MapError) as info:
        parse_map("01111\n1PCE1\n01111")
    assert str(info.value) == "Error! The Upper boundary isn`t correct!"


def test_counts_checked_before_symbols():
    with pytest.raises(MapError) as info:
        parse_map("111111\n1P0EX1\n111111")
    assert str(info.value) == "Error! There must be 1 or more Coins on the map!"


def test_danger_tile_only_in_bonus():
    text = "111111\n1PCED1\n111111"
    with pytest.raises(MapError, match="Invalid simbol"):
        parse_map(text)
    assert parse_map(text, bonus=True).count("D") == text.count("D")


@pytest.mark.parametrize("name", ["map.txt", "map", "map.be", "map.BER"])
def test_bad_extension(name):
    with pytest.raises(MapError, match="Extension not valid"):
        check_file_extension(name)


def test_read_missing_file(tmp_path):
    with pytest.raises(MapError, match="Impossible to read the map"):
        read_map_text(tmp_path / "absent.ber")


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="Error! Map not valid!"):
        read_map_text(path)


def test_read_file_with_empty_line(tmp_path):
    path = tmp_path / "gap.ber"
    path.write_text("11111\n\n1PCE1\n11111")
    with pytest.raises(MapError, match="Error! Map not valid!"):
        read_map_text(path)


def test_read_returns_contents(tmp_path):
    path = tmp_path / "ok.ber"
    path.write_text(VALID)
    assert read_map_text(path) == VALID


def test_load_map(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert str(load_map(path)) == VALID


def test_load_map_extension_only_checks_prefix(tmp_path):
    path = tmp_path / "level.berx"
    path.write_text(VALID)
    assert str(load_map(path)) == VALID


def test_load_map_rejects_extension_before_reading(tmp_path):
    with pytest.raises(MapError, match="Extension not valid"):
        load_map(tmp_path / "absent.txt")


def test_load_map_trailing_newline_rejected(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID + "\n")
    with pytest.raises(MapError, match="Error! Map not valid!"):
        load_map(path)


def test_load_bonus_map(tmp_path):
    text = "111111\n1PCED1\n111111"
    path = tmp_path / "bonus.ber"
    path.write_text(text)
    assert str(load_map(path, bonus=True)) == text
import pytest

from solong.app import FAREWELL, TILE_SIZE, USAGE_ERROR, main, window_size
from solong.maps import parse_map


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_window_size_of_small_map():
    game_map = parse_map("11111\n1PCE1\n11111")
    assert window_size(game_map) == (500, 300)


def test_window_size_scales_with_tile_size():
    small = parse_map("11111\n1PCE1\n11111")
    tall = parse_map("11111\n1PCE1\n10001\n11111")
    small_w, small_h = window_size(small)
    tall_w, tall_h = window_size(tall)
    assert tall_w == small_w
    assert tall_h - small_h == TILE_SIZE


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"], ["--bonus"]])
def test_main_rejects_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out.strip() == USAGE_ERROR


def test_main_rejects_wrong_extension(tmp_path, capsys):
    path = _write(tmp_path, "map.txt", "11111\n1PCE1\n11111")
    assert main([path]) == 1
    assert capsys.readouterr().out.strip() == "Error! Extension not valid"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ber")]) == 1
    assert capsys.readouterr().out.strip() == "Error! Impossible to read the map!"


def test_main_reports_unreachable_exit(tmp_path, capsys):
    path = _write(tmp_path, "closed.ber", "1111111\n1P1C0E1\n1111111")
    assert main([path]) == 1
    assert capsys.readouterr().out.strip() == "Map not valid!"


def test_main_rejects_danger_tile_outside_bonus(tmp_path, capsys):
    path = _write(tmp_path, "danger.ber", "111111\n1PDCE1\n111111")
    assert main([path]) == 1
    assert capsys.readouterr().out.strip() == "Error! Invalid simbol(s) on the map!"


def test_main_bonus_treats_danger_as_blocking(tmp_path, capsys):
    path = _write(tmp_path, "danger.ber", "111111\n1PDCE1\n111111")
    assert main(["--bonus", path]) == 1
    out = capsys.readouterr().out.strip()
    assert out == "Map not valid!"
    assert FAREWELL not in out


def test_main_reports_bad_boundary(tmp_path, capsys):
    path = _write(tmp_path, "open.ber", "11111\n1PCE0\n11111")
    assert main([path]) == 1
    assert capsys.readouterr().out.strip() == "Error! The Right boundary isn`t correct!"
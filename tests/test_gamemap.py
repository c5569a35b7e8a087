import pytest

from sollong.gamemap import (
    TILE_SIZE,
    GameMap,
    MapError,
    Tile,
    has_ber_extension,
    load_map,
    parse_map,
    strip_newlines,
)

VALID = ["1111111\n", "1P0C0E1\n", "1111111\n"]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.ber", True),
        (".ber", True),
        ("level.txt", False),
        ("level.ber.txt", False),
        ("level.bert", False),
    ],
)
def test_has_ber_extension(path, expected):
    assert has_ber_extension(path) is expected


def test_strip_newlines_removes_newlines():
    assert strip_newlines(["111\n", "1P1\n", "111"]) == ["111", "1P1", "111"]


def test_strip_newlines_rejects_uneven_rows():
    with pytest.raises(MapError):
        strip_newlines(["1111\n", "111\n"])


def test_strip_newlines_rejects_single_line_without_newline():
    with pytest.raises(MapError):
        strip_newlines(["111"])


def test_strip_newlines_rejects_trailing_blank_line():
    with pytest.raises(MapError):
        strip_newlines(["111\n", "1P1\n", "111\n", "\n"])


def test_strip_newlines_rejects_empty_input():
    with pytest.raises(MapError):
        strip_newlines([])


def test_parse_valid_map():
    game_map = parse_map(VALID)
    assert game_map.rows == [line.rstrip("\n") for line in VALID]
    assert game_map.width == len(VALID[0]) - 1
    assert game_map.height == len(VALID)
    assert game_map.count(Tile.COLLECTIBLE) == 1
    assert game_map.count("E") == 1
    assert game_map.player_position() == (1, 1)


def test_pixel_size_uses_tile_size():
    game_map = parse_map(VALID)
    assert game_map.pixel_size == (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)


def test_indexing_round_trip():
    game_map = GameMap(["111", "1C1", "111"])
    game_map[1, 1] = Tile.EMPTY
    assert game_map[1, 1] == Tile.EMPTY.value
    assert game_map.count(Tile.COLLECTIBLE) == 0


def test_player_position_missing():
    with pytest.raises(MapError):
        GameMap(["111", "101", "111"]).player_position()


@pytest.mark.parametrize(
    "lines",
    [
        ["1111111\n", "1P0X0E1\n", "1111111\n"],
        ["1111111\n", "0P0C0E1\n", "1111111\n"],
        ["1111111\n", "1P0C0E0\n", "1111111\n"],
        ["1111111\n", "1P0C0E1\n", "1110111\n"],
        ["0111111\n", "1P0C0E1\n", "1111111\n"],
        ["1111111\n", "1P0CEE1\n", "1111111\n"],
        ["1111111\n", "1PPC0E1\n", "1111111\n"],
        ["1111111\n", "1P000E1\n", "1111111\n"],
        ["1111111\n", "10C00E1\n", "1111111\n"],
    ],
)
def test_invalid_maps_raise(lines):
    with pytest.raises(MapError):
        parse_map(lines)


def test_collectible_behind_exit_is_rejected():
    with pytest.raises(MapError):
        parse_map(["11111\n", "1PEC1\n", "11111\n"])


def test_walled_off_exit_is_rejected():
    with pytest.raises(MapError):
        parse_map(["1111111\n", "1PC01E1\n", "1111111\n"])


def test_walled_off_collectible_is_rejected():
    with pytest.raises(MapError):
        parse_map(["1111111\n", "1PE01C1\n", "1111111\n"])


def test_load_map_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("".join(VALID))
    game_map = load_map(path)
    assert game_map.rows == parse_map(VALID).rows


def test_load_map_without_final_newline(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("".join(VALID).rstrip("\n"))
    assert load_map(path).player_position() == (1, 1)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "missing.ber")


def test_load_map_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError):
        load_map(path)


def test_load_map_rejects_carriage_returns(tmp_path):
    path = tmp_path / "level.ber"
    path.write_bytes("".join(VALID).replace("\n", "\r\n").encode())
    with pytest.raises(MapError):
        load_map(path)
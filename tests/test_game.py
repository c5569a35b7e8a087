import io

import pytest

from sollong.game import (
    KEY_ESCAPE,
    KEY_LEFT,
    KEY_RIGHT,
    Direction,
    Game,
    MoveResult,
    gg_banner,
    main,
)
from sollong.gamemap import parse_map

MAP_LINES = [
    "111111\n",
    "1P0CE1\n",
    "100001\n",
    "111111\n",
]


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def game(out):
    return Game(parse_map(MAP_LINES), stream=out)


def test_initial_state(game):
    assert game.player == (1, 1)
    assert game.collectibles == 1
    assert game.moves == 0
    assert game.finished is False


def test_move_onto_empty(game, out):
    assert game.move(Direction.RIGHT) is MoveResult.MOVED
    assert game.player == (1, 2)
    assert game.moves == 1
    assert out.getvalue() == "Move n⁰1\n"


def test_move_into_wall_is_blocked(game, out):
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.move(Direction.LEFT) is MoveResult.BLOCKED
    assert game.player == (1, 1)
    assert game.moves == 0
    assert out.getvalue() == ""


def test_collect(game):
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveResult.COLLECTED
    assert game.collectibles == 0
    assert game.grid[1][3] == "0"
    assert game.player == (1, 3)


def test_exit_blocked_while_collectibles_remain(game):
    game.move(Direction.DOWN)
    for _ in range(3):
        game.move(Direction.RIGHT)
    assert game.player == (2, 4)
    assert game.move(Direction.UP) is MoveResult.BLOCKED
    assert game.player == (2, 4)
    assert game.finished is False


def test_win(game, out):
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.move(Direction.RIGHT) is MoveResult.WON
    assert game.finished is True
    assert game.moves == 3
    assert out.getvalue().endswith("Move n⁰3\n" + gg_banner())
    with pytest.raises(RuntimeError):
        game.move(Direction.LEFT)


def test_handle_key_mapping(game):
    assert game.handle_key(ord("d")) is MoveResult.MOVED
    assert game.player == (1, 2)
    assert game.handle_key(KEY_LEFT) is MoveResult.MOVED
    assert game.player == (1, 1)
    assert game.handle_key(ord("s")) is MoveResult.MOVED
    assert game.player == (2, 1)
    assert game.handle_key(ord("w")) is MoveResult.MOVED
    assert game.player == (1, 1)
    assert game.handle_key(KEY_RIGHT) is MoveResult.MOVED
    assert game.player == (1, 2)


def test_handle_key_escape_and_unknown(game):
    assert game.handle_key(ord("q")) is MoveResult.IGNORED
    assert game.finished is False
    assert game.handle_key(KEY_ESCAPE) is MoveResult.QUIT
    assert game.finished is True


def test_tiles_follow_player(game):
    before = {(r, c): t for r, c, t in game.tiles()}
    assert before[(1, 1)] == "P"
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    after = {(r, c): t for r, c, t in game.tiles()}
    assert after[(1, 1)] == "0"
    assert after[(1, 3)] == "P"
    assert list(after.values()).count("P") == 1
    assert len(after) == 24


def test_gg_banner():
    assert gg_banner().splitlines()[0] == "  ________  ________  ._."
    assert gg_banner().endswith("\n")


def test_main_needs_one_argument():
    assert main([]) == 1
    assert main(["a.ber", "b.ber"]) == 1


def test_main_rejects_other_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().out == ""


def test_main_reports_bad_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("111\n1P1\n111\n")
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == "Error\n"


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.ber")]) == 1
    assert capsys.readouterr().out == "Error\n"
from sollong.pathfind import collectibles_reachable, exit_reachable, is_finishable

OPEN = ["1111111", "1P0C0E1", "1111111"]

MAZE = [
    "1111111",
    "1P00001",
    "1011101",
    "10C1E01",
    "1111111",
]


def test_open_corridor_is_finishable():
    assert collectibles_reachable(OPEN, (1, 1)) is True
    assert exit_reachable(OPEN, (1, 1)) is True
    assert is_finishable(OPEN, (1, 1)) is True


def test_maze_with_dead_ends_is_finishable():
    assert collectibles_reachable(MAZE, (1, 1)) is True
    assert exit_reachable(MAZE, (1, 1)) is True
    assert is_finishable(MAZE, (1, 1)) is True


def test_collectible_behind_exit():
    rows = ["11111", "1PEC1", "11111"]
    assert collectibles_reachable(rows, (1, 1)) is False
    assert exit_reachable(rows, (1, 1)) is True
    assert is_finishable(rows, (1, 1)) is False


def test_walled_off_exit():
    rows = ["1111111", "1PC01E1", "1111111"]
    assert collectibles_reachable(rows, (1, 1)) is True
    assert exit_reachable(rows, (1, 1)) is False
    assert is_finishable(rows, (1, 1)) is False


def test_one_of_several_collectibles_unreachable():
    rows = ["11111111", "1PC0E1C1", "11111111"]
    assert collectibles_reachable(rows, (1, 1)) is False


def test_no_collectibles_is_vacuously_reachable():
    rows = ["11111", "1P0E1", "11111"]
    assert collectibles_reachable(rows, (1, 1)) is True


def test_rows_are_not_modified():
    rows = list(MAZE)
    is_finishable(rows, (1, 1))
    assert rows == MAZE


def test_grid_edges_count_as_walls():
    rows = ["P0", "CE"]
    assert collectibles_reachable(rows, (0, 0)) is True
    assert exit_reachable(rows, (0, 0)) is True


def test_results_do_not_depend_on_start_in_connected_area():
    for start in [(1, 1), (1, 2), (3, 1)]:
        assert is_finishable(MAZE, start) is True
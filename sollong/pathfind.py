"""Reachability checks that decide whether a map can be finished."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

_WALL = "1"
_EXIT = "E"
_COLLECTIBLE = "C"

# Up, right, down, left: the order in which neighbours are tried.
_NEIGHBOURS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def _explore(
    rows: Sequence[str], start: tuple[int, int], blocked: frozenset[str]
) -> Iterator[str]:
    """Walk depth-first from ``start`` and yield the tile of each cell entered.

    Cells outside the grid count as walls; the rows are not modified.
    """
    grid = [list(row) for row in rows]
    stack = [start]
    while stack:
        r, c = stack[-1]
        grid[r][c] = _WALL
        for dr, dc in _NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < len(grid) and 0 <= nc < len(grid[nr])):
                continue
            tile = grid[nr][nc]
            if tile not in blocked:
                stack.append((nr, nc))
                yield tile
                break
        else:
            stack.pop()


def collectibles_reachable(rows: Sequence[str], start: tuple[int, int]) -> bool:
    """Tell whether every collectible can be reached without crossing the exit."""
    total = sum(row.count(_COLLECTIBLE) for row in rows)
    reached = sum(
        1
        for tile in _explore(rows, start, frozenset({_WALL, _EXIT}))
        if tile == _COLLECTIBLE
    )
    return reached >= total


def exit_reachable(rows: Sequence[str], start: tuple[int, int]) -> bool:
    """Tell whether the exit can be reached from ``start``."""
    return any(tile == _EXIT for tile in _explore(rows, start, frozenset({_WALL})))


def is_finishable(rows: Sequence[str], start: tuple[int, int]) -> bool:
    """Tell whether all collectibles and then the exit can be reached."""
    return collectibles_reachable(rows, start) and exit_reachable(rows, start)
"""Game state, player movement and the windowed game loop."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from enum import Enum
from pathlib import Path
from typing import TextIO

from sollong.gamemap import TILE_SIZE, GameMap, MapError, Tile, has_ber_extension, load_map
from sollong.printf import printf
from sollong.xpm import TRANSPARENT, XpmError, XpmImage, load_xpm

WINDOW_TITLE = "so_long"
SPRITE_DIR = Path("xpm")
SPRITE_FILES = {
    "player": "player.xpm",
    "wall": "mur.xpm",
    "background": "fond.xpm",
    "collectible": "mush.xpm",
    "exit": "exit.xpm",
}
_FALLBACK_COLORS = {
    "player": (230, 60, 60),
    "wall": (90, 90, 90),
    "background": (30, 30, 30),
    "collectible": (240, 200, 40),
    "exit": (60, 160, 230),
}

KEY_LEFT = 65361
KEY_UP = 65362
KEY_RIGHT = 65363
KEY_DOWN = 65364
KEY_ESCAPE = 65307

_GG_BANNER = (
    "  ________  ________  ._.\n"
    " /  _____/ /  _____/  | |\n"
    "/   \\  ___/   \\  ___  | |\n"
    "\\    \\_\\  \\    \\_\\  \\  \\|\n"
    " \\______  /\\______  /  __\n"
    "        \\/        \\/   \\/ \n"
)


def gg_banner() -> str:
    """Return the text shown when the game is won."""
    return _GG_BANNER


class Direction(Enum):
    """A step on the grid as ``(row delta, column delta)``."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class MoveResult(Enum):
    """What a move or a key press led to."""

    BLOCKED = "blocked"
    MOVED = "moved"
    COLLECTED = "collected"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


_KEY_DIRECTIONS = {
    ord("a"): Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    ord("d"): Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
    ord("w"): Direction.UP,
    KEY_UP: Direction.UP,
    ord("s"): Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
}


class Game:
    """A running game on a validated map."""

    def __init__(self, game_map: GameMap, stream: TextIO | None = None) -> None:
        self.grid: list[list[str]] = [list(row) for row in game_map.rows]
        self.player = game_map.player_position()
        row, col = self.player
        self.grid[row][col] = Tile.EMPTY.value
        self.collectibles = game_map.count(Tile.COLLECTIBLE)
        self.moves = 0
        self.finished = False
        self.stream = stream

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def _count_move(self) -> None:
        self.moves += 1
        printf("Move n⁰%d\n", self.moves, stream=self.stream)

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one cell in ``direction``."""
        if self.finished:
            raise RuntimeError("the game is over")
        dr, dc = direction.delta
        row, col = self.player[0] + dr, self.player[1] + dc
        target = self.grid[row][col]
        if target == Tile.WALL.value:
            return MoveResult.BLOCKED
        if target == Tile.EXIT.value:
            if self.collectibles:
                return MoveResult.BLOCKED
            self._count_move()
            printf(gg_banner(), stream=self.stream)
            self.finished = True
            return MoveResult.WON
        result = MoveResult.MOVED
        if target == Tile.COLLECTIBLE.value:
            self.grid[row][col] = Tile.EMPTY.value
            self.collectibles -= 1
            result = MoveResult.COLLECTED
        self.player = (row, col)
        self._count_move()
        return result

    def handle_key(self, keycode: int) -> MoveResult:
        """Act on an X11 key symbol: WASD or arrows move, Escape quits."""
        direction = _KEY_DIRECTIONS.get(keycode)
        if direction is not None:
            return self.move(direction)
        if keycode == KEY_ESCAPE:
            self.finished = True
            return MoveResult.QUIT
        return MoveResult.IGNORED

    def tiles(self) -> Iterator[tuple[int, int, str]]:
        """Yield ``(row, column, tile)`` for every cell, the player included."""
        for r, row in enumerate(self.grid):
            for c, char in enumerate(row):
                if (r, c) == self.player:
                    yield r, c, Tile.PLAYER.value
                else:
                    yield r, c, char


def _surface_from_xpm(pygame, image: XpmImage):
    data = bytearray()
    for pixel in image.pixels:
        alpha = 0 if pixel == TRANSPARENT else 255
        data += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF, alpha))
    return pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA").copy()


def _load_sprites(pygame) -> dict:
    sprites = {}
    for name, filename in SPRITE_FILES.items():
        try:
            sprites[name] = _surface_from_xpm(pygame, load_xpm(SPRITE_DIR / filename))
        except XpmError:
            surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
            surface.fill(_FALLBACK_COLORS[name])
            sprites[name] = surface
    return sprites


_TILE_SPRITES = {
    Tile.WALL.value: "wall",
    Tile.PLAYER.value: "player",
    Tile.COLLECTIBLE.value: "collectible",
    Tile.EXIT.value: "exit",
}


def _draw(window, sprites: dict, game: Game) -> None:
    for r, c, tile in game.tiles():
        position = (c * TILE_SIZE, r * TILE_SIZE)
        if tile == Tile.WALL.value:
            window.blit(sprites["wall"], position)
            continue
        window.blit(sprites["background"], position)
        sprite = _TILE_SPRITES.get(tile)
        if sprite is not None:
            window.blit(sprites[sprite], position)


def _run_window(game: Game, game_map: GameMap) -> int:
    import pygame

    key_symbols = {
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
        pygame.K_UP: KEY_UP,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_ESCAPE: KEY_ESCAPE,
    }
    pygame.init()
    try:
        window = pygame.display.set_mode(game_map.pixel_size)
        pygame.display.set_caption(WINDOW_TITLE)
        sprites = _load_sprites(pygame)
        _draw(window, sprites, game)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            result = game.handle_key(key_symbols.get(event.key, event.key))
            if result in (MoveResult.WON, MoveResult.QUIT):
                return 0
            if result in (MoveResult.MOVED, MoveResult.COLLECTED):
                _draw(window, sprites, game)
                pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    path = args[0]
    if not has_ber_extension(path):
        return 1
    try:
        game_map = load_map(path)
    except MapError:
        printf("Error\n")
        return 1
    return _run_window(Game(game_map), game_map)


if __name__ == "__main__":
    sys.exit(main())
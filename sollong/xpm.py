"""Reading XPM pixmaps into 32-bit ARGB pixel arrays."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from sollong.colors import text_to_rgb
from sollong.wordtab import find, find_outside_quotes, split_words

TRANSPARENT = 0xFF000000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap; pixels are 0xAARRGGBB values stored row by row."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    The length of the text is kept, so positions stay valid.
    """
    while (begin := find_outside_quotes(text, "/*", len(text))) != -1:
        body = begin + 2
        end = find(text[body:], "*/", len(text) - body)
        stop = len(text) if end == -1 else body + end + 2
        text = _blank(text, begin, stop)
    while (begin := find_outside_quotes(text, "//", len(text))) != -1:
        body = begin + 2
        end = find(text[body:], "\n", len(text) - body)
        stop = len(text) if end == -1 else body + end + 1
        text = _blank(text, begin, stop)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = find(text[pos:], '"', len(text) - pos)
        if start == -1:
            return
        content = pos + start + 1
        end = find(text[content:], '"', len(text) - content)
        if end == -1:
            return
        yield text[content:content + end]
        pos = content + end + 1


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its sequence of string values."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("invalid XPM header")

    # Small keys keep the last definition, longer keys the first one.
    last_wins = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        words = split_words(line[cpp:])
        try:
            key_index = words.index("c")
        except ValueError:
            raise XpmError(f"colour definition without 'c' key: {line!r}") from None
        if key_index + 1 >= len(words):
            raise XpmError(f"colour definition without a value: {line!r}")
        suffix = words[key_index + 2] if key_index + 2 < len(words) else None
        value = text_to_rgb(words[key_index + 1], suffix)
        key = line[:cpp]
        if last_wins:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    pixels: list[int] = []
    for _ in range(height):
        line = next_line("pixel row")
        for start in range(0, width * cpp, cpp):
            value = palette.get(line[start:start + cpp], 0)
            pixels.append(TRANSPARENT if value == -1 else value & 0xFFFFFFFF)
    return XpmImage(width, height, tuple(pixels))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))
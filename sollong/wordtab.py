"""String searching and word splitting helpers for XPM parsing."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _terminated(text: str) -> str:
    """Return ``text`` up to its first NUL character."""
    end = text.find("\0")
    return text if end == -1 else text[:end]


def find(text: str, needle: str, limit: int) -> int:
    """Return the position of ``needle`` in ``text``, or -1.

    Returns -1 at once when the needle is longer than ``limit``. The search
    stops at the first NUL character of ``text``.
    """
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    return _terminated(text).find(needle)


def find_outside_quotes(text: str, needle: str, limit: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted strings."""
    if not needle:
        raise ValueError("needle must not be empty")
    if len(needle) > limit:
        return -1
    text = _terminated(text)
    quoted = False
    for pos, char in enumerate(text[: len(text) - len(needle) + 1]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(_terminated(text)) if word]
"""Small string helpers shared by the parser and the executor."""

from __future__ import annotations

from itertools import zip_longest


def split_nonempty(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    return [part for part in text.split(sep) if part]


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def prefix_compare(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters of two strings.

    Returns zero when they agree over that span, otherwise the difference
    between the code points of the first pair of characters that differ
    (the end of a string counts as code point zero).
    """
    if limit <= 0:
        return 0
    left = _until_nul(first)[:limit]
    right = _until_nul(second)[:limit]
    for a, b in zip_longest(left, right, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0
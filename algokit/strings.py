"""String algorithms: words, versions, numerals, prefixes and searches."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import groupby, zip_longest

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def reverse_words(s: str) -> str:
    """Words of ``s`` (separated by spaces) in reverse order, joined by single spaces."""
    words = [word for word in s.split(" ") if word]
    return " ".join(reversed(words))


def count_and_say(n: int) -> str:
    """The ``n``-th term of the count-and-say sequence, starting from "1"."""
    if n < 1:
        raise ValueError("n must be at least 1")
    term = "1"
    for _ in range(n - 1):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def compare_version(version1: str, version2: str) -> int:
    """-1, 0 or 1 as ``version1`` is lower than, equal to or higher than ``version2``."""
    parts1 = (int(part) if part else 0 for part in version1.split("."))
    parts2 = (int(part) if part else 0 for part in version2.split("."))
    for a, b in zip_longest(parts1, parts2, fillvalue=0):
        if a < b:
            return -1
        if a > b:
            return 1
    return 0


def int_to_roman(num: int) -> str:
    """Roman numeral for ``num``; empty for values below 1."""
    pieces = []
    for value, symbol in _ROMAN_TABLE:
        repeats, num = divmod(num, value) if num > 0 else (0, num)
        pieces.append(symbol * repeats)
    return "".join(pieces)


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Longest string that starts every item of ``strs``."""
    if not strs:
        raise ValueError("strs must not be empty")
    prefix = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def first_unique_char(s: str) -> int:
    """Index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def frequency_sort(s: str) -> str:
    """Characters of ``s`` ordered by falling frequency, ties by falling character."""
    counts = Counter(s)
    return "".join(sorted(s, key=lambda ch: (-counts[ch], -ord(ch))))


def str_str(haystack: str, needle: str) -> int:
    """Index of the first occurrence of a non-empty ``needle``, or -1."""
    width = len(needle)
    if width == 0:
        return -1
    return next(
        (
            start
            for start in range(len(haystack) - width + 1)
            if haystack[start:start + width] == needle
        ),
        -1,
    )
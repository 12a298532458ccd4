"""Building new strings from existing ones: slicing, joining, trimming, splitting, mapping."""

from __future__ import annotations

from typing import Any, Callable, List, MutableSequence, Optional


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start.

    A start at or past the end of s gives an empty string.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of s1 and s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """s with every leading and trailing character found in charset removed."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> List[str]:
    """The non-empty words of s delimited by the single character sep."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """A new string whose characters are func(index, char) for each char of s."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Optional[Any]]) -> None:
    """Call func(index, item) on every item of buffer, in place.

    When func returns a value other than None it replaces the item.
    """
    for index, item in enumerate(buffer):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement
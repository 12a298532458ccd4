"""String searching, comparison, bounded copying and integer conversion.

Positions are returned as indexes into the string; "not found" is None.
The terminating character of a C string is modelled as the position just
past the end of the text, so searching for "\\0" yields len(s).
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_SPACES = frozenset("\t\n\v\f\r ")


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, len(s) for "\\0", else None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, len(s) for "\\0", else None."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns the difference of the code points at the first position where
    the strings differ (the end of a string counts as code point 0), or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    compared = min(len(s1), len(s2), n)
    if compared == n:
        return 0
    tail1 = ord(s1[compared]) if compared < len(s1) else 0
    tail2 = ord(s2[compared]) if compared < len(s2) else 0
    return tail1 - tail2


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first occurrence of little lying wholly inside big[:length].

    An empty needle is found at index 0; otherwise None when absent.
    """
    if not little:
        return 0
    if length <= 0:
        return None
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a destination of size slots, one kept for the terminator.

    Returns the text the destination holds afterwards and len(src), the
    length that a large enough destination would have needed. With size 0
    nothing is copied.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a destination of size slots.

    Returns the resulting text and the length the full concatenation would
    have. When size does not exceed len(dst), dst is left untouched and the
    length reported is size + len(src).
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one optional sign.

    Parsing stops at the first non-digit; text with no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Decimal representation of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)
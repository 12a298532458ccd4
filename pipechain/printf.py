"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions.

Integer arguments are reduced to the width the conversion works with:
d and i to a signed 32-bit value, u, x and X to an unsigned 32-bit value,
p to an unsigned 64-bit address. An unknown conversion character prints
nothing and consumes no argument; a lone "%" at the end prints nothing.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Iterator

from pipechain.output import put_str

_U32 = 2**32
_U64 = 2**64
_S32_OFFSET = 2**31


def _integer(value: Any, spec: str) -> int:
    if isinstance(value, bool):
        return int(value)
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"%{spec} expects an integer, got {type(value).__name__}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_integer(value, "c") & 0xFF)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _signed(value: Any) -> str:
    n = (_integer(value, "d") + _S32_OFFSET) % _U32 - _S32_OFFSET
    return str(n)


def _unsigned(value: Any) -> str:
    return str(_integer(value, "u") % _U32)


def _hex_lower(value: Any) -> str:
    return format(_integer(value, "x") % _U32, "x")


def _hex_upper(value: Any) -> str:
    return format(_integer(value, "X") % _U32, "X")


def _pointer(value: Any) -> str:
    address = 0 if value is None else _integer(value, "p") % _U64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _signed,
    "i": _signed,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _take(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def sformat(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_take(remaining, spec)))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sformat(fmt, *args)
    put_str(text, 1)
    return len(text)
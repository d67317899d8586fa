"""A small printf supporting the c, s, d, i, u, x, X and p conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator

DECIMAL_DIGITS = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_INT_BITS = 32


def format_base(number: int, digits: str) -> str:
    """Write a non-negative ``number`` using ``digits`` as the digit set."""
    base = len(digits)
    if base < 2:
        raise ValueError("a digit set needs at least two symbols")
    if number < 0:
        raise ValueError("number must not be negative")
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _to_int32(value: int) -> int:
    span = 1 << _INT_BITS
    half = 1 << (_INT_BITS - 1)
    return (value + half) % span - half


def _to_uint32(value: int) -> int:
    return value % (1 << _INT_BITS)


def _take(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _convert_char(value: Any) -> str:
    if isinstance(value, (str, bytes)):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value if isinstance(value, str) else value.decode("latin-1")
    return chr(int(value) & 0xFF)


def _convert_pointer(value: Any) -> str:
    if value is None or value == 0 and isinstance(value, int):
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format_base(address, HEX_LOWER)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "c":
        return _convert_char(_take(values, spec))
    if spec == "s":
        value = _take(values, spec)
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_to_int32(int(_take(values, spec))))
    if spec == "u":
        return format_base(_to_uint32(int(_take(values, spec))), DECIMAL_DIGITS)
    if spec == "x":
        return format_base(_to_uint32(int(_take(values, spec))), HEX_LOWER)
    if spec == "X":
        return format_base(_to_uint32(int(_take(values, spec))), HEX_UPPER)
    if spec == "p":
        return _convert_pointer(_take(values, spec))
    return spec


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    An unknown conversion character is written as is; a lone ``%`` at the
    very end of ``fmt`` is dropped.
    """
    values = iter(args)
    out = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append("%" if spec == "%" else _convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
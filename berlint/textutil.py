"""Small string helpers: number parsing, scanning, splitting and trimming."""

from __future__ import annotations

from typing import List, Optional

_ATOI_SPACES = frozenset(" \t\n\v\f\r")
_SKIPPED_SPACES = frozenset([chr(code) for code in range(14)] + [" "])
_DIGITS = frozenset("0123456789")


def _parse_signed(text: str, pos: int) -> tuple[int, int]:
    """Read an optional sign at ``pos``; return the sign and the new position."""
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _parse_digits(text: str, pos: int) -> int:
    value = 0
    while pos < len(text) and text[pos] in _DIGITS:
        value = value * 10 + int(text[pos])
        pos += 1
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way ``atoi`` does.

    Leading blanks are skipped, one optional sign is accepted, and parsing
    stops at the first non-digit. A string with no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _ATOI_SPACES:
        pos += 1
    sign, pos = _parse_signed(text, pos)
    return sign * _parse_digits(text, pos)


def atol(text: str) -> int:
    """Parse a leading decimal integer, also allowing blanks after the sign.

    Blanks here are any control character up to carriage return, and space.
    """
    pos = skip_spaces(text)
    sign, pos = _parse_signed(text, pos)
    pos += skip_spaces(text[pos:])
    return sign * _parse_digits(text, pos)


def count_digits(n: int) -> int:
    """Return how many characters ``n`` takes in decimal, minus sign included."""
    if n == 0:
        return 1
    count = 1 if n < 0 else 0
    n = abs(n)
    while n > 9:
        n //= 10
        count += 1
    return count + 1


def has_digits(text: Optional[str]) -> bool:
    """Return True if ``text`` holds at least one decimal digit."""
    if not text:
        return False
    return any(char in _DIGITS for char in text)


def only_chars_from(text: Optional[str], allowed: str) -> bool:
    """Return True if every character of ``text`` appears in ``allowed``.

    An empty or missing ``text`` counts as made only of allowed characters.
    """
    if not text:
        return True
    return all(char in allowed for char in text)


def skip_digits(text: Optional[str]) -> int:
    """Return the length of an optional sign followed by digits at the start."""
    if not text:
        return 0
    pos = 1 if text[0] in "+-" else 0
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    return pos


def skip_spaces(text: Optional[str]) -> int:
    """Return the number of leading blanks (control characters up to CR, space)."""
    if not text:
        return 0
    return len(text) - len(text.lstrip("".join(_SKIPPED_SPACES)))


def skip_pattern(text: str, pattern: str) -> int:
    """Return the number of leading characters of ``text`` found in ``pattern``."""
    count = 0
    for char in text:
        if char not in pattern:
            break
        count += 1
    return count


def split(text: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``text`` on ``sep``, dropping empty fields.

    Returns None when ``text`` is None.
    """
    if text is None:
        return None
    return [word for word in text.split(sep) if word]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters in ``charset`` from both ends of ``text``.

    Returns None when either argument is None.
    """
    if text is None or charset is None:
        return None
    return text.strip(charset)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    digits = []
    value = abs(n)
    while True:
        digits.append(chr(ord("0") + value % 10))
        value //= 10
        if value == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    Returns the index of the first match, 0 for an empty ``little``, or None.
    """
    if not little:
        return 0
    index = big.find(little, 0, max(length, 0))
    return None if index == -1 else index


def count_leading(text: str, char: str) -> int:
    """Return how many times ``char`` repeats at the start of ``text``."""
    count = 0
    for current in text:
        if current != char:
            break
        count += 1
    return count
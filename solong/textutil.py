"""String helpers: integer parsing and formatting, splitting, trimming, slicing."""

from __future__ import annotations

from typing import Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as a 32-bit signed value.

    Leading whitespace is skipped and one optional sign is accepted; parsing
    stops at the first non-digit. Text with no digits yields 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    negative = False
    if stripped[:1] in ("-", "+"):
        negative = stripped[0] == "-"
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    number = int("".join(digits)) if digits else 0
    return _wrap_int32(-number if negative else number)


def itoa(n: int) -> str:
    """Format a 32-bit signed integer in decimal."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def split(text: Optional[str], sep: str) -> Optional[list[str]]:
    """Split on a single separator character, dropping empty pieces."""
    if text is None:
        return None
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strtrim(text: Optional[str], charset: Optional[str]) -> str:
    """Remove characters in charset from both ends of text.

    A missing text or charset yields an empty string.
    """
    if text is None or charset is None:
        return ""
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most length characters of text beginning at start."""
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text) or length == 0:
        return ""
    return text[start:start + length]
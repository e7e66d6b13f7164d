"""Searching, comparing and mapping over strings and byte buffers."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[str, int]


def _cstr(text: str) -> str:
    """Return text up to, not including, its first NUL character."""
    return text.split("\0", 1)[0]


def _target(c: CharLike) -> str:
    """Turn a character argument into a one-character string.

    An int is reduced to its low byte, as a char conversion would.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c & 0xFF)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in text, or None.

    Searching for NUL finds the end of the string.
    """
    text = _cstr(text)
    target = _target(c)
    if target == "\0":
        return len(text)
    index = text.find(target)
    return index if index >= 0 else None


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in text, or None.

    Searching for NUL finds the end of the string.
    """
    text = _cstr(text)
    target = _target(c)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return index if index >= 0 else None


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters of a and b.

    Returns the difference of the first pair of characters that differ,
    with the end of a string counting as code 0, or 0 when they agree.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = _cstr(a), _cstr(b)
    for i in range(n):
        left = ord(a[i]) if i < len(a) else 0
        right = ord(b[i]) if i < len(b) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    needle = _cstr(needle)
    if not needle:
        return 0
    index = _cstr(haystack)[:length].find(needle)
    return index if index >= 0 else None


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first n bytes of two buffers.

    Returns the difference of the first differing bytes, or 0.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    left, right = memoryview(a).cast("B"), memoryview(b).cast("B")
    if n > len(left) or n > len(right):
        raise ValueError(f"cannot compare {n} bytes of shorter buffers")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


def strmapi(text: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from func(index, char) for every character of text."""
    if text is None or func is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(_cstr(text)))


def striteri(
    text: Optional[MutableSequence],
    func: Optional[Callable[[int, object], object]],
) -> None:
    """Call func(index, item) for each item, storing back any value it returns.

    The sequence is changed in place; a missing sequence or function does nothing.
    """
    if text is None or func is None:
        return
    for i, item in enumerate(text):
        result = func(i, item)
        if result is not None:
            text[i] = result
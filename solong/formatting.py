"""printf-style formatting for the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from solong.chars import is_digit
from solong.textutil import atoi

CONVERSIONS = "cspdiuxX%"
FLAGS = "-0# +"

_INT_MIN = -(2**31)
_UINT32_MASK = 0xFFFFFFFF
_UINTPTR_MASK = 0xFFFFFFFFFFFFFFFF


@dataclass
class FormatSpec:
    """One parsed conversion: flags, field width, precision and conversion letter."""

    conversion: Optional[str] = None
    width: int = 0
    precision: Optional[int] = None
    minus: bool = False
    zero: bool = False
    alternate: bool = False
    space: bool = False
    plus: bool = False

    def set_flag(self, flag: str) -> None:
        """Turn on the flag named by one of the characters '-', '0', '#', ' ', '+'."""
        if flag == "-":
            self.minus = True
        elif flag == "0":
            self.zero = True
        elif flag == "#":
            self.alternate = True
        elif flag == " ":
            self.space = True
        elif flag == "+":
            self.plus = True
        else:
            raise ValueError(f"unknown flag {flag!r}")

    @property
    def prec(self) -> int:
        """Precision with -1 standing for 'not given'."""
        return -1 if self.precision is None else self.precision


def _skip_digits(fmt: str, pos: int, end: int) -> int:
    while pos < end and is_digit(fmt[pos]):
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse the conversion that starts at pos, just after a '%'.

    Characters that are neither flags, digits, '.' nor a conversion letter
    are skipped. Returns the spec and the position after the conversion
    letter; if the text ends first, the spec has no conversion.
    """
    spec = FormatSpec()
    end = fmt.find("\0", pos)
    if end < 0:
        end = len(fmt)
    while pos < end and fmt[pos] not in CONVERSIONS:
        ch = fmt[pos]
        if ch in FLAGS:
            spec.set_flag(ch)
            pos += 1
        elif is_digit(ch):
            spec.width = atoi(fmt[pos:end])
            pos = _skip_digits(fmt, pos, end)
        elif ch == ".":
            pos += 1
            if pos < end and is_digit(fmt[pos]):
                spec.precision = atoi(fmt[pos:end])
                pos = _skip_digits(fmt, pos, end)
            else:
                spec.precision = 0
            spec.zero = False
        else:
            pos += 1
    if pos < end:
        spec.conversion = fmt[pos]
        pos += 1
    return spec, pos


def _pad(count: int, fill: str) -> str:
    return fill * count if count > 0 else ""


def _require_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an integer, got {type(value).__name__}")
    return value


def _render_char(spec: FormatSpec, value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c needs a single character, got {value!r}")
        ch = value
    else:
        ch = chr(_require_int(value, "c") & 0xFF)
    if spec.width > 1:
        padding = _pad(spec.width - 1, " ")
        return ch + padding if spec.minus else padding + ch
    return ch


def _render_str(spec: FormatSpec, value: Any) -> str:
    prec = spec.prec
    if value is None:
        text = "(null)" if prec > 5 or prec < 0 else ""
    elif isinstance(value, str):
        text = value.split("\0", 1)[0]
    else:
        raise TypeError(f"%s needs a string or None, got {type(value).__name__}")
    if 0 <= prec < len(text):
        text = text[:prec]
    padding = _pad(spec.width - len(text), " ")
    return text + padding if spec.minus else padding + text


def _render_ptr(spec: FormatSpec, value: Any) -> str:
    address = 0 if value is None else _require_int(value, "p") & _UINTPTR_MASK
    text = "(nil)" if address == 0 else "0x" + format(address, "x")
    padding = _pad(spec.width - len(text), " ")
    return text + padding if spec.minus else padding + text


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - 2**32 if value >= 2**31 else value


def _render_int(spec: FormatSpec, value: Any) -> str:
    number = _int32(_require_int(value, "d"))
    prec = spec.prec
    digits = "2147483648" if number == _INT_MIN else str(abs(number))
    suppressed = number == 0 and prec == 0

    if suppressed:
        pad_len = 0
    else:
        pad_len = max(len(digits), prec)
        if number < 0 or spec.plus or spec.space:
            pad_len += 1

    if number < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""

    fill = spec.width - pad_len
    out = []
    if not spec.minus and not spec.zero:
        out.append(_pad(fill, " "))
    out.append(sign)
    if not spec.minus and spec.zero:
        out.append(_pad(fill, "0"))
    out.append(_pad(prec - len(digits), "0"))
    if not suppressed:
        out.append(digits)
    if spec.minus:
        out.append(_pad(fill, " "))
    return "".join(out)


def _render_uint(spec: FormatSpec, value: Any) -> str:
    number = _require_int(value, "u") & _UINT32_MASK
    prec = spec.prec
    digits = str(number)
    suppressed = number == 0 and prec == 0

    pad_len = 0 if suppressed else len(digits)
    if prec > 0 and prec > pad_len:
        pad_len = prec

    fill = spec.width - pad_len
    out = []
    if not spec.minus:
        out.append(_pad(fill, "0" if spec.zero and prec == -1 else " "))
    if prec > 0:
        out.append(_pad(prec - len(digits), "0"))
    if not suppressed:
        out.append(digits)
    if spec.minus:
        out.append(_pad(fill, " "))
    return "".join(out)


def _render_hex(spec: FormatSpec, value: Any, upper: bool) -> str:
    number = _require_int(value, "X" if upper else "x") & _UINT32_MASK
    prec = spec.prec
    digits = format(number, "X" if upper else "x")
    suppressed = number == 0 and prec == 0
    prefix = ("0X" if upper else "0x") if spec.alternate and number else ""

    if suppressed:
        pad_len = 0
    else:
        pad_len = len(digits)
        if prec > 0 and prec > pad_len:
            pad_len = prec
        pad_len += len(prefix)

    fill = spec.width - pad_len
    out = []
    if not spec.minus and not spec.zero:
        out.append(_pad(fill, " "))
    out.append(prefix)
    if not spec.minus and spec.zero:
        out.append(_pad(fill, "0"))
    if prec > 0:
        out.append(_pad(prec - len(digits), "0"))
    if not suppressed:
        out.append(digits)
    if spec.minus:
        out.append(_pad(fill, " "))
    return "".join(out)


_RENDERERS: dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": _render_char,
    "s": _render_str,
    "p": _render_ptr,
    "d": _render_int,
    "i": _render_int,
    "u": _render_uint,
    "x": lambda spec, value: _render_hex(spec, value, upper=False),
    "X": lambda spec, value: _render_hex(spec, value, upper=True),
}


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def sprintf(fmt: Optional[str], *args: Any) -> str:
    """Format args according to fmt and return the text.

    Extra arguments are ignored; too few raise TypeError. A missing format
    yields an empty string.
    """
    if fmt is None:
        return ""
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    pieces: list[str] = []
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent + 1)
        if spec.conversion == "%":
            pieces.append("%")
        elif spec.conversion is not None:
            value = _next_arg(remaining, spec.conversion)
            pieces.append(_RENDERERS[spec.conversion](spec, value))
    return "".join(pieces)


def printf(fmt: Optional[str], *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    if fmt is None:
        return 0
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
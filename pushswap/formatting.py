"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions.

Integer arguments are reduced to the width of the conversion: 32 bits for
%d, %i, %u, %x and %X, and 64 bits for %p.
"""

import sys
from typing import Callable, Dict, Iterator, Optional, Union

_HEX_DIGITS = {"x": "0123456789abcdef", "X": "0123456789ABCDEF"}


def _to_int32(n: int) -> int:
    n &= 0xFFFFFFFF
    return n - (1 << 32) if n >> 31 else n


def format_decimal(n: int) -> str:
    """Format ``n`` as a signed 32-bit decimal number."""
    return str(_to_int32(n))


def format_unsigned(n: int) -> str:
    """Format ``n`` as an unsigned 32-bit decimal number."""
    return str(n & 0xFFFFFFFF)


def _hex(n: int, digits: str) -> str:
    out = []
    while True:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
        if not n:
            break
    return "".join(reversed(out))


def format_hex(n: int, spec: str) -> str:
    """Format ``n`` as an unsigned 32-bit hexadecimal number.

    ``spec`` is ``"x"`` for lower-case digits or ``"X"`` for upper case.
    """
    try:
        digits = _HEX_DIGITS[spec]
    except KeyError:
        raise ValueError(f"hex conversion must be 'x' or 'X', got {spec!r}") from None
    return _hex(n & 0xFFFFFFFF, digits)


def format_pointer(n: int) -> str:
    """Format ``n`` as an address: ``0x`` and lower-case hex, or ``(nil)`` for 0."""
    n &= 0xFFFFFFFFFFFFFFFF
    if n == 0:
        return "(nil)"
    return "0x" + _hex(n, _HEX_DIGITS["x"])


def format_string(s: Optional[str]) -> str:
    """Return ``s``, or ``(null)`` when it is missing."""
    return "(null)" if s is None else s


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c needs a character or an integer, got {type(value).__name__}")


_CONVERSIONS: Dict[str, Callable] = {
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": lambda v: format_hex(v, "x"),
    "X": lambda v: format_hex(v, "X"),
}


def sprintf(fmt: str, *args) -> str:
    """Render ``fmt`` with ``args`` and return the text.

    Unknown conversions produce nothing and consume no argument; a lone
    ``%`` at the end of the format is dropped.
    """
    if fmt is None:
        raise TypeError("a format string is required")
    values: Iterator = iter(args)
    chars = iter(fmt)
    parts = []
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            parts.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            parts.append(_CONVERSIONS[spec](value))
    return "".join(parts)


def printf(fmt: str, *args) -> int:
    """Render ``fmt`` with ``args`` to standard output; return the length written."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)
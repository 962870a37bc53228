"""Conversions between decimal text and fixed-width integers."""

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a two's-complement integer of the given width."""
    mask = (1 << bits) - 1
    value &= mask
    return value - (1 << bits) if value >> (bits - 1) else value


def _scan(text: str) -> tuple[int, int]:
    """Parse leading whitespace, an optional sign and digits.

    Returns the signed value and the position just past the last digit.
    """
    pos = len(text) - len(text.lstrip(_WHITESPACE))
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return (sign * int(digits) if digits else 0), pos


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text`` as a 32-bit int.

    Trailing characters are ignored; values outside the 32-bit range wrap.
    """
    value, _ = _scan(text)
    return _wrap(value, 32)


def atol(text: str) -> int:
    """Read a decimal integer from ``text`` as a 64-bit long.

    The number must be followed by the end of the text or a space;
    anything else yields 0. Values outside the 64-bit range wrap.
    """
    value, pos = _scan(text)
    if pos < len(text) and text[pos] != " ":
        return 0
    return _wrap(value, 64)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)
"""ASCII character classification and case conversion on code points."""

_DIGITS = range(ord("0"), ord("9") + 1)
_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def isalpha(c: int) -> bool:
    """Return True if ``c`` is an ASCII letter."""
    return c in _UPPER or c in _LOWER


def isdigit(c: int) -> bool:
    """Return True if ``c`` is an ASCII decimal digit."""
    return c in _DIGITS


def isalnum(c: int) -> bool:
    """Return True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int) -> bool:
    """Return True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= c <= 127


def isprint(c: int) -> bool:
    """Return True if ``c`` is a printable ASCII character, space included."""
    return 32 <= c <= 126


def tolower(c: int) -> int:
    """Map an ASCII upper-case letter to lower case; other values pass through."""
    return c + _CASE_OFFSET if c in _UPPER else c


def toupper(c: int) -> int:
    """Map an ASCII lower-case letter to upper case; other values pass through."""
    return c - _CASE_OFFSET if c in _LOWER else c
"""String helpers: searching, copying, joining, trimming and splitting.

Positions are returned as indices into the string, or ``None`` when there
is no match. The end of a string compares as a NUL character, so searching
for ``"\\0"`` finds the position just past the last character.
"""

from itertools import islice, zip_longest
from typing import Callable, List, Optional, Tuple

_NUL = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative: {value}")


def strlen(s: Optional[str]) -> int:
    """Return the length of ``s``; a missing string has length 0."""
    return len(s) if s is not None else 0


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL yields ``len(s)``. Returns None if ``c`` is absent.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    pos = s.find(c)
    return None if pos < 0 else pos


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL yields ``len(s)``. Returns None if ``c`` is absent.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    pos = s.rfind(c)
    return None if pos < 0 else pos


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end gives an empty string; a missing string gives None.
    """
    if s is None:
        return None
    _check_non_negative(start=start, length=length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as absent.

    Returns None only when both are missing.
    """
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return strdup(s2)
    if s2 is None:
        return strdup(s1)
    return s1 + s2


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the text that fits and the full length of ``src``; the caller
    can detect truncation when that length is ``size`` or more.
    """
    _check_non_negative(size=size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting buffer text and the length the result would have
    had without truncation. If ``dst`` already fills the buffer it is left
    unchanged and the returned length is ``size + len(src)``.
    """
    _check_non_negative(size=size)
    dlen = min(len(dst), size)
    if dlen == size:
        return dst, dlen + len(src)
    room = size - dlen - 1
    return dst[:dlen] + src[:room], dlen + len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first differing character codes, where
    the end of a string counts as 0, or 0 when they match.
    """
    _check_non_negative(n=n)
    pairs = zip_longest(map(ord, s1), map(ord, s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
        if a == 0:
            return 0
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` matches at 0. Returns None if there is no match.
    """
    _check_non_negative(length=length)
    if not little:
        return 0
    if len(little) > length:
        return None
    pos = big.find(little, 0, length)
    return None if pos < 0 else pos


def strtrim(s1: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s1``."""
    if s1 is None or charset is None:
        return None
    return s1.strip(charset)


def split(s: Optional[str], c: str) -> Optional[List[str]]:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces."""
    if s is None:
        return None
    _check_char(c)
    return [word for word in s.split(c) if word]


def strmapi(s: Optional[str], f: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string from ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        return None
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: Optional[List[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each character of the list ``chars``.

    When ``f`` returns a character it replaces the one at that index,
    so the list is edited in place.
    """
    if chars is None or f is None:
        return
    for i, ch in enumerate(chars):
        replacement = f(i, ch)
        if replacement is not None:
            chars[i] = replacement
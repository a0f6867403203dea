"""String helpers: number conversion, splitting, searching and bounded copies.

Searches return indexes into the string, or None when nothing is found.
The bounded copy helpers return the resulting string together with the
length they would have needed.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple

_WHITESPACE = " \t\n\v\f\r"
_SIGNS = "+-"


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are skipped. Parsing stops at
    the first non-digit; a string without leading digits yields 0.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in _SIGNS and stripped[:1]:
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal text of n, with a leading '-' when negative."""
    return str(int(n))


def split(text: str, sep: str) -> list[str]:
    """Split text on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def strjoin(s1: str, s2: str) -> str:
    """Return s1 followed by s2."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """Return at most length characters of s starting at start.

    A start at or past the end of s gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in charset from both ends of s."""
    return s.strip(charset)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of s1 and s2.

    The end of a string compares as code 0. Returns the difference of the
    first differing character codes, or 0 when the compared parts match.
    """
    if n < 0:
        raise ValueError("count must not be negative")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Find little in big, looking only at the first length characters.

    An empty little is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def strchr(s: str, c: str) -> Optional[int]:
    """Index of the first c in s; searching for '\\0' finds the end of s."""
    _check_char(c)
    index = s.find(c)
    if index < 0:
        return len(s) if c == "\0" else None
    return index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last c in s; searching for '\\0' finds the end of s."""
    _check_char(c)
    if c == "\0" and "\0" not in s:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters) and len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create, that is
    min(len(dst), size) + len(src).
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = min(len(dst), size)
    if used >= size:
        return dst, used + len(src)
    room = size - used - 1
    return dst + src[:room], used + len(src)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from f(index, character) for each character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, MutableSequence], None]) -> None:
    """Call f(index, s) for every position of the mutable sequence s.

    f may change s[index] in place.
    """
    for index in range(len(s)):
        f(index, s)
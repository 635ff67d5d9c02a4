"""C-style string inspection helpers: length, search, compare, bounded copy
and concatenation, and integer conversion.

Strings are treated the way a C string would be: the text stops at the first
NUL character, if there is one. Positions are returned as indices into the
given string, and a search that finds nothing returns None.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]

__all__ = [
    "strlen",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "atoi",
    "itoa",
]

_INT_BITS = 32
_INT_MIN = -(1 << (_INT_BITS - 1))
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_ATOI_SPACES = frozenset(" \t\n\v\f\r")


def _c_string(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.partition("\0")[0]


def _char_code(c: CharLike) -> int:
    """Code of the character to look for, reduced to one byte."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c) & 0xFF
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value &= (1 << _INT_BITS) - 1
    return value - (1 << _INT_BITS) if value > _INT_MAX else value


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL (or the whole string)."""
    return len(_c_string(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _c_string(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    return next((i for i, ch in enumerate(text) if ord(ch) == code), None)


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _c_string(s)
    code = _char_code(c)
    if code == 0:
        return len(text)
    return next(
        (i for i in reversed(range(len(text))) if ord(text[i]) == code), None
    )


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first pair of differing character codes,
    the end of a string counting as code 0, or 0 if they agree.
    """
    a = _c_string(first)
    b = _c_string(second)
    for i in range(min(n, max(len(a), len(b)) + 1)):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within the first ``length``
    characters of ``haystack``; an empty needle is found at index 0."""
    wanted = _c_string(needle)
    if not wanted:
        return 0
    window = _c_string(haystack)[: max(length, 0)]
    index = window.find(wanted)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the text that fits (at most ``size - 1`` characters, room being
    kept for the terminator) and the full length of ``src``, so truncation
    happened when that length is ``size`` or more.
    """
    text = _c_string(src)
    if size <= 0:
        return "", len(text)
    return text[: size - 1], len(text)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When
    ``dest`` already fills the buffer it is returned unchanged and the
    length reported is ``size + strlen(src)``.
    """
    if size < 0:
        raise ValueError("strlcat: size must not be negative")
    existing = _c_string(dest)
    text = _c_string(src)
    dest_len = min(len(existing), size)
    if dest_len >= size:
        return existing, size + len(text)
    room = size - 1 - dest_len
    return existing + text[:room], dest_len + len(text)


def atoi(text: str) -> int:
    """Parse a decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is taken, and digits are
    read until the first non-digit. Text with no digits gives 0. The result
    wraps around as a signed 32-bit integer.
    """
    s = _c_string(text)
    pos = 0
    while pos < len(s) and s[pos] in _ATOI_SPACES:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in s[pos:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(sign * value)


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)
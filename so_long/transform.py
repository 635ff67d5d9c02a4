"""String builders: duplicate, slice, join, trim, split and map.

Input strings are read the way a C string would be: the text stops at the
first NUL character, if there is one. Every function returns a new string
or list, except ``striteri``, which rewrites a list of characters in place.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[str, int]

__all__ = ["strdup", "substr", "strjoin", "strtrim", "split", "strmapi", "striteri"]


def _c_string(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    return s.partition("\0")[0]


def _single_char(c: CharLike) -> str:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, got bool")
    if isinstance(c, int):
        return chr(c & 0xFF)
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def strdup(s: str) -> str:
    """Return a copy of the string up to its terminator."""
    return _c_string(s)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string; no string gives None.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("substr: start and length must not be negative")
    text = _c_string(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; if either is missing, return None."""
    if first is None or second is None:
        return None
    return _c_string(first) + _c_string(second)


def strtrim(s: Optional[str], charset: Optional[str]) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``.

    Without a string the result is empty; without a set it is a copy of ``s``.
    """
    if s is None:
        return ""
    text = _c_string(s)
    if charset is None:
        return text
    chars = _c_string(charset)
    if not chars:
        return text
    return text.strip(chars)


def split(s: Optional[str], sep: CharLike) -> Optional[List[str]]:
    """Split ``s`` on the character ``sep``, dropping empty pieces.

    Returns None when there is no string to split.
    """
    if s is None:
        return None
    text = _c_string(s)
    separator = _single_char(sep)
    if separator == "\0":
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` applied to each character.

    Returns None when the string or the function is missing.
    """
    if s is None or func is None:
        return None
    return "".join(func(i, ch) for i, ch in enumerate(_c_string(s)))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], str]],
) -> None:
    """Replace each character of ``chars`` in place with ``func(index, char)``.

    Processing stops at the first NUL entry. With no sequence or no function
    nothing happens.
    """
    if chars is None or func is None:
        return
    for i, ch in enumerate(chars):
        if ch == "\0":
            break
        chars[i] = func(i, ch)
"""Small string helpers: number parsing, splitting, trimming and ASCII tests."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, Optional, Tuple, Union

Char = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(char: Char) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    if isinstance(char, bool) or not isinstance(char, int):
        raise TypeError(f"expected a character or an int, got {type(char).__name__}")
    return char


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; a string without digits gives 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in text.split(sep) if word]


def trim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the text gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    _check_non_negative("limit", limit)
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the code-point difference at the first mismatch (a missing
    character counts as 0), or 0 when the compared parts are equal.
    """
    _check_non_negative("count", count)
    for a, b in zip_longest(first[:count], second[:count], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative("size", size)
    return src[:max(size - 1, 0)], len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have
    needed; when ``size`` does not exceed ``len(dst)`` nothing is appended
    and the length reported is ``len(src) + size``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def is_alpha(char: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(char)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(char: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(char) <= ord("9")


def is_alnum(char: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(char) or is_digit(char)


def is_ascii(char: Char) -> bool:
    """True for a code in the range 0..127."""
    return 0 <= _code(char) <= 127


def is_printable(char: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(char) < 127


def _shift_case(char: Char, low: str, high: str, delta: int) -> Char:
    code = _code(char)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(char, str) else code


def to_upper(char: Char) -> Char:
    """Upper-case an ASCII letter; anything else comes back unchanged."""
    return _shift_case(char, "a", "z", -32)


def to_lower(char: Char) -> Char:
    """Lower-case an ASCII letter; anything else comes back unchanged."""
    return _shift_case(char, "A", "Z", 32)
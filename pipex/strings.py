"""String searching, slicing, joining and bounded copying helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _char(c: int | str) -> str:
    """Normalise ``c`` to a one-character string; integers are taken as bytes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def strchr(s: str, c: int | str) -> str | None:
    """Return the tail of ``s`` from the first ``c``, or ``None`` if absent.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return s[index:]
    return "" if ch == _NUL else None


def strrchr(s: str, c: int | str) -> str | None:
    """Return the tail of ``s`` from the last ``c``, or ``None`` if absent."""
    ch = _char(c)
    index = s.rfind(ch)
    if index >= 0:
        return s[index:]
    return "" if ch == _NUL else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns zero when they match, otherwise the difference of the code
    points at the first mismatch (a shorter string compares as NUL).
    """
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> str | None:
    """Find ``little`` wholly inside the first ``length`` characters of ``big``.

    Returns the tail of ``big`` starting at the match, ``big`` itself when
    ``little`` is empty, or ``None`` when there is no match.
    """
    if not little:
        return big
    index = big.find(little, 0, max(length, 0))
    return big[index:] if index >= 0 else None


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return up to ``length`` characters of ``s`` starting at ``start``.

    A start beyond the end gives an empty string; ``None`` gives ``None``.
    """
    if s is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing side is treated as absent."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strtrim(s: str | None, charset: str) -> str | None:
    """Strip every character in ``charset`` from both ends of ``s``."""
    if s is None:
        return None
    return s.strip(charset) if charset else s


def split(s: str | None, sep: int | str) -> list[str] | None:
    """Split ``s`` on ``sep``, dropping the empty pieces between separators."""
    if s is None:
        return None
    return [piece for piece in s.split(_char(sep)) if piece]


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``f(index, char)`` for every character."""
    if s is None or f is None:
        return None
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str] | None,
    f: Callable[[int, str], str | None] | None,
) -> None:
    """Apply ``f(index, char)`` to each element of ``s`` in place.

    When ``f`` returns a value it replaces the element; ``None`` leaves it.
    """
    if s is None or f is None:
        return
    for index, ch in enumerate(list(s)):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the copied text and the length of ``src``; a result length less
    than the returned total means the copy was truncated.
    """
    if size <= 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create.  When
    ``dst`` already fills the buffer it is returned unchanged with
    ``size + len(src)``.
    """
    if len(dst) >= size:
        return dst, size + len(src)
    copied, src_len = strlcpy(src, size - len(dst))
    return dst + copied, len(dst) + src_len
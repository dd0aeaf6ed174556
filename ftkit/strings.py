"""String searching, comparison, slicing and transformation helpers.

Text functions work on ``str``. The bounded copy functions, ``strlcpy`` and
``strlcat``, write NUL-terminated bytes into a ``bytearray`` whose capacity
is the ``size`` argument. Searches return indexes, or ``None`` when nothing
is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _terminated(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    return s.split("\0", 1)[0]


def _cstr(data: bytes) -> bytes:
    """The bytes of ``data`` before its first NUL byte."""
    return bytes(data).split(b"\0", 1)[0]


def _check_size(dest: bytearray, size: int) -> None:
    if size < 0:
        raise ValueError("size must not be negative")
    if size > len(dest):
        raise ValueError(f"size {size} exceeds the destination length {len(dest)}")


def _copy_into(dest: bytearray, offset: int, text: bytes, room: int) -> None:
    """Copy as much of ``text`` as fits in ``room`` bytes, NUL included."""
    if room == 0:
        return
    count = min(len(text), room - 1)
    dest[offset:offset + count] = text[:count]
    dest[offset + count] = 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code-point difference of the first unequal pair, treating
    the end of a string as a NUL, or 0 when the compared parts are equal.
    """
    if n < 0:
        raise ValueError("count must not be negative")
    left, right = _terminated(s1)[:n], _terminated(s2)[:n]
    for a, b in zip_longest(left, right, fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or ``None``.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``n`` characters
    of ``haystack``, or ``None``. An empty needle is found at 0."""
    if n < 0:
        raise ValueError("count must not be negative")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strlcpy(dest: bytearray, src: bytes, size: int) -> int:
    """Copy ``src`` into ``dest``, writing at most ``size`` bytes including
    the terminating NUL. Returns the length of ``src``."""
    _check_size(dest, size)
    text = _cstr(src)
    _copy_into(dest, 0, text, size)
    return len(text)


def strlcat(dest: bytearray, src: bytes, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest`` so that the
    result, NUL included, takes at most ``size`` bytes.

    Returns the length of the string it tried to build; when ``dest``
    already fills ``size``, that is ``size + len(src)``.
    """
    _check_size(dest, size)
    text = _cstr(src)
    len_dest = len(_cstr(dest))
    if len_dest + 1 > size:
        return size + len(text)
    _copy_into(dest, len_dest, text, size - len_dest)
    return len_dest + len(text)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty when
    ``start`` lies past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """The concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """``s`` without the leading and trailing characters found in ``charset``."""
    return s.strip(_terminated(charset))


def split(s: str, sep: CharLike) -> List[str]:
    """The non-empty pieces of ``s`` between occurrences of ``sep``."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each element of ``chars``.

    When ``f`` returns a value other than ``None``, it replaces the element
    in place.
    """
    for index, ch in enumerate(chars):
        result = f(index, ch)
        if result is not None:
            chars[index] = result
"""A small formatter for the conversions ``%c %s %p %d %i %u %x %X %%``.

``sprintf`` returns the formatted text. ``printf`` writes it to standard
output and returns the number of characters written. Integer arguments are
reduced to the width of a C ``int`` or ``unsigned int``, as a variadic call
would do.
"""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, Union

HEXA_LOWER = "0123456789abcdef"
HEXA_UPPER = "0123456789ABCDEF"

_INT_BITS = 32
_UINT_MOD = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))
_POINTER_MOD = 1 << 64


class FormatError(ValueError):
    """Raised for a bad conversion or a missing argument in a format string."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    return (value - _INT_MIN) % _UINT_MOD + _INT_MIN


def _to_uint32(value: int) -> int:
    return value % _UINT_MOD


def _in_base16(value: int, digits: str) -> str:
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def format_char(c: Union[int, str]) -> str:
    """A single character: a one-character string, or the low byte of an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c, "%c") & 0xFF)


def format_str(s: Optional[str]) -> str:
    """The string itself, or ``(null)`` for ``None``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"%s expects a str or None, got {type(s).__name__}")
    return s


def format_int(n: int) -> str:
    """Signed decimal of ``n`` taken as a 32-bit int."""
    return str(_to_int32(_require_int(n, "%d")))


def format_unsigned(n: int) -> str:
    """Unsigned decimal of ``n`` taken as a 32-bit unsigned int."""
    return str(_to_uint32(_require_int(n, "%u")))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal of ``n`` taken as a 32-bit unsigned int, no prefix."""
    value = _to_uint32(_require_int(n, "%x"))
    return _in_base16(value, HEXA_UPPER if upper else HEXA_LOWER)


def format_pointer(address: Optional[int]) -> str:
    """An address as ``0x`` followed by lower-case hex; ``None`` is address 0."""
    value = 0 if address is None else _require_int(address, "%p") % _POINTER_MOD
    return "0x" + _in_base16(value, HEXA_LOWER)


_CONVERSIONS = {
    "c": format_char,
    "s": format_str,
    "p": format_pointer,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, False),
    "X": lambda n: format_hex(n, True),
}


def _render(fmt: str, args: tuple) -> Iterator[str]:
    """Yield the output of ``fmt`` piece by piece."""
    remaining = iter(args)
    literal_start = 0
    index = 0
    while index < len(fmt):
        if fmt[index] != "%":
            index += 1
            continue
        if literal_start < index:
            yield fmt[literal_start:index]
        spec = fmt[index + 1:index + 2]
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                arg = next(remaining)
            except StopIteration:
                raise FormatError(f"missing argument for %{spec}", index) from None
            yield _CONVERSIONS[spec](arg)
        elif spec == "":
            raise FormatError("incomplete conversion", index)
        else:
            raise FormatError(f"unknown conversion %{spec}", index)
        index += 2
        literal_start = index
    if literal_start < len(fmt):
        yield fmt[literal_start:]


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``."""
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length.

    Output produced before a bad conversion is written before the
    ``FormatError`` is raised.
    """
    written = 0
    out = sys.stdout
    for piece in _render(fmt, args):
        out.write(piece)
        written += len(piece)
    return written
# ftkit

A small collection of helpers for ASCII characters, byte buffers, strings,
singly linked lists, stream output and a compact printf-style formatter.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

ASCII classification and case mapping. Each function takes an integer code
point or a one-character string.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
- `to_upper`, `to_lower` change only ASCII letters and return a value of the
  same kind they were given (`to_upper("a") == "A"`, `to_upper(97) == 65`).

### `ftkit.memory`

Operations on `bytearray` and other byte sequences. A count that runs past
the end of a buffer raises `ValueError`.

- `memset(buf, value, n)`, `bzero(buf, n)` fill the first `n` bytes.
- `memcpy(dest, src, n)` copies the first `n` bytes of `src` into `dest`.
- `memmove(buf, dest, src, n)` copies `n` bytes between two offsets of the
  same buffer; the regions may overlap.
- `memchr(data, value, n)` returns the index of a byte, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or 0.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`; a total too large
  for a size value raises `OverflowError`.

### `ftkit.convert`

- `atoi(text)` skips leading whitespace, reads one optional sign and the
  digits that follow; text without digits gives 0.
- `itoa(n)` returns the decimal text of an `int`.

### `ftkit.strings`

- `strncmp(s1, s2, n)` compares at most `n` characters and returns the
  code-point difference of the first unequal pair, or 0.
- `strchr`, `strrchr`, `strnstr` return an index, or `None` when nothing is
  found. Searching for NUL finds the end of the string.
- `strlcpy(dest, src, size)` and `strlcat(dest, src, size)` write
  NUL-terminated bytes into a `bytearray`, never more than `size` bytes, and
  return the length of the string they tried to build.
- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`.
- `split(s, sep)` returns the non-empty pieces between separators.
- `strmapi(s, f)` builds a string from `f(index, char)`; `striteri(chars, f)`
  calls `f(index, char)` on a mutable sequence and stores any non-`None`
  result in place.

### `ftkit.lists`

`Node` holds a value and the next node. `LinkedList` takes an optional
iterable of initial values and offers `push_front`, `push_back` (both return
the new node), `last`, `clear(delete=None)`, `for_each(f)` and
`map(f, delete=None)`. Lists support `len()` and iteration over their values.
If `f` raises during `map`, the values already produced are passed to
`delete` and the exception propagates.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
standard output by default. `put_str` and `put_endl` write nothing for
`None`.

### `ftkit.printf`

`sprintf(fmt, *args)` returns the formatted text; `printf(fmt, *args)` writes
it to standard output and returns the number of characters written. The
conversions are `%c`, `%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`.
Integers are taken as 32-bit `int` or `unsigned int`, so
`sprintf("%u", -1) == "4294967295"`. `%s` prints `(null)` for `None`, and
`%p` prints `0x` followed by lower-case hex. An unknown conversion, a `%` at
the end of the format, or a missing argument raises `FormatError`, which
carries the `position` of the offending `%`. The single-conversion helpers
`format_char`, `format_str`, `format_int`, `format_unsigned`, `format_hex`
and `format_pointer` are available too.

## Example

```python
from ftkit.printf import sprintf
from ftkit.strings import split, strtrim

sprintf("%s has %d items (0x%x)", "cart", 42, 255)
# 'cart has 42 items (0xff)'

split("  a  b c ", " ")
# ['a', 'b', 'c']

strtrim("xxhixx", "x")
# 'hi'
```

## Limits

The formatter has no flags, field widths or precisions: each `%` must be
followed directly by one of the conversion letters above. The package has no
command-line interface; it is a library only.
# ftkit

A small pure-Python toolkit of everyday helpers: character classification,
lenient number parsing, string utilities, `bytearray` operations, a singly
linked list, a compact printf and buffered line reading from file
descriptors. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
`is_whitespace`, `is_hex`, `to_lower`, `to_upper`. Each takes a
one-character string or an integer code point; the classifiers return a
`bool`, and `to_lower` / `to_upper` return a value of the same kind they
were given. Only ASCII letters are converted.

### `ftkit.numbers`

- `parse_int(text)`: skips leading whitespace and one optional sign, then
  reads digits up to the first non-digit; returns 0 when there are none.
- `parse_float(text)`: like `parse_int`, with an optional fractional part;
  stops at the first non-digit or a second decimal point.
- `int_to_str(n)`: decimal representation of an integer.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write a character, a
string, a string plus newline, or an integer to a text stream (standard
output when the stream is `None`). `put_str(None)` writes nothing.

### `ftkit.memory`

Operations on byte buffers: `memset(buf, value, n)`, `bzero(buf, n)`,
`calloc(count, size)` (a zero-filled `bytearray`), `memcpy(dest, src, n)`,
`memmove(buf, dest_offset, src_offset, n)` for overlapping regions within
one buffer, `memchr(data, c, n)` (index or `None`) and `memcmp(a, b, n)`
(difference at the first mismatching byte, else 0). Counts larger than a
buffer, or negative, raise `ValueError`.

### `ftkit.lists`

`LinkedList(items=())` is a singly linked list of `Node` cells with
`push_front`, `push_back`, `last`, `len()`, iteration over values,
`for_each(f)`, `map(f, delete=None)`, `pop_front(delete=None)` and
`clear(delete=None)`. The optional `delete` callback receives each value
that is removed; if `f` raises during `map`, the values mapped so far are
passed to `delete` and the exception propagates.

### `ftkit.strings`

`split`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strlcpy`,
`strlcat`, `substr`, `strjoin`, `strtrim`, `strmapi`, `striteri`.
Searches return an index or `None`; comparisons return the code-point
difference at the first mismatch. `strlcpy(src, size)` and
`strlcat(dst, src, size)` return a tuple of the resulting text and the
length the full result would have had. `striteri` works in place on a
mutable sequence of characters such as a list.

### `ftkit.formatting`

`sprintf(fmt, *args)` returns formatted text and
`printf(fmt, *args, stream=None)` writes it and returns the number of
characters written. Supported conversions are `%c %s %p %d %i %u %x %X %%`;
integers wrap to 32 bits, `%s` of `None` prints `(null)` and `%p` of zero
prints `(nil)`. Other `%` sequences are copied literally; too few arguments
raise `TypeError`.

### `ftkit.lines`

`LineReader(fd, buffer_size=10000)` reads a raw file descriptor and yields
lines as `bytes`, each keeping its trailing newline (the last may lack
one). `read_line()` returns `None` at end of input. `get_next_line(fd)`
does the same while keeping a separate reader for each descriptor.

## Examples

```python
from ftkit.numbers import parse_int, parse_float
from ftkit.strings import split, strtrim
from ftkit.formatting import sprintf
from ftkit.lists import LinkedList

parse_int("  -42abc")           # -42
parse_float("2.5")              # 2.5
split("a,,b,c", ",")            # ['a', 'b', 'c']
strtrim("xxhixx", "x")          # 'hi'
sprintf("%d%% of %x", 50, 255)  # '50% of ff'

items = LinkedList([1, 2, 3])
items.push_back(4)
list(items.map(lambda v: v * 10))  # [10, 20, 30, 40]
```

Reading lines from a file descriptor:

```python
import os
from ftkit.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 4096):
    print(line.decode(), end="")
os.close(fd)
```

## Scope

ftkit is a library only: it installs no command-line program.
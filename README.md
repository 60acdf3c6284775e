# libft

Helpers that keep the semantics of the classic C string, memory, conversion
and formatted-output routines. Return values, edge cases and limits follow
the C behaviour, while failures are raised as Python exceptions instead of
being reported through special return values.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

ASCII classification and case mapping. Each function takes an integer code
or a one-character string.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
- `to_upper` and `to_lower` map only ASCII letters and return a value of the
  same kind they were given (an `int` for an `int`, a `str` for a `str`).

### `libft.memory`

Operations on byte buffers (`bytearray` or `memoryview` for writing,
any bytes-like object for reading). A count larger than a buffer, or a
negative count, raises `ValueError`.

- `memset(buf, c, n)`, `bzero(buf, n)`, `memcpy(dst, src, n)` and
  `memmove(dst, src, n)` modify the buffer in place.
- `memchr(buf, c, n)` returns the index of the first matching byte, or `None`.
- `memcmp(s1, s2, n)` returns the difference of the first unequal bytes, or 0.
- `calloc(nmemb, size)` returns a zeroed `bytearray`; it raises `MemoryError`
  when the total size does not fit in 64 bits.

### `libft.cstrings`

Routines on NUL-terminated byte strings. A string's content runs up to its
first NUL byte, or to the end of the object. Searches return an index instead
of a pointer.

- `strlen`, `strcmp`, `strncmp`
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` write into a
  `bytearray` and return the length of the string they tried to build.
- `strchr`, `strrchr`: searching for 0 finds the terminator at `strlen(s)`.
- `strnstr(big, little, length)`: an empty `little` is found at index 0.

### `libft.convert`

- `atoi(s)` skips leading whitespace and one sign, reads digits up to the
  first non-digit, and wraps the result to a 32-bit signed int.
- `itoa(n)` gives the decimal text of a 32-bit int; values outside that range
  raise `OverflowError`.
- `atodbl(s)` parses text with an optional fractional part into a `float`.
- `safe_atoi(s)` accepts only an optional sign followed by digits and raises
  `ValueError` for anything else or for values outside the 32-bit range.

### `libft.text`

- `strdup`, `substr(s, start, length)`, `strjoin`, `strtrim(s, charset)`
- `split(s, sep)` splits on a single character and drops empty pieces.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` replaces each item of a mutable sequence in place
  with `f(index, item)`.

### `libft.line_reader`

`LineReader(buffer_size=42, max_fd=1024)` reads file descriptors one line at
a time, keeping leftover bytes separately for each descriptor.

- `read_line(fd)` returns the next line as `bytes`, newline included, or
  `None` at end of input. A descriptor outside `0..max_fd-1` raises
  `ValueError`.
- `lines(fd)` yields the remaining lines.
- `forget(fd)` drops the bytes kept for a descriptor.

`get_next_line(fd)` does the same as `read_line` on one shared reader.

### `libft.printf`

A small printf supporting `%c %s %p %d %i %u %x %X %%`.

- `format_string(fmt, *args)` returns the expansion as `bytes`. `%d`/`%i`
  wrap to a 32-bit signed int and `%u %x %X` to a 32-bit unsigned int; `%s`
  of `None` gives `(null)`, `%p` of 0 or `None` gives `(nil)`. An unknown
  conversion is copied through unchanged; a trailing lone `%` or a missing
  argument raises `ValueError`.
- `printf(fmt, *args)` writes the expansion to standard output and returns the
  number of bytes written.
- `format_number_base(n, base, upper=False)` and `format_pointer(address)`
  are the digit and address formatters it uses.

## Examples

```python
from libft.convert import atoi, itoa
from libft.text import split, strtrim
from libft.printf import format_string

atoi("   -42abc")                      # -42
itoa(-2147483648)                      # "-2147483648"
split("  hello  world ", " ")          # ["hello", "world"]
strtrim("xxhixx", "x")                 # "hi"
format_string("%d%% of %s", 50, "it")  # b"50% of it"
```

Reading a file line by line:

```python
import os
import sys
from libft.line_reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in LineReader().lines(fd):
        sys.stdout.buffer.write(line)
finally:
    os.close(fd)
```

## What it does not do

There are no helpers for writing single characters, strings or numbers to an
arbitrary file descriptor; the only output routine is `printf`, which always
writes to standard output. There is no command-line program.
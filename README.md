# so_long

Small, dependency-free helpers meant as the groundwork for a tile-map puzzle
game: ASCII character tests, byte-buffer operations, C-style string
functions, a singly linked list, and a reader that pulls lines from a file
descriptor in fixed-size chunks.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

### `so_long.chartype`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each accepts a one-character string or an integer code; the two
conversions return a value of the same kind and change only ASCII letters.

```python
from so_long.chartype import is_print, to_upper

is_print(" ")   # True
to_upper("b")   # "B"
to_upper(98)    # 66
```

### `so_long.memory`

Operations on `bytearray` buffers: `memset`, `bzero`, `memcpy`,
`memmove(buffer, dst_offset, src_offset, count)` (overlap-safe),
`memchr` (returns an index or `None`), `memcmp` (returns the difference of
the first unequal bytes, or 0) and `calloc(count, size)`, which returns a
zeroed buffer and raises `MemoryError` for requests above 65535 bytes.
Spans that run past the end of a buffer raise `ValueError`.

```python
from so_long.memory import memchr, memcmp

memchr(b"Hello, World!", ord(","), 6)   # 5
memcmp(b"\x01\x02\x03", b"\x01\x02\x04", 3)   # -1
```

### `so_long.strings`

`strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`,
`atoi` and `itoa`. Text stops at the first NUL character, as a C string
would. Searches return an index or `None`. `strlcpy(src, size)` and
`strlcat(dest, src, size)` return the resulting text together with the
length they tried to create. `atoi` skips leading whitespace, takes one
optional sign and wraps as a signed 32-bit integer; `itoa` raises
`OverflowError` for values outside that range.

```python
from so_long.strings import atoi, strlcpy

atoi("   -42abc")        # -42
strlcpy("hello", 3)      # ("he", 5)
```

### `so_long.transform`

`strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and
`striteri`. `split` drops empty pieces; `striteri` rewrites a list of
characters in place.

```python
from so_long.transform import split, strtrim

split("0,0,,,Hello,World", ",")   # ["0", "0", "Hello", "World"]
strtrim("\tHello\tWorld!\t", "\t") # "Hello\tWorld!"
```

### `so_long.linked_list`

`Node` and `LinkedList`, with `push_front`, `push_back`, `last`, `len()` and
iteration over the contents.

```python
from so_long.linked_list import LinkedList

items = LinkedList(["b"])
items.push_front("a")
items.push_back("c")
list(items)   # ["a", "b", "c"]
```

### `so_long.line_reader`

`LineReader(fd, buffer_size=42)` reads a raw file descriptor in chunks of
`buffer_size` bytes. `read_line()` returns the next line with its newline
kept, or `None` at the end; iterating yields every remaining line.
`read_lines(fd, buffer_size=42)` is the generator form.

```python
import os
from so_long.line_reader import read_lines

fd = os.open("map.ber", os.O_RDONLY)
try:
    rows = [line.rstrip("\n") for line in read_lines(fd)]
finally:
    os.close(fd)
```

## What this package does not do

There is no game here yet: the package has no map loader or map
validation, no player movement or win condition, no window or texture
drawing, and no command to start anything. It provides only the helper
modules listed above.
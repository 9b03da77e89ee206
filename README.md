# tlsrecord

Small helpers for working with raw TLS traffic:

- `tlsrecord.memmem.memmem` finds a byte sequence inside another one and
  returns the offset of the first match, or `None` when there is no match.
  Needles of one to four bytes take a direct path. Longer needles use the
  two-way string-matching algorithm.
- `tlsrecord.tls_utils` has the 5-byte TLS record-layer header
  (`RecordLayer`) and the content-type and protocol-version enumerations
  (`RecordType`, `RecordVersion`). It also has console colour helpers
  (`Color`, `set_console_color`, `restore_console_color`), which you can use
  to highlight records that were sent or received.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Searching bytes

```python
from tlsrecord.memmem import memmem

memmem(b"GET / HTTP/1.1\r\n", b"HTTP")   # 6
memmem(b"abc", b"")                      # 0, an empty needle matches at the start
memmem(b"abc", b"xyz")                   # None
```

Both arguments can be `bytes`, `bytearray` or `memoryview`. If either one is
a `str` or another object that is not bytes-like, the function raises
`TypeError`.

## Record-layer headers

```python
from tlsrecord.tls_utils import RecordLayer, RecordType, RecordVersion

header = RecordLayer.from_bytes(b"\x16\x03\x01\x02\x00")
header.content_type   # RecordType.HANDSHAKE
header.version        # RecordVersion.TLS10
header.length         # 512

header.to_bytes()     # b"\x16\x03\x01\x02\x00"
RecordLayer.SIZE      # 5
```

`RecordLayer` is a frozen dataclass with three fields: `content_type`,
`version` and `length`. `from_bytes` reads the first five bytes of its
input, in network byte order, and ignores anything after them. It raises
`ValueError` when the input is shorter than five bytes. If a content type or
version does not match a member of `RecordType` or `RecordVersion`, the field
holds the plain integer.

`RecordType` has the members `CHANGE_CIPHER_SPEC` (20), `ALERT` (21),
`HANDSHAKE` (22) and `APPLICATION_DATA` (23). `RecordVersion` has the members
`SSL30` (0x0300), `TLS10` (0x0301), `TLS11` (0x0302), `TLS12` (0x0303) and
`TLS13` (0x0304).

## Coloured console output

```python
import sys
from tlsrecord.tls_utils import Color, set_console_color, restore_console_color

previous = set_console_color(Color.BLUE, sys.stdout)
print("[recv] content_type:22 ver:0x0303 len:512")
restore_console_color(previous, sys.stdout)
```

`Color` is a flag enumeration with the members `BLUE`, `GREEN`, `RED` and
`INTENSITY`.

`set_console_color` adds `INTENSITY` to the colour you give it, writes the
matching ANSI escape sequence to the stream, and flushes the stream. It
returns the attributes that were active on that stream before the call. If
you omit the arguments, the colour is `Color.GREEN` and the stream is
`sys.stdout`.

`restore_console_color` takes attributes returned by `set_console_color`
and writes the escape sequence for them.

The current attributes are tracked separately for each stream. A stream
that has not been set yet is treated as `RED | GREEN | BLUE`, which is plain
white.

## What this package does not do

This package does not open connections and does not perform TLS
handshakes. It also does not encrypt or decrypt records. It only parses and
builds record headers, searches byte strings, and colours console output.
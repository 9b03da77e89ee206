"""TLS record-layer header and coloured console output helpers."""

from __future__ import annotations

import enum
import struct
import sys
import threading
import weakref
from dataclasses import dataclass
from typing import Optional, TextIO, Union


class RecordType(enum.IntEnum):
    """Content type of a TLS record."""

    CHANGE_CIPHER_SPEC = 20
    ALERT = 21
    HANDSHAKE = 22
    APPLICATION_DATA = 23


class RecordVersion(enum.IntEnum):
    """Protocol version carried in a TLS record header."""

    TLS10 = 0x0301
    TLS11 = 0x0302
    TLS12 = 0x0303
    TLS13 = 0x0304
    # Deprecated: SSLv3 is cryptographically broken.
    SSL30 = 0x0300


_HEADER = struct.Struct(">BHH")


def _as_enum(enum_cls, value: int):
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(frozen=True)
class RecordLayer:
    """The five-byte header that starts every TLS record."""

    content_type: Union[RecordType, int]
    version: Union[RecordVersion, int]
    length: int

    SIZE = _HEADER.size

    @classmethod
    def from_bytes(cls, data) -> "RecordLayer":
        """Parse the header at the start of data."""
        raw = bytes(memoryview(data)[: _HEADER.size])
        if len(raw) < _HEADER.size:
            raise ValueError(
                f"record header needs {_HEADER.size} bytes, got {len(raw)}"
            )
        content_type, version, length = _HEADER.unpack(raw)
        return cls(
            _as_enum(RecordType, content_type),
            _as_enum(RecordVersion, version),
            length,
        )

    def to_bytes(self) -> bytes:
        """Serialise the header in network byte order."""
        return _HEADER.pack(int(self.content_type), int(self.version), self.length)


class Color(enum.IntFlag):
    """Console text attributes."""

    BLUE = 0x1
    GREEN = 0x2
    RED = 0x4
    INTENSITY = 0x8


DEFAULT_ATTRIBUTES = Color.RED | Color.GREEN | Color.BLUE

_lock = threading.Lock()
_attributes: "weakref.WeakKeyDictionary[TextIO, Color]" = weakref.WeakKeyDictionary()


def _ansi_sequence(attributes: Color) -> str:
    index = 0
    if attributes & Color.RED:
        index |= 1
    if attributes & Color.GREEN:
        index |= 2
    if attributes & Color.BLUE:
        index |= 4
    base = 90 if attributes & Color.INTENSITY else 30
    return f"\x1b[{base + index}m"


def _apply(attributes: Color, stream: TextIO) -> Color:
    with _lock:
        previous = _attributes.get(stream, DEFAULT_ATTRIBUTES)
        _attributes[stream] = attributes
    stream.write(_ansi_sequence(attributes))
    stream.flush()
    return previous


def set_console_color(
    color: Color = Color.GREEN, stream: Optional[TextIO] = None
) -> Color:
    """Switch to a bright version of color and return the previous attributes."""
    target = sys.stdout if stream is None else stream
    return _apply(Color(color) | Color.INTENSITY, target)


def restore_console_color(attributes: Color, stream: Optional[TextIO] = None) -> None:
    """Restore attributes previously returned by set_console_color."""
    target = sys.stdout if stream is None else stream
    _apply(Color(attributes), target)
import io

import pytest
from hypothesis import given, strategies as st

from tlsrecord.tls_utils import (
    DEFAULT_ATTRIBUTES,
    Color,
    RecordLayer,
    RecordType,
    RecordVersion,
    restore_console_color,
    set_console_color,
)


def test_parse_handshake_header():
    record = RecordLayer.from_bytes(b"\x16\x03\x01\x02\x00rest")
    assert record.content_type is RecordType.HANDSHAKE
    assert record.version is RecordVersion.TLS10
    assert record.length == 0x0200


def test_enum_values_match_wire():
    record = RecordLayer.from_bytes(bytes([23, 0x03, 0x03, 0x00, 0x10]))
    assert record.content_type is RecordType.APPLICATION_DATA
    assert record.content_type == 23
    assert record.version is RecordVersion.TLS12
    assert record.version == 0x0303
    assert record.length == 16


def test_unknown_values_kept_as_int():
    record = RecordLayer.from_bytes(bytes([99, 0x7F, 0x01, 0, 5]))
    assert record.content_type == 99
    assert not isinstance(record.content_type, RecordType)
    assert record.version == 0x7F01


def test_short_header_rejected():
    with pytest.raises(ValueError):
        RecordLayer.from_bytes(b"\x16\x03\x03\x00")


def test_to_bytes_pins_wire_format():
    record = RecordLayer(RecordType.ALERT, RecordVersion.TLS12, 2)
    assert record.to_bytes() == b"\x15\x03\x03\x00\x02"


@given(
    st.integers(0, 255),
    st.integers(0, 0xFFFF),
    st.integers(0, 0xFFFF),
)
def test_round_trip(content_type, version, length):
    data = RecordLayer(content_type, version, length).to_bytes()
    assert len(data) == RecordLayer.SIZE
    assert RecordLayer.from_bytes(data).to_bytes() == data


def test_set_returns_default_then_previous():
    stream = io.StringIO()
    first = set_console_color(stream=stream)
    second = set_console_color(Color.BLUE, stream=stream)
    assert first == DEFAULT_ATTRIBUTES
    assert second == Color.GREEN | Color.INTENSITY


def test_green_is_bright_escape():
    stream = io.StringIO()
    set_console_color(stream=stream)
    assert stream.getvalue() == "\x1b[92m"


def test_restore_round_trip():
    stream = io.StringIO()
    old = set_console_color(Color.BLUE, stream=stream)
    restore_console_color(old, stream=stream)
    assert set_console_color(Color.RED, stream=stream) == old


def test_restore_writes_escape_sequence():
    stream = io.StringIO()
    restore_console_color(DEFAULT_ATTRIBUTES, stream=stream)
    output = stream.getvalue()
    assert output.startswith("\x1b[") and output.endswith("m")
    assert output != "\x1b[92m"


def test_streams_are_independent():
    a, b = io.StringIO(), io.StringIO()
    set_console_color(Color.RED, stream=a)
    assert set_console_color(Color.BLUE, stream=b) == DEFAULT_ATTRIBUTES
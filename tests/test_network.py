import io

import pytest

from iso8583.network import (
    MAX_MESSAGE_LENGTH,
    ASCII4BytesHeader,
    BCD2BytesHeader,
    Binary2BytesHeader,
    HeaderError,
    VMLHeader,
)


# ASCII 4 bytes header


def test_ascii_write_returns_ascii_encoded_length():
    header = ASCII4BytesHeader()
    header.length = 115
    buf = io.BytesIO()
    n = header.write_to(buf)
    assert n == 4
    assert buf.getvalue() == b"0115"


def test_ascii_read_decodes_length():
    header = ASCII4BytesHeader()
    read = header.read_from(io.BytesIO(b"0115"))
    assert header.length == 115
    assert read == 4


def test_ascii_read_not_enough_data():
    header = ASCII4BytesHeader()
    with pytest.raises(HeaderError, match="reading header"):
        header.read_from(io.BytesIO(b"011"))


def test_ascii_read_non_numeric():
    header = ASCII4BytesHeader()
    with pytest.raises(HeaderError, match="converting header to int"):
        header.read_from(io.BytesIO(b"01x5"))


# BCD 2 bytes header


def test_bcd_write_returns_bcd_encoded_length():
    header = BCD2BytesHeader()
    header.length = 115
    buf = io.BytesIO()
    n = header.write_to(buf)
    assert n == 2
    assert buf.getvalue() == bytes([0x01, 0x15])


def test_bcd_read_decodes_length():
    header = BCD2BytesHeader()
    read = header.read_from(io.BytesIO(bytes([0x01, 0x15])))
    assert header.length == 115
    assert read == 2


def test_bcd_read_not_enough_data():
    header = BCD2BytesHeader()
    with pytest.raises(HeaderError):
        header.read_from(io.BytesIO(bytes([0x01])))


def test_bcd_round_trip():
    header = BCD2BytesHeader(length=9876)
    buf = io.BytesIO()
    header.write_to(buf)
    other = BCD2BytesHeader()
    other.read_from(io.BytesIO(buf.getvalue()))
    assert other.length == 9876


# Binary 2 bytes header


def test_binary_write_returns_binary_encoded_length():
    header = Binary2BytesHeader()
    header.length = 319
    buf = io.BytesIO()
    n = header.write_to(buf)
    assert n == 2
    assert buf.getvalue() == bytes([0x01, 0x3F])


def test_binary_read_decodes_length():
    header = Binary2BytesHeader()
    read = header.read_from(io.BytesIO(bytes([0x01, 0x3F])))
    assert header.length == 319
    assert read == 2


def test_binary_length_too_large():
    header = Binary2BytesHeader()
    header.length = 319
    with pytest.raises(HeaderError, match="exceeds max length"):
        header.length = 65536
    assert header.length == 319


def test_binary_max_length_is_written():
    header = Binary2BytesHeader()
    header.length = 65535
    buf = io.BytesIO()
    assert header.write_to(buf) == 2
    assert buf.getvalue() == bytes([0xFF, 0xFF])


def test_binary_read_not_enough_data():
    header = Binary2BytesHeader()
    with pytest.raises(HeaderError, match="reading uint16"):
        header.read_from(io.BytesIO(bytes([0x01])))


# VML header


def test_vml_write_encodes_length_and_reserved_bytes():
    header = VMLHeader()
    header.length = 15
    buf = io.BytesIO()
    n = header.write_to(buf)
    assert n == 4
    assert buf.getvalue() == bytes([0x00, 0x0F, 0x00, 0x00])


def test_vml_write_rejects_length_above_max():
    header = VMLHeader()
    header.length = MAX_MESSAGE_LENGTH + 1
    with pytest.raises(HeaderError, match="exceeds max length"):
        header.write_to(io.BytesIO())


def test_vml_read_with_session_control():
    header = VMLHeader()
    read = header.read_from(io.BytesIO(bytes([0x00, 0x0F, 0x00, 0x20])))
    assert header.length == 15
    assert read == 4
    assert header.is_session_control is True


def test_vml_read_without_session_control():
    header = VMLHeader()
    header.read_from(io.BytesIO(bytes([0x00, 0x0F, 0x00, 0x00])))
    assert header.length == 15
    assert header.is_session_control is False


def test_vml_read_rejects_length_above_max():
    header = VMLHeader()
    with pytest.raises(HeaderError, match="exceeds max length"):
        header.read_from(io.BytesIO(bytes([0xFF, 0xFF, 0x00, 0x20])))


def test_vml_read_not_enough_data():
    header = VMLHeader()
    with pytest.raises(HeaderError, match="reading 4 bytes"):
        header.read_from(io.BytesIO(bytes([0x00, 0x0F])))
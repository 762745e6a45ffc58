"""Network headers that carry the length of an ISO 8583 message on the wire."""

from __future__ import annotations

import re
import struct
from abc import ABC, abstractmethod
from typing import BinaryIO

from .prefix.base import PrefixError
from .prefix.bcd import decode_bcd, encode_bcd

MAX_MESSAGE_LENGTH = 2048
_MAX_UINT16 = 0xFFFF
_SESSION_CONTROL_INDICATOR = ord("2")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


class HeaderError(ValueError):
    """Raised when a header cannot be written or read."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising HeaderError on a short read."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) < size:
        raise HeaderError("EOF" if not data else "unexpected EOF")
    return data


def _write(stream: BinaryIO, data: bytes) -> int:
    written = stream.write(data)
    return len(data) if written is None else written


class Header(ABC):
    """Writes and reads the encoded length of a message."""

    _max_length: int | None = None

    def __init__(self, length: int = 0) -> None:
        self.length = length

    @property
    def length(self) -> int:
        """The length of the message the header announces."""
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        limit = self._max_length
        if limit is not None:
            if value > limit:
                raise HeaderError(
                    f"length {value} exceeds max length for 2 bytes header {limit}"
                )
            if value < 0:
                raise HeaderError(f"negative length: {value}")
        self._length = value

    @abstractmethod
    def write_to(self, stream: BinaryIO) -> int:
        """Write the encoded length to ``stream``; return the bytes written."""

    @abstractmethod
    def read_from(self, stream: BinaryIO) -> int:
        """Read the header from ``stream``; return the bytes read."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.length})"


class ASCII4BytesHeader(Header):
    """Length written as four ASCII decimal digits."""

    def write_to(self, stream: BinaryIO) -> int:
        return _write(stream, f"{self.length:04d}".encode("ascii"))

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 4)
        except HeaderError as exc:
            raise HeaderError(f"reading header: {exc}") from None
        text = raw.decode("ascii", errors="replace")
        if not _DECIMAL.fullmatch(text):
            raise HeaderError(
                f'converting header to int: parsing "{text}": invalid syntax'
            )
        self.length = int(text)
        return len(raw)


class BCD2BytesHeader(Header):
    """Length written as four BCD digits packed into two bytes."""

    def write_to(self, stream: BinaryIO) -> int:
        try:
            encoded = encode_bcd(f"{self.length:04d}".encode("ascii"))
        except PrefixError as exc:
            raise HeaderError(str(exc)) from None
        return _write(stream, encoded)

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 2)
        except HeaderError as exc:
            raise HeaderError(f"reading header: {exc}") from None
        try:
            digits, _ = decode_bcd(raw, 4)
        except PrefixError as exc:
            raise HeaderError(str(exc)) from None
        self.length = int(digits.decode("ascii"))
        return len(raw)


class Binary2BytesHeader(Header):
    """Length written as a big-endian unsigned 16-bit integer."""

    _max_length = _MAX_UINT16

    def write_to(self, stream: BinaryIO) -> int:
        _write(stream, struct.pack(">H", self.length))
        return 2

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 2)
        except HeaderError as exc:
            raise HeaderError(f"reading uint16 from reader: {exc}") from None
        (self.length,) = struct.unpack(">H", raw)
        return 2


class VMLHeader(Header):
    """Visa message length header: two length bytes and two indicator bytes.

    ``is_session_control`` is set when the message is a session control
    message (heartbeat or idle-time) sent after a period without traffic.
    """

    _max_length = _MAX_UINT16

    def __init__(self, length: int = 0, is_session_control: bool = False) -> None:
        super().__init__(length)
        self.is_session_control = is_session_control

    def write_to(self, stream: BinaryIO) -> int:
        if self.length > MAX_MESSAGE_LENGTH:
            raise HeaderError(
                f"length {self.length} exceeds max length {MAX_MESSAGE_LENGTH}"
            )
        return _write(stream, struct.pack(">H", self.length) + b"\x00\x00")

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 4)
        except HeaderError as exc:
            raise HeaderError(f"reading 4 bytes from reader: {exc}") from None
        (length,) = struct.unpack(">H", raw[:2])
        if length > MAX_MESSAGE_LENGTH:
            raise HeaderError(
                f"length {length} exceeds max length {MAX_MESSAGE_LENGTH}"
            )
        self.length = length
        try:
            indicators, _ = decode_bcd(raw[3:], 2)
        except PrefixError as exc:
            raise HeaderError(f"decoding indicators: {exc}") from None
        self.is_session_control = indicators[0] == _SESSION_CONTROL_INDICATOR
        return len(raw)

    def __repr__(self) -> str:
        return (
            f"VMLHeader(length={self.length}, "
            f"is_session_control={self.is_session_control})"
        )
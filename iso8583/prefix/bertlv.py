"""Lengths encoded by the BER-TLV rules.

Short form: when the most significant bit is clear, the single byte holds the
length (up to 127). Long form: when it is set, the low seven bits give the
number of bytes that follow, and those bytes hold the length as a big-endian
unsigned integer.
"""

from __future__ import annotations

from dataclasses import dataclass

from .base import PrefixError, Prefixer

_MSB = 0x80


def _magnitude_bytes(value: int) -> bytes:
    magnitude = abs(value)
    return magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")


@dataclass(frozen=True)
class BerTLVPrefixer(Prefixer):
    """Dynamic BER-TLV length; ``max_len`` is ignored in both directions."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        encoded = _magnitude_bytes(data_len)
        if data_len <= 127:
            return encoded
        return bytes([(len(encoded) & 0xFF) | _MSB]) + encoded

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if not data:
            raise PrefixError("failed to decode TLV length: EOF")
        first = data[0]
        if not first & _MSB:
            return first, 1
        count = first & ~_MSB & 0xFF
        following = data[1 : 1 + count]
        if len(following) < count:
            reason = "EOF" if not following else "unexpected EOF"
            raise PrefixError(f"failed to read long form TLV length: {reason}")
        return int.from_bytes(following, "big"), 1 + count

    def inspect(self) -> str:
        return "BerTLV"


BER_TLV = BerTLVPrefixer()
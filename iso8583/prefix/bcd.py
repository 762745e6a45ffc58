"""Lengths written as packed binary-coded decimal."""

from __future__ import annotations

from dataclasses import dataclass

from .base import PrefixError, Prefixer, Prefixers, _atoi


def encode_bcd(digits: bytes) -> bytes:
    """Pack ASCII decimal digits two to a byte, left-padding odd counts with zero."""
    if len(digits) % 2:
        digits = b"0" + digits
    packed = bytearray()
    for high, low in zip(digits[::2], digits[1::2]):
        if not (0x30 <= high <= 0x39 and 0x30 <= low <= 0x39):
            raise PrefixError(f"invalid BCD digits: {digits!r}")
        packed.append(((high - 0x30) << 4) | (low - 0x30))
    return bytes(packed)


def decode_bcd(data: bytes, length: int) -> tuple[bytes, int]:
    """Unpack ``length`` digits from BCD; return the digits and bytes read."""
    needed = (length + 1) // 2
    if len(data) < needed:
        raise PrefixError(
            f"not enough data to decode {length} BCD digits: {len(data)} bytes"
        )
    nibbles = []
    for byte in data[:needed]:
        nibbles.extend((byte >> 4, byte & 0x0F))
    if any(nibble > 9 for nibble in nibbles):
        raise PrefixError(f"invalid BCD data: {data[:needed]!r}")
    if length % 2:
        nibbles = nibbles[1:]
    return bytes(0x30 + nibble for nibble in nibbles), needed


@dataclass(frozen=True)
class BcdVarPrefixer(Prefixer):
    """Variable length written as ``digits`` BCD digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(
                f"field length: {data_len} is larger than maximum: {max_len}"
            )
        if len(str(data_len)) > self.digits:
            raise PrefixError(
                f"number of digits in length: {data_len} exceeds: {self.digits}"
            )
        return encode_bcd(f"{data_len:0{self.digits}d}".encode("ascii"))

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        length = (self.digits + 1) // 2
        if len(data) < length:
            raise PrefixError(
                f"length mismatch: want to read {length} bytes, get only {len(data)}"
            )
        digits, _ = decode_bcd(data[:length], self.digits)
        data_len = _atoi(digits)
        if data_len > max_len:
            raise PrefixError(
                f"data length {data_len} is larger than maximum {max_len}"
            )
        return data_len, length

    def inspect(self) -> str:
        return f"BCD.{'L' * self.digits}"


@dataclass(frozen=True)
class BcdFixedPrefixer(Prefixer):
    """Fixed length: nothing is written; data may not exceed the length."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "BCD.Fixed"


BCD = Prefixers(
    fixed=BcdFixedPrefixer(),
    L=BcdVarPrefixer(1),
    LL=BcdVarPrefixer(2),
    LLL=BcdVarPrefixer(3),
    LLLL=BcdVarPrefixer(4),
)
"""Lengths written as big-endian unsigned binary integers."""

from __future__ import annotations

from dataclasses import dataclass

from .base import PrefixError, Prefixer, Prefixers

_UINT32_SIZE = 4


@dataclass(frozen=True)
class BinaryFixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the length must match exactly."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len != max_len:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "Binary.Fixed"


@dataclass(frozen=True)
class BinaryVarPrefixer(Prefixer):
    """Variable length written as ``digits`` big-endian bytes."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(
                f"field length: {data_len} is larger than maximum: {max_len}"
            )
        if data_len < 0:
            raise PrefixError(f"encode length: negative number: {data_len}")
        encoded = (data_len & 0xFFFFFFFF).to_bytes(_UINT32_SIZE, "big").lstrip(b"\x00")
        if len(encoded) > self.digits:
            raise PrefixError(
                f"number of digits in length: {data_len} exceeds: {self.digits}"
            )
        return encoded.rjust(self.digits, b"\x00")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if len(data) < self.digits:
            raise PrefixError(
                f"not enough data length: {len(data)} to read: {self.digits} bytes"
            )
        prefix = data[: self.digits].rjust(_UINT32_SIZE, b"\x00")
        data_len = int.from_bytes(prefix[:_UINT32_SIZE], "big")
        if data_len > max_len:
            raise PrefixError(
                f"data length: {data_len} is larger than maximum {max_len}"
            )
        return data_len, self.digits

    def inspect(self) -> str:
        return f"Binary.{'L' * self.digits}"


BINARY = Prefixers(
    fixed=BinaryFixedPrefixer(),
    L=BinaryVarPrefixer(1),
    LL=BinaryVarPrefixer(2),
    LLL=BinaryVarPrefixer(3),
    LLLL=BinaryVarPrefixer(4),
)
"""Lengths written as ASCII decimal digits."""

from __future__ import annotations

from dataclasses import dataclass

from .base import PrefixError, Prefixer, Prefixers, _atoi


@dataclass(frozen=True)
class AsciiVarPrefixer(Prefixer):
    """Variable length written as ``digits`` ASCII digits."""

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
        return f"{data_len:0{self.digits}d}".encode("ascii")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if len(data) < self.digits:
            raise PrefixError(
                f"not enough data length: {len(data)} to read: {self.digits} byte digits"
            )
        data_len = _atoi(data[: self.digits])
        if data_len < 0:
            raise PrefixError(f"invalid length: {data_len}")
        if data_len > max_len:
            raise PrefixError(
                f"data length: {data_len} is larger than maximum {max_len}"
            )
        return data_len, self.digits

    def inspect(self) -> str:
        return f"ASCII.{'L' * self.digits}"


@dataclass(frozen=True)
class AsciiFixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the length must match exactly."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len != max_len:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "ASCII.Fixed"


ASCII = Prefixers(
    fixed=AsciiFixedPrefixer(),
    L=AsciiVarPrefixer(1),
    LL=AsciiVarPrefixer(2),
    LLL=AsciiVarPrefixer(3),
    LLLL=AsciiVarPrefixer(4),
)
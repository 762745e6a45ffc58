"""Lengths written as ASCII hexadecimal digits."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .base import PrefixError, Prefixer, Prefixers

_HEX = re.compile(r"[+-]?[0-9A-Fa-f]+")


@dataclass(frozen=True)
class HexFixedPrefixer(Prefixer):
    """Fixed length of bytes shown as hex; the data holds twice as many digits."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len != max_len * 2:
            raise PrefixError(
                f"field length: {data_len} should be fixed: {max_len * 2}"
            )
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "Hex.Fixed"


@dataclass(frozen=True)
class HexVarPrefixer(Prefixer):
    """Variable length of ``digits`` bytes written as upper-case hex."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(
                f"field length: {data_len} is larger than maximum: {max_len}"
            )
        if data_len > (1 << (self.digits * 8)) - 1:
            raise PrefixError(
                f"number of digits in length: {data_len} exceeds: {self.digits}"
            )
        return f"{data_len:X}".rjust(self.digits * 2, "0").encode("ascii")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        length = self.digits * 2
        if len(data) < length:
            raise PrefixError(
                f"length mismatch: want to read {length} bytes, get only {len(data)}"
            )
        text = data[:length].decode("ascii", errors="replace")
        if not _HEX.fullmatch(text):
            raise PrefixError(f'parsing "{text}": invalid syntax')
        data_len = int(text, 16)
        bits = self.digits * 8
        if not -(1 << (bits - 1)) <= data_len < (1 << (bits - 1)):
            raise PrefixError(f'parsing "{text}": value out of range')
        if data_len > max_len:
            raise PrefixError(
                f"data length {data_len} is larger than maximum {max_len}"
            )
        return data_len, length

    def inspect(self) -> str:
        return f"Hex.{'L' * self.digits}"


HEX = Prefixers(
    fixed=HexFixedPrefixer(),
    L=HexVarPrefixer(1),
    LL=HexVarPrefixer(2),
    LLL=HexVarPrefixer(3),
    LLLL=HexVarPrefixer(4),
)
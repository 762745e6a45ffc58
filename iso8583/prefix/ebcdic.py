"""Lengths written as EBCDIC (code page 037) decimal digits."""

from __future__ import annotations

from dataclasses import dataclass

from .base import PrefixError, Prefixer, Prefixers, _atoi

_CODEC = "cp037"


def _encode(text: str) -> bytes:
    try:
        return text.encode(_CODEC)
    except UnicodeEncodeError as exc:
        raise PrefixError(f"encoding {text!r} to EBCDIC: {exc}") from None


def _decode(data: bytes) -> str:
    return data.decode(_CODEC)


@dataclass(frozen=True)
class EbcdicVarPrefixer(Prefixer):
    """Variable length written as ``digits`` EBCDIC digits."""

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
        return _encode(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        length = self.digits
        if len(data) < length:
            raise PrefixError(
                f"length mismatch: want to read {length} bytes, get only {len(data)}"
            )
        data_len = _atoi(_decode(data[:length]).encode("utf-8"))
        if data_len > max_len:
            raise PrefixError(
                f"data length {data_len} is larger than maximum {max_len}"
            )
        return data_len, length

    def inspect(self) -> str:
        return f"EBCDIC.{'L' * self.digits}"


@dataclass(frozen=True)
class EbcdicFixedPrefixer(Prefixer):
    """Fixed length: nothing is written; data may not exceed the length."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "EBCDIC.Fixed"


EBCDIC = Prefixers(
    fixed=EbcdicFixedPrefixer(),
    L=EbcdicVarPrefixer(1),
    LL=EbcdicVarPrefixer(2),
    LLL=EbcdicVarPrefixer(3),
    LLLL=EbcdicVarPrefixer(4),
)
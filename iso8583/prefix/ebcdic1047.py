"""Lengths written as EBCDIC (code page 1047) decimal digits."""

from __future__ import annotations

from dataclasses import dataclass

from .base import PrefixError, Prefixer, Prefixers, _atoi

# Code page 1047 equals code page 037 except for these positions.
_CP1047_OVERRIDES = {
    0x5F: "^",
    0xAD: "[",
    0xB0: "\u00ac",
    0xBA: "\u00dd",
    0xBB: "\u00a8",
    0xBD: "]",
}

_DECODE_TABLE = "".join(
    _CP1047_OVERRIDES.get(code, char)
    for code, char in enumerate(bytes(range(256)).decode("cp037"))
)
_ENCODE_TABLE = {char: code for code, char in enumerate(_DECODE_TABLE)}


def _encode(text: str) -> bytes:
    try:
        return bytes(_ENCODE_TABLE[char] for char in text)
    except KeyError as exc:
        raise PrefixError(
            f"character {exc.args[0]!r} cannot be encoded in EBCDIC 1047"
        ) from None


def _decode(data: bytes) -> str:
    return "".join(_DECODE_TABLE[byte] for byte in data)


@dataclass(frozen=True)
class Ebcdic1047Prefixer(Prefixer):
    """Variable length written as ``digits`` EBCDIC 1047 digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(
                f"field length [{data_len}] is larger than maximum [{max_len}]"
            )
        if len(str(data_len)) > self.digits:
            raise PrefixError(
                f"number of digits in data [{data_len}] exceeds its maximum "
                f"indicator [{self.digits}]"
            )
        return _encode(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if len(data) < self.digits:
            raise PrefixError(
                f"not enough data length [{len(data)}] to read [{self.digits}] "
                "byte digits"
            )
        text = _decode(data[: self.digits])
        try:
            data_len = _atoi(text.encode("utf-8"))
        except PrefixError:
            raise PrefixError(
                f"length [{text}] is not a valid integer length field"
            ) from None
        if data_len > max_len:
            raise PrefixError(
                f"data length [{data_len}] is larger than maximum [{max_len}]"
            )
        return data_len, self.digits

    def inspect(self) -> str:
        return f"EBCDIC.{'L' * self.digits}"


@dataclass(frozen=True)
class Ebcdic1047FixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the length must match exactly."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len != max_len:
            raise PrefixError(
                f"field length [{data_len}] should be fixed [{max_len}]"
            )
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "EBCDIC.Fixed"


EBCDIC1047 = Prefixers(
    fixed=Ebcdic1047FixedPrefixer(),
    L=Ebcdic1047Prefixer(1),
    LL=Ebcdic1047Prefixer(2),
    LLL=Ebcdic1047Prefixer(3),
    LLLL=Ebcdic1047Prefixer(4),
)
"""Padders that fill field values up to a fixed length and strip the fill again."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Padder(ABC):
    """Pads and unpads raw field data."""

    @abstractmethod
    def pad(self, data: bytes, length: int) -> bytes:
        """Return ``data`` padded up to ``length`` bytes."""

    @abstractmethod
    def unpad(self, data: bytes) -> bytes:
        """Return ``data`` with the padding removed."""

    @abstractmethod
    def inspect(self) -> bytes:
        """Return the encoded padding character."""


def _encode_pad(pad: str) -> bytes:
    if len(pad) != 1:
        raise ValueError(f"padding must be a single character, got {pad!r}")
    return pad.encode("utf-8")


class LeftPadder(Padder):
    """Pads on the left, for right-justified values."""

    def __init__(self, pad: str) -> None:
        self._pad = _encode_pad(pad)

    def pad(self, data: bytes, length: int) -> bytes:
        missing = length - len(data)
        if missing <= 0:
            return data
        return self._pad * missing + data

    def unpad(self, data: bytes) -> bytes:
        while data.startswith(self._pad):
            data = data[len(self._pad):]
        return data

    def inspect(self) -> bytes:
        return self._pad

    def __repr__(self) -> str:
        return f"LeftPadder({self._pad.decode('utf-8')!r})"


class RightPadder(Padder):
    """Pads on the right, for left-justified values."""

    def __init__(self, pad: str) -> None:
        self._pad = _encode_pad(pad)

    def pad(self, data: bytes, length: int) -> bytes:
        missing = length - len(data)
        if missing <= 0:
            return data
        return data + self._pad * missing

    def unpad(self, data: bytes) -> bytes:
        while data.endswith(self._pad):
            data = data[: len(data) - len(self._pad)]
        return data

    def inspect(self) -> bytes:
        return self._pad

    def __repr__(self) -> str:
        return f"RightPadder({self._pad.decode('utf-8')!r})"


class NonePadder(Padder):
    """Leaves data untouched."""

    def pad(self, data: bytes, length: int) -> bytes:
        return data

    def unpad(self, data: bytes) -> bytes:
        return data

    def inspect(self) -> bytes:
        return b""

    def __repr__(self) -> str:
        return "NonePadder()"


NONE = NonePadder()
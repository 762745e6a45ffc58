"""A prefixer that writes no length and takes all remaining data."""

from __future__ import annotations

from dataclasses import dataclass

from .base import Prefixer, Prefixers


@dataclass(frozen=True)
class NonePrefixer(Prefixer):
    """Writes nothing; the field length is whatever data is left."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return len(data), 0

    def inspect(self) -> str:
        return "None.Fixed"


NONE = Prefixers(fixed=NonePrefixer())
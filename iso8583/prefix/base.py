"""Common interface for length prefixers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass


class PrefixError(ValueError):
    """Raised when a length cannot be encoded or decoded."""


class Prefixer(ABC):
    """Encodes and decodes the length of a field."""

    @abstractmethod
    def encode_length(self, max_len: int, data_len: int) -> bytes:
        """Return the field length encoded as bytes."""

    @abstractmethod
    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        """Return the field length and the number of bytes read to decode it."""

    @abstractmethod
    def inspect(self) -> str:
        """Return a readable name such as ``ASCII.LL`` or ``Hex.Fixed``."""


@dataclass(frozen=True)
class Prefixers:
    """A family of prefixers sharing one encoding."""

    fixed: Prefixer
    L: Prefixer | None = None
    LL: Prefixer | None = None
    LLL: Prefixer | None = None
    LLLL: Prefixer | None = None

    def by_name(self, name: str) -> Prefixer:
        """Return the prefixer called ``Fixed``, ``L``, ``LL``, ``LLL`` or ``LLLL``."""
        members = {
            "Fixed": self.fixed,
            "L": self.L,
            "LL": self.LL,
            "LLL": self.LLL,
            "LLLL": self.LLLL,
        }
        prefixer = members.get(name)
        if prefixer is None:
            raise PrefixError(f"no prefixer named {name!r}")
        return prefixer


_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _atoi(text: bytes) -> int:
    """Parse a decimal integer, optionally signed, from ASCII bytes."""
    try:
        decoded = text.decode("ascii")
    except UnicodeDecodeError:
        raise PrefixError(f"parsing {text!r}: invalid syntax") from None
    if not _DECIMAL.fullmatch(decoded):
        raise PrefixError(f'parsing "{decoded}": invalid syntax')
    return int(decoded)
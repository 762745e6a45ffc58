"""In-place orderings for lists of string keys, such as subfield tags."""

from __future__ import annotations

import binascii
import re

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_INT64_MASK = (1 << 64) - 1


def sort_strings(values: list[str]) -> None:
    """Sort ``values`` in place in increasing lexical order."""
    values.sort()


def _as_int(text: str) -> int:
    if not _DECIMAL.fullmatch(text):
        raise ValueError(
            "failed to sort strings by int: failed to convert string to int"
        )
    return int(text)


def sort_strings_by_int(values: list[str]) -> None:
    """Sort ``values`` in place by their decimal integer value.

    Raises ValueError if an element is not a decimal integer.
    """
    if len(values) < 2:
        return
    values.sort(key=_as_int)


def _as_hex_int(text: str) -> int:
    try:
        raw = binascii.unhexlify(text.encode("utf-8"))
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"failed to encode ascii hex {text} to bytes : {exc}") from None
    value = int.from_bytes(raw, "big") & _INT64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


def sort_strings_by_hex(values: list[str]) -> None:
    """Sort ``values`` in place by their big-endian hex value.

    Each element must be an even-length hex string; otherwise ValueError.
    """
    if len(values) < 2:
        return
    values.sort(key=_as_hex_int)
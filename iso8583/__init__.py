"""Padding, length prefixes, tag sorting and network length headers for ISO 8583 messages."""

__version__ = "0.1.0"
__all__ = ["network", "padding", "prefix", "sorting"]
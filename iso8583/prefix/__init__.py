"""Length prefixers for fixed and variable length ISO 8583 fields."""

__all__ = ["ascii", "base", "bcd", "bertlv", "binary", "ebcdic", "ebcdic1047", "hex", "none"]
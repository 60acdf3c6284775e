"""String, memory, conversion, line-reading and printf helpers with C semantics."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstrings", "convert", "text", "line_reader", "printf"]
"""ASCII character, byte-buffer, string, linked-list, stream output and printf-style formatting helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "convert", "lists", "memory", "output", "printf", "strings"]
"""Character, byte-buffer, string, linked-list and line-reading helpers."""

__version__ = "1.0.0"
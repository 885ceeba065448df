"""Character, number, output, string, memory, linked-list, formatting and line-reading helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "numbers", "output", "memory", "lists", "strings", "formatting", "lines"]
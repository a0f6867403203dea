"""Chain commands between an input file and an output file, like a shell pipeline, with small string, memory and list helpers."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "strings", "linkedlist", "output", "resolve", "pipeline"]
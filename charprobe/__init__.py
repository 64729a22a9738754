"""Coding state machines, single-byte, Hebrew and group probers for guessing byte-stream encodings."""

__version__ = "0.1.0"
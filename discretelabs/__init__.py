"""Discrete mathematics exercises: LZW and RLE text coding, a B+ tree dictionary and graph algorithms."""

__version__ = "0.1.0"
"""Run-length coding in the form ``<symbol><count>,`` per run."""

from __future__ import annotations

import re
from itertools import groupby

_COUNT = re.compile(r"\s*([+-]?\d+)")


def rle_encode(text: str) -> str:
    """Encode runs of ``text``; texts shorter than two characters encode to ''."""
    if len(text) < 2:
        return ""
    return "".join(f"{symbol}{sum(1 for _ in run)}," for symbol, run in groupby(text))


def rle_decode(text: str) -> str:
    """Expand a string produced by :func:`rle_encode`."""
    pieces: list[str] = []
    position = 0
    while position < len(text) - 1:
        symbol = text[position]
        end = text.find(",", position + 1)
        if end == -1:
            end = len(text)
        number = text[position + 1:end]
        match = _COUNT.match(number)
        if match is None:
            raise ValueError(f"invalid run count {number!r} at position {position}")
        pieces.append(symbol * int(match.group(1)))
        position = end + 1
    return "".join(pieces)
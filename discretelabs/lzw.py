"""LZW coding of text into a string of binary digits with growing code widths."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

ALPHABET: tuple[str, ...] = (
    "f", "k", "p", "a", "o", "i", "F", "K", "P", "A", "O", "I", " ",
    "0", "1", "2", "3", "4", "5", "6", "7", "8", "9", "%", ".", ",",
)


@dataclass
class CodeStats:
    """Counts of emitted codes by their bit length, plus the final dictionary size."""

    counts: Counter = field(default_factory=Counter)
    dictionary_size: int = 0

    def record(self, length: int) -> None:
        """Count one emitted code of ``length`` bits."""
        self.counts[length] += 1

    def cost(self) -> float:
        """Average code length weighted over the size of the final dictionary."""
        if self.dictionary_size <= 0:
            raise ValueError("no dictionary has been built yet")
        return sum(length * count for length, count in self.counts.items()) / self.dictionary_size


def code_length(dictionary_size: int) -> int:
    """Number of bits needed to address ``dictionary_size`` entries."""
    if dictionary_size <= 1:
        return 0
    return (dictionary_size - 1).bit_length()


def to_bits(value: int, dictionary_size: int) -> str:
    """Write ``value`` in binary, zero-padded to the code width for the dictionary."""
    if value < 0:
        raise ValueError(f"negative code: {value}")
    width = code_length(dictionary_size)
    bits = format(value, "b")
    if len(bits) > width:
        raise ValueError(f"code {value} does not fit in {width} bits")
    return bits.zfill(width)


def from_bits(bits: str) -> int:
    """Read a string of binary digits; an empty string reads as zero."""
    if set(bits) - {"0", "1"}:
        raise ValueError(f"not a binary string: {bits!r}")
    return int(bits, 2) if bits else 0


def lzw_encode(
    text: str,
    alphabet: Sequence[str] = ALPHABET,
    stats: CodeStats | None = None,
) -> str:
    """Encode ``text`` over ``alphabet`` into a string of binary digits."""
    table = {symbol: index for index, symbol in enumerate(alphabet)}
    pieces: list[str] = []

    def emit(code: int) -> None:
        bits = to_bits(code, len(table))
        pieces.append(bits)
        if stats is not None:
            stats.record(len(bits))

    current = ""
    for symbol in text:
        if symbol not in table:
            raise ValueError(f"symbol {symbol!r} is not in the alphabet")
        candidate = current + symbol
        if candidate in table:
            current = candidate
            continue
        emit(table[current])
        table[candidate] = len(table)
        current = symbol

    if current:
        emit(table[current])
    if stats is not None:
        stats.dictionary_size = len(table)
    return "".join(pieces)


def lzw_decode(bits: str, alphabet: Sequence[str] = ALPHABET) -> str:
    """Decode a string of binary digits produced by :func:`lzw_encode`."""
    table = list(alphabet)
    known = set(table)
    pieces: list[str] = []
    current = ""
    position = 0

    while position < len(bits):
        width = code_length(len(table) + 1)
        chunk = bits[position:position + width]
        position += width
        if not chunk:
            break
        code = from_bits(chunk)
        if code == len(table):
            if not current:
                raise ValueError(f"code {code} refers to an entry not yet defined")
            entry = current + current[0]
        elif code < len(table):
            entry = table[code]
        else:
            raise ValueError(f"unknown code {code}")

        for offset, symbol in enumerate(entry):
            current += symbol
            if current not in known:
                pieces.append(current[:-1])
                table.append(current)
                known.add(current)
                current = entry[offset:]
                break

    pieces.append(current)
    return "".join(pieces)
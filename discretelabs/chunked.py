"""Chunked coding of text and the end-to-end demonstration of the codecs."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable, Sequence
from pathlib import Path

from discretelabs.lzw import ALPHABET, lzw_decode, lzw_encode
from discretelabs.rle import rle_decode, rle_encode

FILE_SIZE = 10000
GENERATED_ALPHABET = ALPHABET[:25]


def split_parts(content: str, count: int) -> list[str]:
    """Cut ``content`` into ``count`` equal parts; the last one takes the remainder."""
    if count < 1:
        raise ValueError("the number of parts must be positive")
    size = len(content) // count
    parts = [content[index * size:(index + 1) * size] for index in range(count - 1)]
    parts.append(content[(count - 1) * size:])
    return parts


def split_by_lengths(data: str, lengths: Sequence[int]) -> list[str]:
    """Cut ``data`` into consecutive pieces of the given lengths."""
    parts = []
    position = 0
    for length in lengths:
        if position > len(data):
            raise ValueError("lengths run past the end of the data")
        parts.append(data[position:position + length])
        position += length
    return parts


def encode_chunked(
    content: str, count: int, encoder: Callable[[str], str]
) -> tuple[str, list[int]]:
    """Encode each part separately; return the joined code and each part's length."""
    coded = [encoder(part) for part in split_parts(content, count)]
    return "".join(coded), [len(part) for part in coded]


def decode_chunked(
    data: str, lengths: Sequence[int], decoder: Callable[[str], str]
) -> str:
    """Decode each piece of ``data`` separately and join the results."""
    return "".join(decoder(part) for part in split_by_lengths(data, lengths))


def generate_text(
    length: int,
    alphabet: Sequence[str] = GENERATED_ALPHABET,
    rng: random.Random | None = None,
) -> str:
    """Random text of ``length`` symbols drawn from ``alphabet``."""
    rng = rng or random.Random()
    return "".join(rng.choice(alphabet) for _ in range(length))


def read_first_line(path: str | Path) -> str:
    """The first line of a file, without its line break."""
    with open(path, encoding="utf-8", newline="") as handle:
        line = handle.readline()
    return line[:-1] if line.endswith("\n") else line


def _through(path: Path, text: str) -> str:
    path.write_text(text, encoding="utf-8")
    return read_first_line(path)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a random text and check LZW and RLE coding round trips."
    )
    parser.add_argument("--dir", type=Path, default=Path.cwd(), help="working directory")
    parser.add_argument("--length", type=int, default=FILE_SIZE, help="text length")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    workdir: Path = args.dir
    workdir.mkdir(parents=True, exist_ok=True)
    source = workdir / "File.txt"
    lzw_file = workdir / "encode_File.txt"
    lzw_out = workdir / "decode_File.txt"
    rle_file = workdir / "rle_coder.txt"
    rle_out = workdir / "RLE_decoder.txt"

    original = _through(source, generate_text(args.length, GENERATED_ALPHABET, random.Random(args.seed)))
    print(f"Generated a file of {len(original)} symbols")
    results: list[bool] = []

    def report(label: str, restored: str) -> None:
        same = restored == original
        results.append(same)
        verdict = "original and decoded files match" if same else "files differ, an error occurred"
        print(f"{label}: {verdict}")

    decoded = _through(lzw_out, lzw_decode(_through(lzw_file, lzw_encode(original))))
    report("LZW", decoded)

    bits, lengths = encode_chunked(original, 7, lzw_encode)
    decoded = _through(lzw_out, decode_chunked(_through(lzw_file, bits), lengths, lzw_decode))
    report("LZW in parts", decoded)

    decoded = _through(rle_out, rle_decode(_through(rle_file, rle_encode(original))))
    report("RLE", decoded)

    runs, lengths = encode_chunked(original, 3, rle_encode)
    decoded = _through(rle_out, decode_chunked(_through(rle_file, runs), lengths, rle_decode))
    report("RLE in parts", decoded)

    runs = _through(rle_file, rle_encode(original))
    bits = _through(lzw_file, lzw_encode(runs))
    runs = _through(lzw_out, lzw_decode(bits))
    report("RLE then LZW", _through(rle_out, rle_decode(runs)))

    runs, run_lengths = encode_chunked(original, 7, rle_encode)
    runs = _through(rle_file, runs)
    bits, bit_lengths = encode_chunked(runs, 7, lzw_encode)
    bits = _through(lzw_file, bits)
    runs = _through(lzw_out, decode_chunked(bits, bit_lengths, lzw_decode))
    report("RLE then LZW in parts", _through(rle_out, decode_chunked(runs, run_lengths, rle_decode)))

    bits = _through(lzw_file, lzw_encode(original))
    runs = _through(rle_file, rle_encode(bits))
    bits = _through(rle_out, rle_decode(runs))
    report("LZW then RLE", _through(lzw_out, lzw_decode(bits)))

    bits, bit_lengths = encode_chunked(original, 7, lzw_encode)
    bits = _through(lzw_file, bits)
    runs, run_lengths = encode_chunked(bits, 7, rle_encode)
    runs = _through(rle_file, runs)
    bits = _through(rle_out, decode_chunked(runs, run_lengths, rle_decode))
    report("LZW then RLE in parts", _through(lzw_out, decode_chunked(bits, bit_lengths, lzw_decode)))

    return 0 if all(results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
# discretelabs

A collection of discrete mathematics exercises, usable as a library and
through three interactive commands. It has no dependencies outside the
standard library.

- **Text coding**: LZW coding over a fixed alphabet into a string of binary
  digits with growing code widths (`discretelabs.lzw`), run-length coding in
  the form `<symbol><count>,` (`discretelabs.rle`), and both applied part by
  part to a text cut into chunks (`discretelabs.chunked`).
- **Word dictionary**: a B+ tree of string keys with linked leaves
  (`discretelabs.bplustree`) and an interactive dictionary built on it
  (`discretelabs.dictionary_cli`).
- **Graphs**: random connected acyclic directed graphs whose vertex degrees
  follow a hypergeometric draw (`discretelabs.graph`), Shimbell's method and
  route counting, shortest and longest paths (`discretelabs.paths`),
  Ford–Fulkerson maximum flow and a minimum cost flow
  (`discretelabs.flows`), Kirchhoff's spanning tree count, Prim's and
  Borůvka's spanning trees and weighted Prüfer codes
  (`discretelabs.spanning`), Euler cycles, Hamiltonian cycles and the
  travelling salesman problem (`discretelabs.cycles`), and a menu over all of
  them (`discretelabs.graph_cli`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### discretelabs-codecs

```
discretelabs-codecs [--dir DIR] [--length N] [--seed SEED]
```

Generates a random text of `N` symbols (10000 by default), then codes and
decodes it with LZW, RLE, RLE followed by LZW and LZW followed by RLE, each
both whole and in chunks. Every step goes through a file in `DIR` (the
current directory by default): `File.txt`, `encode_File.txt`,
`decode_File.txt`, `rle_coder.txt` and `RLE_decoder.txt`. For each
combination it reports whether the decoded text matches the original, and
exits with status 1 if any does not.

### discretelabs-dictionary

```
discretelabs-dictionary [--order ORDER] [FILE ...]
```

Loads the words of the given text files (punctuation removed, first letter
lowered) into a B+ tree with at most `ORDER` keys per node (20 by default)
and then reads commands:

- `search <word>`
- `insert <word>`
- `delete <word>`
- `display` – every node depth first, leaves marked `Leaf:`
- `read <path>` – add the words of another file
- `clear`
- `exit`

Inserts and deletes report splits, transfers between siblings, merges and
root changes as they happen.

### discretelabs-graph

```
discretelabs-graph [--vertices N] [--seed SEED] [--tours FILE]
```

Builds a random graph of `N` vertices (asking for the number if it is not
given) and offers a menu of actions chosen by a single letter: weight
generation, Shimbell's method, route counting, Dijkstra, breadth-first and
longest path search, maximum flow, minimum cost flow of two thirds of the
maximum, spanning tree count, Prim, Borůvka, Prüfer coding, Euler and
Hamiltonian cycles with the travelling salesman problem, a new graph, and
`w` to leave. With `--tours`, every Hamiltonian cycle tried by the salesman
search is written to `FILE` with its length.

## Library use

```python
from discretelabs.lzw import lzw_decode, lzw_encode
from discretelabs.rle import rle_decode, rle_encode

assert rle_encode("aaabbc") == "a3,b2,c1,"
assert rle_decode("a3,b2,c1,") == "aaabbc"

bits = lzw_encode("papa pop")
assert lzw_decode(bits) == "papa pop"
```

```python
from discretelabs.bplustree import BPlusTree

tree = BPlusTree(order=20)
for word in ["pear", "apple", "plum"]:
    tree.insert(word)

assert "apple" in tree
assert list(tree) == ["apple", "pear", "plum"]
tree.remove("pear")          # raises KeyError for a missing key
assert len(tree) == 2
```

```python
from discretelabs.flows import ford_fulkerson
from discretelabs.spanning import count_spanning_trees

capacity = [[0, 3, 2], [0, 0, 2], [0, 0, 0]]
flow, residual = ford_fulkerson(capacity)     # from vertex 0 to the last vertex
assert flow == 4

triangle = [[0, 1, 1], [1, 0, 1], [1, 1, 0]]
assert count_spanning_trees(triangle) == 3
```

The graph algorithms work on plain square matrices (lists of lists of
integers) in which 0 means no edge. Vertices are numbered from 0 in the
library and from 1 in the interactive menu.

## Limits

- RLE coding treats digits and commas in the text as ordinary symbols only
  when they cannot be confused with counts; texts shorter than two
  characters encode to an empty string.
- LZW coding accepts only symbols of the alphabet it is given.
- The dictionary keeps its tree in memory only; nothing is saved between
  sessions.
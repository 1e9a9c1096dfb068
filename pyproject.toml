[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "discretelabs"
version = "0.1.0"
description = "Discrete mathematics exercises: LZW and RLE coding, a B+ tree word dictionary and classic graph algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "lzw",
    "rle",
    "compression",
    "b+ tree",
    "graph",
    "max flow",
    "min cost flow",
    "spanning tree",
    "prufer code",
    "euler cycle",
    "hamiltonian cycle",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
discretelabs-codecs = "discretelabs.chunked:main"
discretelabs-dictionary = "discretelabs.dictionary_cli:main"
discretelabs-graph = "discretelabs.graph_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["discretelabs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

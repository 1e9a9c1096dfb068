"""Interactive menu over a random graph and the graph algorithms."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from random import Random
from typing import TextIO, TypeVar

from discretelabs.cycles import (
    euler_cycle,
    has_hamiltonian_cycle,
    is_eulerian,
    make_eulerian,
    make_hamiltonian,
    travelling_salesman,
    vertex_degrees,
)
from discretelabs.flows import capacity_matrix, ford_fulkerson, min_cost_flow, target_flow
from discretelabs.graph import Graph, format_matrix
from discretelabs.paths import bfs_shortest, dijkstra, longest_paths, reconstruct_path
from discretelabs.spanning import (
    boruvka,
    count_spanning_trees,
    kirchhoff_matrix,
    prim,
    prufer_decode,
    prufer_encode,
    undirected_matrix,
)

T = TypeVar("T")
Reader = Callable[[], str]

MENU = """\
 a. Generate edge weights
 b. Path weights over a given number of arcs (Shimbell method)
 c. Check whether a route exists between two vertices
 d. Dijkstra's algorithm
 e. Breadth-first shortest path search
 f. Longest path search
 g. Ford-Fulkerson maximum flow
 h. Minimum cost of a flow of 2/3 of the maximum
 i. Number of spanning trees
 j. Prim's algorithm
 k. Boruvka's algorithm
 l. Encode the spanning tree as a Prufer code and decode it
 m. Check whether the graph is Eulerian and build an Euler cycle
 n. Check whether the graph is Hamiltonian and solve the travelling salesman problem
 o. Generate a new graph
 w. Leave the program"""

_NUMBER = re.compile(r"[0-9]+")
_SIGNED = re.compile(r"-?[0-9]+")


def _ask(reader: Reader, out: TextIO, prompt: str, parse: Callable[[str], T | None]) -> T:
    """Prompt until ``parse`` accepts a line; EOFError from the reader propagates."""
    while True:
        print(prompt, file=out)
        value = parse(reader().strip())
        if value is not None:
            return value


def _natural(text: str) -> int | None:
    return int(text) if _NUMBER.fullmatch(text) else None


def _parse_size(text: str) -> int | None:
    value = _natural(text)
    return value if value is not None and value > 1 else None


def _joined(vertices: Sequence[int]) -> str:
    return " ".join(str(vertex + 1) for vertex in vertices)


class GraphSession:
    """Menu-driven work on one graph, reading answers from ``reader`` and writing to ``out``."""

    def __init__(
        self,
        graph: Graph,
        reader: Reader = input,
        out: TextIO | None = None,
        rng: Random | None = None,
    ) -> None:
        self.graph = graph
        self.reader = reader
        self.out = out if out is not None else sys.stdout
        self.rng = rng or Random()
        self.tours_path: Path | None = None
        self._actions: dict[str, Callable[[], None]] = {
            "a": self._weights,
            "b": self._shimbell,
            "c": self._routes,
            "d": lambda: self._paths(dijkstra, "Shortest"),
            "e": lambda: self._paths(bfs_shortest, "Shortest"),
            "f": lambda: self._paths(longest_paths, "Longest"),
            "g": self._max_flow,
            "h": self._min_cost,
            "i": self._kirchhoff,
            "j": self._prim,
            "k": self._boruvka,
            "l": self._prufer,
            "m": self._euler,
            "n": self._hamilton,
            "o": self._new_graph,
        }
        self._reset()

    def _reset(self) -> None:
        self.capacity: list[list[int]] | None = None
        self.cost: list[list[int]] | None = None
        self.max_flow: int | None = None
        self.tree: list[list[int]] | None = None

    def _print(self, *parts: object) -> None:
        print(*parts, file=self.out)

    def _show(self, title: str, matrix: Sequence[Sequence[int]]) -> None:
        self._print(title)
        self._print(format_matrix(matrix))
        self._print()

    def _ask(self, prompt: str, parse: Callable[[str], T | None]) -> T:
        return _ask(self.reader, self.out, prompt, parse)

    def _vertex(self, prompt: str) -> int:
        def parse(text: str) -> int | None:
            value = _natural(text)
            if value is None or value == 0:
                return None
            if value > self.graph.size:
                self._print("No such vertex")
                return None
            return value - 1

        return self._ask(prompt, parse)

    def _pair(self) -> tuple[int, int]:
        source = self._vertex("Enter the vertex to start from")
        target = self._vertex("Enter the vertex to go to")
        return source, target

    def handle(self, choice: str) -> bool:
        """Run one menu action; return False when the session should end."""
        choice = choice.strip()
        if choice == "w":
            return False
        action = self._actions.get(choice)
        if action is None:
            self._print("Choose an action")
            return True
        try:
            action()
        except ValueError as error:
            self._print(f"Error: {error}")
        return True

    def run(self) -> None:
        """Show the menu and handle choices until 'w' or the end of input."""
        self._print(MENU)
        while True:
            try:
                if not self.handle(self.reader()):
                    return
            except EOFError:
                return

    def _build_flow_matrices(self) -> None:
        self.cost = [row[:] for row in self.graph.weights]
        self.capacity = capacity_matrix(self.graph.adjacency, self.graph.weights, self.rng)
        self.max_flow = None

    def _ensure_flow_matrices(self) -> tuple[list[list[int]], list[list[int]]]:
        if self.capacity is None or self.cost is None:
            self._build_flow_matrices()
        assert self.capacity is not None and self.cost is not None
        return self.capacity, self.cost

    def _weights(self) -> None:
        kind = self._ask(
            "Enter 1 for positive weights only, 2 to allow negative weights",
            lambda text: int(text) if text in ("1", "2") else None,
        )
        if kind == 1:
            maximum = self._ask(
                "Enter the largest positive weight",
                lambda text: value if (value := _natural(text)) else None,
            )
            self.graph.generate_weights(maximum, self.rng)
        else:
            minimum = self._ask(
                "Enter the smallest negative weight",
                lambda text: int(text) if _SIGNED.fullmatch(text) and int(text) < 0 else None,
            )
            maximum = self._ask(
                "Enter the largest weight; it must exceed the smallest",
                lambda text: int(text) if _SIGNED.fullmatch(text) and int(text) > minimum else None,
            )
            self.graph.generate_signed_weights(minimum, maximum, self.rng)
        self.tree = None
        self._show("Weight matrix", self.graph.weights)
        self._build_flow_matrices()

    def _shimbell(self) -> None:
        mode = self._ask(
            "Enter min for the shortest paths or max for the longest paths",
            lambda text: text if text in ("min", "max") else None,
        )

        def parse(text: str) -> int | None:
            value = _natural(text)
            if value == 0:
                self._print("A path cannot consist of 0 edges")
                return None
            return value if value is not None and value <= self.graph.size else None

        edges = self._ask("Enter the number of edges in a path", parse)
        self._show(f"Paths of {edges} edges ({mode})", self.graph.shimbell(mode, edges))

    def _routes(self) -> None:
        source, target = self._pair()
        if source == target:
            self._print("You are already at this vertex; there is no separate route")
            return
        count = self.graph.count_routes(source, target)
        if count == 0:
            self._print(f"No routes from {source + 1} to {target + 1}")
        else:
            self._print(f"Routes from {source + 1} to {target + 1} exist: there are {count}")

    def _paths(self, finder: Callable, label: str) -> None:
        source, target = self._pair()
        distances, previous, iterations = finder(self.graph.weights, source)
        shown = " ".join("X" if value is None else str(value) for value in distances)
        self._print(f"Distances from vertex {source + 1}: {shown}")
        if distances[target] is None:
            self._print(f"No path from {source + 1} to {target + 1}")
        else:
            self._print(
                f"{label} distance from {source + 1} to {target + 1} is {distances[target]}"
            )
        if source == target:
            self._print("You entered the same vertex twice; there is no separate path")
        else:
            path = reconstruct_path(previous, target)
            if path:
                self._print(f"Path from {source + 1} to {target + 1}: {_joined(path)}")
            else:
                self._print("The path does not exist")
        self._print(f"Iterations: {iterations}")

    def _max_flow(self) -> None:
        capacity, cost = self._ensure_flow_matrices()
        self._show("Cost matrix", cost)
        self._show("Capacity matrix", capacity)
        flow, residual = ford_fulkerson(capacity)
        self.max_flow = flow
        self._print(f"Maximum flow is {flow}")
        self._show("Residual matrix", residual)

    def _min_cost(self) -> None:
        capacity, cost = self._ensure_flow_matrices()
        if self.max_flow is None:
            self.max_flow, _ = ford_fulkerson(capacity)
        flow = target_flow(self.max_flow)
        total, units = min_cost_flow(capacity, cost, flow)
        for number, (price, path) in enumerate(units, start=1):
            self._print(f"Unit {number} costs {price}")
            self._print(f"It passes through: {_joined(path)}")
        self._print(f"Minimum cost of a flow of {flow} is {total}")

    def _undirected_weights(self) -> list[list[int]]:
        return undirected_matrix(self.graph.weights)

    def _kirchhoff(self) -> None:
        adjacency = undirected_matrix(self.graph.adjacency)
        self._show("Undirected adjacency matrix", adjacency)
        self._show("Kirchhoff matrix", kirchhoff_matrix(adjacency))
        self._print(f"Number of spanning trees: {count_spanning_trees(adjacency)}")

    def _print_tree(self, edges: Sequence[tuple[int, int, int]]) -> None:
        self._print("Vertices     Weight")
        for u, v, weight in edges:
            self._print(f"{u + 1} - {v + 1}\t{weight}")
        self._print(f"Total: {sum(weight for _, _, weight in edges)}")

    def _prim(self) -> None:
        edges, iterations = prim(self._undirected_weights())
        self._print("Prim's algorithm")
        self._print_tree(edges)
        self._print(f"Iterations: {iterations}")

    def _store_tree(self, edges: Sequence[tuple[int, int, int]]) -> list[list[int]]:
        size = self.graph.size
        tree = [[0] * size for _ in range(size)]
        for u, v, weight in edges:
            tree[u][v] = tree[v][u] = weight
        self.tree = tree
        return tree

    def _boruvka(self) -> None:
        edges, iterations = boruvka(self._undirected_weights())
        self._print("Boruvka's algorithm")
        self._print_tree(edges)
        self._print(f"Iterations: {iterations}")
        self._store_tree(edges)

    def _prufer(self) -> None:
        tree = self.tree
        if tree is None:
            edges, _ = boruvka(self._undirected_weights())
            tree = self._store_tree(edges)
        code, weights = prufer_encode(tree)
        self._print(f"Prufer code: ( {_joined(code)} )")
        self._print("Decoded")
        for u, v, weight in prufer_decode(code, weights):
            self._print(f"{u + 1} - {v + 1}\t{weight}")

    def _euler(self) -> None:
        matrix = self._undirected_weights()
        self._show("Undirected graph matrix", matrix)
        if self.graph.size == 2:
            self._print("A graph with two vertices is not Eulerian")
            return
        if is_eulerian(vertex_degrees(matrix)):
            self._print("The graph is Eulerian")
        else:
            self._print("The graph is not Eulerian, modifying it")
            matrix, added, removed = make_eulerian(matrix, self.rng)
            for u, v, weight in added:
                self._print(f"Adding edge {u + 1}-{v + 1} of length {weight}")
            for u, v in removed:
                self._print(f"Removing edge {u + 1}-{v + 1}")
            self._show("Modified undirected graph matrix", matrix)
        self._print(f"Euler cycle: ( {_joined(euler_cycle(matrix))} )")

    def _hamilton(self) -> None:
        matrix = self._undirected_weights()
        if self.graph.size == 2:
            self._print("A graph with two vertices is not Hamiltonian")
            return
        self._show("Undirected graph matrix", matrix)
        if has_hamiltonian_cycle(matrix):
            self._print("The graph is Hamiltonian")
        else:
            self._print("The graph is not Hamiltonian, modifying it")
            matrix, added = make_hamiltonian(matrix, self.rng)
            for u, v, weight in added:
                self._print(f"Adding edge {u + 1}-{v + 1} of length {weight}")
            self._show("Modified graph matrix", matrix)
            if has_hamiltonian_cycle(matrix):
                self._print("Now the graph is Hamiltonian")
            else:
                self._print("The graph is not Hamiltonian")
        path, cost, tours = travelling_salesman(matrix)
        if self.tours_path is not None:
            with open(self.tours_path, "w", encoding="utf-8") as handle:
                for tour, tour_cost in tours:
                    handle.write(f"{_joined(tour)}\tDistance: {tour_cost}\n")
        self._print(f"Travelling salesman: {_joined(path)}\tDistance: {cost}")

    def _new_graph(self) -> None:
        def parse(text: str) -> int | None:
            value = _natural(text)
            if value in (0, 1):
                self._print("Such a graph does not exist, enter again")
            return _parse_size(text)

        size = self._ask("Enter the number of vertices", parse)
        self.graph = Graph.random(size, self.rng)
        self._reset()
        self._show("Adjacency matrix", self.graph.adjacency)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Explore a random acyclic graph from a menu.")
    parser.add_argument("--vertices", type=int, default=None, help="number of vertices")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--tours", type=Path, default=None, help="file for every salesman tour")
    args = parser.parse_args(argv)
    if args.vertices is not None and args.vertices < 2:
        parser.error("a graph needs at least two vertices")

    rng = Random(args.seed)
    size = args.vertices
    if size is None:
        try:
            size = _ask(input, sys.stdout, "Enter the number of vertices", _parse_size)
        except EOFError:
            return 0
    graph = Graph.random(size, rng)
    print("Adjacency matrix")
    print(format_matrix(graph.adjacency))
    print()
    session = GraphSession(graph, input, sys.stdout, rng)
    session.tours_path = args.tours
    session.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
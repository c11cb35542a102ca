"""2019 day 6 — the universal orbit map."""

from __future__ import annotations

import networkx as nx  # type: ignore[import-untyped]

from advent.core.day import Day, answer
from advent.core.errors import ParseError
from advent.core.input import Input

YOU = "YOU"
SANTA = "SAN"


def parse_orbit(text: str) -> tuple[str, str]:
    """Parse ``"A)B"`` (B orbits A) into ``(A, B)``."""
    parts = [p.strip() for p in text.split(")")]
    if len(parts) != 2 or not all(parts):
        raise ParseError(f"expected A)B, got {text!r}")
    return parts[0], parts[1]


def build_orbit_graph(orbits: tuple[tuple[str, str], ...]) -> nx.DiGraph:
    """Directed graph with an edge from each body to everything orbiting it."""
    graph = nx.DiGraph()
    graph.add_edges_from(orbits)
    return graph


def total_orbits(graph: nx.DiGraph) -> int:
    """Direct plus indirect orbits: the depth of every body, summed."""
    return sum(len(nx.ancestors(graph, body)) for body in graph.nodes)


def orbital_transfers(graph: nx.DiGraph, source: str = YOU, target: str = SANTA) -> int:
    """Transfers needed to move from what *source* orbits to what *target* orbits."""
    if source not in graph or target not in graph:
        raise ValueError(f"{source} or {target} missing from the orbit map")
    # Path runs source -> parent ... parent -> target; the end hops are not transfers.
    return nx.shortest_path_length(graph.to_undirected(as_view=True), source, target) - 2


class Day6(Day):
    title = "Universal Orbit Map"

    def __init__(self, input: Input) -> None:  # noqa: A002
        self.graph = build_orbit_graph(tuple(input.decode_many("\n", parse_orbit)))

    async def part_one(self) -> str:
        return answer(total_orbits(self.graph))

    async def part_two(self) -> str:
        if YOU not in self.graph or SANTA not in self.graph:
            return answer(None)
        return answer(orbital_transfers(self.graph))

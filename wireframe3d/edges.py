"""Edges of a wireframe model: pairs of 1-based vertex numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterator, Sequence

from wireframe3d.geometry import DataError, read_count


@dataclass(frozen=True)
class Edge:
    """A segment between two vertices, numbered from 1."""

    start: int
    end: int

    def check(self, point_count: int) -> None:
        """Raise DataError unless both ends name existing vertices."""
        if not (1 <= self.start <= point_count and 1 <= self.end <= point_count):
            raise DataError(f"edge {self.start}-{self.end} is invalid")


def read_edge(tokens: Iterator[str]) -> Edge:
    """Read one edge, two vertex numbers, from the token stream."""
    ends = []
    for _ in range(2):
        token = next(tokens, None)
        try:
            if token is None:
                raise ValueError
            ends.append(int(token))
        except ValueError:
            raise DataError("invalid edge format") from None
    return Edge(*ends)


def read_edges(tokens: Iterator[str]) -> list[Edge]:
    """Read an edge count followed by that many edges."""
    count = read_count(tokens, "edge")
    return [read_edge(tokens) for _ in range(count)]


def export_edges(stream: IO[str], edges: Sequence[Edge]) -> None:
    """Write the edge count and the edges in the model text format."""
    stream.write(f"{len(edges)}\n")
    for edge in edges:
        stream.write(f"{edge.start} {edge.end}\n")


def check_edges(edges: Sequence[Edge], point_count: int) -> None:
    """Raise DataError if there are no edges, no points, or a bad edge."""
    if not edges or point_count == 0:
        raise DataError("figure is not set")
    for edge in edges:
        edge.check(point_count)
"""A wireframe figure: vertices, edges and the center they turn about."""

from __future__ import annotations

import io
from dataclasses import dataclass, field

from wireframe3d.edges import Edge, check_edges, export_edges, read_edges
from wireframe3d.geometry import (
    FileError,
    MoveData,
    Point,
    RotateData,
    ScaleData,
    export_points,
    points_center,
    read_points,
    rotate_points,
    scale_points,
    tokenize,
    translate_points,
)


def _origin() -> Point:
    return Point(0.0, 0.0, 0.0)


@dataclass
class Figure:
    """Vertices and edges of a model, with the center used for transforms."""

    points: list[Point] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    center: Point = field(default_factory=_origin)

    def check(self) -> None:
        """Raise DataError unless the figure has vertices and valid edges."""
        check_edges(self.edges, len(self.points))

    def update_center(self) -> None:
        """Recompute the center as the mean of the vertices."""
        self.center = points_center(self.points)

    def translate(self, data: MoveData) -> None:
        """Move the figure and its center by the given offsets."""
        self.check()
        self.center = self.center.translated(data.dx, data.dy, data.dz)
        self.points = translate_points(self.points, data)

    def scale(self, data: ScaleData) -> None:
        """Scale the figure about its center."""
        self.check()
        self.points = scale_points(self.points, self.center, data)

    def rotate(self, data: RotateData) -> None:
        """Rotate the figure about its center."""
        self.check()
        self.points = rotate_points(self.points, self.center, data)

    def export(self, filename: str) -> None:
        """Write the figure to a file in the model text format."""
        self.check()
        buffer = io.StringIO()
        export_points(buffer, self.points)
        export_edges(buffer, self.edges)
        try:
            with open(filename, "w", encoding="utf-8") as stream:
                stream.write(buffer.getvalue())
        except OSError as exc:
            raise FileError(f"error while opening the file: {filename}") from exc


def parse_figure(text: str) -> Figure:
    """Build a checked figure from model text: vertices, then edges."""
    tokens = tokenize(text)
    points = read_points(tokens)
    edges = read_edges(tokens)
    figure = Figure(points=points, edges=edges)
    figure.check()
    return figure


def read_figure(filename: str) -> Figure:
    """Read and check a figure from a file."""
    try:
        with open(filename, encoding="utf-8") as stream:
            text = stream.read()
    except OSError as exc:
        raise FileError(f"error while opening the file: {filename}") from exc
    return parse_figure(text)


def load_figure(filename: str) -> Figure:
    """Read a figure from a file and compute its center."""
    figure = read_figure(filename)
    figure.update_center()
    return figure
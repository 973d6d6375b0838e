"""Drawing a figure's edges onto a two-dimensional scene."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

from wireframe3d.edges import Edge
from wireframe3d.figure import Figure
from wireframe3d.geometry import Point, SceneError


class Scene(Protocol):
    """Anything that can clear itself and draw straight lines."""

    def add_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def clear(self) -> None: ...


@dataclass(frozen=True)
class Line:
    """A segment between two points."""

    start: Point
    end: Point


@dataclass
class RecordingScene:
    """A scene that keeps the lines drawn on it."""

    lines: list[tuple[float, float, float, float]] = field(default_factory=list)

    def add_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.lines.append((x1, y1, x2, y2))

    def clear(self) -> None:
        self.lines.clear()


def to_scene_point(point: Point, width: float, height: float) -> Point:
    """Shift a point so that the model origin lands at the scene's middle."""
    return Point(point.x + width / 2, point.y + height / 2, point.z)


def create_line(points: Sequence[Point], edge: Edge) -> Line:
    """Return the segment an edge names; raise DataError for a bad edge."""
    edge.check(len(points))
    return Line(points[edge.start - 1], points[edge.end - 1])


def draw_figure(
    figure: Figure, scene: Optional[Scene], width: float, height: float
) -> None:
    """Clear the scene and draw every edge of the figure onto it."""
    figure.check()
    if scene is None:
        raise SceneError("no scene to draw on")
    scene.clear()
    for edge in figure.edges:
        line = create_line(figure.points, edge)
        start = to_scene_point(line.start, width, height)
        end = to_scene_point(line.end, width, height)
        scene.add_line(start.x, start.y, end.x, end.y)
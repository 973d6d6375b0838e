"""Points of a wireframe model: parsing, export and affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Sequence

PI = 3.141592

MAX_VERTICES = 100
MAX_EDGES = 200


class FigureError(Exception):
    """Base class for every error raised while handling a figure."""


class FileError(FigureError):
    """A file could not be opened or used."""


class DataError(FigureError):
    """The figure data is missing, malformed or inconsistent."""


class SceneError(FigureError):
    """There is no scene to draw on."""


@dataclass(frozen=True)
class Point:
    """A vertex in three-dimensional space."""

    x: float
    y: float
    z: float

    def translated(self, dx: float, dy: float, dz: float) -> Point:
        return Point(self.x + dx, self.y + dy, self.z + dz)

    def scaled(self, sx: float, sy: float, sz: float) -> Point:
        return Point(self.x * sx, self.y * sy, self.z * sz)

    def rotated_x(self, cos_a: float, sin_a: float) -> Point:
        return Point(
            self.x,
            self.y * cos_a - self.z * sin_a,
            self.y * sin_a + self.z * cos_a,
        )

    def rotated_y(self, cos_a: float, sin_a: float) -> Point:
        return Point(
            self.x * cos_a + self.z * sin_a,
            self.y,
            -self.x * sin_a + self.z * cos_a,
        )

    def rotated_z(self, cos_a: float, sin_a: float) -> Point:
        return Point(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
            self.z,
        )


@dataclass(frozen=True)
class MoveData:
    """Offsets along each axis."""

    dx: float = 0.0
    dy: float = 0.0
    dz: float = 0.0


@dataclass(frozen=True)
class ScaleData:
    """Scale factors along each axis."""

    sx: float = 1.0
    sy: float = 1.0
    sz: float = 1.0

    def validate(self) -> None:
        """Raise DataError unless every factor is strictly positive."""
        if self.sx <= 0 or self.sy <= 0 or self.sz <= 0:
            raise DataError("scale factors must be positive")


@dataclass(frozen=True)
class RotateData:
    """Rotation angles in degrees about each axis."""

    ax: float = 0.0
    ay: float = 0.0
    az: float = 0.0


def tokenize(text: str) -> Iterator[str]:
    """Split model text into a stream of whitespace-separated tokens."""
    return iter(text.split())


def to_rad(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * PI / 180.0


def read_count(tokens: Iterator[str], what: str) -> int:
    """Read a non-negative element count from the token stream."""
    token = next(tokens, None)
    try:
        if token is None:
            raise ValueError
        count = int(token)
    except ValueError:
        raise DataError(f"invalid {what} count format") from None
    if count < 0:
        raise DataError(f"invalid {what} count format")
    return count


def read_point(tokens: Iterator[str]) -> Point:
    """Read one vertex, three numbers, from the token stream."""
    coords = []
    for _ in range(3):
        token = next(tokens, None)
        try:
            if token is None:
                raise ValueError
            coords.append(float(token))
        except ValueError:
            raise DataError("invalid vertex format") from None
    return Point(*coords)


def read_points(tokens: Iterator[str]) -> list[Point]:
    """Read a vertex count followed by that many vertices."""
    count = read_count(tokens, "vertex")
    return [read_point(tokens) for _ in range(count)]


def export_points(stream: IO[str], points: Sequence[Point]) -> None:
    """Write the vertex count and the vertices in the model text format."""
    stream.write(f"{len(points)}\n")
    for point in points:
        stream.write(f"{point.x:.6f} {point.y:.6f} {point.z:.6f}\n")


def points_center(points: Sequence[Point]) -> Point:
    """Return the arithmetic mean of the points."""
    if not points:
        raise DataError("cannot find the center of no points")
    count = len(points)
    return Point(
        sum(p.x for p in points) / count,
        sum(p.y for p in points) / count,
        sum(p.z for p in points) / count,
    )


def translate_points(points: Iterable[Point], data: MoveData) -> list[Point]:
    """Shift every point by the given offsets."""
    return [p.translated(data.dx, data.dy, data.dz) for p in points]


def _to_origin(points: Iterable[Point], center: Point) -> list[Point]:
    return translate_points(points, MoveData(-center.x, -center.y, -center.z))


def _from_origin(points: Iterable[Point], center: Point) -> list[Point]:
    return translate_points(points, MoveData(center.x, center.y, center.z))


def scale_points(points: Iterable[Point], center: Point, data: ScaleData) -> list[Point]:
    """Scale the points about a center; factors must be positive."""
    data.validate()
    moved = _to_origin(points, center)
    scaled = [p.scaled(data.sx, data.sy, data.sz) for p in moved]
    return _from_origin(scaled, center)


def _rotation(angle: float) -> tuple[float, float]:
    radians = to_rad(angle)
    return math.cos(radians), math.sin(radians)


def rotate_points(points: Iterable[Point], center: Point, data: RotateData) -> list[Point]:
    """Rotate the points about a center: first about x, then y, then z."""
    result = _to_origin(points, center)
    cos_a, sin_a = _rotation(data.ax)
    result = [p.rotated_x(cos_a, sin_a) for p in result]
    cos_a, sin_a = _rotation(data.ay)
    result = [p.rotated_y(cos_a, sin_a) for p in result]
    cos_a, sin_a = _rotation(data.az)
    result = [p.rotated_z(cos_a, sin_a) for p in result]
    return _from_origin(result, center)
import math
from collections.abc import Generator, Sequence

from shapely.geometry import LineString, Point

from geometry_type.constants import SINGLE_POINT, TWO_DIMENSIONAL
from geometry_type.models import InvalidArgumentError
from geometry_type.types import CoordinatePair, ShapelyGeometry


def make_point(points: Sequence[CoordinatePair], i: int) -> Point:
    return Point(*make_vertex(points, i))


def make_vertex(points: Sequence[CoordinatePair], i: int) -> CoordinatePair:
    x, y = (float(c) for c in points[i])
    if not (math.isfinite(x) and math.isfinite(y)):
        raise InvalidArgumentError(f"coordinates must be finite, got ({x}, {y}) at index {i}")
    return x, y


def make_segment(points: Sequence[CoordinatePair], start: int, end: int) -> tuple[CoordinatePair, CoordinatePair]:
    return make_vertex(points, start), make_vertex(points, end)


def build_geometry(points: Sequence[CoordinatePair]) -> ShapelyGeometry:
    """Build a point, line or polyline from an ordered sequence of (x, y) pairs

    One pair gives a point, two pairs a line between them, more pairs a polyline
    starting with the line between the first two points, extended with one segment
    for every following point. Points are neither reordered, deduplicated nor is
    the path closed.

    Raises:
        InvalidArgumentError: no points given
    """
    n = len(points)
    if n == 0:
        raise InvalidArgumentError("invalid number of points: 0")
    if n == SINGLE_POINT:
        return make_point(points, 0)

    vertices = list(make_segment(points, 0, 1))
    for i in range(TWO_DIMENSIONAL, n):
        append_segment(vertices, make_segment(points, i - 1, i))
    return LineString(vertices)


def append_segment(vertices: list[CoordinatePair], segment: tuple[CoordinatePair, CoordinatePair]) -> None:
    # vertices is extended in place, the polyline is built once all segments are chained
    start, end = segment
    if vertices[-1] != start:
        raise InvalidArgumentError(f"segment starting at {start} is not connected to polyline ending at {vertices[-1]}")
    vertices.append(end)


def segments(geometry: ShapelyGeometry) -> Generator[tuple[CoordinatePair, CoordinatePair], None, None]:
    """Yield the consecutive segments of a line as (start, end) coordinate pairs"""
    coords = list(geometry.coords)
    yield from zip(coords[:-1], coords[1:])

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from geojson_pydantic import LineString as GeojsonLineString
from geojson_pydantic import Point as GeojsonPoint
from shapely.geometry import LineString, Point

CoordinatePair = tuple[float, float]

ShapelyGeometry: TypeAlias = Point | LineString  # noqa: UP040

GeojsonGeometry: TypeAlias = GeojsonPoint | GeojsonLineString  # noqa: UP040

JsonTree: TypeAlias = Mapping[Any, Any] | Sequence[Any] | str | int | float | bool | None  # noqa: UP040

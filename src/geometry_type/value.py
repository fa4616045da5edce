from functools import cached_property

from geometry_type.builder import build_geometry
from geometry_type.crs import resolve_spatial_reference
from geometry_type.models import OgcGeometry, SpatialReference
from geometry_type.serialization import (
    esri_json_to_geometry,
    geojson_to_geometry,
    geometry_to_esri_json,
    to_ogc_view,
    validate_geometry,
)
from geometry_type.types import CoordinatePair, ShapelyGeometry


class GeometryValue:
    """Geometry value wrapping a shapely Point or LineString and its spatial reference

    A value without geometry is the null geometry, it serializes to None. Values are
    immutable, the GeoJSON view is derived from geometry and spatial reference on first
    use and is not part of equality.
    """

    def __init__(
        self: "GeometryValue",
        geometry: ShapelyGeometry | None = None,
        reference: SpatialReference | None = None,
    ) -> None:
        object.__setattr__(self, "_geometry", validate_geometry(geometry) if geometry is not None else None)
        object.__setattr__(self, "_reference", resolve_spatial_reference(reference))

    @classmethod
    def from_points(
        cls, *points: CoordinatePair, reference: SpatialReference | None = None  # noqa: ANN102
    ) -> "GeometryValue":
        """Build a point, line or polyline value from (x, y) pairs

        Raises:
            InvalidArgumentError: no points given
        """
        return cls(build_geometry(points), reference)

    @classmethod
    def from_geojson(cls, geojson: str) -> "GeometryValue":  # noqa: ANN102
        return cls(geojson_to_geometry(geojson))

    @classmethod
    def from_json(cls, json: str) -> "GeometryValue":  # noqa: ANN102
        reference, geometry = esri_json_to_geometry(json)
        return cls(geometry, reference)

    @property
    def geometry(self: "GeometryValue") -> ShapelyGeometry | None:
        return self._geometry

    @property
    def reference(self: "GeometryValue") -> SpatialReference:
        return self._reference

    @cached_property
    def ogc_view(self: "GeometryValue") -> OgcGeometry | None:
        if self._geometry is None:
            return None
        return to_ogc_view(self._reference, self._geometry)

    def to_geojson(self: "GeometryValue") -> str | None:
        if self.ogc_view is None:
            return None
        return self.ogc_view.to_geojson()

    def to_json(self: "GeometryValue") -> str | None:
        if self._geometry is None:
            return None
        return geometry_to_esri_json(self._reference, self._geometry)

    def __setattr__(self: "GeometryValue", name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self: "GeometryValue", name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self: "GeometryValue", other: object) -> bool:
        if not isinstance(other, GeometryValue):
            return NotImplemented
        if self._reference != other._reference:
            return False
        if self._geometry is None or other._geometry is None:
            return self._geometry is None and other._geometry is None
        return bool(self._geometry == other._geometry)

    def __hash__(self: "GeometryValue") -> int:
        # same data as __eq__, 0.0 and -0.0 hash alike
        if self._geometry is None:
            return hash((self._reference.wkid, None))
        return hash((self._reference.wkid, self._geometry.geom_type, tuple(self._geometry.coords)))

    def __str__(self: "GeometryValue") -> str:
        return str(self.to_geojson())

    def __repr__(self: "GeometryValue") -> str:
        wkt = self._geometry.wkt if self._geometry is not None else None
        return f"GeometryValue({wkt}, {self._reference})"

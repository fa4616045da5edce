from functools import lru_cache
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat
from pyproj import CRS as ProjCrs  # noqa: N811
from pyproj.exceptions import CRSError

from geometry_type.constants import DEFAULT_AUTHORITY
from geometry_type.types import GeojsonGeometry
from geometry_type.util import extract_authority_code, format_as_uri


class GeometryTypeError(Exception):
    type_str = "geometry-type/error"
    title = "Geometry Type Error"
    pass


class InvalidArgumentError(GeometryTypeError, ValueError):
    type_str = "geometry-type/invalid-argument"
    title = "Invalid Argument"
    pass


class GeometryParseError(GeometryTypeError, ValueError):
    type_str = "geometry-type/parse-error"
    title = "Geometry Parse Error"

    def __init__(
        self: "GeometryParseError",
        reason: str,
        text: str | None = None,
    ) -> None:
        message = f"unable to parse geometry, {reason}"
        super().__init__(message)
        self.reason = reason
        self.text = text


class UnsupportedGeometryTypeError(GeometryParseError):
    type_str = "geometry-type/unsupported-geometry-type"
    title = "Unsupported Geometry Type"

    def __init__(
        self: "UnsupportedGeometryTypeError",
        geometry_type: str,
        text: str | None = None,
    ) -> None:
        super().__init__(f"geometry type {geometry_type} is not supported", text)
        self.geometry_type = geometry_type


@lru_cache
def _crs_from_epsg(wkid: int) -> ProjCrs:
    return ProjCrs.from_epsg(wkid)


class SpatialReference(BaseModel):
    """Spatial reference of a geometry, identified by its EPSG well-known id (wkid)"""

    model_config = ConfigDict(frozen=True)

    wkid: int

    @classmethod
    def create(cls, wkid: int) -> "SpatialReference":  # noqa: ANN102
        """Create a spatial reference for an EPSG code, checked against the PROJ database

        Raises:
            InvalidArgumentError: wkid is not a known EPSG code
        """
        try:
            _crs_from_epsg(wkid)
        except CRSError as e:
            raise InvalidArgumentError(f"unknown spatial reference wkid: {wkid}") from e
        return cls(wkid=wkid)

    @classmethod
    def from_crs_str(cls, crs_str: str) -> "SpatialReference":  # noqa: ANN102
        # accepts EPSG:28992 as well as http://www.opengis.net/def/crs/EPSG/0/28992
        try:
            auth, code = extract_authority_code(crs_str)
        except ValueError as e:
            raise InvalidArgumentError(str(e)) from e
        if auth.upper() != DEFAULT_AUTHORITY or not code.isdigit():
            raise InvalidArgumentError(
                f"expected a spatial reference of authority {DEFAULT_AUTHORITY} with numeric code, got {crs_str}"
            )
        return cls.create(int(code))

    def get_crs(self: "SpatialReference") -> ProjCrs:
        return _crs_from_epsg(self.wkid)

    def to_crs_str(self: "SpatialReference") -> str:
        return f"{DEFAULT_AUTHORITY}:{self.wkid}"

    def to_uri(self: "SpatialReference") -> str:
        return format_as_uri(self.to_crs_str())

    def __str__(self: "SpatialReference") -> str:
        return self.to_crs_str()


class EsriSpatialReference(BaseModel):
    """Esri spatialReference member, any of wkid, latestWkid or wkt may be given"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    wkid: int | None = None
    latest_wkid: int | None = Field(default=None, alias="latestWkid")
    wkt: str | None = None

    @classmethod
    def from_spatial_reference(cls, reference: SpatialReference) -> "EsriSpatialReference":  # noqa: ANN102
        return cls(wkid=reference.wkid)

    def to_spatial_reference(self: "EsriSpatialReference") -> SpatialReference | None:
        """Spatial reference named by this member, None when it names no EPSG code

        Raises:
            GeometryParseError: wkt is not a valid WKT coordinate reference system
        """
        # latestWkid holds the EPSG code where wkid is a legacy Esri code (102100 vs 3857)
        wkid = self.latest_wkid if self.latest_wkid is not None else self.wkid
        if wkid is None and self.wkt is not None:
            try:
                wkid = ProjCrs.from_wkt(self.wkt).to_epsg()
            except CRSError as e:
                raise GeometryParseError(f"invalid spatial reference wkt: {self.wkt}") from e
        return SpatialReference(wkid=wkid) if wkid is not None else None


EsriPosition = tuple[FiniteFloat, FiniteFloat]


class EsriPoint(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    x: FiniteFloat
    y: FiniteFloat
    spatial_reference: EsriSpatialReference | None = Field(default=None, alias="spatialReference")


class EsriPolyline(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    paths: Annotated[
        list[Annotated[list[EsriPosition], Field(min_length=2)]],
        Field(min_length=1, max_length=1),
    ]
    spatial_reference: EsriSpatialReference | None = Field(default=None, alias="spatialReference")


EsriGeometry = EsriPoint | EsriPolyline


class OgcGeometry(BaseModel):
    """GeoJSON view of a geometry together with its spatial reference"""

    model_config = ConfigDict(frozen=True)

    spatial_reference: SpatialReference
    geometry: GeojsonGeometry

    def to_geojson(self: "OgcGeometry") -> str:
        return self.geometry.model_dump_json(exclude_none=True)

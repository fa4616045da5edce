import json
import logging
import math
from functools import partial

from geojson_pydantic.geometries import parse_geometry_obj
from pydantic import TypeAdapter, ValidationError
from shapely.geometry import LineString, Point, mapping, shape

from geometry_type.constants import GEOJSON_GEOMETRY_TYPES
from geometry_type.models import (
    EsriGeometry,
    EsriPoint,
    EsriPolyline,
    EsriSpatialReference,
    GeometryParseError,
    InvalidArgumentError,
    OgcGeometry,
    SpatialReference,
    UnsupportedGeometryTypeError,
)
from geometry_type.types import ShapelyGeometry

logger = logging.getLogger(__name__)

esri_geometry_adapter: TypeAdapter[EsriGeometry] = TypeAdapter(EsriGeometry)


def has_finite_coordinates(geometry: ShapelyGeometry) -> bool:
    return all(math.isfinite(c) for position in geometry.coords for c in position)


def validate_geometry(geometry: ShapelyGeometry) -> ShapelyGeometry:
    # exact type, LinearRing is a LineString subclass without a GeoJSON counterpart
    geom_type = getattr(geometry, "geom_type", type(geometry).__name__)
    if not isinstance(geometry, (Point, LineString)) or geom_type not in GEOJSON_GEOMETRY_TYPES:
        raise InvalidArgumentError(f"unsupported geometry type: {geom_type}")
    if geometry.is_empty:
        raise InvalidArgumentError(f"empty {geom_type} geometries are not supported")
    if not has_finite_coordinates(geometry):
        raise InvalidArgumentError(f"{geom_type} has non-finite coordinates: {geometry.wkt}")
    if geometry.has_z:
        raise InvalidArgumentError(f"only two dimensional coordinates are supported, got {geometry.wkt}")
    return geometry


def to_ogc_view(reference: SpatialReference, geometry: ShapelyGeometry) -> OgcGeometry:
    return OgcGeometry(
        spatial_reference=reference,
        geometry=parse_geometry_obj(mapping(geometry)),
    )


def geometry_to_geojson(reference: SpatialReference, geometry: ShapelyGeometry) -> str:
    return to_ogc_view(reference, geometry).to_geojson()


def geometry_to_esri_json(reference: SpatialReference, geometry: ShapelyGeometry) -> str:
    esri_geometry: EsriGeometry
    if isinstance(geometry, Point):
        esri_geometry = EsriPoint(
            x=geometry.x,
            y=geometry.y,
            spatial_reference=EsriSpatialReference.from_spatial_reference(reference),
        )
    elif isinstance(geometry, LineString):
        esri_geometry = EsriPolyline(
            paths=[list(geometry.coords)],
            spatial_reference=EsriSpatialReference.from_spatial_reference(reference),
        )
    else:
        raise InvalidArgumentError(f"unsupported geometry type: {geometry.geom_type}")
    return esri_geometry.model_dump_json(by_alias=True, exclude_none=True)


def reject_constant(text: str, constant: str) -> float:
    raise GeometryParseError(f"invalid JSON: {constant} is not a JSON number", text)


def geojson_to_geometry(text: str) -> ShapelyGeometry:
    """Parse a GeoJSON geometry object into a shapely geometry

    Args:
        text: GeoJSON text of a Point or LineString geometry object

    Raises:
        GeometryParseError: text is not valid JSON or not a valid GeoJSON geometry object
        UnsupportedGeometryTypeError: text describes a geometry type other than Point or LineString

    Returns:
        shapely Point or LineString
    """
    try:
        obj = json.loads(text, parse_constant=partial(reject_constant, text))
    except json.JSONDecodeError as e:
        raise GeometryParseError(f"invalid JSON: {e.msg} at position {e.pos}", text) from e

    if not isinstance(obj, dict):
        raise GeometryParseError(f"expected a JSON object, got {type(obj).__name__}", text)
    if "type" not in obj:
        raise GeometryParseError("GeoJSON object has no member type", text)

    geometry_type = obj["type"]
    if geometry_type not in GEOJSON_GEOMETRY_TYPES:
        raise UnsupportedGeometryTypeError(str(geometry_type), text)

    try:
        geometry = parse_geometry_obj(obj)
    except ValueError as e:
        raise GeometryParseError(f"invalid GeoJSON {geometry_type}: {e}", text) from e
    try:
        result = shape({"type": geometry.type, "coordinates": geometry.coordinates})
    except (TypeError, ValueError) as e:
        raise GeometryParseError(f"invalid GeoJSON {geometry_type} coordinates: {e}", text) from e
    if not has_finite_coordinates(result):
        raise GeometryParseError(f"GeoJSON {geometry_type} has non-finite coordinates", text)
    if result.has_z:
        raise GeometryParseError(f"GeoJSON {geometry_type} has three dimensional positions", text)
    logger.debug(f"parsed GeoJSON {geometry_type}")
    return result


def esri_json_to_geometry(
    text: str,
) -> tuple[SpatialReference | None, ShapelyGeometry]:
    """Parse an Esri JSON point or single path polyline into a shapely geometry

    Returns:
        spatial reference found in the document (None when absent) and the geometry
    """
    try:
        esri_geometry = esri_geometry_adapter.validate_json(text)
    except ValidationError as e:
        raise GeometryParseError(f"invalid Esri JSON geometry: {e}", text) from e

    if isinstance(esri_geometry, EsriPoint):
        geometry: ShapelyGeometry = Point(esri_geometry.x, esri_geometry.y)
    else:
        geometry = LineString(esri_geometry.paths[0])
    reference = None
    if esri_geometry.spatial_reference is not None:
        reference = esri_geometry.spatial_reference.to_spatial_reference()
    logger.debug(f"parsed Esri JSON {geometry.geom_type}")
    return reference, geometry

"""GeoJSON and Esri JSON codec for geometry values

Encoding works on a (spatial reference, geometry) pair and returns None for an absent
geometry. Decoding returns a GeometryValue, GeoJSON text always decodes to the default
spatial reference.
"""

import logging

from geometry_type.models import SpatialReference
from geometry_type.serialization import geometry_to_esri_json, geometry_to_geojson
from geometry_type.types import ShapelyGeometry
from geometry_type.value import GeometryValue

logger = logging.getLogger(__name__)


def encode(reference: SpatialReference, geometry: ShapelyGeometry | None) -> str | None:
    if geometry is None:
        return None
    return geometry_to_geojson(reference, geometry)


def encode_as_plain_json(reference: SpatialReference, geometry: ShapelyGeometry | None) -> str | None:
    if geometry is None:
        return None
    return geometry_to_esri_json(reference, geometry)


def decode(text: str) -> GeometryValue:
    return GeometryValue.from_geojson(text)


def decode_plain_json(text: str) -> GeometryValue:
    return GeometryValue.from_json(text)

from collections import OrderedDict

import pytest
from shapely.geometry import LineString, Point

from geometry_type.codec import decode
from geometry_type.constants import SQL_TYPE
from geometry_type.crs import WGS84
from geometry_type.models import (
    GeometryParseError,
    InvalidArgumentError,
    UnsupportedGeometryTypeError,
)
from geometry_type.udt import GEOMETRY_TYPE, GeometryType
from geometry_type.value import GeometryValue


def test_storage_representation_is_text():
    assert GEOMETRY_TYPE.sql_type == SQL_TYPE == "string"
    assert GEOMETRY_TYPE.user_class is GeometryValue
    assert GeometryType() == GEOMETRY_TYPE


def test_serialize():
    value = GeometryValue.from_points((1.0, 2.0))

    assert GEOMETRY_TYPE.serialize(value) == value.to_geojson()


def test_serialize_null_geometry():
    assert GEOMETRY_TYPE.serialize(GeometryValue()) is None


@pytest.mark.parametrize("obj", [42, "POINT (1 2)", None, {"type": "Point", "coordinates": [1.0, 2.0]}])
def test_serialize_invalid_input_raises(obj):
    with pytest.raises(InvalidArgumentError):
        GEOMETRY_TYPE.serialize(obj)


def test_deserialize_value_is_identity():
    value = GeometryValue.from_points((1.0, 2.0), (3.0, 4.0))

    assert GEOMETRY_TYPE.deserialize(value) is value


def test_deserialize_is_idempotent(linestring_geojson):
    value = GEOMETRY_TYPE.deserialize(linestring_geojson)

    assert GEOMETRY_TYPE.deserialize(value) is value


def test_deserialize_text(point_geojson):
    value = GEOMETRY_TYPE.deserialize(point_geojson)

    assert value == decode(point_geojson)
    assert value.reference == WGS84


def test_deserialize_serialized_value():
    value = GeometryValue.from_points((0.0, 0.0), (1.0, 1.0), (2.0, 0.0))

    assert GEOMETRY_TYPE.deserialize(GEOMETRY_TYPE.serialize(value)) == value


def test_deserialize_mapping_equals_text():
    from_mapping = GEOMETRY_TYPE.deserialize({"type": "Point", "coordinates": [1.0, 2.0]})
    from_text = GEOMETRY_TYPE.deserialize('{"type":"Point","coordinates":[1.0,2.0]}')

    assert from_mapping.geometry == Point(1.0, 2.0)
    assert from_mapping == from_text


@pytest.mark.parametrize(
    "datum",
    [
        OrderedDict([("type", "LineString"), ("coordinates", ((0, 0), (1, 1), (2, 0)))]),
        {"type": "LineString", "coordinates": [[0, 0], [1, 1], [2, 0]]},
        {"coordinates": [[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]], "type": "LineString"},
        {"type": "LineString", "coordinates": [[0.0, 0.0], [1.0, 1.0], [2.0, 0.0]], "bbox": [0, 0, 2, 1]},
    ],
)
def test_deserialize_nested_mapping(datum):
    value = GEOMETRY_TYPE.deserialize(datum)

    assert value.geometry == LineString([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])


def test_deserialize_mapping_with_unserializable_value_raises():
    with pytest.raises(InvalidArgumentError):
        GEOMETRY_TYPE.deserialize({"type": "Point", "coordinates": [object(), object()]})


def test_deserialize_unsupported_mapping_raises():
    with pytest.raises(UnsupportedGeometryTypeError):
        GEOMETRY_TYPE.deserialize({"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]]})


@pytest.mark.parametrize("datum", [3.14, 42, None, b'{"type":"Point","coordinates":[1.0,2.0]}', [1.0, 2.0], Point(1, 2)])
def test_deserialize_invalid_input_raises(datum):
    with pytest.raises(InvalidArgumentError):
        GEOMETRY_TYPE.deserialize(datum)


def test_deserialize_invalid_json_raises():
    with pytest.raises(GeometryParseError):
        GEOMETRY_TYPE.deserialize("{not valid json")


def test_deserialize_self_referencing_mapping_raises():
    datum: dict = {"type": "Point"}
    datum["coordinates"] = [datum]

    with pytest.raises(InvalidArgumentError):
        GEOMETRY_TYPE.deserialize(datum)

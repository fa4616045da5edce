import logging
from collections.abc import Mapping
from typing import Any

from pydantic_core import PydanticSerializationError

from geometry_type.codec import decode
from geometry_type.constants import SQL_TYPE
from geometry_type.models import InvalidArgumentError
from geometry_type.util import json_tree_to_text
from geometry_type.value import GeometryValue

logger = logging.getLogger(__name__)


class GeometryType:
    """Column type adapter for GeometryValue, stored by the host engine as GeoJSON text"""

    sql_type = SQL_TYPE
    user_class = GeometryValue

    def serialize(self: "GeometryType", obj: Any) -> str | None:  # noqa: ANN401
        if isinstance(obj, GeometryValue):
            return obj.to_geojson()
        raise InvalidArgumentError(f"invalid GeometryType value to serialize: {obj!r}")

    def deserialize(self: "GeometryType", datum: Any) -> GeometryValue:  # noqa: ANN401
        """Translate a GeometryValue, a GeoJSON string or a JSON-like mapping to a GeometryValue

        Raises:
            InvalidArgumentError: datum is of any other type
            GeometryParseError: datum is not a valid GeoJSON Point or LineString
        """
        if isinstance(datum, GeometryValue):
            return datum
        elif isinstance(datum, str):
            return decode(datum)
        elif isinstance(datum, Mapping):
            try:
                json_text = json_tree_to_text(datum)
            except (TypeError, RecursionError, PydanticSerializationError) as e:
                raise InvalidArgumentError(f"can't deserialize to GeometryType: {datum!r}") from e
            logger.debug(f"deserializing mapping as GeoJSON: {json_text}")
            return decode(json_text)
        else:
            raise InvalidArgumentError(f"can't deserialize to GeometryType: {datum!r}")

    def __eq__(self: "GeometryType", other: object) -> bool:
        return isinstance(other, GeometryType)

    def __hash__(self: "GeometryType") -> int:
        return hash(type(self).__name__)

    def __repr__(self: "GeometryType") -> str:
        return "GeometryType()"


GEOMETRY_TYPE = GeometryType()

DEFAULT_WKID = 4326  # WGS84, used when no spatial reference is supplied
DEFAULT_AUTHORITY = "EPSG"
SQL_TYPE = "string"  # storage representation of the geometry type in the host engine
TWO_DIMENSIONAL = 2
SINGLE_POINT = 1
GEOJSON_GEOMETRY_TYPES = ["Point", "LineString"]

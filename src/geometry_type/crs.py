from geometry_type.constants import DEFAULT_WKID
from geometry_type.models import SpatialReference
from geometry_type.settings import app_settings

WGS84 = SpatialReference(wkid=DEFAULT_WKID)

DEFAULT_SPATIAL_REFERENCE = (
    WGS84 if app_settings.default_wkid == DEFAULT_WKID else SpatialReference.create(app_settings.default_wkid)
)


def resolve_spatial_reference(reference: SpatialReference | None = None) -> SpatialReference:
    if reference is None:
        return DEFAULT_SPATIAL_REFERENCE
    return reference

from pydantic import Field
from pydantic_settings import BaseSettings

from geometry_type.constants import DEFAULT_WKID


class AppSettings(BaseSettings):
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")
    default_wkid: int = Field(
        alias="DEFAULT_WKID",
        default=DEFAULT_WKID,
        description="EPSG code of the spatial reference assigned to geometries when none is given",
        gt=0,
    )


app_settings = AppSettings()

import json
import logging
import logging.config
import pkgutil
import re
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic_core import to_jsonable_python

import geometry_type
from geometry_type.settings import app_settings
from geometry_type.types import JsonTree

logger = logging.getLogger(__name__)


def extract_authority_code(crs: str) -> tuple[str, str]:
    r = re.search(r"^(https?://www\.opengis\.net/def/crs/)?(.[^/|:]*)(/.*/|:)(.*)", crs)
    if r is not None:
        auth = r[2]
        code = r[4]
        return auth, code
    else:
        raise ValueError(f"expected crs string format is: {{auth}}:{{code}}, got: {crs}")


def format_as_uri(crs: str) -> str:
    return "http://www.opengis.net/def/crs/{}/0/{}".format(*crs.split(":"))


def json_tree_to_text(value: JsonTree) -> str:
    """Write an untyped tree of mappings, sequences and scalars as JSON text

    Mapping keys are stringified and written in the order the mapping yields them,
    sequences are written as arrays in order and every other value is written as a
    JSON scalar.

    Args:
        value: arbitrarily nested mapping/sequence/scalar value

    Returns:
        compact JSON text
    """
    if isinstance(value, Mapping):
        members = (f"{json.dumps(str(key))}:{json_tree_to_text(item)}" for key, item in value.items())
        return "{" + ",".join(members) + "}"
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return "[" + ",".join(json_tree_to_text(item) for item in value) + "]"
    else:
        return _scalar_to_text(value)


def _scalar_to_text(value: Any) -> str:  # noqa: ANN401
    return json.dumps(value, default=to_jsonable_python)


def get_logging_config() -> dict[str, Any]:
    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {},
    }
    package = geometry_type
    for _importer, modname, _ispkg in pkgutil.walk_packages(
        path=package.__path__, prefix=f"{package.__name__}.", onerror=lambda _: None
    ):
        logging_config["loggers"][modname] = {
            "handlers": ["default"],
            "level": app_settings.log_level,
            "propagate": False,
        }
    return logging_config


def configure_logging() -> None:
    logging.config.dictConfig(get_logging_config())
    logger.debug(f"logging configured with level {app_settings.log_level}")
    if app_settings.log_level.upper() != "DEBUG":  # suppress pyproj warnings unless debugging
        logging.getLogger("pyproj").setLevel(logging.ERROR)

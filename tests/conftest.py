import os

import pytest


@pytest.fixture()
def test_dir():
    return os.path.dirname(os.path.abspath(__file__))


def _read_text(test_dir, name):
    with open(os.path.join(test_dir, "data", name)) as f:
        return f.read()


@pytest.fixture()
def point_geojson(test_dir):
    return _read_text(test_dir, "point.json")


@pytest.fixture()
def linestring_geojson(test_dir):
    return _read_text(test_dir, "linestring.json")


@pytest.fixture()
def polygon_geojson(test_dir):
    return _read_text(test_dir, "polygon.json")


@pytest.fixture()
def feature_geojson(test_dir):
    return _read_text(test_dir, "feature.json")


@pytest.fixture()
def esri_point(test_dir):
    return _read_text(test_dir, "esri-point.json")


@pytest.fixture()
def esri_polyline(test_dir):
    return _read_text(test_dir, "esri-polyline.json")


@pytest.fixture()
def esri_multi_path_polyline(test_dir):
    return _read_text(test_dir, "esri-multi-path-polyline.json")


@pytest.fixture()
def esri_polygon(test_dir):
    return _read_text(test_dir, "esri-polygon.json")

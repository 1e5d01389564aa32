import pytest

from windwarp.types import CanvasBound, GeoBound


@pytest.fixture
def world_geo():
    return GeoBound(north=85.0, west=-180.0, south=-85.0, east=180.0)


@pytest.fixture
def world_canvas():
    return CanvasBound(x_min=0.0, y_min=0.0, x_max=360.0, y_max=180.0)


@pytest.fixture
def alberta_geo():
    return GeoBound(north=60.5, west=-120.0, south=48.5, east=-108.0)


@pytest.fixture
def offset_canvas():
    return CanvasBound(x_min=100.0, y_min=50.0, x_max=500.0, y_max=250.0)

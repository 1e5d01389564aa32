import dataclasses
import logging
import math

import pytest

from windwarp.config import DistortionConfig
from windwarp.corrector import distort_at_canvas
from windwarp.distortion import distortion
from windwarp.errors import DegenerateBound, InvalidCoordinate
from windwarp.projection import canvas_to_geo, geo_to_canvas
from windwarp.types import CanvasBound, CanvasPoint, GeoBound, GeoCoordinate, VectorSample


def test_errors_are_value_errors():
    assert issubclass(InvalidCoordinate, ValueError)
    assert issubclass(DegenerateBound, ValueError)


@pytest.mark.parametrize("lat", [90.0, -90.0, 91.0, math.nan])
def test_checked_forward_rejects_bad_latitude(world_geo, world_canvas, lat):
    with pytest.raises(InvalidCoordinate):
        geo_to_canvas(GeoCoordinate(lat, 0.0), world_geo, world_canvas, checked=True)


def test_checked_inverse_rejects_non_finite_point(world_geo, world_canvas):
    with pytest.raises(InvalidCoordinate):
        canvas_to_geo(CanvasPoint(math.inf, 0.0), world_geo, world_canvas, checked=True)


@pytest.mark.parametrize("geo_bound", [
    GeoBound(north=-10.0, west=0.0, south=10.0, east=20.0),   # north below south
    GeoBound(north=10.0, west=5.0, south=-10.0, east=5.0),    # zero width
    GeoBound(north=90.0, west=0.0, south=-10.0, east=20.0),   # pole as edge
    GeoBound(north=10.0, west=math.nan, south=-10.0, east=20.0),
])
def test_checked_rejects_degenerate_geo_bound(world_canvas, geo_bound):
    with pytest.raises(DegenerateBound):
        geo_to_canvas(GeoCoordinate(0.0, 10.0), geo_bound, world_canvas, checked=True)


def test_checked_rejects_flat_canvas(world_geo):
    flat = CanvasBound(x_min=0.0, y_min=10.0, x_max=360.0, y_max=10.0)
    with pytest.raises(DegenerateBound):
        canvas_to_geo(CanvasPoint(1.0, 10.0), world_geo, flat, checked=True)


def test_checked_config_reaches_distortion(world_geo, world_canvas):
    geo = GeoCoordinate(90.0, 0.0)
    with pytest.raises(InvalidCoordinate):
        distortion(geo, CanvasPoint(0.0, 0.0), world_geo, world_canvas, DistortionConfig(checked=True))


def test_checked_config_reaches_corrector(world_geo, world_canvas):
    with pytest.raises(InvalidCoordinate):
        distort_at_canvas(CanvasPoint(math.nan, 5.0), VectorSample(1.0, 1.0), world_geo, world_canvas,
                          DistortionConfig(checked=True))


def test_unchecked_is_the_default(world_canvas):
    degenerate = GeoBound(north=10.0, west=5.0, south=-10.0, east=5.0)
    wind = distort_at_canvas(CanvasPoint(1.0, 1.0), VectorSample(1.0, 1.0), degenerate, world_canvas)
    assert not (math.isfinite(wind.u) and math.isfinite(wind.v))


def test_rejection_is_logged(world_geo, world_canvas, caplog):
    with caplog.at_level(logging.DEBUG, logger="windwarp.errors"):
        with pytest.raises(InvalidCoordinate):
            geo_to_canvas(GeoCoordinate(95.0, 0.0), world_geo, world_canvas, checked=True)
    assert "at or beyond a pole" in caplog.text


def test_unknown_method():
    with pytest.raises(ValueError, match="Unknown distortion method"):
        DistortionConfig(method="central")


def test_default_step():
    assert DistortionConfig().step == pytest.approx(10 ** -5.2)


def test_config_is_frozen():
    cfg = DistortionConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.method = "central"

"""
Local distortion tensor of the Mercator canvas projection.

The tensor is the 4-tuple (a, b, c, d) = (dx/dlng, dy/dlng, dx/dlat, dy/dlat),
partials per degree, with the longitude partials divided by the meridian
scale factor cos(lat) (Snyder eq. 4-3 with R = 1). Without that factor a
degree of longitude looks as long near the poles as at the equator and
vectors pinch together there.

At lat = +/-90 the scale factor is ~0 and the tensor is huge or non-finite.
That is a known limitation and is left unguarded unless checked mode is on.
"""
from typing import Optional, Tuple

import numpy as np

from .config import DistortionConfig
from .errors import check_bounds, check_geo
from .projection import NUMERIC_ERRSTATE, _forward, _scales, deg2rad
from .types import CanvasPoint, GeoCoordinate

Tensor = Tuple[float, float, float, float]


# ---------------------------
# Scalar/array core
# ---------------------------

def _finite_difference(lat, lng, x, y, geo_bound, canvas_bound, step: float):
    """
    One-sided differences of the forward map. Each offset steps toward zero
    (negative for lng/lat >= 0, positive otherwise).
    """
    h_lng = np.where(lng >= 0, -step, step)
    h_lat = np.where(lat >= 0, -step, step)

    x_lng, y_lng = _forward(lat, lng + h_lng, geo_bound, canvas_bound)
    x_lat, y_lat = _forward(lat + h_lat, lng, geo_bound, canvas_bound)

    k = np.cos(deg2rad(lat))
    return (
        (x_lng - x) / h_lng / k,
        (y_lng - y) / h_lng / k,
        (x_lat - x) / h_lat,
        (y_lat - y) / h_lat,
    )


def _analytic(lat, geo_bound, canvas_bound):
    """Closed-form partials; the cross terms vanish for a cylindrical map."""
    _, x_factor, y_factor = _scales(geo_bound, canvas_bound)
    per_degree = np.pi / 180.0
    cos_lat = np.cos(deg2rad(lat))

    a = x_factor * per_degree / cos_lat
    d = y_factor * per_degree / cos_lat
    zero = np.zeros_like(a)
    return a, zero, zero, d


def _tensor(lat, lng, x, y, geo_bound, canvas_bound, config: DistortionConfig):
    if config.method == "analytic":
        return _analytic(lat, geo_bound, canvas_bound)
    if config.method == "finite_difference":
        return _finite_difference(lat, lng, x, y, geo_bound, canvas_bound, config.step)
    raise ValueError(f"Unknown distortion method {config.method!r}")


# ---------------------------
# Public point API
# ---------------------------

def distortion(geo: GeoCoordinate, canvas_point: CanvasPoint, geo_bound, canvas_bound,
               config: Optional[DistortionConfig] = None) -> Tensor:
    """
    Finite-difference distortion tensor at geo, whose projection is
    canvas_point. Uses a step of 10**-5.2 degrees by default.
    """
    config = config or DistortionConfig()
    if config.checked:
        check_bounds(geo_bound, canvas_bound)
        check_geo(geo)

    with np.errstate(**NUMERIC_ERRSTATE):
        parts = _finite_difference(geo.lat, geo.lng, canvas_point.x, canvas_point.y,
                                   geo_bound, canvas_bound, config.step)
    return tuple(float(p) for p in parts)


def analytic_distortion(geo: GeoCoordinate, geo_bound, canvas_bound,
                        config: Optional[DistortionConfig] = None) -> Tensor:
    """
    Exact counterpart of distortion(): the cross terms are zero and the
    diagonal follows from the derivative of ln(tan(phi/2 + pi/4)), which is
    sec(phi).
    """
    config = config or DistortionConfig()
    if config.checked:
        check_bounds(geo_bound, canvas_bound)
        check_geo(geo)

    with np.errstate(**NUMERIC_ERRSTATE):
        parts = _analytic(np.float64(geo.lat), geo_bound, canvas_bound)
    return tuple(float(p) for p in parts)

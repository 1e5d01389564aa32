"""
Mercator projection onto a canvas rectangle.

y grows northward from the south edge of the bound: the south-west corner
lands on (x_min, y_min) and the north-east corner on (x_max, y_max).

All the math runs on numpy float64 under ``np.errstate`` so that
out-of-domain input (lat = -90, zero-width bounds, ...) yields nan/inf
instead of ZeroDivisionError / ValueError. The private ``_forward`` and
``_inverse`` helpers accept scalars or arrays; the public functions wrap
them for single points.
"""
import numpy as np

from .errors import check_bounds, check_geo, check_point
from .types import CanvasPoint, GeoCoordinate

# ignore the float warnings the unchecked path is allowed to produce
NUMERIC_ERRSTATE = dict(divide="ignore", invalid="ignore", over="ignore")


# ---------------------------
# Units
# ---------------------------

def deg2rad(deg):
    return deg * np.pi / 180.0


def rad2deg(rad):
    return rad * 180.0 / np.pi


def mercator_y(phi):
    """Mercator ordinate for latitude phi in radians; -inf/huge at the poles."""
    with np.errstate(**NUMERIC_ERRSTATE):
        return np.log(np.tan(phi / 2.0 + np.pi / 4.0))


# ---------------------------
# Scalar/array core
# ---------------------------

def _scales(geo_bound, canvas_bound):
    """Returns (m_south, x_factor, y_factor) for the given bounds."""
    m_south = mercator_y(deg2rad(np.float64(geo_bound.south)))
    m_north = mercator_y(deg2rad(np.float64(geo_bound.north)))

    x_factor = np.float64(canvas_bound.width) / deg2rad(np.float64(geo_bound.width))
    y_factor = np.float64(canvas_bound.height) / (m_north - m_south)
    return m_south, x_factor, y_factor


def _forward(lat, lng, geo_bound, canvas_bound):
    """(lat, lng) degrees -> (x, y) pixels. Caller holds the errstate."""
    m_south, x_factor, y_factor = _scales(geo_bound, canvas_bound)

    x = canvas_bound.x_min + (deg2rad(lng) - deg2rad(geo_bound.west)) * x_factor
    y = canvas_bound.y_min + (mercator_y(deg2rad(lat)) - m_south) * y_factor
    return x, y


def _inverse(x, y, geo_bound, canvas_bound):
    """(x, y) pixels -> (lat, lng) degrees. Defined for every real x, y."""
    m_south, x_factor, y_factor = _scales(geo_bound, canvas_bound)

    lat_rad = np.arctan(np.sinh((y - canvas_bound.y_min) / y_factor + m_south))
    lng_rad = (x - canvas_bound.x_min) / x_factor + deg2rad(geo_bound.west)
    return rad2deg(lat_rad), rad2deg(lng_rad)


# ---------------------------
# Public point API
# ---------------------------

def geo_to_canvas(geo: GeoCoordinate, geo_bound, canvas_bound, checked: bool = False) -> CanvasPoint:
    if checked:
        check_bounds(geo_bound, canvas_bound)
        check_geo(geo)

    with np.errstate(**NUMERIC_ERRSTATE):
        x, y = _forward(geo.lat, geo.lng, geo_bound, canvas_bound)
    return CanvasPoint(float(x), float(y))


def canvas_to_geo(point: CanvasPoint, geo_bound, canvas_bound, checked: bool = False) -> GeoCoordinate:
    if checked:
        check_bounds(geo_bound, canvas_bound)
        check_point(point)

    with np.errstate(**NUMERIC_ERRSTATE):
        lat, lng = _inverse(point.x, point.y, geo_bound, canvas_bound)
    return GeoCoordinate(float(lat), float(lng))

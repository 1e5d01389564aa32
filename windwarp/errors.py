"""
Optional domain checks.

The projection and distortion math never raise on their own: out-of-domain
input comes back as nan/inf. These checks are only run when a caller asks
for them (``checked=True`` or ``DistortionConfig(checked=True)``).
"""
import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


class InvalidCoordinate(ValueError):
    """A coordinate outside the domain the projection is defined on."""


class DegenerateBound(ValueError):
    """A geographic or canvas bound that leaves a scale factor undefined."""


def _reject(exc_type, msg: str):
    logger.debug("rejecting input: %s", msg)
    raise exc_type(msg)


def check_geo(geo, allow_poles: bool = False):
    """
    Latitude must be finite and, unless allow_poles, strictly inside (-90, 90):
    the Mercator y and the meridian scale both blow up at the poles.
    """
    if not (math.isfinite(geo.lat) and math.isfinite(geo.lng)):
        _reject(InvalidCoordinate, f"Non-finite coordinate: lat={geo.lat}, lng={geo.lng}")
    if not allow_poles and abs(geo.lat) >= 90.0:
        _reject(InvalidCoordinate, f"Latitude {geo.lat} is at or beyond a pole")


def check_point(point):
    if not (math.isfinite(point.x) and math.isfinite(point.y)):
        _reject(InvalidCoordinate, f"Non-finite canvas point: x={point.x}, y={point.y}")


def check_bounds(geo_bound, canvas_bound):
    values = (geo_bound.north, geo_bound.west, geo_bound.south, geo_bound.east,
              canvas_bound.x_min, canvas_bound.y_min, canvas_bound.x_max, canvas_bound.y_max)
    if not all(math.isfinite(v) for v in values):
        _reject(DegenerateBound, f"Non-finite bound value in {geo_bound} / {canvas_bound}")

    if geo_bound.north <= geo_bound.south:
        _reject(DegenerateBound, f"north ({geo_bound.north}) must exceed south ({geo_bound.south})")
    if geo_bound.north >= 90.0 or geo_bound.south <= -90.0:
        _reject(DegenerateBound, f"Bound latitudes must lie strictly inside (-90, 90), got "
                                 f"north={geo_bound.north}, south={geo_bound.south}")
    if geo_bound.width == 0:
        _reject(DegenerateBound, "Geographic bound has zero width (east == west)")
    if canvas_bound.width == 0 or canvas_bound.height == 0:
        _reject(DegenerateBound, f"Canvas bound has zero extent: width={canvas_bound.width}, "
                                 f"height={canvas_bound.height}")


def check_point_arrays(x, y):
    if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
        _reject(InvalidCoordinate, "Non-finite canvas coordinates in input arrays")


def check_lat_array(lat):
    """Array form of the pole check in check_geo."""
    at_pole = np.abs(lat) >= 90.0
    if np.any(at_pole):
        _reject(InvalidCoordinate, f"{int(np.count_nonzero(at_pole))} point(s) map to a pole latitude")

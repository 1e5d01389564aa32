"""Project u/v vector fields onto a Mercator canvas and correct them for local distortion."""
from .config import DistortionConfig
from .corrector import distort_at_canvas, distort_at_geo
from .distortion import analytic_distortion, distortion
from .errors import DegenerateBound, InvalidCoordinate
from .field import distort_points
from .projection import canvas_to_geo, deg2rad, geo_to_canvas, mercator_y, rad2deg
from .types import CanvasBound, CanvasPoint, GeoBound, GeoCoordinate, VectorSample

__version__ = "0.1.0"

__all__ = [
    "CanvasBound",
    "CanvasPoint",
    "DegenerateBound",
    "DistortionConfig",
    "GeoBound",
    "GeoCoordinate",
    "InvalidCoordinate",
    "VectorSample",
    "analytic_distortion",
    "canvas_to_geo",
    "deg2rad",
    "distort_at_canvas",
    "distort_at_geo",
    "distort_points",
    "distortion",
    "geo_to_canvas",
    "mercator_y",
    "rad2deg",
]

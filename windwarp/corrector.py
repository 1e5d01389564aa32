"""
Apply the local distortion tensor to a vector sample.

Samples are immutable: the corrected vector comes back as a new
VectorSample and the caller rebinds it.
"""
import logging
from typing import Optional

from .config import DistortionConfig
from .distortion import analytic_distortion, distortion
from .errors import check_bounds, check_point
from .projection import canvas_to_geo
from .types import CanvasPoint, GeoCoordinate, VectorSample

logger = logging.getLogger(__name__)


def distort_at_geo(geo: GeoCoordinate, canvas_point: CanvasPoint, scale: float,
                   sample: VectorSample, geo_bound, canvas_bound,
                   config: Optional[DistortionConfig] = None) -> VectorSample:
    """
    Calculate the on-canvas vector for sample (u east, v north) at geo,
    whose projection is canvas_point. The result is linear in scale.
    """
    config = config or DistortionConfig()
    u = sample.u * scale
    v = sample.v * scale

    if config.method == "analytic":
        a, b, c, d = analytic_distortion(geo, geo_bound, canvas_bound, config)
    elif config.method == "finite_difference":
        a, b, c, d = distortion(geo, canvas_point, geo_bound, canvas_bound, config)
    else:
        raise ValueError(f"Unknown distortion method {config.method!r}")

    # scale the distortion columns by u and v, then add
    return VectorSample(a * u + c * v, b * u + d * v)


def distort_at_canvas(canvas_point: CanvasPoint, sample: VectorSample, geo_bound, canvas_bound,
                      config: Optional[DistortionConfig] = None) -> VectorSample:
    config = config or DistortionConfig()
    if config.checked:
        check_bounds(geo_bound, canvas_bound)
        check_point(canvas_point)

    geo = canvas_to_geo(canvas_point, geo_bound, canvas_bound)
    logger.debug("distort %s at %s (%s)", sample, geo, config.method)
    return distort_at_geo(geo, canvas_point, 1, sample, geo_bound, canvas_bound, config)

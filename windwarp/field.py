"""
Vectorised corrector for many canvas points at once.

Same formulas as distort_at_canvas, evaluated with numpy over whatever
points the caller hands in (any shapes that broadcast together).
"""
from typing import Optional, Tuple

import numpy as np

from .config import DistortionConfig
from .distortion import _tensor
from .errors import check_bounds, check_lat_array, check_point_arrays
from .projection import NUMERIC_ERRSTATE, _inverse


def distort_points(x, y, u, v, geo_bound, canvas_bound,
                   config: Optional[DistortionConfig] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    x, y: canvas coordinates; u, v: eastward/northward components.
    Returns (u_out, v_out) float64 arrays of the broadcast shape.
    """
    config = config or DistortionConfig()
    x, y, u, v = np.broadcast_arrays(*(np.asarray(a, dtype=float) for a in (x, y, u, v)))

    if config.checked:
        check_bounds(geo_bound, canvas_bound)
        check_point_arrays(x, y)

    with np.errstate(**NUMERIC_ERRSTATE):
        lat, lng = _inverse(x, y, geo_bound, canvas_bound)
        if config.checked:
            check_lat_array(lat)
        a, b, c, d = _tensor(lat, lng, x, y, geo_bound, canvas_bound, config)
        u_out = a * u + c * v
        v_out = b * u + d * v
    return np.asarray(u_out, dtype=float), np.asarray(v_out, dtype=float)

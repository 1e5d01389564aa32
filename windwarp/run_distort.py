# run_distort.py

import os
from typing import Optional

from windwarp.config import DistortionConfig
from windwarp.corrector import distort_at_canvas
from windwarp.projection import geo_to_canvas
from windwarp.types import CanvasBound, GeoBound, GeoCoordinate, VectorSample

# ================= CONFIG =================
GEO_BOUND = GeoBound(north=85.0, west=-180.0, south=-85.0, east=180.0)
CANVAS_BOUND = CanvasBound(x_min=0.0, y_min=0.0, x_max=360.0, y_max=180.0)

DEFAULT_LAT, DEFAULT_LNG = 53.5444, -113.4909  # Edmonton
DEFAULT_U, DEFAULT_V = 10.0, 10.0              # m/s
# ==========================================


def run_distort(lat: float, lng: float, u: float, v: float,
                geo_bound: GeoBound = GEO_BOUND,
                canvas_bound: CanvasBound = CANVAS_BOUND,
                cfg: Optional[DistortionConfig] = None):
    """
    Project one point and correct one wind vector there.
    Returns (canvas_point, corrected_sample).
    """
    cfg = cfg or DistortionConfig()

    print("Projecting point...")
    pt = geo_to_canvas(GeoCoordinate(lat, lng), geo_bound, canvas_bound, checked=cfg.checked)

    print("Correcting vector...")
    wind = distort_at_canvas(pt, VectorSample(u, v), geo_bound, canvas_bound, cfg)

    print(f"canvas: x={pt.x:.3f} y={pt.y:.3f}")
    print(f"vector: u={u:.3f} v={v:.3f} -> u={wind.u:.3f} v={wind.v:.3f} ({cfg.method})")
    return pt, wind


def main():
    lat = float(os.environ.get("LAT", DEFAULT_LAT))
    lng = float(os.environ.get("LNG", DEFAULT_LNG))
    u = float(os.environ.get("U", DEFAULT_U))
    v = float(os.environ.get("V", DEFAULT_V))
    method = os.environ.get("METHOD", "finite_difference")

    run_distort(lat, lng, u, v, cfg=DistortionConfig(method=method))


if __name__ == "__main__":
    main()

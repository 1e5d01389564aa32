from dataclasses import dataclass


# ---------------------------
# Coordinates
# ---------------------------

@dataclass(frozen=True)
class GeoCoordinate:
    lat: float  # degrees, not clamped
    lng: float  # degrees, not wrapped


@dataclass(frozen=True)
class CanvasPoint:
    x: float  # pixels from the left edge
    y: float  # pixels, growing northward


@dataclass(frozen=True)
class VectorSample:
    u: float  # eastward component
    v: float  # northward component


# ---------------------------
# Bounds
# ---------------------------

@dataclass(frozen=True)
class GeoBound:
    """
    Geographic window mapped onto the canvas.

    north > south is needed for a finite vertical scale. east may be
    numerically below west, but width must not be zero.
    """
    north: float
    west: float
    south: float
    east: float

    @property
    def width(self) -> float:
        return self.east - self.west


@dataclass(frozen=True)
class CanvasBound:
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

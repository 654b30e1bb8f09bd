# orbital_analyzer/models/sample.py
from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real


def _finite(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a real number, got {value!r}")
    out = float(value)
    if not math.isfinite(out):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return out


@dataclass(frozen=True)
class GeoSample:
    """
    One telemetry fix: sub-satellite point in degrees plus the source timestamp (s).
    Validated on construction; bad values raise ValueError instead of becoming 0.
    """
    latitude: float
    longitude: float
    timestamp: int

    def __post_init__(self):
        lat = _finite("latitude", self.latitude)
        lon = _finite("longitude", self.longitude)
        if not -90.0 <= lat <= 90.0:
            raise ValueError(f"latitude out of range [-90, 90]: {lat}")
        if not -180.0 <= lon <= 180.0:
            raise ValueError(f"longitude out of range [-180, 180]: {lon}")
        if isinstance(self.timestamp, bool) or not isinstance(self.timestamp, Integral):
            raise ValueError(f"timestamp must be an integer, got {self.timestamp!r}")

        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)
        object.__setattr__(self, "timestamp", int(self.timestamp))


@dataclass(frozen=True)
class ProjectedPoint:
    x: int  # pixel column
    y: int  # pixel row

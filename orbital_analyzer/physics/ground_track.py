# orbital_analyzer/physics/ground_track.py
from typing import Sequence

import numpy as np

from orbital_analyzer.config.settings import R_EARTH_KM, OUTLIER_THRESHOLD_KM
from orbital_analyzer.models.results import Rejection, VelocityResult
from orbital_analyzer.models.sample import GeoSample


def _haversine_km(lat1, lon1, lat2, lon2):
    """
    Haversine great-circle distance on a sphere of radius R_EARTH_KM.
    Accepts scalars or numpy arrays in degrees.
    h is clipped to [0, 1] so rounding at identical/antipodal points never leaves the sqrt/arcsin domain.
    """
    lat1 = np.radians(lat1)
    lon1 = np.radians(lon1)
    lat2 = np.radians(lat2)
    lon2 = np.radians(lon2)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = np.sin(dlat / 2.0) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2.0) ** 2
    h = np.clip(h, 0.0, 1.0)

    c = 2.0 * np.arcsin(np.sqrt(h))
    return R_EARTH_KM * c


def distance_km(a: GeoSample, b: GeoSample) -> float:
    return float(_haversine_km(a.latitude, a.longitude, b.latitude, b.longitude))


def velocity_km_s(a: GeoSample, b: GeoSample) -> VelocityResult:
    """
    Ground speed implied by two consecutive samples (a earlier, b later).

    Rejected (never raised):
      - NON_POSITIVE_INTERVAL if b.timestamp <= a.timestamp
      - IMPLAUSIBLE_JUMP if the distance is >= OUTLIER_THRESHOLD_KM, whatever the interval
    """
    dt = b.timestamp - a.timestamp
    if dt <= 0:
        return VelocityResult(None, None, dt, Rejection.NON_POSITIVE_INTERVAL)

    d = distance_km(a, b)
    if d >= OUTLIER_THRESHOLD_KM:
        return VelocityResult(None, d, dt, Rejection.IMPLAUSIBLE_JUMP)

    return VelocityResult(d / dt, d, dt)


def track_distances_km(samples: Sequence[GeoSample]) -> np.ndarray:
    """Leg lengths between consecutive samples (len(samples) - 1 values)."""
    if len(samples) < 2:
        return np.zeros(0, dtype=float)
    lats = np.array([s.latitude for s in samples], dtype=float)
    lons = np.array([s.longitude for s in samples], dtype=float)
    return _haversine_km(lats[:-1], lons[:-1], lats[1:], lons[1:])

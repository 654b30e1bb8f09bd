# orbital_analyzer/physics/circular_orbit.py
import logging
import math
from numbers import Real

import numpy as np

from orbital_analyzer.config.settings import (
    GM_EARTH,
    R_EARTH_KM,
    SECONDS_PER_DAY,
    ADVISORY_ALTITUDE_MIN_KM,
    ADVISORY_ALTITUDE_MAX_KM,
)
from orbital_analyzer.models.results import OrbitParameters, OrbitResult, Rejection

logger = logging.getLogger(__name__)


def compute_orbit(altitude_km) -> OrbitResult:
    """
    Two-body circular orbit at the given altitude above the mean Earth radius.

    All outputs derive from r = (R_EARTH_KM + altitude) * 1000 m:
        v = sqrt(GM / r)
        T = 2*pi * sqrt(r^3 / GM)     (Kepler's third law for a circle)
        revolutions/day = 86400 / T
    Negative altitude is rejected (below the reference sphere).
    Altitudes outside the advisory range are computed but flagged as extrapolated.
    """
    if isinstance(altitude_km, bool) or not isinstance(altitude_km, Real):
        raise ValueError(f"altitude must be a real number, got {altitude_km!r}")
    alt = float(altitude_km)
    if not math.isfinite(alt):
        raise ValueError(f"altitude must be finite, got {altitude_km!r}")
    if alt < 0.0:
        return OrbitResult(None, Rejection.INVALID_ALTITUDE)

    r_m = (R_EARTH_KM + alt) * 1000.0

    speed_m_s = math.sqrt(GM_EARTH / r_m)
    period_s = 2.0 * math.pi * math.sqrt(r_m ** 3 / GM_EARTH)

    extrapolated = not ADVISORY_ALTITUDE_MIN_KM <= alt <= ADVISORY_ALTITUDE_MAX_KM
    if extrapolated:
        logger.debug("Altitude %.1f km outside advisory range; circular model extrapolated", alt)

    return OrbitResult(
        OrbitParameters(
            altitude_km=alt,
            orbital_speed_km_s=speed_m_s / 1000.0,
            period_min=period_s / 60.0,
            revolutions_per_day=SECONDS_PER_DAY / period_s,
            extrapolated=extrapolated,
        )
    )


def orbit_profile(altitudes_km):
    """
    Vectorized compute_orbit over an altitude grid (km).
    Returns dict of numpy arrays: altitude_km, speed_km_s, period_min, revs_per_day.
    """
    alt = np.asarray(altitudes_km, dtype=float)
    if not np.all(np.isfinite(alt)):
        raise ValueError("altitudes must be finite")
    if np.any(alt < 0.0):
        raise ValueError("altitudes must be >= 0")

    r_m = (R_EARTH_KM + alt) * 1000.0
    period_s = 2.0 * np.pi * np.sqrt(r_m ** 3 / GM_EARTH)

    return {
        "altitude_km": alt,
        "speed_km_s": np.sqrt(GM_EARTH / r_m) / 1000.0,
        "period_min": period_s / 60.0,
        "revs_per_day": SECONDS_PER_DAY / period_s,
    }

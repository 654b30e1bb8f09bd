"""
Project settings (constants + small helpers).
Units: kilometers (km), seconds (s), kilograms (kg), pixels (px) unless the name says otherwise.
"""
from __future__ import annotations

import math
import os
from typing import Optional

# Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
OUTPUT_DIR = os.path.join(BASE_DIR, "outputs")

# Run
VALIDATE_ON_IMPORT = False

# Physics
G = 6.67430e-11          # m^3 kg^-1 s^-2
M_EARTH = 5.97219e24     # kg
GM_EARTH = G * M_EARTH   # m^3 s^-2
R_EARTH_KM = 6371.0      # mean radius
R_EARTH_M = R_EARTH_KM * 1000.0
SECONDS_PER_DAY = 86400.0

# Ground-track policy
OUTLIER_THRESHOLD_KM = 500.0  # implausible for a 5 s sampling cadence

# Orbit model validity (advisory only; outside it results are extrapolation)
ADVISORY_ALTITUDE_MIN_KM = 0.0
ADVISORY_ALTITUDE_MAX_KM = 2000.0

# Host defaults (altitude slider + map widget of the tracker window)
DEFAULT_ALTITUDE_KM = 408
ALTITUDE_SLIDER_MIN_KM = 0
ALTITUDE_SLIDER_MAX_KM = 1000
ALTITUDE_SLIDER_STEP_KM = 50

MAP_WIDTH_PX = 760
MAP_HEIGHT_PX = 380

# Polling
POLL_INTERVAL_SEC = 5.0
POLL_INTERVAL_MIN = 1.0
POLL_INTERVAL_MAX = 300.0
DEFAULT_POLLS = 12
MAX_POLLS = 10_000

# Telemetry source
OPEN_NOTIFY_URL = "http://api.open-notify.org/iss-now.json"
HTTP_TIMEOUT_SEC = 10.0
HTTP_RETRIES = 3
HTTP_BACKOFF_SEC = 0.5
USER_AGENT = "OrbitalAnalyzer/1.0"


def clamp_altitude(val: Optional[float]) -> int:
    """Clamp a requested altitude to the slider range, like the tracker window's TrackBar."""
    out = float(DEFAULT_ALTITUDE_KM if val is None else val)
    if not math.isfinite(out):
        raise ValueError(f"altitude must be finite, got {val!r}")
    return int(max(ALTITUDE_SLIDER_MIN_KM, min(ALTITUDE_SLIDER_MAX_KM, round(out))))


def clamp_poll_interval(val: Optional[float]) -> float:
    out = float(POLL_INTERVAL_SEC if val is None else val)
    return max(float(POLL_INTERVAL_MIN), min(float(POLL_INTERVAL_MAX), out))


def validate_settings() -> None:
    if G <= 0 or M_EARTH <= 0:
        raise ValueError("G and M_EARTH must be > 0")
    if R_EARTH_KM <= 0:
        raise ValueError("R_EARTH_KM must be > 0")
    if OUTLIER_THRESHOLD_KM <= 0:
        raise ValueError("OUTLIER_THRESHOLD_KM must be > 0")
    if ADVISORY_ALTITUDE_MAX_KM < ADVISORY_ALTITUDE_MIN_KM:
        raise ValueError("ADVISORY_ALTITUDE_MAX_KM must be >= ADVISORY_ALTITUDE_MIN_KM")
    if ALTITUDE_SLIDER_MIN_KM < 0:
        raise ValueError("ALTITUDE_SLIDER_MIN_KM must be >= 0")
    if ALTITUDE_SLIDER_MAX_KM < ALTITUDE_SLIDER_MIN_KM:
        raise ValueError("ALTITUDE_SLIDER_MAX_KM must be >= ALTITUDE_SLIDER_MIN_KM")
    if not ALTITUDE_SLIDER_MIN_KM <= DEFAULT_ALTITUDE_KM <= ALTITUDE_SLIDER_MAX_KM:
        raise ValueError("DEFAULT_ALTITUDE_KM must lie within the slider range")
    if MAP_WIDTH_PX <= 0 or MAP_HEIGHT_PX <= 0:
        raise ValueError("MAP_WIDTH_PX and MAP_HEIGHT_PX must be > 0")
    if POLL_INTERVAL_MIN <= 0:
        raise ValueError("POLL_INTERVAL_MIN must be > 0")
    if POLL_INTERVAL_MAX < POLL_INTERVAL_MIN:
        raise ValueError("POLL_INTERVAL_MAX must be >= POLL_INTERVAL_MIN")
    if HTTP_TIMEOUT_SEC <= 0:
        raise ValueError("HTTP_TIMEOUT_SEC must be > 0")
    if HTTP_RETRIES < 1:
        raise ValueError("HTTP_RETRIES must be >= 1")


if VALIDATE_ON_IMPORT:
    validate_settings()

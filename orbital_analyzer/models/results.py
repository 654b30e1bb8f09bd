# orbital_analyzer/models/results.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Rejection(str, Enum):
    """Anticipated conditions the engine reports as values instead of raising."""
    NON_POSITIVE_INTERVAL = "non_positive_interval"
    IMPLAUSIBLE_JUMP = "implausible_jump"
    INVALID_ALTITUDE = "invalid_altitude"


@dataclass(frozen=True)
class VelocityResult:
    """
    Outcome of comparing two samples.
    velocity_km_s is None exactly when rejection is set.
    """
    velocity_km_s: Optional[float]
    distance_km: Optional[float]
    interval_s: int
    rejection: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None


@dataclass(frozen=True)
class OrbitParameters:
    altitude_km: float
    orbital_speed_km_s: float
    period_min: float
    revolutions_per_day: float
    extrapolated: bool = False  # outside the advisory altitude range


@dataclass(frozen=True)
class OrbitResult:
    params: Optional[OrbitParameters]
    rejection: Optional[Rejection] = None

    @property
    def ok(self) -> bool:
        return self.rejection is None

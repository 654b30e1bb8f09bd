# orbital_analyzer/engine/tracking_session.py
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from orbital_analyzer.models.results import Rejection
from orbital_analyzer.models.sample import GeoSample
from orbital_analyzer.physics.ground_track import velocity_km_s

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    EMPTY = "empty"
    TRACKING = "tracking"


class OutcomeKind(str, Enum):
    FIRST_SAMPLE = "first_sample"
    UPDATED = "updated"
    REJECTED = "rejected"


@dataclass(frozen=True)
class IngestOutcome:
    kind: OutcomeKind
    velocity_km_s: Optional[float] = None
    reason: Optional[Rejection] = None


class TrackingSession:
    """
    Velocity bookkeeping across successive telemetry samples.

    EMPTY    -> no previous sample; the next ingest only stores it.
    TRACKING -> each ingest is compared against the previous sample.

    Every ingest advances last_sample, rejected or not, so one bad fix never stalls tracking.
    A rejection leaves last_velocity_km_s (last known-good value) untouched.
    reset() drops the previous sample only, e.g. after an upstream fault.

    Not thread-safe: the owner serializes calls.
    """

    def __init__(self):
        self.last_sample: Optional[GeoSample] = None
        self.last_velocity_km_s: Optional[float] = None
        self.accepted_count = 0
        self.rejected_count = 0

    @property
    def state(self) -> SessionState:
        return SessionState.EMPTY if self.last_sample is None else SessionState.TRACKING

    def ingest(self, sample: GeoSample) -> IngestOutcome:
        if self.last_sample is None:
            self.last_sample = sample
            return IngestOutcome(OutcomeKind.FIRST_SAMPLE)

        res = velocity_km_s(self.last_sample, sample)
        self.last_sample = sample

        if not res.ok:
            self.rejected_count += 1
            logger.info(
                "Velocity sample rejected (%s): dt=%ss distance=%s km",
                res.rejection.value, res.interval_s,
                "n/a" if res.distance_km is None else f"{res.distance_km:.1f}",
            )
            return IngestOutcome(OutcomeKind.REJECTED, reason=res.rejection)

        self.accepted_count += 1
        self.last_velocity_km_s = res.velocity_km_s
        return IngestOutcome(OutcomeKind.UPDATED, velocity_km_s=res.velocity_km_s)

    def reset(self) -> None:
        if self.last_sample is not None:
            logger.debug("Tracking session reset; previous sample discarded")
        self.last_sample = None

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from orbital_analyzer.config.settings import MAP_WIDTH_PX, MAP_HEIGHT_PX, POLL_INTERVAL_SEC
from orbital_analyzer.data.open_notify import TelemetryError, fetch_iss_position
from orbital_analyzer.engine.tracking_session import OutcomeKind, TrackingSession
from orbital_analyzer.models.sample import GeoSample
from orbital_analyzer.physics.ground_track import track_distances_km
from orbital_analyzer.physics.projection import project

logger = logging.getLogger(__name__)


def format_cycle(rec: Dict[str, Any]) -> str:
    """One terminal line per poll: position, speed (last good value persists), map pixel or error."""
    if rec.get("error"):
        v = rec.get("last_velocity_km_s")
        v_txt = "--.--" if v is None else f"{v:.2f}"
        return f"[{rec['cycle']:>3}] API error: {rec['error']}  |  Velocity: {v_txt} km/s"

    v = rec.get("last_velocity_km_s")
    v_txt = "--.--" if v is None else f"{v:.2f}"
    line = (
        f"[{rec['cycle']:>3}] Lat: {rec['latitude']:.4f}  Lon: {rec['longitude']:.4f}  "
        f"Velocity: {v_txt} km/s  Map: ({rec['x']}, {rec['y']})"
    )
    if rec.get("outcome") == OutcomeKind.REJECTED.value:
        line += f"  [skipped: {rec['reason']}]"
    return line


def track_segments(cycles: List[Dict[str, Any]]) -> List[List[GeoSample]]:
    """
    Split the cycle records into runs of accepted legs.
    A fault, a first sample or a rejected sample starts a new run, so no leg
    crosses an outage or leads into a rejected fix.
    """
    segments: List[List[GeoSample]] = []
    current: List[GeoSample] = []
    for rec in cycles:
        if rec.get("error"):
            current = []
            continue
        sample = GeoSample(rec["latitude"], rec["longitude"], rec["timestamp"])
        if rec.get("outcome") == OutcomeKind.UPDATED.value and current:
            current.append(sample)
        else:
            current = [sample]
            segments.append(current)
    return segments


def _summarize(cycles: List[Dict[str, Any]], session: TrackingSession, faults: int) -> Dict[str, Any]:
    segments = track_segments(cycles)
    track_km = sum(float(track_distances_km(seg).sum()) for seg in segments)
    return {
        "samples": sum(len(seg) for seg in segments),
        "faults": faults,
        "accepted": session.accepted_count,
        "rejected": session.rejected_count,
        "track_length_km": track_km,
        "last_velocity_km_s": session.last_velocity_km_s,
    }


def run_tracker(
    polls: int,
    interval_sec: float = POLL_INTERVAL_SEC,
    fetch: Callable[[], GeoSample] = fetch_iss_position,
    sleep: Callable[[float], None] = time.sleep,
    frame: Tuple[int, int] = (MAP_WIDTH_PX, MAP_HEIGHT_PX),
    session: Optional[TrackingSession] = None,
    echo: bool = True,
) -> Dict[str, Any]:
    """
    Sequential polling loop: fetch -> ingest -> project, then sleep.
    A poll never overlaps the previous one, so the session needs no locking.

    On TelemetryError the session is reset (no comparison across an outage) and the
    last good velocity is kept for display.

    Returns {"cycles": [...], "summary": {...}}.
    """
    if polls < 0:
        raise ValueError("polls must be >= 0")
    width, height = frame

    session = session or TrackingSession()
    cycles: List[Dict[str, Any]] = []
    faults = 0

    for i in range(1, polls + 1):
        rec: Dict[str, Any] = {"cycle": i}
        try:
            sample = fetch()
        except TelemetryError as e:
            faults += 1
            logger.warning("Telemetry fault on poll %d: %s", i, e)
            session.reset()
            rec.update(error=str(e), last_velocity_km_s=session.last_velocity_km_s)
        else:
            outcome = session.ingest(sample)
            pt = project(sample, width, height)
            rec.update(
                latitude=sample.latitude,
                longitude=sample.longitude,
                timestamp=sample.timestamp,
                outcome=outcome.kind.value,
                velocity_km_s=outcome.velocity_km_s,
                reason=outcome.reason.value if outcome.reason else None,
                last_velocity_km_s=session.last_velocity_km_s,
                x=pt.x,
                y=pt.y,
            )

        cycles.append(rec)
        if echo:
            print(format_cycle(rec))

        if i < polls:
            sleep(float(interval_sec))

    summary = _summarize(cycles, session, faults)
    logger.info(
        "Tracking finished: %d samples, %d accepted, %d rejected, %d faults",
        summary["samples"], summary["accepted"], summary["rejected"], faults,
    )
    return {"cycles": cycles, "summary": summary}

import pytest

from orbital_analyzer.data.open_notify import TelemetryError
from orbital_analyzer.models.sample import GeoSample
from orbital_analyzer.physics.ground_track import distance_km
from orbital_analyzer.simulation.tracker import format_cycle, run_tracker, track_segments

KM_PER_DEG = 111.195  # equator, R = 6371 km


def _feed(items):
    it = iter(items)

    def fetch():
        item = next(it)
        if isinstance(item, Exception):
            raise item
        return item

    return fetch


def _run(items, **kw):
    return run_tracker(len(items), fetch=_feed(items), sleep=lambda _: None, echo=False, **kw)


def test_tracker_cycle_and_fault_reset():
    fetch = _feed([
        GeoSample(0.0, 0.0, 0),
        GeoSample(0.0, 0.3, 5),
        TelemetryError("HTTP 503"),
        GeoSample(0.0, 0.9, 15),
        GeoSample(0.0, 1.2, 20),
    ])
    sleeps = []
    run = run_tracker(5, interval_sec=5.0, fetch=fetch, sleep=sleeps.append, echo=False)

    kinds = [c.get("outcome") for c in run["cycles"]]
    assert kinds == ["first_sample", "updated", None, "first_sample", "updated"]
    assert run["cycles"][2]["error"] == "HTTP 503"
    # last good velocity survives the outage
    assert run["cycles"][2]["last_velocity_km_s"] == pytest.approx(run["cycles"][1]["velocity_km_s"])
    assert sleeps == [5.0] * 4

    s = run["summary"]
    assert s["samples"] == 4
    assert s["faults"] == 1
    assert s["accepted"] == 2
    assert s["rejected"] == 0
    # 0.3 deg before the outage + 0.3 deg after; the 0.6 deg gap across it is not counted
    assert s["track_length_km"] == pytest.approx(0.6 * KM_PER_DEG, rel=1e-3)


def test_track_length_skips_rejected_jump():
    run = _run([
        GeoSample(0.0, 0.0, 0),
        GeoSample(0.0, 0.3, 5),
        GeoSample(40.0, 100.0, 10),
        GeoSample(40.0, 100.3, 15),
    ])
    kinds = [c["outcome"] for c in run["cycles"]]
    assert kinds == ["first_sample", "updated", "rejected", "updated"]

    expected = (
        distance_km(GeoSample(0.0, 0.0, 0), GeoSample(0.0, 0.3, 5))
        + distance_km(GeoSample(40.0, 100.0, 10), GeoSample(40.0, 100.3, 15))
    )
    assert run["summary"]["track_length_km"] == pytest.approx(expected)
    assert run["summary"]["track_length_km"] < 100.0


def test_track_segments_break_at_rejections_and_faults():
    run = _run([
        GeoSample(0.0, 0.0, 0),
        GeoSample(0.0, 0.3, 5),
        GeoSample(40.0, 100.0, 10),     # rejected jump
        GeoSample(40.0, 100.3, 15),
        TelemetryError("timeout"),
        GeoSample(41.0, 110.0, 60),     # first sample after reset
        GeoSample(41.0, 110.0, 60),     # duplicate timestamp, rejected
    ])
    segs = track_segments(run["cycles"])
    assert [len(s) for s in segs] == [2, 2, 1, 1]
    assert segs[1][0] == GeoSample(40.0, 100.0, 10)


def test_tracker_projects_onto_frame():
    run = _run([GeoSample(90.0, -180.0, 1)], frame=(760, 380))
    rec = run["cycles"][0]
    assert (rec["x"], rec["y"]) == (0, 0)
    assert run["summary"]["track_length_km"] == 0.0


def test_tracker_zero_polls():
    run = run_tracker(0, fetch=_feed([]), sleep=lambda _: None, echo=False)
    assert set(run) == {"cycles", "summary"}
    assert run["cycles"] == []
    assert run["summary"]["samples"] == 0


def test_format_cycle():
    line = format_cycle({
        "cycle": 2, "latitude": 1.23456, "longitude": -2.5, "outcome": "rejected",
        "reason": "implausible_jump", "last_velocity_km_s": 7.6612, "x": 10, "y": 20,
    })
    assert "Lat: 1.2346" in line
    assert "7.66 km/s" in line
    assert "implausible_jump" in line
    assert "--.--" in format_cycle({"cycle": 1, "error": "boom", "last_velocity_km_s": None})

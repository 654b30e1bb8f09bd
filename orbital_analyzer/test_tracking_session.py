import pytest

from orbital_analyzer.engine.tracking_session import OutcomeKind, SessionState, TrackingSession
from orbital_analyzer.models.results import Rejection
from orbital_analyzer.models.sample import GeoSample


def test_first_ingest_is_first_sample():
    sess = TrackingSession()
    assert sess.state is SessionState.EMPTY
    out = sess.ingest(GeoSample(10.0, 20.0, 1000))
    assert out.kind is OutcomeKind.FIRST_SAMPLE
    assert out.velocity_km_s is None
    assert sess.state is SessionState.TRACKING
    assert sess.last_velocity_km_s is None


def test_zero_timestamp_is_a_real_sample():
    sess = TrackingSession()
    sess.ingest(GeoSample(0.0, 0.0, 0))
    out = sess.ingest(GeoSample(0.0, 0.05, 1))
    assert out.kind is OutcomeKind.UPDATED


def test_rejection_keeps_velocity_and_rebases():
    sess = TrackingSession()
    sess.ingest(GeoSample(0.0, 0.0, 0))
    good = sess.ingest(GeoSample(0.0, 0.3, 5))
    assert good.kind is OutcomeKind.UPDATED
    v_good = sess.last_velocity_km_s
    assert v_good == pytest.approx(good.velocity_km_s)

    # garbled fix far away
    bad = sess.ingest(GeoSample(40.0, 100.0, 10))
    assert bad.kind is OutcomeKind.REJECTED
    assert bad.reason is Rejection.IMPLAUSIBLE_JUMP
    assert sess.last_velocity_km_s == v_good
    assert sess.last_sample == GeoSample(40.0, 100.0, 10)

    # next fix is compared against the rejected one, not the stale one
    nxt = sess.ingest(GeoSample(40.0, 100.3, 15))
    assert nxt.kind is OutcomeKind.UPDATED
    assert sess.last_velocity_km_s != v_good
    assert sess.accepted_count == 2
    assert sess.rejected_count == 1


def test_duplicate_timestamp_rejected():
    sess = TrackingSession()
    sess.ingest(GeoSample(0.0, 0.0, 50))
    out = sess.ingest(GeoSample(0.0, 0.1, 50))
    assert out.reason is Rejection.NON_POSITIVE_INTERVAL
    assert sess.last_velocity_km_s is None


def test_reset_returns_to_empty_but_keeps_last_velocity():
    sess = TrackingSession()
    sess.ingest(GeoSample(0.0, 0.0, 0))
    sess.ingest(GeoSample(0.0, 0.3, 5))
    v = sess.last_velocity_km_s
    sess.reset()
    assert sess.state is SessionState.EMPTY
    assert sess.last_velocity_km_s == v
    out = sess.ingest(GeoSample(30.0, 30.0, 500))
    assert out.kind is OutcomeKind.FIRST_SAMPLE

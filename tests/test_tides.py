"""Tests for the tides module."""
import pytest
from datetime import date, datetime, timedelta, timezone

from swellcast.models import TideDirection, TidePhase, TidePoint, TideType
from swellcast.tides import (
    TideState,
    extract_extrema,
    generate_synthetic_tides,
    resolve_tide_phase,
    tide_points_from_predictions,
)


def at(hour, minute=0):
    return datetime(2025, 1, 1, hour, minute, tzinfo=timezone.utc)


@pytest.fixture
def tide_day():
    """Low at 03:00, high at 09:15, low at 15:30, with hourly heights between."""
    points = [
        TidePoint(at(3), 0.4, TideType.LOW),
        TidePoint(at(9, 15), 3.1, TideType.HIGH),
        TidePoint(at(15, 30), 0.5, TideType.LOW),
    ]
    points += [TidePoint(at(h), 1.5) for h in (4, 6, 12, 14)]
    return points


def test_extract_extrema_sorts_and_filters(tide_day):
    extrema = extract_extrema(tide_day)
    assert [p.type for p in extrema] == [TideType.LOW, TideType.HIGH, TideType.LOW]
    assert [p.time for p in extrema] == sorted(p.time for p in extrema)


def test_extract_extrema_empty():
    assert extract_extrema(None) == []
    assert extract_extrema([]) == []


def test_rising_mid_tide(tide_day):
    state = resolve_tide_phase(at(6), tide_day)
    assert state == TideState(TidePhase.MID, TideDirection.RISING)
    assert state.describe() == "mid, rising"


def test_falling_mid_tide(tide_day):
    state = resolve_tide_phase(at(12), tide_day)
    assert state.phase == TidePhase.MID
    assert state.direction == TideDirection.FALLING


def test_high_within_45_minutes(tide_day):
    assert resolve_tide_phase(at(8, 30), tide_day).phase == TidePhase.HIGH
    assert resolve_tide_phase(at(10, 0), tide_day).phase == TidePhase.HIGH
    assert resolve_tide_phase(at(10, 1), tide_day).phase == TidePhase.MID


def test_low_near_extremum_keeps_direction(tide_day):
    state = resolve_tide_phase(at(3, 30), tide_day)
    assert state.phase == TidePhase.LOW
    assert state.direction == TideDirection.RISING
    assert state.describe() == "low"


def test_exactly_on_extremum(tide_day):
    assert resolve_tide_phase(at(9, 15), tide_day).phase == TidePhase.HIGH


def test_outside_range_defaults_to_mid(tide_day):
    assert resolve_tide_phase(at(1), tide_day) == TideState()
    assert resolve_tide_phase(at(20), tide_day) == TideState()


def test_no_tide_data_defaults_to_mid():
    assert resolve_tide_phase(at(12), None) == TideState(TidePhase.MID, TideDirection.UNKNOWN)
    assert resolve_tide_phase(at(12), []).describe() == "mid"


def test_same_type_pair_has_no_direction():
    points = [TidePoint(at(2), 2.8, TideType.HIGH), TidePoint(at(14), 2.9, TideType.HIGH)]
    state = resolve_tide_phase(at(8), points)
    assert state == TideState(TidePhase.MID, TideDirection.UNKNOWN)


def test_tide_points_from_predictions():
    predictions = [
        {"t": "2025-01-01 03:00", "v": "0.412", "type": "L"},
        {"t": "2025-01-01 09:15", "v": "3.105", "type": "H"},
        {"t": "2025-01-01T12:00Z", "v": "1.5"},
    ]
    points = tide_points_from_predictions(predictions)

    assert points[0] == TidePoint(at(3), 0.412, TideType.LOW)
    assert points[1].type == TideType.HIGH
    assert points[1].height_m == pytest.approx(3.105)
    assert points[2].type is None
    assert points[2].time == at(12)


def test_synthetic_tides_shape():
    points = generate_synthetic_tides(date(2025, 1, 1))

    assert len(points) == 48
    assert points[0].time == at(0)
    assert points[-1].time == at(0) + timedelta(hours=47)
    assert all(0.0 <= p.height_m <= 3.0 for p in points)


def test_synthetic_tides_alternate_extrema():
    extrema = extract_extrema(generate_synthetic_tides(date(2025, 1, 1)))

    assert len(extrema) >= 4
    for first, second in zip(extrema, extrema[1:]):
        assert first.type != second.type
    # Starts at the crest of the cosine
    assert extrema[0].type == TideType.HIGH
    assert extrema[0].time == at(0)


def test_synthetic_tides_feed_resolver():
    points = generate_synthetic_tides(date(2025, 1, 1))
    # Three hours after the first crest the M2 tide is falling through mid
    state = resolve_tide_phase(at(3), points)
    assert state == TideState(TidePhase.MID, TideDirection.FALLING)

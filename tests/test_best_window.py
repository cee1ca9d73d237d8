"""Tests for the best-window selector."""
import pytest
from datetime import date, datetime, timezone

from swellcast.best_window import (
    LIMITED_DAYLIGHT,
    NO_GOOD_WINDOW,
    SurfWindow,
    find_best_window,
    get_best_surf_window,
)
from swellcast.models import Location, QualityLabel


@pytest.fixture
def poor(make_sample):
    """Flat, short-period, onshore and wrong-angle: scores 10 on the tide alone."""
    def _poor(hour):
        return make_sample(forecast_hour_utc=datetime(2024, 6, 21, hour, tzinfo=timezone.utc),
                           wave_height_m=0.1, wave_period_s=4,
                           wind_direction_deg=270, swell_direction_deg=90)
    return _poor


@pytest.fixture
def at_hour(make_sample):
    def _at(hour, **overrides):
        return make_sample(forecast_hour_utc=datetime(2024, 6, 21, hour, tzinfo=timezone.utc),
                           **overrides)
    return _at


def day_with(poor, special):
    """24 hourly samples, poor everywhere except the hours in `special`."""
    return [special.get(h) or poor(h) for h in range(24)]


def test_dominant_block_is_selected(poor, at_hour, beach_profile, lisbon):
    samples = day_with(poor, {12: at_hour(12), 13: at_hour(13), 14: at_hour(14)})

    result = get_best_surf_window(samples, beach_profile, lisbon, date=date(2024, 6, 21))

    # 12:00-14:00 UTC is 13:00-15:00 in Lisbon summer time; end is one hour past the last sample
    assert result == "Best window: 13:00–16:00 (EPIC conditions)"


def test_find_best_window_returns_window(poor, at_hour, beach_profile, lisbon):
    samples = day_with(poor, {12: at_hour(12), 13: at_hour(13), 14: at_hour(14)})

    window, message = find_best_window(samples, beach_profile, lisbon)

    assert isinstance(window, SurfWindow)
    assert window.mean_score == 100
    assert window.duration_minutes == 180
    assert len(window.scores) == 3
    assert window.best_label == QualityLabel.EPIC
    assert window.start.hour == 13
    assert str(window) == message


def test_shorter_window_wins_when_strictly_better(poor, at_hour, beach_profile, lisbon):
    samples = day_with(poor, {12: at_hour(12), 13: at_hour(13)})

    window, message = find_best_window(samples, beach_profile, lisbon)

    assert len(window.scores) == 2
    assert message == "Best window: 13:00–15:00 (EPIC conditions)"


def test_label_comes_from_best_individual_sample(poor, at_hour, beach_profile, lisbon):
    # 84 (EPIC), 51 (FAIR), 84 (EPIC): mean 73 would be GOOD
    samples = day_with(poor, {
        12: at_hour(12, wind_direction_deg=200),
        13: at_hour(13, wave_height_m=0.1, wind_direction_deg=0, swell_direction_deg=345),
        14: at_hour(14, wind_direction_deg=200),
    })

    window, message = find_best_window(samples, beach_profile, lisbon)

    assert [s.score for s in window.scores] == [84, 51, 84]
    assert window.mean_score == pytest.approx(73.0)
    assert window.best_label == QualityLabel.EPIC
    assert message.endswith("(EPIC conditions)")


def test_no_good_window(poor, beach_profile, lisbon):
    samples = day_with(poor, {})
    window, message = find_best_window(samples, beach_profile, lisbon)
    assert window is None
    assert message == NO_GOOD_WINDOW == "No good window today"


def test_limited_daylight_data(poor, at_hour, beach_profile, lisbon):
    night = [poor(h) for h in range(0, 5)]
    assert get_best_surf_window(night, beach_profile, lisbon) == LIMITED_DAYLIGHT

    one_daylight = night + [at_hour(12)]
    assert get_best_surf_window(one_daylight, beach_profile, lisbon) == "Limited daylight data"


def test_empty_samples(beach_profile, lisbon):
    assert get_best_surf_window([], beach_profile, lisbon) == LIMITED_DAYLIGHT


def test_two_daylight_samples_use_size_two(at_hour, beach_profile, lisbon):
    samples = [at_hour(10), at_hour(11)]
    window, _ = find_best_window(samples, beach_profile, lisbon)
    assert len(window.scores) == 2


def test_night_samples_never_win(at_hour, poor, beach_profile, lisbon):
    # Perfect conditions before dawn are filtered out
    samples = [at_hour(2), at_hour(3), at_hour(4)] + [poor(h) for h in range(5, 24)]
    window, message = find_best_window(samples, beach_profile, lisbon)
    assert window is None
    assert message == NO_GOOD_WINDOW


def test_missing_profile_uses_default(poor, at_hour, lisbon):
    samples = day_with(poor, {9: at_hour(9), 10: at_hour(10), 11: at_hour(11)})
    assert get_best_surf_window(samples, None, lisbon) == "Best window: 10:00–13:00 (EPIC conditions)"


def test_far_west_spot_without_zone(make_sample, beach_profile):
    """Santa Cruz with no zone named: windows are shown in nautical time, UTC-8."""
    santa_cruz = Location(latitude=36.95, longitude=-122.03)
    samples = [make_sample(forecast_hour_utc=datetime(2024, 6, 21, h, tzinfo=timezone.utc)) for h in range(24)]

    # 00-03 UTC belong to the evening of the 20th, 13-23 UTC to the 21st
    assert get_best_surf_window(samples, beach_profile, santa_cruz) == "Best window: 16:00–19:00 (EPIC conditions)"
    assert get_best_surf_window(samples, beach_profile, santa_cruz, date=date(2024, 6, 21)) == \
        "Best window: 05:00–08:00 (EPIC conditions)"

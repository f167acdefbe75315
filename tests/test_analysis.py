import logging

import pandas as pd
import pytest

from analysis import (
    Alert,
    StatSummary,
    Trend,
    battery_status,
    compute_stats,
    compute_trend,
    differential_exceeded,
    estimate_ambient,
    evaluate_alerts,
    round1,
    temperature_differential,
)
from config import AlertThresholds
from constants import BATTERY_HIGH_MESSAGE, DIFFERENTIAL_MESSAGE
from exceptions import AnalysisError, EmptySeriesError, InsufficientDataError
from models import Sample, readings_frame
from store import initial_readings


def make_readings(*pairs):
    return readings_frame(
        Sample(f"{i:02d}:00", local, battery) for i, (local, battery) in enumerate(pairs)
    )


@pytest.mark.parametrize(
    "local, battery, expected",
    [(22, 25, 23.0), (20, 32, 24.0), (21.5, 24.2, 22.4), (-5, 1, -3.0)],
)
def test_estimate_ambient_weights_local_twice(local, battery, expected):
    assert estimate_ambient(local, battery) == pytest.approx(expected)
    assert estimate_ambient(local, battery) == round1((2 * local + battery) / 3)


def test_compute_stats_over_demo_series():
    readings = initial_readings()
    local = compute_stats(readings, "local_temp")
    battery = compute_stats(readings, "battery_temp")
    assert local == StatSummary(min=20.0, max=28.0, avg=23.5)
    assert battery == StatSummary(min=23.0, max=35.0, avg=28.0)


def test_compute_stats_keeps_full_precision_for_min_max():
    readings = make_readings((21.25, 30.0), (22.75, 31.0), (20.1, 29.0))
    stats = compute_stats(readings, "local_temp")
    assert stats.min == 20.1
    assert stats.max == 22.75
    assert stats.avg == 21.4
    assert stats.min <= stats.avg <= stats.max


def test_compute_stats_is_order_independent():
    readings = initial_readings()
    shuffled = readings.sample(frac=1.0, random_state=7).reset_index(drop=True)
    for field in ("local_temp", "battery_temp"):
        assert compute_stats(shuffled, field) == compute_stats(readings, field)


def test_singleton_series_stats_and_trend():
    readings = make_readings((24.5, 27.0))
    assert compute_stats(readings, "battery_temp") == StatSummary(27.0, 27.0, 27.0)
    with pytest.raises(InsufficientDataError):
        compute_trend(readings, "battery_temp")


def test_singleton_with_extra_precision_keeps_min_max_avg_equal():
    stats = compute_stats(make_readings((20.04, 25.0)), "local_temp")
    assert stats == StatSummary(min=20.04, max=20.04, avg=20.04)


def test_rounded_average_stays_between_min_and_max():
    readings = make_readings((20.04, 25.11), (20.06, 25.19), (20.07, 25.13), (20.01, 25.21))
    for field in ("local_temp", "battery_temp"):
        stats = compute_stats(readings, field)
        assert stats.min <= stats.avg <= stats.max
    # mean 20.045 rounds to 20.0, below the 20.01 minimum
    assert compute_stats(readings, "local_temp").avg == 20.01
    assert compute_stats(readings, "battery_temp").avg == 25.2


@pytest.mark.parametrize(
    "value, expected",
    [(20.25, 20.3), (0.25, 0.3), (20.35, 20.4), (-0.25, -0.3), (23.0, 23.0), (22.44, 22.4)],
)
def test_round1_rounds_ties_away_from_zero(value, expected):
    assert round1(value) == expected


def test_half_step_data_rounds_up():
    readings = make_readings((20.0, 25.0), (20.5, 25.0))
    assert compute_stats(readings, "local_temp").avg == 20.3
    trend = compute_trend(make_readings((20.0, 25.0), (20.25, 25.0)), "local_temp")
    assert trend == Trend("up", 0.3)
    # (2 * 20.25 + 20.25) / 3 == 20.25
    assert estimate_ambient(20.25, 20.25) == 20.3
    assert temperature_differential(Sample("09:00", 20.0, 30.25)) == 10.3


def test_empty_series_rejected():
    empty = readings_frame([])
    with pytest.raises(EmptySeriesError):
        compute_stats(empty, "local_temp")
    with pytest.raises(EmptySeriesError):
        evaluate_alerts(empty)
    with pytest.raises(InsufficientDataError):
        compute_trend(empty, "local_temp")


def test_analysis_errors_share_a_base():
    assert issubclass(EmptySeriesError, AnalysisError)
    assert issubclass(InsufficientDataError, AnalysisError)
    assert issubclass(AnalysisError, ValueError)


def test_unknown_field_rejected():
    with pytest.raises(ValueError, match="Unsupported temperature field"):
        compute_stats(initial_readings(), "ambient")
    with pytest.raises(ValueError, match="Unsupported temperature field"):
        compute_trend(initial_readings(), "localTemp")


def test_compute_trend_uses_last_two_samples():
    readings = make_readings((28, 35), (25, 30))
    assert compute_trend(readings, "battery_temp") == Trend(direction="down", magnitude=5.0)
    assert compute_trend(readings, "local_temp") == Trend(direction="down", magnitude=3.0)

    rising = make_readings((10, 10), (20.0, 23.0), (20.5, 24.5))
    trend = compute_trend(rising, "local_temp")
    assert trend.direction == "up"
    assert trend.magnitude == pytest.approx(0.5)


def test_compute_trend_equal_values_are_down():
    readings = make_readings((22, 25), (22, 25))
    assert compute_trend(readings, "local_temp") == Trend("down", 0.0)


def test_compute_trend_depends_on_order():
    readings = make_readings((20, 23), (26, 32))
    reversed_readings = readings.iloc[::-1].reset_index(drop=True)
    assert compute_trend(readings, "local_temp").direction == "up"
    assert compute_trend(reversed_readings, "local_temp").direction == "down"


def test_evaluate_alerts_both_rules_fire_in_order():
    readings = make_readings((22, 25), (20, 32))
    alerts = evaluate_alerts(readings)
    assert [a.message for a in alerts] == [BATTERY_HIGH_MESSAGE, DIFFERENTIAL_MESSAGE]
    assert len({a.id for a in alerts}) == 2
    assert all(isinstance(a, Alert) for a in alerts)


def test_evaluate_alerts_none_fire():
    assert evaluate_alerts(make_readings((22, 25))) == []


def test_evaluate_alerts_reads_only_latest_sample():
    readings = make_readings((10, 40), (22, 25))
    assert evaluate_alerts(readings) == []


def test_evaluate_alerts_thresholds_are_strict():
    # battery exactly 30 and differential exactly 10 do not fire
    assert evaluate_alerts(make_readings((20, 30))) == []
    alerts = evaluate_alerts(make_readings((19.5, 30)))
    assert [a.message for a in alerts] == [DIFFERENTIAL_MESSAGE]


def test_evaluate_alerts_differential_is_absolute():
    alerts = evaluate_alerts(make_readings((35, 24)))
    assert [a.message for a in alerts] == [DIFFERENTIAL_MESSAGE]


def test_evaluate_alerts_recomputes_fresh_each_call():
    readings = make_readings((20, 32))
    first = evaluate_alerts(readings)
    second = evaluate_alerts(readings)
    assert first is not second
    assert [a.message for a in first] == [a.message for a in second]
    assert len(second) == 2


def test_evaluate_alerts_with_custom_thresholds():
    readings = make_readings((22, 25))
    limits = AlertThresholds(battery_high=24.0, differential=2.0)
    alerts = evaluate_alerts(readings, limits)
    assert [a.message for a in alerts] == [BATTERY_HIGH_MESSAGE, DIFFERENTIAL_MESSAGE]


def test_evaluate_alerts_logs_fired_rules(caplog):
    from logger import logger

    propagate = logger.propagate
    logger.propagate = True
    try:
        with caplog.at_level(logging.DEBUG, logger="tempdash"):
            evaluate_alerts(make_readings((20, 32)))
    finally:
        logger.propagate = propagate
    assert BATTERY_HIGH_MESSAGE in caplog.text


def test_evaluate_alerts_does_not_mutate_readings():
    readings = initial_readings()
    before = readings.copy()
    evaluate_alerts(readings)
    compute_stats(readings, "battery_temp")
    compute_trend(readings, "battery_temp")
    pd.testing.assert_frame_equal(readings, before)


def test_status_helpers():
    hot = Sample("15:00", 28, 35)
    calm = Sample("21:00", 23, 27)
    assert battery_status(hot) == "Warning"
    assert battery_status(calm) == "Normal"
    assert temperature_differential(Sample("12:00", 20.0, 32.3)) == 12.3
    assert differential_exceeded(Sample("12:00", 20, 32))
    assert not differential_exceeded(calm)

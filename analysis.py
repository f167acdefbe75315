"""Ambient estimate, statistics, trend and alert evaluation over a readings frame.

Every function here is pure: it reads the frame it is given and never mutates it.
"""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Literal, Optional

import pandas as pd

from config import AlertThresholds, get_alert_thresholds
from constants import BATTERY_HIGH_MESSAGE, DIFFERENTIAL_MESSAGE
from exceptions import EmptySeriesError, InsufficientDataError
from logger import logger
from models import Sample, TemperatureField, latest_sample, validate_field


def round1(value: float) -> float:
    """Round to one decimal place, ties away from zero (20.25 -> 20.3)."""
    return float(Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class StatSummary:
    min: float
    max: float
    avg: float


@dataclass(frozen=True)
class Trend:
    """Change between the last two samples of one field."""

    direction: Literal["up", "down"]
    magnitude: float


@dataclass(frozen=True)
class Alert:
    id: int
    message: str


def estimate_ambient(local_temp: float, battery_temp: float) -> float:
    """
    Weighted average of the two sensors. The battery self-heats, so the
    local sensor counts twice.
    """
    return round1((2 * local_temp + battery_temp) / 3)


def compute_stats(readings: pd.DataFrame, field: TemperatureField) -> StatSummary:
    """Min, max and mean of ``field`` across the whole series.

    Args:
        readings: Readings frame, one row per sample.
        field: ``"local_temp"`` or ``"battery_temp"``.

    Returns:
        StatSummary with the mean rounded to one decimal and kept within
        [min, max]; min/max keep full precision.

    Raises:
        EmptySeriesError: If the frame has no rows.
    """
    validate_field(field)
    if readings.empty:
        raise EmptySeriesError("Cannot compute statistics over an empty series.")
    values = readings[field].astype(float)
    lo = float(values.min())
    hi = float(values.max())
    # rounding may push the mean past an extreme, e.g. a lone 20.04
    avg = min(max(round1(float(values.mean())), lo), hi)
    return StatSummary(min=lo, max=hi, avg=avg)


def compute_trend(readings: pd.DataFrame, field: TemperatureField) -> Trend:
    """Compare the last sample of ``field`` with the one before it.

    Equal values are reported as ``"down"``.

    Raises:
        InsufficientDataError: If the frame has fewer than two rows.
    """
    validate_field(field)
    if len(readings) < 2:
        raise InsufficientDataError("Trend needs at least two samples.")
    last = float(readings[field].iloc[-1])
    prev = float(readings[field].iloc[-2])
    return Trend(
        direction="up" if last > prev else "down",
        magnitude=round1(abs(last - prev)),
    )


def temperature_differential(sample: Sample) -> float:
    return round1(abs(sample.battery_temp - sample.local_temp))


def battery_high(sample: Sample, thresholds: Optional[AlertThresholds] = None) -> bool:
    limits = thresholds or get_alert_thresholds()
    return sample.battery_temp > limits.battery_high


def differential_exceeded(
    sample: Sample, thresholds: Optional[AlertThresholds] = None
) -> bool:
    limits = thresholds or get_alert_thresholds()
    return abs(sample.battery_temp - sample.local_temp) > limits.differential


def battery_status(
    sample: Sample, thresholds: Optional[AlertThresholds] = None
) -> Literal["Warning", "Normal"]:
    return "Warning" if battery_high(sample, thresholds) else "Normal"


def evaluate_alerts(
    readings: pd.DataFrame, thresholds: Optional[AlertThresholds] = None
) -> List[Alert]:
    """Evaluate both alert rules against the latest sample.

    Rules run in a fixed order (battery high, then differential) and are not
    exclusive. Each call returns a fresh list; ids are unique within the call.

    Raises:
        EmptySeriesError: If the frame has no rows.
    """
    if readings.empty:
        raise EmptySeriesError("Cannot evaluate alerts over an empty series.")
    latest = latest_sample(readings)
    ids = itertools.count(time.time_ns())

    fired: List[str] = []
    if battery_high(latest, thresholds):
        fired.append(BATTERY_HIGH_MESSAGE)
    if differential_exceeded(latest, thresholds):
        fired.append(DIFFERENTIAL_MESSAGE)

    alerts = [Alert(id=next(ids), message=message) for message in fired]
    for alert in alerts:
        logger.debug("alert at %s: %s", latest.time, alert.message)
    return alerts

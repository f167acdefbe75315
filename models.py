from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Literal

import pandas as pd

from constants import BATTERY_TEMP, LOCAL_TEMP, TEMPERATURE_FIELDS

TemperatureField = Literal["local_temp", "battery_temp"]

READING_COLUMNS = ["time", LOCAL_TEMP, BATTERY_TEMP]


@dataclass(frozen=True)
class Sample:
    """One paired observation of the local and battery sensors (°C)."""

    time: str
    local_temp: float
    battery_temp: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.local_temp) and math.isfinite(self.battery_temp)):
            raise ValueError("Sample temperatures must be finite numbers.")


def readings_frame(samples: Iterable[Sample]) -> pd.DataFrame:
    """Build a readings DataFrame; row order follows iteration order."""
    rows = [
        {"time": s.time, LOCAL_TEMP: float(s.local_temp), BATTERY_TEMP: float(s.battery_temp)}
        for s in samples
    ]
    return pd.DataFrame(rows, columns=READING_COLUMNS)


def latest_sample(readings: pd.DataFrame) -> Sample:
    row = readings.iloc[-1]
    return Sample(
        time=str(row["time"]),
        local_temp=float(row[LOCAL_TEMP]),
        battery_temp=float(row[BATTERY_TEMP]),
    )


def validate_field(field: str) -> None:
    if field not in TEMPERATURE_FIELDS:
        raise ValueError(
            f"Unsupported temperature field {field!r}; expected one of {TEMPERATURE_FIELDS}."
        )

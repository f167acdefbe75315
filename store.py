from __future__ import annotations

import pandas as pd

from models import Sample, readings_frame

DEMO_SAMPLES = (
    Sample("00:00", 22, 25),
    Sample("03:00", 21, 24),
    Sample("06:00", 20, 23),
    Sample("09:00", 23, 28),
    Sample("12:00", 26, 32),
    Sample("15:00", 28, 35),
    Sample("18:00", 25, 30),
    Sample("21:00", 23, 27),
)


def initial_readings() -> pd.DataFrame:
    return readings_frame(DEMO_SAMPLES)


def append_reading(readings: pd.DataFrame, sample: Sample) -> pd.DataFrame:
    """Return a new frame with ``sample`` as the latest row; ``readings`` is left untouched."""
    addition = readings_frame([sample])
    if readings.empty:
        return addition
    return pd.concat([readings, addition], ignore_index=True)

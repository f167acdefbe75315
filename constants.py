from __future__ import annotations

# Alert thresholds (°C). Kept in a dedicated module to avoid cross-module magic numbers.
BATTERY_HIGH_THRESHOLD: float = 30.0
DIFFERENTIAL_THRESHOLD: float = 10.0

BATTERY_HIGH_MESSAGE = "Battery temperature exceeding normal range"
DIFFERENTIAL_MESSAGE = "Large temperature differential detected"

LOCAL_TEMP = "local_temp"
BATTERY_TEMP = "battery_temp"
TEMPERATURE_FIELDS = (LOCAL_TEMP, BATTERY_TEMP)

FIELD_LABELS = {
    LOCAL_TEMP: "Local Temperature",
    BATTERY_TEMP: "Battery Temperature",
}
FIELD_COLORS = {
    LOCAL_TEMP: "#3b82f6",
    BATTERY_TEMP: "#ef4444",
}
AMBIENT_COLOR = "#10b981"

TIME_RANGES = ("24h", "7d")

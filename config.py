"""Configuration and environment handling for the dashboard."""

from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from constants import BATTERY_HIGH_THRESHOLD, DIFFERENTIAL_THRESHOLD

__all__ = ["AlertThresholds", "get_alert_thresholds", "get_log_level"]


class AlertThresholds(BaseModel):
    """Limits for the two alert rules, in °C.

    Both rules compare strictly: a reading equal to a limit does not alert.
    """

    model_config = ConfigDict(frozen=True)

    battery_high: float = Field(
        default=BATTERY_HIGH_THRESHOLD,
        allow_inf_nan=False,
        description="Alert when the latest battery temperature is above this value",
    )

    differential: float = Field(
        default=DIFFERENTIAL_THRESHOLD,
        ge=0,
        allow_inf_nan=False,
        description="Alert when |battery - local| of the latest sample is above this value",
    )

    @classmethod
    def from_env(cls) -> "AlertThresholds":
        """Create AlertThresholds from environment variables.

        Environment variables:
        - TEMPDASH_BATTERY_HIGH_THRESHOLD: Battery limit (default: 30.0)
        - TEMPDASH_DIFFERENTIAL_THRESHOLD: Differential limit (default: 10.0)
        """
        return cls(
            battery_high=float(os.environ.get("TEMPDASH_BATTERY_HIGH_THRESHOLD", cls.model_fields["battery_high"].default)),
            differential=float(os.environ.get("TEMPDASH_DIFFERENTIAL_THRESHOLD", cls.model_fields["differential"].default)),
        )


# Global thresholds instance
_alert_thresholds: Optional[AlertThresholds] = None


def get_alert_thresholds() -> AlertThresholds:
    """Get alert thresholds configuration.

    Returns cached instance if already initialized.
    """
    global _alert_thresholds
    if _alert_thresholds is None:
        _alert_thresholds = AlertThresholds.from_env()
    return _alert_thresholds


def get_log_level() -> int:
    name = os.getenv("TEMPDASH_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.INFO

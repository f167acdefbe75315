from __future__ import annotations

from datetime import date
from typing import Optional, Tuple

import pandas as pd
import streamlit as st

from analysis import (
    Trend,
    battery_status,
    compute_stats,
    compute_trend,
    differential_exceeded,
    estimate_ambient,
    evaluate_alerts,
    temperature_differential,
)
from charts import build_temperature_figure
from config import get_alert_thresholds, get_log_level
from constants import BATTERY_TEMP, FIELD_LABELS, LOCAL_TEMP, TEMPERATURE_FIELDS, TIME_RANGES
from exceptions import AnalysisError, InsufficientDataError
from forms import READINGS_KEY, render_add_reading_form
from logger import logger, setup_logger
from models import TemperatureField, latest_sample
from store import initial_readings
from utils.time import format_long_date


def _trend_or_none(readings: pd.DataFrame, field: TemperatureField) -> Optional[Trend]:
    try:
        return compute_trend(readings, field)
    except InsufficientDataError:
        return None


def format_trend_delta(trend: Optional[Trend]) -> Tuple[Optional[str], str]:
    """Delta text and colour mode for ``st.metric``.

    Rising temperature is bad news, so colours are inverted (red up, green down).
    A zero change carries no sign and stays grey.
    """
    if trend is None:
        return None, "off"
    if trend.magnitude == 0:
        return "0.0°C", "off"
    sign = "" if trend.direction == "up" else "-"
    return f"{sign}{trend.magnitude:.1f}°C", "inverse"


def _render_stat_card(readings: pd.DataFrame, field: TemperatureField) -> None:
    stats = compute_stats(readings, field)
    delta, delta_color = format_trend_delta(_trend_or_none(readings, field))
    st.metric(FIELD_LABELS[field], f"{stats.avg:.1f}°C", delta=delta, delta_color=delta_color)


def _render_statistics(readings: pd.DataFrame) -> None:
    st.subheader("Temperature Statistics")
    for field in TEMPERATURE_FIELDS:
        stats = compute_stats(readings, field)
        st.caption(FIELD_LABELS[field])
        c_min, c_max, c_avg = st.columns(3)
        c_min.metric("Min", f"{stats.min:g}°C")
        c_max.metric("Max", f"{stats.max:g}°C")
        c_avg.metric("Avg", f"{stats.avg:.1f}°C")


def _render_system_status(readings: pd.DataFrame) -> None:
    st.subheader("System Status")
    thresholds = get_alert_thresholds()
    latest = latest_sample(readings)

    status = battery_status(latest, thresholds)
    badge = ":red-background[Warning]" if status == "Warning" else ":green-background[Normal]"
    col_label, col_value = st.columns([3, 1])
    col_label.write("Battery Temperature Status")
    col_value.markdown(badge)

    diff = temperature_differential(latest)
    color = "orange" if differential_exceeded(latest, thresholds) else "green"
    col_label, col_value = st.columns([3, 1])
    col_label.write("Temperature Differential")
    col_value.markdown(f":{color}-background[{diff:.1f}°C]")


def main() -> None:
    setup_logger(get_log_level())
    st.set_page_config(page_title="Temperature Analysis Dashboard", page_icon="🌡️", layout="wide")

    if READINGS_KEY not in st.session_state:
        st.session_state[READINGS_KEY] = initial_readings()
    if "time_range" not in st.session_state:
        st.session_state["time_range"] = TIME_RANGES[0]

    col_title, col_range = st.columns([4, 1])
    with col_title:
        st.title("Temperature Analysis Dashboard")
        st.caption(format_long_date(date.today()))
    with col_range:
        st.radio("Time range", TIME_RANGES, key="time_range", horizontal=True)

    readings: pd.DataFrame = st.session_state[READINGS_KEY]

    try:
        alerts = evaluate_alerts(readings, get_alert_thresholds())
    except AnalysisError as e:
        logger.warning("alert evaluation skipped: %s", e)
        alerts = []
    for alert in alerts:
        st.error(alert.message, icon="⚠️")

    st.subheader(f"Temperature Trends ({st.session_state['time_range']})")
    st.plotly_chart(build_temperature_figure(readings), use_container_width=True)

    if readings.empty:
        st.info("No data yet. Add a reading to see statistics.")
    else:
        try:
            col_local, col_battery, col_ambient = st.columns(3)
            with col_local:
                _render_stat_card(readings, LOCAL_TEMP)
            with col_battery:
                _render_stat_card(readings, BATTERY_TEMP)
            with col_ambient:
                latest = latest_sample(readings)
                ambient = estimate_ambient(latest.local_temp, latest.battery_temp)
                st.metric("Ambient Temperature", f"{ambient:.1f}°C")

            col_stats, col_status = st.columns(2)
            with col_stats:
                _render_statistics(readings)
            with col_status:
                _render_system_status(readings)
        except AnalysisError as e:
            logger.warning("statistics unavailable: %s", e)
            st.info("No data yet.")

    st.divider()
    render_add_reading_form()


if __name__ == "__main__":
    main()

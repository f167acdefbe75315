from __future__ import annotations

from datetime import datetime

import streamlit as st

from logger import logger
from models import Sample
from store import append_reading
from utils.time import time_label

READINGS_KEY = "readings"


def render_add_reading_form() -> None:
    st.subheader("Add reading")
    with st.form("reading_form", clear_on_submit=True):
        now = datetime.now().time().replace(second=0, microsecond=0)
        t = st.time_input("Time", value=now, step=60)
        col1, col2 = st.columns(2)
        with col1:
            local_temp = st.number_input(
                "Local temperature (°C)",
                min_value=-40.0,
                max_value=85.0,
                step=0.1,
                value=22.0,
                format="%.1f",
            )
        with col2:
            battery_temp = st.number_input(
                "Battery temperature (°C)",
                min_value=-40.0,
                max_value=85.0,
                step=0.1,
                value=25.0,
                format="%.1f",
            )
        submitted = st.form_submit_button("Add reading")
        if submitted:
            try:
                sample = Sample(time_label(t), float(local_temp), float(battery_temp))
            except ValueError as e:
                st.error(str(e))
                return
            st.session_state[READINGS_KEY] = append_reading(
                st.session_state[READINGS_KEY], sample
            )
            logger.info(
                "appended reading %s local=%.1f battery=%.1f",
                sample.time,
                sample.local_temp,
                sample.battery_temp,
            )
            st.rerun()

from __future__ import annotations

from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from analysis import estimate_ambient
from config import AlertThresholds, get_alert_thresholds
from constants import AMBIENT_COLOR, BATTERY_TEMP, FIELD_COLORS, FIELD_LABELS, LOCAL_TEMP


def build_temperature_figure(
    readings: pd.DataFrame,
    *,
    height: int = 420,
    thresholds: Optional[AlertThresholds] = None,
) -> go.Figure:
    limits = thresholds or get_alert_thresholds()
    fig = go.Figure()

    if not readings.empty:
        ambient = [
            estimate_ambient(local, battery)
            for local, battery in zip(readings[LOCAL_TEMP], readings[BATTERY_TEMP])
        ]
        for field in (LOCAL_TEMP, BATTERY_TEMP):
            fig.add_trace(
                go.Scatter(
                    x=readings["time"],
                    y=readings[field],
                    mode="lines",
                    name=FIELD_LABELS[field],
                    line=dict(color=FIELD_COLORS[field], width=2, shape="spline"),
                    hovertemplate=f"{FIELD_LABELS[field].split()[0]}: %{{y}}°C<extra></extra>",
                )
            )
        # Invisible trace so the unified hover also lists the ambient estimate
        fig.add_trace(
            go.Scatter(
                x=readings["time"],
                y=ambient,
                mode="markers",
                name="Ambient (estimated)",
                marker=dict(size=1, color="rgba(0,0,0,0)"),
                hovertemplate=f"<span style='color:{AMBIENT_COLOR}'>Ambient: %{{y:.1f}}°C</span><extra></extra>",
                showlegend=False,
            )
        )

    # Battery warning guideline
    fig.add_hline(
        y=limits.battery_high,
        line_dash="dash",
        line_color=FIELD_COLORS[BATTERY_TEMP],
        line_width=1,
    )
    fig.add_annotation(
        xref="paper",
        x=1,
        xanchor="right",
        yref="y",
        y=limits.battery_high,
        yshift=8,
        text=f"{limits.battery_high:.1f}°C",
        font=dict(color=FIELD_COLORS[BATTERY_TEMP], size=11),
        showarrow=False,
        bgcolor="rgba(0,0,0,0)",
    )

    fig.update_layout(
        template="simple_white",
        height=height,
        margin=dict(l=40, r=20, t=40, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        hovermode="x unified",
        xaxis_title="Time",
        yaxis_title="Temperature (°C)",
    )
    fig.update_xaxes(type="category", showgrid=True, gridcolor="#e5e7eb", griddash="dot")
    fig.update_yaxes(showgrid=True, gridcolor="#e5e7eb", griddash="dot")
    return fig

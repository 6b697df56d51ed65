from __future__ import annotations

from typing import Any, Dict, Sequence

import altair as alt
import pandas as pd

from core.state import TimeSeriesPoint
from core.theme import ThemePreference

alt.data_transformers.disable_max_rows()

PIE_COLORS = ["#0088FE", "#f91ea5", "#FFBB28", "#ff9a42"]
LINE_COLOR = "#0072B2"
BAR_COLOR = "#00C49F"
CHART_HEIGHT = 300

THEME_COLORS = {
    ThemePreference.LIGHT: {"background": "#ffffff", "text": "#1f2933", "grid": "#cccccc"},
    ThemePreference.DARK: {"background": "#1e1e1e", "text": "#e5e7eb", "grid": "#444444"},
}


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def series_frame(series: Sequence[TimeSeriesPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "order": list(range(len(series))),
            "time": [p.time for p in series],
            "accidents": [p.accidents for p in series],
        },
        columns=["order", "time", "accidents"],
    )


def _themed(chart: alt.Chart, title: str, theme: ThemePreference) -> alt.Chart:
    colors = THEME_COLORS[theme]
    return (
        chart.properties(title=title, height=CHART_HEIGHT, width="container")
        .configure(background=colors["background"])
        .configure_axis(labelColor=colors["text"], titleColor=colors["text"], gridColor=colors["grid"])
        .configure_legend(labelColor=colors["text"], titleColor=colors["text"])
        .configure_title(color=colors["text"])
        .configure_view(strokeWidth=0)
    )


def line_chart(series: Sequence[TimeSeriesPoint], theme: ThemePreference = ThemePreference.LIGHT) -> alt.Chart:
    chart = (
        alt.Chart(series_frame(series))
        .mark_line(interpolate="monotone", color=LINE_COLOR, strokeWidth=3, point={"filled": True, "size": 60})
        .encode(
            x=alt.X("time:N", sort=None, title="Time"),
            y=alt.Y("accidents:Q", title="Accidents"),
            tooltip=["time", "accidents"],
        )
    )
    return _themed(chart, "Accidents by Time of Day", theme)


def pie_chart(series: Sequence[TimeSeriesPoint], theme: ThemePreference = ThemePreference.LIGHT) -> alt.Chart:
    df = series_frame(series)
    # slice colours cycle by position, not by label
    df["slice"] = [PIE_COLORS[i % len(PIE_COLORS)] for i in range(len(df))]
    chart = (
        alt.Chart(df)
        .mark_arc(outerRadius=100)
        .encode(
            theta=alt.Theta("accidents:Q"),
            color=alt.Color("slice:N", scale=None),
            order=alt.Order("order:Q"),
            tooltip=["time", "accidents"],
        )
    )
    return _themed(chart, "Accident Distribution (Pie)", theme)


def bar_chart(series: Sequence[TimeSeriesPoint], theme: ThemePreference = ThemePreference.LIGHT) -> alt.Chart:
    chart = (
        alt.Chart(series_frame(series))
        .mark_bar(color=BAR_COLOR, size=50)
        .encode(
            x=alt.X("time:N", sort=None, title="Time"),
            y=alt.Y("accidents:Q", title="Accidents"),
            tooltip=["time", "accidents"],
        )
    )
    return _themed(chart, "Accident Frequency (Bar)", theme)


def build_charts(series: Sequence[TimeSeriesPoint], theme: ThemePreference = ThemePreference.LIGHT) -> Dict[str, alt.Chart]:
    return {
        "line": line_chart(series, theme),
        "pie": pie_chart(series, theme),
        "bar": bar_chart(series, theme),
    }


def build_chart_specs(series: Sequence[TimeSeriesPoint], theme: ThemePreference = ThemePreference.LIGHT) -> Dict[str, Dict[str, Any]]:
    return {name: to_vega_spec(chart) for name, chart in build_charts(series, theme).items()}

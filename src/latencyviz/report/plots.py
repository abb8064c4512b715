"""Plotly figures for latency reports.

Every builder returns a Plotly figure dict (never go.Figure), ready for
json serialization or a plotly front end.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from latencyviz.binning.histogram import Histogram
from latencyviz.colors.color_ramp import color_map
from latencyviz.colors.colorscales import ColorRampScheme
from latencyviz.report.latency_density import TimeSeriesLatencyDensity
from latencyviz.report.theme import (
    ThemeMode,
    get_grid_color,
    get_theme_colors,
    get_theme_template,
    resolve_theme,
)


def _apply_theme(fig: go.Figure, theme_mode: ThemeMode, xaxis: dict, yaxis: dict) -> None:
    bg_color, fg_color = get_theme_colors(theme_mode)
    grid_color = get_grid_color(theme_mode)
    fig.update_layout(
        template=get_theme_template(theme_mode),
        paper_bgcolor=bg_color,
        plot_bgcolor=bg_color,
        font=dict(color=fg_color),
        xaxis=dict(color=fg_color, gridcolor=grid_color, **xaxis),
        yaxis=dict(color=fg_color, gridcolor=grid_color, **yaxis),
        margin=dict(l=0, r=20, t=10, b=20),
        showlegend=False,
    )


def histogram_plot_plotly(
    histogram: Histogram,
    *,
    latency_unit: str = "ms",
    scheme: Optional[ColorRampScheme] = None,
    theme: Optional[Union[str, ThemeMode]] = None,
) -> dict:
    """Horizontal bar chart of interval counts.

    Bars are colored by count through the scheme when given; hover text
    shows count, percentage and cumulative percentage.
    """
    theme_mode = resolve_theme(theme)
    _, fg_color = get_theme_colors(theme_mode)

    labels = [iv.format() for iv in histogram.intervals]
    counts = list(histogram.counts)
    marker_color = color_map(counts, scheme) if scheme is not None and counts else fg_color
    hover = [
        f"{label}<br>count={c}<br>{p:.2f}%<br>sum={cp:.2f}%"
        for label, c, p, cp in zip(
            labels, counts, histogram.percentages, histogram.cumulative_percentages
        )
    ]

    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=counts,
            y=labels,
            orientation="h",
            marker_color=marker_color,
            hovertext=hover,
            hoverinfo="text",
        )
    )
    _apply_theme(
        fig,
        theme_mode,
        xaxis=dict(title="Count"),
        yaxis=dict(title=f"Latency ({latency_unit})", autorange="reversed", type="category"),
    )
    return fig.to_dict()


def percentile_plot_plotly(
    pairs: Sequence[tuple[float, float]],
    *,
    latency_unit: str = "ms",
    theme: Optional[Union[str, ThemeMode]] = None,
) -> dict:
    """Horizontal bars of percentile values, highest key on top."""
    theme_mode = resolve_theme(theme)
    _, fg_color = get_theme_colors(theme_mode)

    keys = [f"{k:g}" for k, _ in pairs]
    values = [v for _, v in pairs]

    fig = go.Figure()
    fig.add_trace(go.Bar(x=values, y=keys, orientation="h", marker_color=fg_color, opacity=0.7))
    _apply_theme(
        fig,
        theme_mode,
        xaxis=dict(title=f"Value ({latency_unit})"),
        yaxis=dict(title="Percentile", type="category"),
    )
    return fig.to_dict()


def heatmap_plot_plotly(
    density: TimeSeriesLatencyDensity,
    scheme: ColorRampScheme = ColorRampScheme.DEFAULT,
    *,
    latency_unit: str = "ms",
    theme: Optional[Union[str, ThemeMode]] = None,
) -> dict:
    """Latency heat map: one cell per (latency bucket, time bucket).

    Cells are drawn with the quantized ramp colors: z holds each cell's level
    (0 = background, i = i-th ramp color) against a stepped colorscale.
    Rows are labelled by their upper edge and columns by their lower edge,
    so the sentinel buckets show as "Infinity" / "-Infinity".
    """
    theme_mode = resolve_theme(theme)

    counts = density.counts
    colors = density.heat_map_colors(scheme)
    levels = {c: i for i, c in enumerate(scheme.foreground_colors, start=1)}
    z = np.array([[levels.get(c, 0) for c in row] for row in colors], dtype=int)

    row_points = density.density.row_points
    col_points = density.density.column_points
    # Bucket i spans points i..i+1
    y_labels = [p.format(lambda v: f"{v:g}") for p in row_points[1:]]
    x_labels = [
        p.format(
            lambda v: pd.Timestamp(int(v), unit="ms", tz="UTC")
            .tz_convert(density.time_zone)
            .strftime("%d/%m/%Y %H:%M")
        )
        for p in col_points[:-1]
    ]

    fig = go.Figure()
    fig.add_trace(
        go.Heatmap(
            z=z,
            x=x_labels,
            y=y_labels,
            customdata=counts,
            hovertemplate="time=%{x}<br>latency<=%{y}<br>count=%{customdata}<extra></extra>",
            colorscale=scheme.to_plotly_colorscale(),
            zmin=0,
            zmax=len(scheme.foreground_colors),
            showscale=False,
        )
    )
    _apply_theme(
        fig,
        theme_mode,
        xaxis=dict(title="Time", type="category"),
        yaxis=dict(title=f"Latency ({latency_unit})", type="category"),
    )
    return fig.to_dict()

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Altair rendering of chart specifications.
"""

from __future__ import annotations

from typing import Any, Dict

import altair as alt
import pandas as pd

from ..core.primitives import LayerKind
from .spec import Axis, ChartSpec, Layer, Legend
from .theme import FONT_SIZE, THEME_COLORS, apply_theme, resolve_color


def _scale(axis: Axis) -> alt.Scale:
    kwargs: Dict[str, Any] = {"zero": axis.include_zero}
    if axis.domain is not None:
        kwargs["domain"] = list(axis.domain)
        kwargs["nice"] = False
    return alt.Scale(**kwargs)


def _axis(axis: Axis) -> alt.Axis:
    kwargs: Dict[str, Any] = {}
    if axis.format is not None:
        kwargs["format"] = axis.format
    return alt.Axis(**kwargs)


def _x(field: str, spec: ChartSpec) -> alt.X:
    axis = spec.x_axis
    kind = "T" if axis.temporal else "Q"
    return alt.X(
        f"{field}:{kind}",
        title=axis.title or None,
        scale=_scale(axis),
        axis=_axis(axis),
    )


def _y(field: str, spec: ChartSpec) -> alt.Y:
    axis = spec.y_axis
    return alt.Y(
        f"{field}:Q", title=axis.title or None, scale=_scale(axis), axis=_axis(axis)
    )


def _color(field: str, legend: Legend) -> alt.Color:
    domain = list(legend.domain)
    colors = [resolve_color(color) for color in legend.range]
    if legend.reverse:
        # Domain and range are reversed together so the mapping is unchanged
        domain, colors = domain[::-1], colors[::-1]

    legend_kwargs: Dict[str, Any] = {"title": legend.title, "orient": "bottom"}
    if legend.columns is not None:
        legend_kwargs["columns"] = legend.columns
    return alt.Color(
        f"{field}:N",
        scale=alt.Scale(domain=domain, range=colors),
        legend=alt.Legend(**legend_kwargs),
    )


def _render_bar(layer: Layer, spec: ChartSpec) -> alt.Chart:
    encodings: Dict[str, Any] = {
        "x": alt.X(
            f"{layer.x}:Q",
            stack="normalize",
            title=spec.x_axis.title or None,
            axis=alt.Axis(format="%"),
        ),
        "y": alt.Y(
            f"{layer.y}:N", sort=spec.category_order, title=spec.y_axis.title or None
        ),
    }
    if layer.color_field is not None and spec.legend is not None:
        encodings["color"] = _color(layer.color_field, spec.legend)
    if "stack_order" in layer.data.columns:
        encodings["order"] = alt.Order("stack_order:Q")
    return alt.Chart(layer.data).mark_bar(opacity=layer.opacity).encode(**encodings)


def _render_line(layer: Layer, spec: ChartSpec) -> alt.Chart:
    mark_kwargs: Dict[str, Any] = {"opacity": layer.opacity}
    if layer.color is not None:
        mark_kwargs["color"] = resolve_color(layer.color)
    if layer.line_type.stroke_dash is not None:
        mark_kwargs["strokeDash"] = layer.line_type.stroke_dash

    encodings: Dict[str, Any] = {"x": _x(layer.x, spec), "y": _y(layer.y, spec)}
    if layer.color_field is not None and spec.legend is not None:
        encodings["color"] = _color(layer.color_field, spec.legend)
    return alt.Chart(layer.data).mark_line(**mark_kwargs).encode(**encodings)


def _render_ribbon(layer: Layer, spec: ChartSpec) -> alt.Chart:
    return (
        alt.Chart(layer.data)
        .mark_area(color=resolve_color(layer.color), opacity=layer.opacity)
        .encode(x=_x(layer.x, spec), y=_y(layer.y, spec), y2=alt.Y2(f"{layer.y2}:Q"))
    )


def _render_segment(layer: Layer, spec: ChartSpec) -> alt.Chart:
    data = pd.DataFrame(
        [{"x": layer.x_value, "x2": layer.x2_value, "y": layer.y_value}]
    )
    return (
        alt.Chart(data)
        .mark_rule(color=resolve_color(layer.color or THEME_COLORS["main_line"]))
        .encode(x=_x("x", spec), x2=alt.X2("x2:Q"), y=_y("y", spec))
    )


def _render_text(layer: Layer, spec: ChartSpec) -> alt.Chart:
    data = pd.DataFrame([{"x": layer.x_value, "y": layer.y_value, "text": layer.text}])
    return (
        alt.Chart(data)
        .mark_text(
            align="left",
            baseline="middle",
            fontSize=FONT_SIZE["annotation"],
            color=THEME_COLORS["text"],
        )
        .encode(x=_x("x", spec), y=_y("y", spec), text="text:N")
    )


_RENDERERS = {
    LayerKind.BAR: _render_bar,
    LayerKind.LINE: _render_line,
    LayerKind.RIBBON: _render_ribbon,
    LayerKind.SEGMENT: _render_segment,
    LayerKind.TEXT: _render_text,
}


def render(spec: ChartSpec) -> alt.TopLevelMixin:
    """
    Render a chart specification with Altair.

    Layers are drawn in order, so later layers sit on top. A faceted spec
    must hold a single layer; it is split into one row per facet value.

    Returns:
        Themed Altair chart (a `Chart` when faceted, otherwise a `LayerChart`)
    """
    charts = [_RENDERERS[layer.kind](layer, spec) for layer in spec.layers]

    if spec.facet is not None:
        if len(charts) != 1:
            raise ValueError(
                f"A faceted chart must have a single layer, not {len(charts)}."
            )
        chart = charts[0].encode(
            row=alt.Row(
                f"{spec.facet}:O", title=None, header=alt.Header(labelOrient="right")
            )
        )
    else:
        chart = alt.layer(*charts)

    chart = chart.properties(
        width=spec.width,
        height=spec.height,
        padding={"left": 10, "top": 10, "bottom": 10, "right": spec.padding_right},
    )
    if spec.title:
        chart = chart.properties(
            title=alt.TitleParams(text=spec.title, fontSize=14, fontWeight="bold")
        )
    return apply_theme(chart)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Emission intensity chart: one line per emission factor metric over time.
"""

from __future__ import annotations

from typing import List, Optional

import altair as alt
import pandas as pd

from ..core.labels import to_title
from ..core.primitives import ChartType, LayerKind, PlotSettings, get_settings
from ..core.validation import validate
from ..data.reference import ReferenceData
from ..prep.emission_intensity import prep_emission_intensity
from .render import render
from .spec import Axis, ChartSpec, Layer, Legend


def match_lines_order(data: pd.DataFrame) -> List[str]:
    """
    Labels ordered by their value at the last year, highest first.

    The legend then lists lines in the order they end on the chart.
    """
    last = (
        data.sort_values("year", kind="stable")
        .groupby("label", sort=False)
        .tail(1)
        .sort_values("emission_factor_value", ascending=False, kind="stable")
    )
    return last["label"].tolist()


def build_emission_intensity(
    data: pd.DataFrame, settings: Optional[PlotSettings] = None
) -> ChartSpec:
    """
    Assemble the emission intensity chart from prepared data.

    Palette colours are handed out in order of first appearance in the
    data and matched to labels by their last-year ranking.
    """
    settings = settings or get_settings()
    layer = Layer(
        kind=LayerKind.LINE,
        name="emission_factor_value",
        data=data,
        x="year",
        y="emission_factor_value",
        color_field="label",
    )
    return ChartSpec(
        chart_type=ChartType.EMISSION_INTENSITY,
        layers=[layer],
        legend=Legend(
            domain=match_lines_order(data),
            range=list(pd.unique(data["hex"].dropna())),
        ),
        x_axis=Axis(temporal=True, format="%Y"),
        y_axis=Axis(include_zero=True),
        width=settings.width,
        height=settings.height,
    )


def emission_intensity_spec(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """Validate, prepare and assemble an emission intensity chart specification."""
    validate(data, ChartType.EMISSION_INTENSITY, name=name, settings=settings)
    prep = prep_emission_intensity(data, reference=reference, settings=settings)
    return build_emission_intensity(prep, settings=settings)


def plot_emission_intensity(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> alt.TopLevelMixin:
    """
    Create an emission intensity plot.

    Args:
        data: SDA data. Requirements:
            - columns sector, year, emission_factor_metric, emission_factor_value
            - `sector` holds a single value (e.g. "cement")
            - no more than 7 distinct emission factor metrics
            - optional `label` column provides line labels

    Example:
        ```python
        plot_emission_intensity(sda[sda["sector"] == "cement"])
        ```
    """
    return render(
        emission_intensity_spec(data, name=name, reference=reference, settings=settings)
    )


def qemission_intensity_spec(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """Quick emission intensity specification: 5-year span, titled labels and axes."""
    validate(data, ChartType.EMISSION_INTENSITY, name=name, settings=settings)
    prep = prep_emission_intensity(
        data,
        convert_label=to_title,
        span_5yr=True,
        reference=reference,
        settings=settings,
    )
    sector = to_title(pd.Series([prep["sector"].iloc[0]])).iloc[0]
    return build_emission_intensity(prep, settings=settings).with_labels(
        title=f"Emission Intensity Trend for the {sector} Sector",
        x_title="Year",
        y_title="Tons of CO2 per Ton of Production Unit",
    )


def qplot_emission_intensity(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> alt.TopLevelMixin:
    """
    Create a quick emission intensity plot.

    Compared to `plot_emission_intensity()` this plots five years from the
    start year, formats labels from the emission factor metric, and adds a
    title and axis labels.
    """
    return render(
        qemission_intensity_spec(data, name=name, reference=reference, settings=settings)
    )


__all__ = [
    "build_emission_intensity",
    "emission_intensity_spec",
    "match_lines_order",
    "plot_emission_intensity",
    "qemission_intensity_spec",
    "qplot_emission_intensity",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Techmix chart: the technology mix of the portfolio, its benchmarks and one
scenario target, as proportionally stacked bars for the start and a future
year.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import altair as alt
import pandas as pd

from ..core.labels import spell_out_technology, to_title
from ..core.metrics import classify_metrics
from ..core.primitives import (
    ChartType,
    LayerKind,
    MetricKind,
    PlotSettings,
    get_settings,
)
from ..core.validation import validate
from ..data.reference import ReferenceData, get_reference_data
from ..prep.techmix import prep_techmix
from .render import render
from .spec import Axis, ChartSpec, Layer, Legend

logger = logging.getLogger(__name__)


def techmix_labels(data: pd.DataFrame) -> List[str]:
    """
    Bar labels from bottom to top.

    Metrics are ranked portfolio first, then the other non-scenario metrics
    in table order, then the scenario; the label order is that ranking
    reversed so that the portfolio bar ends up on top.
    """
    kinds = classify_metrics(data["metric"])
    portfolio = list(pd.unique(data.loc[kinds == MetricKind.PORTFOLIO.value, "metric"]))
    scenario = list(pd.unique(data.loc[kinds == MetricKind.SCENARIO.value, "metric"]))
    others = [
        metric
        for metric in pd.unique(data["metric"])
        if metric not in portfolio and metric not in scenario
    ]
    rank = {metric: i for i, metric in enumerate(portfolio + others + scenario)}

    ordered = data.assign(_rank=data["metric"].map(rank)).sort_values(
        "_rank", kind="stable"
    )
    return list(reversed(list(pd.unique(ordered["label"]))))


def get_technology_colours(
    data: pd.DataFrame, reference: Optional[ReferenceData] = None
) -> pd.DataFrame:
    """
    Technology palette restricted to the (sector, technology) pairs in `data`.

    Returns:
        DataFrame with columns sector, technology, label, hex, label_tech in
        palette order
    """
    reference = reference or get_reference_data()
    palette = reference.technology_colours
    present = data[["sector", "technology"]].drop_duplicates()
    colours = palette.merge(present, on=["sector", "technology"], how="inner")

    missing = set(present["technology"]) - set(colours["technology"])
    if missing:
        logger.warning(
            f"No colour for technologies: {', '.join(sorted(map(str, missing)))}"
        )

    tech_labels = data[["technology", "label_tech"]].drop_duplicates("technology")
    return colours.merge(tech_labels, on="technology", how="left")


def build_techmix(
    data: pd.DataFrame,
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """
    Assemble the techmix chart from prepared data (see `prep_techmix`).

    One normalised horizontal bar per (year, label), stacked by technology in
    palette order, faceted by year. Legend entries are listed in reverse
    palette order.
    """
    settings = settings or get_settings()
    colours = get_technology_colours(data, reference)

    rank = {tech: i for i, tech in enumerate(colours["technology"])}
    bars = data.assign(stack_order=data["technology"].map(rank))

    layer = Layer(
        kind=LayerKind.BAR,
        name="technology_share",
        data=bars,
        x="value",
        y="label",
        color_field="label_tech",
    )
    return ChartSpec(
        chart_type=ChartType.TECHMIX,
        layers=[layer],
        legend=Legend(
            domain=colours["label_tech"].tolist(),
            range=colours["hex"].tolist(),
            reverse=True,
            columns=3,
        ),
        facet="year",
        category_order=list(reversed(techmix_labels(data))),
        x_axis=Axis(format="%"),
        width=settings.width,
        height=settings.height // 3,
    )


def techmix_spec(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """Validate, prepare and assemble a techmix chart specification."""
    validate(data, ChartType.TECHMIX, name=name, settings=settings)
    prep = prep_techmix(data, name=name, settings=settings)
    return build_techmix(prep, reference=reference, settings=settings)


def plot_techmix(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> alt.TopLevelMixin:
    """
    Create a techmix plot.

    Args:
        data: Market-share data. Requirements:
            - `sector`, `region` and `scenario_source` hold a single value
            - `metric` holds a portfolio ("projected"), optional benchmarks
              (e.g. "corporate_economy") and a single scenario (e.g.
              "target_sds")
            - optional `label` and `label_tech` columns provide labels
        name: Name used for `data` in messages
        reference: Reference palettes (defaults to the bundled ones)
        settings: Plot settings (defaults to the active settings)

    Returns:
        Altair chart

    Example:
        ```python
        data = market_share[
            (market_share["scenario_source"] == "demo_2020")
            & (market_share["sector"] == "power")
            & (market_share["region"] == "global")
            & market_share["metric"].isin(["projected", "corporate_economy", "target_sds"])
        ]
        plot_techmix(data)
        ```
    """
    return render(techmix_spec(data, name=name, reference=reference, settings=settings))


def qtechmix_spec(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """Quick techmix specification: title-cased labels, 5-year span and a title."""
    validate(data, ChartType.TECHMIX, name=name, settings=settings)
    prep = prep_techmix(
        data,
        convert_label=to_title,
        span_5yr=True,
        convert_tech_label=spell_out_technology,
        name=name,
        settings=settings,
    )
    spec = build_techmix(prep, reference=reference, settings=settings)
    sector = to_title(pd.Series([prep["sector"].iloc[0]])).iloc[0]
    return spec.with_labels(title=f"Technology Mix for the {sector} Sector")


def qplot_techmix(
    data: pd.DataFrame,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> alt.TopLevelMixin:
    """
    Create a quick techmix plot.

    Compared to `plot_techmix()` this compares the start year with five
    years later, formats metric and technology labels, and adds a title.
    """
    return render(qtechmix_spec(data, name=name, reference=reference, settings=settings))


__all__ = [
    "build_techmix",
    "get_technology_colours",
    "plot_techmix",
    "qplot_techmix",
    "qtechmix_spec",
    "techmix_labels",
    "techmix_spec",
]

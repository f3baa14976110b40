# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Trajectory alignment chart.

The portfolio's trajectory for one technology is drawn as a line over a
stack of scenario ribbons (see `pacta_charts.layout.bands`), optionally
with benchmark lines and end-of-line annotations.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import altair as alt
import pandas as pd

from ..core.labels import to_title
from ..core.primitives import (
    ChartType,
    GreenOrBrown,
    LayerKind,
    LineType,
    PlotSettings,
    get_settings,
)
from ..core.side_tables import (
    WORSE_SCENARIO,
    LineMetric,
    SideTable,
    coerce_line_metrics,
    coerce_main_line_metric,
    coerce_scenario_specs,
)
from ..core.validation import validate
from ..data.reference import ReferenceData
from ..layout.bands import BandLayout, layout_scenario_bands
from ..prep.common import span_5yr
from .render import render
from .spec import Axis, ChartSpec, Layer
from .theme import THEME_COLORS

logger = logging.getLogger(__name__)

# Styles of supporting lines, applied by position. The list wraps around:
# a fifth supporting metric is drawn like the first.
SUPPORTING_LINE_STYLES: List[Tuple[LineType, str]] = [
    (LineType.DASHED, "black"),
    (LineType.SOLID, "gray"),
    (LineType.SOLID, "grey46"),
    (LineType.TWODASH, "black"),
]

# Offsets, in years, of annotations from the last plotted year
SEGMENT_LENGTH = 0.75
SCENARIO_LABEL_OFFSET = 0.85
LINE_LABEL_OFFSET = 0.1

PADDING_ANNOTATED = 150
PADDING_PLAIN = 20


def supporting_line_style(index: int) -> Tuple[LineType, str]:
    """Line type and colour of the supporting line at position `index` (0-based)."""
    return SUPPORTING_LINE_STYLES[index % len(SUPPORTING_LINE_STYLES)]


def _value_at(data: pd.DataFrame, year: int, column: str = "value") -> Optional[float]:
    values = data.loc[data["year"] == year, column]
    if values.empty:
        return None
    return float(values.iloc[0])


def _scenario_layers(
    layout: BandLayout,
    last_year: int,
    annotate_data: bool,
    opacity: float,
) -> List[Layer]:
    layers: List[Layer] = []
    boundary = "value" if layout.direction is GreenOrBrown.BROWN else "value_low"

    for spec in layout.scenario_order:
        band = layout.band(spec.scenario)
        layers.append(
            Layer(
                kind=LayerKind.RIBBON,
                name=spec.scenario,
                data=band,
                x="year",
                y="value_low",
                y2="value",
                color=spec.color,
                opacity=opacity,
            )
        )

        if spec.scenario != WORSE_SCENARIO:
            layers.append(
                Layer(
                    kind=LayerKind.LINE,
                    name=spec.scenario,
                    data=band,
                    x="year",
                    y=boundary,
                    color=spec.color,
                )
            )

        if annotate_data:
            y_value = _value_at(band, last_year)
            if y_value is None:
                logger.warning(
                    f"No '{spec.scenario}' band in {last_year}; skipping its annotation"
                )
                continue
            layers.append(
                Layer(
                    kind=LayerKind.SEGMENT,
                    name=spec.scenario,
                    x_value=last_year,
                    x2_value=last_year + SEGMENT_LENGTH,
                    y_value=y_value,
                    color=spec.color,
                )
            )
            layers.append(
                Layer(
                    kind=LayerKind.TEXT,
                    name=spec.scenario,
                    x_value=last_year + SCENARIO_LABEL_OFFSET,
                    y_value=y_value,
                    text=spec.label,
                )
            )
    return layers


def _metric_layers(
    data: pd.DataFrame,
    metric: LineMetric,
    line_type: LineType,
    color: str,
    last_year: int,
    annotate_data: bool,
) -> List[Layer]:
    line_data = data.loc[data["metric"] == metric.metric].reset_index(drop=True)
    if line_data.empty:
        logger.warning(f"No rows for line metric '{metric.metric}'")

    layers = [
        Layer(
            kind=LayerKind.LINE,
            name=metric.metric,
            data=line_data,
            x="year",
            y="value",
            color=color,
            line_type=line_type,
        )
    ]
    if annotate_data:
        y_value = _value_at(line_data, last_year)
        if y_value is not None:
            layers.append(
                Layer(
                    kind=LayerKind.TEXT,
                    name=metric.metric,
                    x_value=last_year + LINE_LABEL_OFFSET,
                    y_value=y_value,
                    text=metric.label,
                )
            )
    return layers


def build_trajectory(
    data: pd.DataFrame,
    scenario_specs: SideTable,
    main_line_metric: SideTable,
    additional_line_metrics: SideTable = None,
    plot_title: str = "",
    x_title: str = "",
    y_title: str = "",
    annotate_data: bool = False,
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """
    Assemble the trajectory chart from a validated trajectory table.

    Layers, bottom to top:
    1. per scenario, in stacking order: a ribbon, a boundary line (not for
       the "worse" band) and, when annotating, a segment and a label at the
       last year
    2. the main metric as a solid line, plus its label when annotating
    3. each additional metric as a styled line, plus its label
    """
    settings = settings or get_settings()
    specs = coerce_scenario_specs(scenario_specs, worse_color=settings.worse_color)
    main_metric = coerce_main_line_metric(main_line_metric)
    extra_metrics = coerce_line_metrics(additional_line_metrics, "additional_line_metrics")

    layout = layout_scenario_bands(data, specs, reference=reference, settings=settings)
    first_year = int(data["year"].min())
    last_year = int(data["year"].max())

    layers = _scenario_layers(
        layout, last_year, annotate_data, opacity=settings.ribbon_opacity
    )
    layers += _metric_layers(
        data,
        main_metric,
        LineType.SOLID,
        THEME_COLORS["main_line"],
        last_year,
        annotate_data,
    )
    for i, metric in enumerate(extra_metrics):
        line_type, color = supporting_line_style(i)
        layers += _metric_layers(
            data, metric, line_type, color, last_year, annotate_data
        )

    return ChartSpec(
        chart_type=ChartType.TRAJECTORY,
        layers=layers,
        title=plot_title,
        x_axis=Axis(title=x_title, domain=(first_year, last_year), format="d"),
        y_axis=Axis(
            title=y_title, domain=(layout.borders.lower, layout.borders.upper)
        ),
        padding_right=PADDING_ANNOTATED if annotate_data else PADDING_PLAIN,
        width=settings.width,
        height=settings.height,
    )


def trajectory_spec(
    data: pd.DataFrame,
    scenario_specs: SideTable,
    main_line_metric: SideTable,
    additional_line_metrics: SideTable = None,
    plot_title: str = "",
    x_title: str = "",
    y_title: str = "",
    annotate_data: bool = False,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """Validate `data` and assemble a trajectory chart specification."""
    validate(data, ChartType.TRAJECTORY, name=name, settings=settings)
    return build_trajectory(
        data,
        scenario_specs,
        main_line_metric,
        additional_line_metrics,
        plot_title=plot_title,
        x_title=x_title,
        y_title=y_title,
        annotate_data=annotate_data,
        reference=reference,
        settings=settings,
    )


def plot_trajectory(
    data: pd.DataFrame,
    scenario_specs: SideTable,
    main_line_metric: SideTable,
    additional_line_metrics: SideTable = None,
    plot_title: str = "",
    x_title: str = "",
    y_title: str = "",
    annotate_data: bool = False,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> alt.TopLevelMixin:
    """
    Create a trajectory alignment chart.

    Args:
        data: Trajectory table with columns year, metric_type, metric, value,
            technology (see `prep_trajectory`)
        scenario_specs: Scenarios ordered from most to least sustainable,
            with columns scenario, label, color. A "worse" band is appended
            when missing.
        main_line_metric: One row {metric, label} drawn as the main line
        additional_line_metrics: Rows {metric, label} drawn as supporting
            lines; only the first four get distinct styles
        plot_title: Title of the plot
        x_title: Title of the x axis
        y_title: Title of the y axis
        annotate_data: Label every band and line at the last year
        name: Name used for `data` in messages
        reference: Reference data (defaults to the bundled tables)
        settings: Plot settings (defaults to the active settings)

    Returns:
        Altair layered chart

    Example:
        ```python
        scenario_specs = pd.DataFrame({
            "scenario": ["sds", "sps", "cps", "worse"],
            "color": ["#9CAB7C", "#FFFFCC", "#FDE291", "#E07B73"],
            "label": ["SDS", "STEPS", "CPS", "worse"],
        })
        main_line_metric = pd.DataFrame({"metric": ["projected"], "label": ["Portfolio"]})

        plot_trajectory(
            data,
            scenario_specs=scenario_specs,
            main_line_metric=main_line_metric,
        )
        ```
    """
    return render(
        trajectory_spec(
            data,
            scenario_specs,
            main_line_metric,
            additional_line_metrics,
            plot_title=plot_title,
            x_title=x_title,
            y_title=y_title,
            annotate_data=annotate_data,
            name=name,
            reference=reference,
            settings=settings,
        )
    )


def qtrajectory_spec(
    data: pd.DataFrame,
    scenario_specs: SideTable,
    main_line_metric: SideTable = None,
    additional_line_metrics: SideTable = None,
    sector: Optional[str] = None,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> ChartSpec:
    """
    Quick trajectory specification.

    Restricts the chart to five years from the start year, annotates the
    data and adds a title and axis labels. The main line defaults to the
    portfolio ("projected", labelled "Portfolio"); additional metric labels
    are title-cased.
    """
    settings = settings or get_settings()
    validate(data, ChartType.TRAJECTORY, name=name, settings=settings)

    data = span_5yr(data, years=settings.span_years)
    if main_line_metric is None:
        main_line_metric = LineMetric(metric="projected", label="Portfolio")
    extra_metrics = [
        metric.model_copy(update={"label": to_title(pd.Series([metric.label])).iloc[0]})
        for metric in coerce_line_metrics(
            additional_line_metrics, "additional_line_metrics"
        )
    ]

    technology = to_title(pd.Series([data["technology"].iloc[0]])).iloc[0]
    title = f"Production Trajectory of Technology {technology}"
    if sector is not None:
        title += f" in the {to_title(pd.Series([sector])).iloc[0]} Sector"

    return build_trajectory(
        data,
        scenario_specs,
        main_line_metric,
        extra_metrics,
        plot_title=title,
        x_title="Year",
        y_title="Production",
        annotate_data=True,
        reference=reference,
        settings=settings,
    )


def qplot_trajectory(
    data: pd.DataFrame,
    scenario_specs: SideTable,
    main_line_metric: SideTable = None,
    additional_line_metrics: SideTable = None,
    sector: Optional[str] = None,
    name: str = "data",
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> alt.TopLevelMixin:
    """Create a quick trajectory chart (see `qtrajectory_spec`)."""
    return render(
        qtrajectory_spec(
            data,
            scenario_specs,
            main_line_metric,
            additional_line_metrics,
            sector=sector,
            name=name,
            reference=reference,
            settings=settings,
        )
    )


__all__ = [
    "SUPPORTING_LINE_STYLES",
    "build_trajectory",
    "plot_trajectory",
    "qplot_trajectory",
    "qtrajectory_spec",
    "supporting_line_style",
    "trajectory_spec",
]

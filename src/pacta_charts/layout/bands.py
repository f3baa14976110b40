# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Scenario band layout for trajectory charts.

A trajectory chart draws the portfolio line over a stack of scenario
ribbons. Each ribbon spans, per year, from the previous scenario's value to
its own, so for any year the ribbons tile the plotted value range without
gaps or overlaps:

    brown technology (high is bad)      green technology (high is good)

    upper ┬──────────────────           upper ┬──────────────────
          │ worse                             │ best scenario
          ├── worst scenario                  ├── ...
          │ ...                               ├── worst scenario
          ├── best scenario                   │ worse
    lower ┴──────────────────           lower ┴──────────────────

Before stacking, the area borders are widened on one side so that the
portfolio's starting value sits near the vertical middle of the chart.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import pandas as pd

from ..core.errors import DegenerateRangeError
from ..core.metrics import portfolio_start_value
from ..core.primitives import GreenOrBrown, MetricKind, Model, PlotSettings, get_settings
from ..core.side_tables import WORSE_SCENARIO, ScenarioSpec
from ..data.reference import ReferenceData, get_reference_data

logger = logging.getLogger(__name__)

BAND_COLUMNS = ["year", "metric", "value_low", "value"]


class AreaBorders(Model):
    """Visual value range covered by the stacked scenario ribbons."""

    lower: float
    upper: float

    @property
    def span(self) -> float:
        return self.upper - self.lower


class BandLayout(Model):
    """
    Result of laying out scenario bands.

    Attributes:
        bands: One row per (year, scenario) with columns year, metric,
            value_low, value; sorted by year, then stacking order
        borders: Area borders after centering
        direction: Green/brown classification of the technology
        scenario_order: Scenario specs in stacking (and drawing) order,
            starting at the lower border
    """

    bands: pd.DataFrame
    borders: AreaBorders
    direction: GreenOrBrown
    scenario_order: List[ScenarioSpec]

    def band(self, scenario: str) -> pd.DataFrame:
        """Rows of a single scenario band."""
        return self.bands.loc[self.bands["metric"] == scenario].reset_index(drop=True)


def compute_area_borders(values: pd.Series) -> AreaBorders:
    """
    Global value bounds of a trajectory table.

    Raises:
        DegenerateRangeError: If all values are equal or missing
    """
    present = values.dropna()
    if present.empty:
        raise DegenerateRangeError(None)
    lower = float(present.min())
    upper = float(present.max())
    if upper == lower:
        raise DegenerateRangeError(lower)
    return AreaBorders(lower=lower, upper=upper)


def center_area_borders(
    borders: AreaBorders, start_value: float, max_delta_distance: float = 0.1
) -> AreaBorders:
    """
    Move one border so `start_value` sits near the middle of the range.

    The relative distances of `start_value` to both borders are compared. If
    they differ by more than `max_delta_distance`, the border nearer to
    `start_value` is pushed outward until both distances are equal. The
    other border never moves.

    Example:
        ```python
        center_area_borders(AreaBorders(lower=0, upper=100), 95)
        # AreaBorders(lower=0.0, upper=190.0)
        ```
    """
    span = borders.span
    if span == 0:
        raise DegenerateRangeError(borders.lower)

    distance_upper = (borders.upper - start_value) / span
    distance_lower = (start_value - borders.lower) / span

    if abs(distance_upper - distance_lower) <= max_delta_distance:
        return borders

    if distance_upper > distance_lower:
        lower = start_value - distance_upper * span
        logger.debug(f"Lower area border moved {borders.lower} -> {lower}")
        return AreaBorders(lower=lower, upper=borders.upper)
    else:
        upper = distance_lower * span + start_value
        logger.debug(f"Upper area border moved {borders.upper} -> {upper}")
        return AreaBorders(lower=borders.lower, upper=upper)


def stacking_order(
    scenario_specs: Sequence[ScenarioSpec], direction: GreenOrBrown
) -> List[ScenarioSpec]:
    """
    Scenario specs from the lower border upward.

    Specs come ordered good to bad. Brown technologies stack them as given
    (best at the bottom); green technologies stack them reversed.
    """
    if direction is GreenOrBrown.BROWN:
        return list(scenario_specs)
    return list(reversed(scenario_specs))


def _sort_by_stacking_order(data: pd.DataFrame, order: List[str]) -> pd.DataFrame:
    rank = data["metric"].map({metric: i for i, metric in enumerate(order)})
    return (
        data.assign(_rank=rank)
        .sort_values(["year", "_rank"], kind="stable")
        .drop(columns="_rank")
        .reset_index(drop=True)
    )


def stack_scenario_bands(
    data: pd.DataFrame,
    scenario_specs: Sequence[ScenarioSpec],
    direction: GreenOrBrown,
    borders: AreaBorders,
) -> pd.DataFrame:
    """
    Compute `value_low`/`value` for every (year, scenario) pair.

    A synthetic "worse" row per year pins the outermost band to the border
    that represents the worst outcome: the upper border for brown
    technologies, the lower border for green ones.

    Args:
        data: Trajectory table (year, metric_type, metric, value)
        scenario_specs: Specs ordered good to bad, ending with "worse"
        direction: Green/brown classification of the plotted technology
        borders: Centered area borders

    Returns:
        DataFrame with columns year, metric, value_low, value
    """
    order = [spec.scenario for spec in stacking_order(scenario_specs, direction)]

    scenarios = data.loc[
        data["metric_type"] == MetricKind.SCENARIO.value, ["year", "metric", "value"]
    ]
    unknown = sorted(set(scenarios["metric"]) - set(order))
    if unknown:
        logger.warning(
            f"Ignoring scenarios without a scenario spec: {', '.join(unknown)}"
        )
        scenarios = scenarios.loc[scenarios["metric"].isin(order)]

    years = pd.unique(data["year"])
    if direction is GreenOrBrown.BROWN:
        worse = pd.DataFrame(
            {"year": years, "metric": WORSE_SCENARIO, "value": borders.upper}
        )
        stacked = _sort_by_stacking_order(pd.concat([scenarios, worse]), order)
        stacked["value_low"] = (
            stacked.groupby("year", sort=False)["value"].shift(1).fillna(borders.lower)
        )
    else:
        scenarios = scenarios.rename(columns={"value": "value_low"})
        worse = pd.DataFrame(
            {"year": years, "metric": WORSE_SCENARIO, "value_low": borders.lower}
        )
        stacked = _sort_by_stacking_order(pd.concat([scenarios, worse]), order)
        stacked["value"] = (
            stacked.groupby("year", sort=False)["value_low"].shift(-1).fillna(borders.upper)
        )

    stacked["year"] = stacked["year"].astype(int)
    stacked[["value_low", "value"]] = stacked[["value_low", "value"]].astype(float)
    return stacked[BAND_COLUMNS]


def layout_scenario_bands(
    data: pd.DataFrame,
    scenario_specs: Sequence[ScenarioSpec],
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> BandLayout:
    """
    Full band layout for one trajectory chart.

    Args:
        data: Validated trajectory table for a single technology
        scenario_specs: Specs ordered good to bad, ending with "worse"
            (see `coerce_scenario_specs`)
        reference: Reference data providing the green/brown lookup
        settings: Plot settings providing the centering threshold

    Raises:
        DegenerateRangeError: If all values are equal
        MissingPortfolioError: If the start year has no portfolio value
        UnknownTechnologyError: If the technology is not classified
    """
    reference = reference or get_reference_data()
    settings = settings or get_settings()

    direction = reference.direction_of(data["technology"].iloc[0])
    borders = compute_area_borders(data["value"])
    start_value = portfolio_start_value(data)
    borders = center_area_borders(borders, start_value, settings.max_delta_distance)

    bands = stack_scenario_bands(data, scenario_specs, direction, borders)
    return BandLayout(
        bands=bands,
        borders=borders,
        direction=direction,
        scenario_order=stacking_order(scenario_specs, direction),
    )

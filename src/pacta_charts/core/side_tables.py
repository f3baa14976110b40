# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Side tables that configure a trajectory chart.

Callers may pass them as DataFrames (as produced by an analysis pipeline)
or as sequences of models or dicts. Either way they are coerced into
lists of immutable models before use.
"""

from __future__ import annotations

from typing import Iterable, List, Union

import pandas as pd

from .errors import EmptyInputError
from .primitives import Model
from .validation import LINE_METRIC_COLUMNS, SCENARIO_SPECS_COLUMNS, check_side_table

WORSE_SCENARIO = "worse"


class ScenarioSpec(Model):
    """One scenario band: its metric name, legend label and fill colour."""

    scenario: str
    label: str
    color: str


class LineMetric(Model):
    """A metric drawn as a line, with its annotation label."""

    metric: str
    label: str


SideTable = Union[pd.DataFrame, Iterable[Union[Model, dict]], None]


def _records(table: SideTable, columns: List[str], name: str) -> List[dict]:
    if table is None:
        return []
    if isinstance(table, pd.DataFrame):
        if table.empty and len(table.columns) == 0:
            return []
        check_side_table(table, columns, name)
        return table[columns].to_dict(orient="records")
    return [
        item.model_dump() if isinstance(item, Model) else dict(item) for item in table
    ]


def coerce_scenario_specs(
    specs: SideTable, worse_color: str = "#E07B73"
) -> List[ScenarioSpec]:
    """
    Coerce `specs` (ordered most to least sustainable) into models.

    The synthetic "worse" scenario always comes last; it is appended with
    `worse_color` when the caller did not list it, and moved to the end when
    listed elsewhere.

    Raises:
        EmptyInputError: If no scenario is given
        MissingColumnsError: If a DataFrame lacks scenario, label or color
    """
    records = _records(specs, SCENARIO_SPECS_COLUMNS, "scenario_specs")
    parsed = [ScenarioSpec(**record) for record in records]
    scenarios = [spec for spec in parsed if spec.scenario != WORSE_SCENARIO]
    if not scenarios:
        raise EmptyInputError("scenario_specs")

    worse = next((spec for spec in parsed if spec.scenario == WORSE_SCENARIO), None)
    if worse is None:
        worse = ScenarioSpec(
            scenario=WORSE_SCENARIO, label=WORSE_SCENARIO, color=worse_color
        )
    return scenarios + [worse]


def coerce_line_metrics(metrics: SideTable, name: str) -> List[LineMetric]:
    """Coerce a `{metric, label}` side table into models; None or empty gives []."""
    records = _records(metrics, LINE_METRIC_COLUMNS, name)
    return [LineMetric(**record) for record in records]


def coerce_main_line_metric(metric: Union[SideTable, LineMetric]) -> LineMetric:
    """The main line metric; a table must hold exactly one row."""
    if isinstance(metric, LineMetric):
        return metric
    if isinstance(metric, dict):
        return LineMetric(**metric)
    metrics = coerce_line_metrics(metric, "main_line_metric")
    if not metrics:
        raise EmptyInputError("main_line_metric")
    if len(metrics) > 1:
        raise ValueError(
            f"`main_line_metric` must have a single row, not {len(metrics)}."
        )
    return metrics[0]

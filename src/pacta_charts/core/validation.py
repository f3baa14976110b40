# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Structural contracts of chart input data.

Each chart type declares the columns it needs, the columns that must hold a
single value, and any constraint on its metric vocabulary. `validate()` runs
those checks in a fixed order and raises on the first violation:

1. the input is a DataFrame
2. it has rows
3. required columns are present
4. single-valued columns hold one value
5. chart-specific metric checks

Validation has no side effects; the input is returned unchanged.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from .errors import (
    EmptyInputError,
    MissingColumnsError,
    MultipleScenariosError,
    MultipleValuesError,
    NoScenarioError,
    TooManyLinesError,
)
from .metrics import extract_scenarios
from .primitives import ChartType, PlotSettings, get_settings

logger = logging.getLogger(__name__)

MARKET_SHARE_COLUMNS = [
    "sector",
    "technology",
    "year",
    "region",
    "scenario_source",
    "metric",
]

REQUIRED_COLUMNS: Dict[ChartType, List[str]] = {
    ChartType.TECHMIX: MARKET_SHARE_COLUMNS + ["technology_share"],
    ChartType.TRAJECTORY: ["year", "metric_type", "metric", "value", "technology"],
    ChartType.EMISSION_INTENSITY: [
        "sector",
        "year",
        "emission_factor_metric",
        "emission_factor_value",
    ],
}

SINGLE_VALUE_COLUMNS: Dict[ChartType, List[str]] = {
    ChartType.TECHMIX: ["sector", "region", "scenario_source"],
    ChartType.TRAJECTORY: [],
    ChartType.EMISSION_INTENSITY: ["sector"],
}

# Name of the dataset each chart type's input should look like
REFERENCE_SHAPES: Dict[ChartType, str] = {
    ChartType.TECHMIX: "market_share",
    ChartType.TRAJECTORY: "market_share",
    ChartType.EMISSION_INTENSITY: "sda",
}

SCENARIO_SPECS_COLUMNS = ["scenario", "label", "color"]
LINE_METRIC_COLUMNS = ["metric", "label"]


def abort_if_not_dataframe(data: object, name: str = "data") -> None:
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"`{name}` must be a pandas DataFrame, not {type(data).__name__}."
        )


def abort_if_has_zero_rows(data: pd.DataFrame, name: str = "data") -> pd.DataFrame:
    if len(data.index) == 0:
        raise EmptyInputError(name)
    return data


def abort_if_missing_names(
    data: pd.DataFrame,
    expected: Iterable[str],
    name: str = "data",
    reference: Optional[str] = None,
) -> pd.DataFrame:
    """
    Raise if any expected column is missing.

    Args:
        data: Table to check
        expected: Required column names
        name: Name used for `data` in the message
        reference: Dataset whose shape `data` should follow, used as a hint

    Raises:
        MissingColumnsError: Listing exactly the missing columns, in the
            order they were expected
    """
    missing = [column for column in expected if column not in data.columns]
    if missing:
        raise MissingColumnsError(missing, name=name, reference=reference)
    return data


def abort_if_multiple(
    data: pd.DataFrame, columns: Sequence[str], name: str = "data"
) -> pd.DataFrame:
    """Raise if any of `columns` holds more than one distinct value."""
    for column in columns:
        values = pd.unique(data[column])
        if len(values) > 1:
            raise MultipleValuesError(column, values, name=name)
    return data


def abort_if_multiple_scenarios(data: pd.DataFrame, name: str = "data") -> pd.DataFrame:
    """
    Raise unless `data['metric']` has exactly one scenario.

    When several scenarios are present the error suggests a filter that keeps
    every non-scenario metric plus the first scenario.
    """
    scenarios = extract_scenarios(data["metric"])
    if not scenarios:
        raise NoScenarioError(name)
    if len(scenarios) > 1:
        others = [m for m in pd.unique(data["metric"]) if m not in scenarios]
        raise MultipleScenariosError(scenarios, other_metrics=others, name=name)
    return data


def abort_if_too_many_lines(
    data: pd.DataFrame,
    max_lines: int,
    column: str = "emission_factor_metric",
    name: str = "data",
) -> pd.DataFrame:
    n_lines = data[column].nunique()
    if n_lines > max_lines:
        raise TooManyLinesError(n_lines, max_lines, column=column, name=name)
    return data


def validate(
    data: pd.DataFrame,
    chart_type: ChartType,
    name: str = "data",
    settings: Optional[PlotSettings] = None,
) -> pd.DataFrame:
    """
    Check `data` against the contract of `chart_type`.

    Args:
        data: Input table
        chart_type: Chart family the table is meant for
        name: Name used for `data` in error messages
        settings: Plot settings (defaults to the active settings)

    Returns:
        `data`, unchanged

    Raises:
        TypeError: If `data` is not a DataFrame
        PlotDataError: The first contract violation found

    Example:
        ```python
        validate(market_share_subset, ChartType.TECHMIX)
        ```
    """
    settings = settings or get_settings()
    chart_type = ChartType(chart_type)

    abort_if_not_dataframe(data, name)
    abort_if_has_zero_rows(data, name)
    abort_if_missing_names(
        data, REQUIRED_COLUMNS[chart_type], name, REFERENCE_SHAPES[chart_type]
    )
    abort_if_multiple(data, SINGLE_VALUE_COLUMNS[chart_type], name)

    if chart_type is ChartType.TECHMIX:
        abort_if_multiple_scenarios(data, name)
    elif chart_type is ChartType.EMISSION_INTENSITY:
        abort_if_too_many_lines(data, settings.max_lines, name=name)

    logger.debug(f"{name}: passed {chart_type.value} validation ({len(data)} rows)")
    return data


def check_side_table(
    table: pd.DataFrame, columns: Sequence[str], name: str
) -> pd.DataFrame:
    """Validate a side table such as `scenario_specs` (non-empty, has columns)."""
    abort_if_not_dataframe(table, name)
    abort_if_has_zero_rows(table, name)
    abort_if_missing_names(table, columns, name)
    return table

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Metric classification.

PACTA tables mix several kinds of series in one `metric` column:
- "projected": the portfolio's own trajectory
- "target_*": a climate scenario's target (e.g. "target_sds")
- anything else: a benchmark (e.g. "corporate_economy")

This module is the single place where metric names are interpreted.
"""

from __future__ import annotations

from typing import Any, List

import pandas as pd

from .errors import MissingPortfolioError
from .primitives import MetricKind

PORTFOLIO_METRIC = "projected"
SCENARIO_PREFIX = "target_"


def classify_metric(metric: Any) -> MetricKind:
    """
    Tag one metric name with its kind.

    Args:
        metric: Metric name as found in the `metric` column

    Returns:
        PORTFOLIO for "projected", SCENARIO for "target_*" names,
        OTHER for missing or empty names, BENCHMARK otherwise.

    Example:
        ```python
        classify_metric("target_sds")         # MetricKind.SCENARIO
        classify_metric("corporate_economy")  # MetricKind.BENCHMARK
        ```
    """
    if not isinstance(metric, str) or not metric.strip():
        return MetricKind.OTHER
    if metric == PORTFOLIO_METRIC:
        return MetricKind.PORTFOLIO
    if metric.startswith(SCENARIO_PREFIX):
        return MetricKind.SCENARIO
    return MetricKind.BENCHMARK


def classify_metrics(metrics: pd.Series) -> pd.Series:
    """Vectorised `classify_metric`, returning the kinds' string values."""
    return metrics.map(lambda metric: classify_metric(metric).value)


def is_scenario(metrics: pd.Series) -> pd.Series:
    """Boolean mask of scenario metrics."""
    return classify_metrics(metrics) == MetricKind.SCENARIO.value


def extract_scenarios(metrics: pd.Series) -> List[str]:
    """Distinct scenario metrics in order of first appearance."""
    return list(pd.unique(metrics[is_scenario(metrics)]))


def strip_scenario_prefix(metric: str) -> str:
    """Drop the scenario prefix: "target_sds" -> "sds"."""
    if classify_metric(metric) is MetricKind.SCENARIO:
        return metric[len(SCENARIO_PREFIX):]
    return metric


def portfolio_start_value(data: pd.DataFrame) -> float:
    """
    Portfolio value at the first year of a trajectory table.

    Args:
        data: Table with year, metric_type and value columns

    Raises:
        MissingPortfolioError: If there is no non-missing portfolio value in
            that year
    """
    start_year = int(data["year"].min())
    rows = data.loc[
        (data["year"] == start_year)
        & (data["metric_type"] == MetricKind.PORTFOLIO.value),
        "value",
    ].dropna()
    if rows.empty:
        raise MissingPortfolioError(start_year)
    return float(rows.iloc[0])

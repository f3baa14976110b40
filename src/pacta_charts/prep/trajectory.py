# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Preparation of market-share data for trajectory charts.

A trajectory chart needs one technology in one sector, region and scenario
source, with every metric tagged by kind. This module filters a full
market-share table down to that and derives the `metric_type` column.
"""

from __future__ import annotations

import logging
from typing import Optional

import pandas as pd

from ..core.errors import PlotDataError
from ..core.metrics import (
    classify_metrics,
    portfolio_start_value,
    strip_scenario_prefix,
)
from ..core.validation import (
    MARKET_SHARE_COLUMNS,
    abort_if_has_zero_rows,
    abort_if_missing_names,
    abort_if_not_dataframe,
)
from .common import recode_sector

logger = logging.getLogger(__name__)

TRAJECTORY_COLUMNS = ["year", "metric_type", "metric", "value", "technology"]


def prep_trajectory(
    data: pd.DataFrame,
    sector: str,
    technology: str,
    region: str,
    scenario_source: str,
    value_name: str = "production",
    end_year: Optional[int] = None,
    normalize: bool = False,
    name: str = "data",
) -> pd.DataFrame:
    """
    Filter market-share data into the shape a trajectory chart expects.

    Args:
        data: Market-share table (sector, technology, year, region,
            scenario_source, metric and the `value_name` column)
        sector: Sector to keep; compared after canonicalising sector names
        technology: Technology to keep
        region: Region to keep
        scenario_source: Scenario source to keep
        value_name: Column plotted as `value` (e.g. "production" or
            "technology_share")
        end_year: Drop years after this one
        normalize: Divide every value by the portfolio's start-year value
        name: Name used for `data` in error messages

    Returns:
        DataFrame with columns year, metric_type, metric, value, technology,
        sorted by metric then year. Scenario metrics lose their "target_"
        prefix ("target_sds" -> "sds") so they match scenario specs.

    Raises:
        MissingColumnsError: If a market-share column is missing
        EmptyInputError: If nothing is left after filtering
        MissingPortfolioError: If normalizing without a portfolio start value
        PlotDataError: If normalizing to a portfolio start value of 0

    Example:
        ```python
        data = prep_trajectory(
            market_share,
            sector="power",
            technology="renewablescap",
            region="global",
            scenario_source="demo_2020",
        )
        ```
    """
    abort_if_not_dataframe(data, name)
    abort_if_missing_names(
        data, MARKET_SHARE_COLUMNS + [value_name], name, reference="market_share"
    )

    keep = (
        (recode_sector(data["sector"]) == recode_sector(pd.Series([sector]))[0])
        & (data["technology"] == technology)
        & (data["region"] == region)
        & (data["scenario_source"] == scenario_source)
    )
    if end_year is not None:
        keep &= data["year"] <= end_year

    out = data.loc[keep, ["year", "metric", "technology", value_name]]
    out = out.rename(columns={value_name: "value"})
    abort_if_has_zero_rows(out, name=f"filtered {name}")

    out["year"] = out["year"].astype(int)
    out["metric_type"] = classify_metrics(out["metric"])
    out["metric"] = out["metric"].map(strip_scenario_prefix)
    out = out.sort_values(["metric", "year"], kind="stable")

    if normalize:
        out = _normalize_to_portfolio_start(out, name)

    return out[TRAJECTORY_COLUMNS].reset_index(drop=True)


def _normalize_to_portfolio_start(data: pd.DataFrame, name: str) -> pd.DataFrame:
    start_value = portfolio_start_value(data)
    if start_value == 0:
        raise PlotDataError(
            f"Can't normalize `{name}` to a portfolio start value of 0.",
            hint="Do you need `normalize=False`?",
        )
    logger.debug(f"Normalizing `{name}` to the portfolio start value {start_value}")
    return data.assign(value=data["value"] / start_value)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reshaping steps shared by every chart's data preparation.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

# First matching rule wins; all patterns are case-insensitive
SECTOR_RULES = [
    (r"power", "power"),
    (r"auto[a-zA-Z]+", "automotive"),
    (r"oil.*gas", "oil&gas"),
    (r"fossil[a-zA-Z]+", "fossil fuels"),
]

METRIC_COLUMNS = ["metric", "emission_factor_metric"]


def recode_sector(x: pd.Series) -> pd.Series:
    """
    Canonicalise free-text sector names.

    Names matching a rule in `SECTOR_RULES` collapse to that rule's
    canonical name; anything else is only lower-cased. Canonical names map
    to themselves, so the function is idempotent.

    Example:
        ```python
        recode_sector(pd.Series(["POWER plants", "Oil & Gas", "Cement"]))
        # ["power", "oil&gas", "cement"]
        ```
    """
    text = x.astype("string")
    conditions = [
        text.str.contains(pattern, case=False, regex=True).fillna(False).to_numpy(bool)
        for pattern, _ in SECTOR_RULES
    ]
    choices = [canonical for _, canonical in SECTOR_RULES]
    default = text.str.lower().astype(object).to_numpy()
    recoded = np.select(conditions, choices, default=default)
    return pd.Series(recoded, index=x.index, name=x.name).where(x.notna(), x)


def metric_column(data: pd.DataFrame) -> str:
    """Name of the column holding metric names ('metric' or 'emission_factor_metric')."""
    for column in METRIC_COLUMNS:
        if column in data.columns:
            return column
    raise KeyError(f"`data` has none of the metric columns {METRIC_COLUMNS}")


def add_label_if_missing(data: pd.DataFrame) -> pd.DataFrame:
    if "label" in data.columns:
        return data
    data = data.copy()
    data["label"] = data[metric_column(data)]
    return data


def add_label_tech_if_missing(data: pd.DataFrame) -> pd.DataFrame:
    if "label_tech" in data.columns:
        return data
    data = data.copy()
    data["label_tech"] = data["technology"]
    return data


def prep_common(data: pd.DataFrame) -> pd.DataFrame:
    """Copy `data`, drop rows without a year, ensure integer years and a `label`."""
    out = data.loc[data["year"].notna()].copy()
    out["year"] = out["year"].astype(int)
    out = add_label_if_missing(out)
    return out.reset_index(drop=True)


def span_5yr(data: pd.DataFrame, years: int = 5) -> pd.DataFrame:
    """Keep rows no more than `years` after the start year."""
    start_year = data["year"].min()
    return data.loc[data["year"] <= start_year + years].reset_index(drop=True)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for pacta_charts tests.

Provides small synthetic datasets shaped like the PACTA `market_share` and
`sda` outputs, plus scenario specs for trajectory charts.
"""

from __future__ import annotations

import pandas as pd
import pytest

from pacta_charts.core.primitives import QUIET_ENV_VAR, reset_settings
from pacta_charts.prep import prep_trajectory

YEARS = list(range(2020, 2031))

# technology, start production, yearly change
TECHNOLOGIES = [("renewablescap", 100.0, 10.0), ("coalcap", 200.0, -8.0)]

# metric, multiplier of the yearly change
METRICS = [
    ("projected", 1.0),
    ("corporate_economy", 1.1),
    ("target_sds", 1.3),
    ("target_cps", 0.9),
]

# emission_factor_metric, start value, yearly change
EMISSION_FACTORS = [
    ("projected", 0.7, -0.01),
    ("corporate_economy", 0.8, -0.01),
    ("target_demo", 0.6, -0.02),
    ("adjusted_scenario_demo", 0.65, -0.015),
]


def make_market_share() -> pd.DataFrame:
    """Power sector market share: two technologies, one region and source."""
    rows = []
    for technology, start, change in TECHNOLOGIES:
        for metric, multiplier in METRICS:
            for year in YEARS:
                rows.append(
                    {
                        "sector": "power",
                        "technology": technology,
                        "year": year,
                        "region": "global",
                        "scenario_source": "demo_2020",
                        "metric": metric,
                        "production": start + change * multiplier * (year - 2020),
                    }
                )
    data = pd.DataFrame(rows)
    totals = data.groupby(["metric", "year"])["production"].transform("sum")
    data["technology_share"] = data["production"] / totals
    return data


def make_sda() -> pd.DataFrame:
    """Cement emission intensities for four emission factor metrics."""
    rows = [
        {
            "sector": "cement",
            "year": year,
            "region": "global",
            "scenario_source": "demo_2020",
            "emission_factor_metric": metric,
            "emission_factor_value": start + change * (year - 2020),
        }
        for metric, start, change in EMISSION_FACTORS
        for year in YEARS
    ]
    return pd.DataFrame(rows)


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    """Every test starts from default settings."""
    monkeypatch.delenv(QUIET_ENV_VAR, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def market_share() -> pd.DataFrame:
    return make_market_share()


@pytest.fixture
def techmix_data(market_share) -> pd.DataFrame:
    """Market share with a portfolio, one benchmark and one scenario."""
    keep = ["projected", "corporate_economy", "target_sds"]
    return market_share[market_share["metric"].isin(keep)].reset_index(drop=True)


@pytest.fixture
def sda() -> pd.DataFrame:
    return make_sda()


@pytest.fixture
def green_trajectory(market_share) -> pd.DataFrame:
    """Trajectory of a green technology (renewables capacity)."""
    return prep_trajectory(
        market_share,
        sector="power",
        technology="renewablescap",
        region="global",
        scenario_source="demo_2020",
    )


@pytest.fixture
def brown_trajectory(market_share) -> pd.DataFrame:
    """Trajectory of a brown technology (coal capacity)."""
    return prep_trajectory(
        market_share,
        sector="power",
        technology="coalcap",
        region="global",
        scenario_source="demo_2020",
    )


@pytest.fixture
def scenario_specs() -> pd.DataFrame:
    """Scenario specs ordered most to least sustainable, without "worse"."""
    return pd.DataFrame(
        {
            "scenario": ["sds", "cps"],
            "label": ["SDS", "CPS"],
            "color": ["#9CAB7C", "#FDE291"],
        }
    )


@pytest.fixture
def main_line_metric() -> pd.DataFrame:
    return pd.DataFrame({"metric": ["projected"], "label": ["Portfolio"]})

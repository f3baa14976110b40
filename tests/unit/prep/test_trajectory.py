# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for trajectory data preparation.
"""

import pandas as pd
import pytest

from pacta_charts.core.errors import (
    EmptyInputError,
    MissingColumnsError,
    MissingPortfolioError,
    PlotDataError,
)
from pacta_charts.prep.trajectory import TRAJECTORY_COLUMNS, prep_trajectory


def _prep(data, **kwargs):
    options = {
        "sector": "power",
        "technology": "renewablescap",
        "region": "global",
        "scenario_source": "demo_2020",
    }
    options.update(kwargs)
    return prep_trajectory(data, **options)


def _renewables(data, metric):
    return (data["metric"] == metric) & (data["technology"] == "renewablescap")


class TestPrepTrajectory:
    """Test suite for filtering market share into trajectory shape."""

    def test_shape(self, market_share):
        """Test output has the trajectory columns and one technology."""
        result = _prep(market_share)

        assert list(result.columns) == TRAJECTORY_COLUMNS
        assert len(result) == 4 * 11
        assert result["technology"].unique().tolist() == ["renewablescap"]

    def test_metric_types_and_scenario_names(self, market_share):
        """Test metrics are tagged by kind and scenarios lose their prefix."""
        result = _prep(market_share)
        types = result.drop_duplicates("metric").set_index("metric")["metric_type"]

        assert types.to_dict() == {
            "corporate_economy": "benchmark",
            "cps": "scenario",
            "projected": "portfolio",
            "sds": "scenario",
        }

    def test_sorted_by_metric_then_year(self, market_share):
        """Test rows come sorted by metric, then year."""
        result = _prep(market_share)
        expected = result.sort_values(["metric", "year"]).reset_index(drop=True)

        pd.testing.assert_frame_equal(result, expected)

    def test_sector_matches_free_text(self, market_share):
        """Test sector filtering compares canonical sector names."""
        data = market_share.assign(sector="Power")
        assert len(_prep(data, sector="POWER")) == 44

    def test_value_name_and_end_year(self, market_share):
        """Test a custom value column and an end year are honoured."""
        result = _prep(market_share, value_name="technology_share", end_year=2025)

        assert result["year"].max() == 2025
        assert result["value"].between(0, 1).all()

    def test_missing_value_column(self, market_share):
        """Test a missing value column raises MissingColumnsError."""
        with pytest.raises(MissingColumnsError) as excinfo:
            _prep(market_share.drop(columns=["production"]))

        assert excinfo.value.columns == ["production"]

    def test_no_match_raises(self, market_share):
        """Test filters that match nothing raise EmptyInputError."""
        with pytest.raises(EmptyInputError):
            _prep(market_share, region="europe")


class TestNormalize:
    """Test suite for normalizing trajectories to the portfolio start value."""

    def test_portfolio_starts_at_one(self, market_share):
        """Test the portfolio's start-year value becomes 1."""
        result = _prep(market_share, normalize=True)
        start = result[(result["year"] == 2020) & (result["metric"] == "projected")]

        assert start["value"].tolist() == [1.0]

    def test_all_metrics_share_the_portfolio_divisor(self, market_share):
        """Test every metric is divided by the portfolio start, not its own."""
        data = market_share.copy()
        sds = _renewables(data, "target_sds")
        data.loc[sds, "production"] = data.loc[sds, "production"] * 2

        result = _prep(data, normalize=True)
        sds_start = result[(result["year"] == 2020) & (result["metric"] == "sds")]
        cps_end = result[(result["year"] == 2030) & (result["metric"] == "cps")]

        assert sds_start["value"].tolist() == pytest.approx([2.0])
        assert cps_end["value"].tolist() == pytest.approx([1.9])

    def test_missing_portfolio_start_raises(self, market_share):
        """Test normalizing without a portfolio start value raises."""
        data = market_share[
            ~(_renewables(market_share, "projected") & (market_share["year"] == 2020))
        ]

        with pytest.raises(MissingPortfolioError) as excinfo:
            _prep(data, normalize=True)

        assert excinfo.value.year == 2020

    def test_zero_portfolio_start_raises(self, market_share):
        """Test a portfolio start value of 0 cannot be normalized to."""
        data = market_share.copy()
        start = _renewables(data, "projected") & (data["year"] == 2020)
        data.loc[start, "production"] = 0.0

        with pytest.raises(PlotDataError, match="portfolio start value of 0"):
            _prep(data, normalize=True)

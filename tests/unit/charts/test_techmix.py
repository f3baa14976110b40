# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for techmix chart assembly.
"""

import pandas as pd
import pytest

from pacta_charts.charts.techmix import (
    get_technology_colours,
    qtechmix_spec,
    techmix_labels,
    techmix_spec,
)
from pacta_charts.core.errors import MultipleScenariosError
from pacta_charts.core.primitives import ChartType, LayerKind, PlotSettings
from pacta_charts.prep.techmix import prep_techmix


class TestTechmixLabels:
    """Test suite for the order of techmix bars."""

    def test_portfolio_on_top_scenario_at_bottom(self, techmix_data):
        """Test labels run scenario, benchmarks, then portfolio."""
        data = prep_techmix(techmix_data)

        assert techmix_labels(data) == ["target_sds", "corporate_economy", "projected"]

    def test_order_does_not_depend_on_row_order(self, techmix_data):
        """Test reversing the rows keeps the label order."""
        shuffled = techmix_data.iloc[::-1].reset_index(drop=True)

        assert techmix_labels(prep_techmix(shuffled)) == [
            "target_sds",
            "corporate_economy",
            "projected",
        ]


class TestTechnologyColours:
    """Test suite for technology colour lookup."""

    def test_palette_order_and_labels(self, techmix_data):
        """Test colours follow the sector palette order."""
        colours = get_technology_colours(prep_techmix(techmix_data))

        assert colours["technology"].tolist() == ["renewablescap", "coalcap"]
        assert colours["hex"].tolist() == ["#a3d69c", "#4e3b37"]
        assert colours["label_tech"].tolist() == ["renewablescap", "coalcap"]


class TestTechmixSpec:
    """Test suite for techmix chart specifications."""

    def test_single_faceted_bar_layer(self, techmix_data):
        """Test the chart is one bar layer faceted by year."""
        spec = techmix_spec(techmix_data)

        assert spec.chart_type is ChartType.TECHMIX
        assert [layer.kind for layer in spec.layers] == [LayerKind.BAR]
        assert spec.facet == "year"
        assert spec.category_order == ["projected", "corporate_economy", "target_sds"]

    def test_legend(self, techmix_data):
        """Test the legend lists technologies in reverse palette order."""
        spec = techmix_spec(techmix_data)

        assert spec.legend.domain == ["renewablescap", "coalcap"]
        assert spec.legend.range == ["#a3d69c", "#4e3b37"]
        assert spec.legend.reverse is True

    def test_bars_stack_in_palette_order(self, techmix_data):
        """Test bar segments stack in palette order."""
        bar = techmix_spec(techmix_data).layers[0]
        order = bar.data.drop_duplicates("technology").set_index("technology")

        assert order["stack_order"].to_dict() == {"renewablescap": 0, "coalcap": 1}
        assert sorted(bar.data["year"].unique()) == [2020, 2030]

    def test_height_follows_settings(self, techmix_data):
        """Test the facet height is derived from the settings."""
        spec = techmix_spec(techmix_data, settings=PlotSettings(height=600))
        assert spec.height == 200

    def test_multiple_scenarios_rejected(self, market_share):
        """Test more than one scenario raises MultipleScenariosError."""
        with pytest.raises(MultipleScenariosError):
            techmix_spec(market_share)

    def test_quick_spec(self, techmix_data):
        """Test the quick variant fills in title, span and labels."""
        spec = qtechmix_spec(techmix_data)
        bar = spec.layers[0]

        assert spec.title == "Technology Mix for the Power Sector"
        assert sorted(bar.data["year"].unique()) == [2020, 2025]
        assert spec.category_order == ["Projected", "Corporate Economy", "Target Sds"]
        assert spec.legend.domain == ["Renewables Capacity", "Coal Capacity"]

    def test_custom_labels_are_kept(self, techmix_data):
        """Test caller-supplied labels drive the category order."""
        labels = {
            "projected": "Portfolio",
            "corporate_economy": "Benchmark",
            "target_sds": "Target",
        }
        data = techmix_data.assign(label=techmix_data["metric"].map(labels))

        spec = techmix_spec(data)
        assert spec.category_order == ["Portfolio", "Benchmark", "Target"]
        assert isinstance(spec.layers[0].data, pd.DataFrame)

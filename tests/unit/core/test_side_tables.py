# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for side-table coercion (scenario specs and line metrics).
"""

import pandas as pd
import pytest

from pacta_charts.core.errors import EmptyInputError, MissingColumnsError
from pacta_charts.core.side_tables import (
    WORSE_SCENARIO,
    LineMetric,
    ScenarioSpec,
    coerce_line_metrics,
    coerce_main_line_metric,
    coerce_scenario_specs,
)


class TestCoerceScenarioSpecs:
    """Test suite for coercing scenario specs."""

    def test_worse_is_appended_when_missing(self, scenario_specs):
        """Test a worse band is added last with the given colour."""
        specs = coerce_scenario_specs(scenario_specs, worse_color="#123456")

        assert [spec.scenario for spec in specs] == ["sds", "cps", WORSE_SCENARIO]
        assert specs[-1].color == "#123456"

    def test_worse_is_moved_last(self):
        """Test a caller-supplied worse band is kept and moved last."""
        specs = coerce_scenario_specs(
            [
                {"scenario": "worse", "label": "Worse", "color": "#E07B73"},
                {"scenario": "sds", "label": "SDS", "color": "#9CAB7C"},
            ]
        )

        assert [spec.scenario for spec in specs] == ["sds", "worse"]
        assert specs[-1].label == "Worse"

    def test_accepts_models(self):
        """Test ScenarioSpec instances pass through."""
        spec = ScenarioSpec(scenario="sds", label="SDS", color="#9CAB7C")
        assert coerce_scenario_specs([spec])[0] == spec

    def test_empty_specs_raise(self):
        """Test no specs raise EmptyInputError."""
        with pytest.raises(EmptyInputError, match="scenario_specs"):
            coerce_scenario_specs([])

    def test_only_worse_raises(self):
        """Test a worse band alone is not enough."""
        with pytest.raises(EmptyInputError):
            coerce_scenario_specs(
                [{"scenario": "worse", "label": "worse", "color": "red"}]
            )

    def test_missing_color_column_raises(self):
        """Test a table without colours raises MissingColumnsError."""
        table = pd.DataFrame({"scenario": ["sds"], "label": ["SDS"]})

        with pytest.raises(MissingColumnsError) as excinfo:
            coerce_scenario_specs(table)

        assert excinfo.value.columns == ["color"]


class TestCoerceLineMetrics:
    """Test suite for coercing line metric tables."""

    def test_none_gives_empty_list(self):
        """Test None means no additional lines."""
        assert coerce_line_metrics(None, "additional_line_metrics") == []

    def test_dataframe(self):
        """Test a DataFrame becomes a list of LineMetric."""
        table = pd.DataFrame({"metric": ["corporate_economy"], "label": ["Benchmark"]})
        assert coerce_line_metrics(table, "additional_line_metrics") == [
            LineMetric(metric="corporate_economy", label="Benchmark")
        ]

    def test_main_line_metric_from_dict(self):
        """Test the main line metric may be given as a dict."""
        metric = coerce_main_line_metric({"metric": "projected", "label": "Portfolio"})
        assert metric == LineMetric(metric="projected", label="Portfolio")

    def test_main_line_metric_must_have_one_row(self):
        """Test a multi-row main line metric raises ValueError."""
        table = pd.DataFrame({"metric": ["a", "b"], "label": ["A", "B"]})
        with pytest.raises(ValueError, match="single row"):
            coerce_main_line_metric(table)

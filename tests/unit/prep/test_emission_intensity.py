# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for emission intensity data preparation.
"""

import logging

import pandas as pd

from pacta_charts.core.labels import to_title
from pacta_charts.data.reference import ReferenceData, palette_colours
from pacta_charts.prep.emission_intensity import prep_emission_intensity


class TestPrepEmissionIntensity:
    """Test suite for prep_emission_intensity."""

    def test_colours_follow_first_appearance(self, sda):
        """Test palette colours are assigned in order of first appearance."""
        result = prep_emission_intensity(sda)
        colours = result.drop_duplicates("emission_factor_metric").set_index(
            "emission_factor_metric"
        )["hex"]

        palette = palette_colours()["hex"].tolist()
        assert colours.to_dict() == {
            "projected": palette[0],
            "corporate_economy": palette[1],
            "target_demo": palette[2],
            "adjusted_scenario_demo": palette[3],
        }

    def test_year_becomes_timestamp(self, sda):
        """Test years become January 1st timestamps."""
        result = prep_emission_intensity(sda)

        assert pd.api.types.is_datetime64_any_dtype(result["year"])
        assert result["year"].min() == pd.Timestamp("2020-01-01")

    def test_labels(self, sda):
        """Test labels are converted."""
        result = prep_emission_intensity(sda, convert_label=to_title)
        assert "Adjusted Scenario Demo" in set(result["label"])

    def test_span(self, sda):
        """Test span_5yr limits the years."""
        result = prep_emission_intensity(sda, span_5yr=True)
        assert result["year"].max() == pd.Timestamp("2025-01-01")

    def test_short_palette_warns(self, sda, caplog):
        """Test a palette shorter than the lines logs a warning."""
        reference = ReferenceData.default()
        reference = reference.model_copy(
            update={"palette_colours": palette_colours().head(2)}
        )
        with caplog.at_level(logging.WARNING, logger="pacta_charts"):
            result = prep_emission_intensity(sda, reference=reference)

        assert "Only 2 palette colours for 4 lines" in caplog.text
        assert result["hex"].isna().any()

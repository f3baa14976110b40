# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for error messages and hints.
"""

from pacta_charts.core.errors import (
    DegenerateRangeError,
    MultipleValuesError,
    PlotDataError,
    fmt_vector,
)


class TestErrors:
    """Test suite for error messages."""

    def test_fmt_vector(self):
        """Test vectors are formatted as Python lists."""
        assert fmt_vector(["a", "b"]) == "['a', 'b']"

    def test_hint_is_appended_to_message(self):
        """Test the hint follows the message on its own line."""
        error = PlotDataError("Bad input.", hint="Try again.")

        assert error.hint == "Try again."
        assert str(error) == "Bad input.\nℹ Try again."

    def test_multiple_values_hint_names_first_value(self):
        """Test the suggested filter uses the first value found."""
        error = MultipleValuesError("region", ["global", "europe"], name="subset")

        assert error.values == ["global", "europe"]
        assert "subset[subset['region'] == 'global']" in str(error)

    def test_degenerate_range_keeps_value(self):
        """Test DegenerateRangeError records the repeated value."""
        error = DegenerateRangeError(3.0)
        assert error.value == 3.0
        assert isinstance(error, ValueError)
        assert "Every value equals 3.0." in str(error)

    def test_degenerate_range_without_values(self):
        """Test DegenerateRangeError reports when every value is missing."""
        error = DegenerateRangeError(None)
        assert error.value is None
        assert "Every value is missing." in str(error)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for enums and plot settings.
"""

import pytest
from pydantic import ValidationError

from pacta_charts.core.primitives import (
    QUIET_ENV_VAR,
    ChartType,
    LineType,
    MetricKind,
    PlotSettings,
    configure,
    get_settings,
    reset_settings,
)


class TestEnums:
    """Test suite for the string enums."""

    def test_enums_compare_as_strings(self):
        """Test enum members compare equal to their values."""
        assert ChartType.TECHMIX == "techmix"
        assert MetricKind.PORTFOLIO.value == "portfolio"

    def test_stroke_dash(self):
        """Test each line type maps to its dash pattern."""
        assert LineType.SOLID.stroke_dash is None
        assert LineType.DASHED.stroke_dash == [6, 4]
        assert LineType.TWODASH.stroke_dash == [2, 2, 6, 2]


class TestPlotSettings:
    """Test suite for PlotSettings and the active settings."""

    def test_defaults(self):
        """Test default setting values."""
        settings = PlotSettings()

        assert settings.quiet is False
        assert settings.max_lines == 7
        assert settings.max_delta_distance == 0.1
        assert settings.span_years == 5

    def test_settings_are_frozen(self):
        """Test settings cannot be mutated."""
        settings = PlotSettings()
        with pytest.raises(ValidationError):
            settings.quiet = True

    def test_unknown_field_is_rejected(self):
        """Test misspelt fields raise ValidationError."""
        with pytest.raises(ValidationError):
            PlotSettings(max_line=3)

    def test_invalid_values_are_rejected(self):
        """Test out-of-range values raise ValidationError."""
        with pytest.raises(ValidationError):
            PlotSettings(max_lines=0)
        with pytest.raises(ValidationError):
            PlotSettings(max_delta_distance=1.5)

    def test_configure_replaces_active_settings(self):
        """Test configure and reset_settings swap the active settings."""
        configure(quiet=True, max_lines=4)

        assert get_settings().quiet is True
        assert get_settings().max_lines == 4

        reset_settings()
        assert get_settings().quiet is False

    def test_quiet_from_environment(self, monkeypatch):
        """Test quiet mode can be switched on from the environment."""
        monkeypatch.setenv(QUIET_ENV_VAR, "true")
        assert reset_settings().quiet is True

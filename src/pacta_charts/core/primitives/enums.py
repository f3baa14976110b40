# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum
from typing import Optional


class MetricKind(str, Enum):
    """
    Closed classification of a metric name.

    Every metric in a PACTA table is exactly one of these. The value strings
    double as the `metric_type` column of trajectory tables.
    """

    PORTFOLIO = "portfolio"
    BENCHMARK = "benchmark"
    SCENARIO = "scenario"
    OTHER = "other"


class ChartType(str, Enum):
    """Chart families with their own structural data contracts."""

    TECHMIX = "techmix"
    TRAJECTORY = "trajectory"
    EMISSION_INTENSITY = "emission_intensity"


class GreenOrBrown(str, Enum):
    """
    Direction of alignment for a technology.

    - GREEN: high values are good (e.g. renewables capacity), so the
      "worse than all scenarios" band sits at the bottom of the chart.
    - BROWN: high values are bad (e.g. coal capacity), so the band sits
      at the top.
    """

    GREEN = "green"
    BROWN = "brown"


class LayerKind(str, Enum):
    """Mark types a chart layer can draw."""

    BAR = "bar"
    LINE = "line"
    RIBBON = "ribbon"
    SEGMENT = "segment"
    TEXT = "text"


class LineType(str, Enum):
    """Line dash styles, named after their ggplot2 equivalents."""

    SOLID = "solid"
    DASHED = "dashed"
    TWODASH = "twodash"

    @property
    def stroke_dash(self) -> Optional[list]:
        """Vega-Lite strokeDash array for this line type (None for solid)."""
        return _STROKE_DASH[self]


_STROKE_DASH = {
    LineType.SOLID: None,
    LineType.DASHED: [6, 4],
    LineType.TWODASH: [2, 2, 6, 2],
}

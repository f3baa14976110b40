# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts Layout

Geometry of the stacked scenario ribbons drawn by trajectory charts.
"""

from .bands import (
    BAND_COLUMNS,
    AreaBorders,
    BandLayout,
    center_area_borders,
    compute_area_borders,
    layout_scenario_bands,
    portfolio_start_value,
    stack_scenario_bands,
    stacking_order,
)

__all__ = [
    "BAND_COLUMNS",
    "AreaBorders",
    "BandLayout",
    "center_area_borders",
    "compute_area_borders",
    "layout_scenario_bands",
    "portfolio_start_value",
    "stack_scenario_bands",
    "stacking_order",
]

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts Charts

Chart builders produce `ChartSpec` draw instructions; `plot_*` functions
render them with Altair. Quick variants (`qplot_*`) add titles, formatted
labels and a five-year window.
"""

from .emission_intensity import (
    build_emission_intensity,
    emission_intensity_spec,
    match_lines_order,
    plot_emission_intensity,
    qemission_intensity_spec,
    qplot_emission_intensity,
)
from .render import render
from .spec import Axis, ChartSpec, Layer, Legend
from .techmix import (
    build_techmix,
    get_technology_colours,
    plot_techmix,
    qplot_techmix,
    qtechmix_spec,
    techmix_labels,
    techmix_spec,
)
from .theme import THEME_COLORS, apply_theme
from .trajectory import (
    SUPPORTING_LINE_STYLES,
    build_trajectory,
    plot_trajectory,
    qplot_trajectory,
    qtrajectory_spec,
    supporting_line_style,
    trajectory_spec,
)

__all__ = [
    "Axis",
    "ChartSpec",
    "Layer",
    "Legend",
    "SUPPORTING_LINE_STYLES",
    "THEME_COLORS",
    "apply_theme",
    "build_emission_intensity",
    "build_techmix",
    "build_trajectory",
    "emission_intensity_spec",
    "get_technology_colours",
    "match_lines_order",
    "plot_emission_intensity",
    "plot_techmix",
    "plot_trajectory",
    "qemission_intensity_spec",
    "qplot_emission_intensity",
    "qplot_techmix",
    "qplot_trajectory",
    "qtechmix_spec",
    "qtrajectory_spec",
    "render",
    "supporting_line_style",
    "techmix_labels",
    "techmix_spec",
    "trajectory_spec",
]

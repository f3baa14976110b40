# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
House style for all charts.

Clean white background, no grid, dark axis text; applied to every rendered
chart through `apply_theme()`.
"""

from __future__ import annotations

import altair as alt

# =============================================================================
# Color Schemes and Styling
# =============================================================================

THEME_COLORS = {
    "text": "#2c2c2c",  # Axis labels and titles
    "axis": "#5b5b5b",  # Axis domain and ticks
    "background": "#ffffff",
    "main_line": "#000000",  # Portfolio trajectory
}

# ggplot colour names without a CSS equivalent
COLOR_ALIASES = {
    "grey46": "#757575",
    "gray46": "#757575",
}

FONT_SIZE = {"label": 11, "title": 12, "chart_title": 14, "annotation": 10}


def resolve_color(color: str) -> str:
    """Translate colour names Vega-Lite does not know into hex codes."""
    return COLOR_ALIASES.get(color, color)


def apply_theme(chart: alt.TopLevelMixin) -> alt.TopLevelMixin:
    """Apply the house style to a top-level chart."""
    return (
        chart.configure(background=THEME_COLORS["background"])
        .configure_axis(
            labelFontSize=FONT_SIZE["label"],
            titleFontSize=FONT_SIZE["title"],
            labelColor=THEME_COLORS["text"],
            titleColor=THEME_COLORS["text"],
            domainColor=THEME_COLORS["axis"],
            tickColor=THEME_COLORS["axis"],
            grid=False,
        )
        .configure_title(
            fontSize=FONT_SIZE["chart_title"],
            anchor="start",
            color=THEME_COLORS["text"],
            fontWeight="bold",
        )
        .configure_legend(
            labelFontSize=FONT_SIZE["label"],
            titleFontSize=FONT_SIZE["title"],
            labelColor=THEME_COLORS["text"],
            titleColor=THEME_COLORS["text"],
        )
        .configure_view(strokeWidth=0)
    )

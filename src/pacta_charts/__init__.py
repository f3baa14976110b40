# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts - Climate Scenario Alignment Charts

Validates PACTA-style alignment data (portfolio vs. benchmarks vs. climate
scenario targets, by sector, technology and year), reshapes it, and builds
declarative chart specifications rendered with Altair.

Key Entry Points:
- pacta_charts.plot_techmix() - Technology mix stacked bars
- pacta_charts.plot_trajectory() - Trajectory line over scenario ribbons
- pacta_charts.plot_emission_intensity() - Emission intensity lines
- pacta_charts.qplot_*() - Quick variants with titles and formatted labels
- pacta_charts.prep.prep_trajectory() - Market-share data to trajectory shape

Example Usage:
    ```python
    import pacta_charts

    data = pacta_charts.prep.prep_trajectory(
        market_share,
        sector="power",
        technology="renewablescap",
        region="global",
        scenario_source="demo_2020",
    )
    chart = pacta_charts.plot_trajectory(
        data,
        scenario_specs=scenario_specs,
        main_line_metric={"metric": "projected", "label": "Portfolio"},
    )
    chart.save("trajectory.html")
    ```
"""

import importlib
import logging

# Libraries should not configure logging; applications attach their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "charts",
    "core",
    "data",
    "layout",
    "prep",
    "plot_emission_intensity",
    "plot_techmix",
    "plot_trajectory",
    "qplot_emission_intensity",
    "qplot_techmix",
    "qplot_trajectory",
    "validate",
    "configure",
    "PlotSettings",
]


_LAZY_MODULES = {
    "charts": "pacta_charts.charts",
    "core": "pacta_charts.core",
    "data": "pacta_charts.data",
    "layout": "pacta_charts.layout",
    "prep": "pacta_charts.prep",
}

_LAZY_ATTRIBUTES = {
    "plot_emission_intensity": "pacta_charts.charts",
    "plot_techmix": "pacta_charts.charts",
    "plot_trajectory": "pacta_charts.charts",
    "qplot_emission_intensity": "pacta_charts.charts",
    "qplot_techmix": "pacta_charts.charts",
    "qplot_trajectory": "pacta_charts.charts",
    "validate": "pacta_charts.core",
    "configure": "pacta_charts.core",
    "PlotSettings": "pacta_charts.core",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is not None:
        module = importlib.import_module(module_path)
        globals()[name] = module
        return module

    module_path = _LAZY_ATTRIBUTES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'pacta_charts' has no attribute '{name}'")
    value = getattr(importlib.import_module(module_path), name)
    globals()[name] = value
    return value

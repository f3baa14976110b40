# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts Core Primitives

Base model, enumerations and settings shared by every other module.
"""

from .enums import ChartType, GreenOrBrown, LayerKind, LineType, MetricKind
from .model import Model
from .settings import (
    QUIET_ENV_VAR,
    PlotSettings,
    configure,
    get_settings,
    reset_settings,
)

__all__ = [
    "ChartType",
    "GreenOrBrown",
    "LayerKind",
    "LineType",
    "MetricKind",
    "Model",
    "PlotSettings",
    "QUIET_ENV_VAR",
    "configure",
    "get_settings",
    "reset_settings",
]

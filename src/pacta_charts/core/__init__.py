# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts Core Framework

Primitives, the metric classification, label converters, the error
taxonomy and the data validator shared by every chart.
"""

from . import errors, labels, metrics, primitives, validation
from .errors import (
    DegenerateRangeError,
    EmptyInputError,
    MissingColumnsError,
    MissingPortfolioError,
    MultipleScenariosError,
    MultipleValuesError,
    NoScenarioError,
    PlotDataError,
    TooManyLinesError,
    UnknownTechnologyError,
)
from .labels import identity, spell_out_technology, to_title
from .metrics import classify_metric, classify_metrics, extract_scenarios
from .primitives import (
    ChartType,
    GreenOrBrown,
    LayerKind,
    LineType,
    MetricKind,
    Model,
    PlotSettings,
    configure,
    get_settings,
)
from .validation import validate

__all__ = [
    "errors",
    "labels",
    "metrics",
    "primitives",
    "validation",
    "ChartType",
    "DegenerateRangeError",
    "EmptyInputError",
    "GreenOrBrown",
    "LayerKind",
    "LineType",
    "MetricKind",
    "MissingColumnsError",
    "MissingPortfolioError",
    "Model",
    "MultipleScenariosError",
    "MultipleValuesError",
    "NoScenarioError",
    "PlotDataError",
    "PlotSettings",
    "TooManyLinesError",
    "UnknownTechnologyError",
    "classify_metric",
    "classify_metrics",
    "configure",
    "extract_scenarios",
    "get_settings",
    "identity",
    "spell_out_technology",
    "to_title",
    "validate",
]

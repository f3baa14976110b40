# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts Reference Data

Static palettes and technology classifications used while building charts.
"""

from .reference import (
    ReferenceData,
    get_reference_data,
    green_or_brown,
    palette_colours,
    technology_colours,
)

__all__ = [
    "ReferenceData",
    "get_reference_data",
    "green_or_brown",
    "palette_colours",
    "technology_colours",
]

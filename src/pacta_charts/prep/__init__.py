# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
pacta_charts Data Preparation

Turns validated input tables into the canonical long form each chart draws
from: canonical sector names, label columns, colours and year windows.
"""

from .common import (
    add_label_if_missing,
    add_label_tech_if_missing,
    prep_common,
    recode_sector,
    span_5yr,
)
from .emission_intensity import prep_emission_intensity
from .techmix import prep_techmix
from .trajectory import TRAJECTORY_COLUMNS, prep_trajectory

__all__ = [
    "TRAJECTORY_COLUMNS",
    "add_label_if_missing",
    "add_label_tech_if_missing",
    "prep_common",
    "prep_emission_intensity",
    "prep_techmix",
    "prep_trajectory",
    "recode_sector",
    "span_5yr",
]

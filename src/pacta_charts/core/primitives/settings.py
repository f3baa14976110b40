# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Plot settings.

A single frozen settings model controls advisory output and the numeric
knobs of the layout rules. The module keeps one active instance; use
`configure()` to replace it and `get_settings()` to read it.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import Field

from .model import Model

QUIET_ENV_VAR = "PACTA_CHARTS_QUIET"

_TRUTHY = {"1", "true", "yes", "on"}


def _quiet_from_env() -> bool:
    return os.environ.get(QUIET_ENV_VAR, "").strip().lower() in _TRUTHY


class PlotSettings(Model):
    """
    Configuration for chart preparation and assembly.

    Usage Examples:
        # Defaults
        settings = PlotSettings()

        # Silence advisories in batch jobs
        configure(quiet=True)

        # Per-call override
        plot_techmix(data, settings=PlotSettings(quiet=True))
    """

    quiet: bool = Field(
        default_factory=_quiet_from_env,
        description="Suppress non-fatal advisory messages.",
    )
    max_lines: int = Field(
        default=7,
        ge=1,
        description="Maximum number of metric lines in an emission intensity chart.",
    )
    max_delta_distance: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description=(
            "Largest tolerated difference between the portfolio start value's "
            "relative distances to the lower and upper area borders."
        ),
    )
    span_years: int = Field(
        default=5,
        ge=1,
        description="Number of years plotted after the start year by quick plots.",
    )
    ribbon_opacity: float = Field(default=0.75, ge=0.0, le=1.0)
    worse_color: str = Field(
        default="#E07B73",
        description="Fill for the synthetic 'worse than all scenarios' band.",
    )
    width: int = Field(default=500, gt=0)
    height: int = Field(default=300, gt=0)


_active_settings = PlotSettings()


def get_settings() -> PlotSettings:
    """Return the active settings."""
    return _active_settings


def configure(**overrides: Any) -> PlotSettings:
    """
    Replace the active settings with a copy carrying `overrides`.

    Returns:
        The new active settings.
    """
    global _active_settings
    _active_settings = PlotSettings(**{**_active_settings.model_dump(), **overrides})
    return _active_settings


def reset_settings() -> PlotSettings:
    """Restore default settings (re-reading the environment)."""
    global _active_settings
    _active_settings = PlotSettings()
    return _active_settings

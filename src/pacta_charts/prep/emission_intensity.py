# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Callable, Optional

import pandas as pd

from ..core.labels import identity
from ..core.primitives import PlotSettings, get_settings
from ..data.reference import ReferenceData, get_reference_data
from .common import prep_common
from .common import span_5yr as _span_5yr

logger = logging.getLogger(__name__)


def prep_emission_intensity(
    data: pd.DataFrame,
    convert_label: Callable[[pd.Series], pd.Series] = identity,
    span_5yr: bool = False,
    reference: Optional[ReferenceData] = None,
    settings: Optional[PlotSettings] = None,
) -> pd.DataFrame:
    """
    Reshape validated SDA data for an emission intensity chart.

    Adds a `hex` colour per distinct `emission_factor_metric`, taken from the
    generic palette in order of first appearance, and turns `year` into a
    timestamp (January 1st) for a temporal x axis.
    """
    reference = reference or get_reference_data()
    settings = settings or get_settings()

    out = prep_common(data)
    out["label"] = convert_label(out["label"])

    if span_5yr:
        out = _span_5yr(out, years=settings.span_years)

    out["year"] = pd.to_datetime(out["year"].astype(str) + "-01-01")

    metrics = pd.unique(out["emission_factor_metric"])
    palette = reference.palette(len(metrics))
    if len(palette) < len(metrics):
        logger.warning(
            f"Only {len(palette)} palette colours for {len(metrics)} lines; "
            "lines without a colour are drawn with the default colour."
        )
    colours = dict(zip(metrics, palette))
    out["hex"] = out["emission_factor_metric"].map(colours)
    return out

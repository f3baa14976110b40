# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Callable, Optional

import pandas as pd

from ..core.labels import identity
from ..core.primitives import PlotSettings, get_settings
from .common import add_label_tech_if_missing, prep_common, recode_sector
from .common import span_5yr as _span_5yr

logger = logging.getLogger(__name__)

LabelConverter = Callable[[pd.Series], pd.Series]


def prep_techmix(
    data: pd.DataFrame,
    convert_label: LabelConverter = identity,
    span_5yr: bool = False,
    convert_tech_label: LabelConverter = identity,
    name: str = "data",
    settings: Optional[PlotSettings] = None,
) -> pd.DataFrame:
    """
    Reshape validated market-share data for a techmix chart.

    Args:
        data: Table passing `validate(data, ChartType.TECHMIX)`
        convert_label: Applied to the `label` column
        span_5yr: Compare the start year with exactly five years later,
            instead of the start year with the last year
        convert_tech_label: Applied to the `label_tech` column
        name: Name used for `data` in the advisory message
        settings: Plot settings (defaults to the active settings)

    Returns:
        Copy of `data` with `value`, `label`, `label_tech` and a canonical
        `sector`, restricted to the start and the future year.

    Note:
        When `span_5yr` is set and there is no data five years after the
        start year, only the start year survives; this is not an error.
    """
    settings = settings or get_settings()

    out = add_label_tech_if_missing(prep_common(data))
    out["value"] = out["technology_share"]
    out["sector"] = recode_sector(out["sector"])
    out["label"] = convert_label(out["label"])
    out["label_tech"] = convert_tech_label(out["label_tech"])

    start_year = int(out["year"].min())
    if span_5yr:
        out = _span_5yr(out, years=settings.span_years)
        future_year = start_year + settings.span_years
    else:
        future_year = int(out["year"].max())

    if not settings.quiet:
        logger.info(
            "The `technology_share` values are plotted for extreme years. "
            f"Do you want to plot different years? E.g. filter {name} with: "
            f"`{name}[{name}['year'].isin([2020, 2030])]`."
        )

    out = out.loc[out["year"].isin([start_year, future_year])]
    return out.reset_index(drop=True)

# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Declarative chart specifications.

A `ChartSpec` is an ordered list of `Layer` draw instructions plus axis,
legend and facet settings. Chart builders produce specs; `render()` turns a
spec into an Altair chart. Keeping the two apart lets the layer sequence be
inspected and tested without going through Vega-Lite.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import pandas as pd
from pydantic import Field

from ..core.primitives import ChartType, LayerKind, LineType, Model


class Layer(Model):
    """
    One draw instruction.

    Data-driven layers (bar, line, ribbon) read field names `x`, `y` and,
    for ribbons, `y2` from `data`. Annotation layers (segment, text) are
    anchored at constant coordinates `x_value`, `x2_value`, `y_value`.
    """

    kind: LayerKind
    name: str = Field(description="Series the layer draws (scenario, metric, label).")
    data: Optional[pd.DataFrame] = None
    x: Optional[str] = None
    y: Optional[str] = None
    y2: Optional[str] = None
    color: Optional[str] = None
    color_field: Optional[str] = None
    line_type: LineType = LineType.SOLID
    opacity: float = 1.0
    x_value: Optional[float] = None
    x2_value: Optional[float] = None
    y_value: Optional[float] = None
    text: Optional[str] = None


class Axis(Model):
    title: str = ""
    domain: Optional[Tuple[float, float]] = None
    include_zero: bool = False
    format: Optional[str] = None
    temporal: bool = False


class Legend(Model):
    """Colour scale: `domain` values drawn with the matching `range` colours."""

    domain: List[str]
    range: List[str]
    title: Optional[str] = None
    reverse: bool = False
    columns: Optional[int] = None


class ChartSpec(Model):
    chart_type: ChartType
    layers: List[Layer]
    title: str = ""
    x_axis: Axis = Axis()
    y_axis: Axis = Axis()
    legend: Optional[Legend] = None
    facet: Optional[str] = None
    category_order: Optional[List[str]] = None
    padding_right: int = 10
    width: int = 500
    height: int = 300

    def layers_of(self, kind: LayerKind) -> List[Layer]:
        return [layer for layer in self.layers if layer.kind is kind]

    def with_labels(
        self,
        title: Optional[str] = None,
        x_title: Optional[str] = None,
        y_title: Optional[str] = None,
    ) -> "ChartSpec":
        """Copy of the spec with new title and axis titles (None keeps the current)."""
        update = {}
        if title is not None:
            update["title"] = title
        if x_title is not None:
            update["x_axis"] = self.x_axis.model_copy(update={"title": x_title})
        if y_title is not None:
            update["y_axis"] = self.y_axis.model_copy(update={"title": y_title})
        return self.model_copy(update=update)

    def to_altair(self):
        from .render import render  # noqa: PLC0415

        return render(self)

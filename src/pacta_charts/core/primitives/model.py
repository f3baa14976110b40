# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for chart specifications, side tables and derived
    geometry. DataFrames are allowed as field values; they are treated as
    read-only once attached to a model.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,  # pandas DataFrames travel inside layers
        frozen=True,
        extra="forbid",  # Catches typos in side-table columns immediately
    )

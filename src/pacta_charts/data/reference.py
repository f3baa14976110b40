# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Reference datasets.

Static lookup tables consumed read-only while charts are built:
- technology colours, by sector
- green/brown direction of each technology
- a generic palette for auxiliary series

Accessors return fresh copies so callers can never mutate the originals.
`ReferenceData` bundles the three tables into one object that is passed
explicitly to the layout engine and the chart assembler.
"""

from __future__ import annotations

import pandas as pd

from ..core.errors import UnknownTechnologyError
from ..core.primitives import GreenOrBrown, Model

# fmt: off
_TECHNOLOGY_COLOURS = [
    # sector, technology, label, hex
    ("automotive", "electric", "Electric", "#548995"),
    ("automotive", "hybrid", "Hybrid", "#a3c2c9"),
    ("automotive", "fuelcell", "Fuel Cell", "#d6e5e8"),
    ("automotive", "ice", "ICE", "#918f8f"),
    ("coal", "coal", "Coal", "#4e3b37"),
    ("fossil fuels", "coal", "Coal", "#4e3b37"),
    ("fossil fuels", "gas", "Gas", "#b9b5b0"),
    ("fossil fuels", "oil", "Oil", "#181716"),
    ("oil&gas", "gas", "Gas", "#b9b5b0"),
    ("oil&gas", "oil", "Oil", "#181716"),
    ("power", "renewablescap", "Renewables Capacity", "#a3d69c"),
    ("power", "hydrocap", "Hydro Capacity", "#c0e3e3"),
    ("power", "nuclearcap", "Nuclear Capacity", "#cb9b35"),
    ("power", "gascap", "Gas Capacity", "#b9b5b0"),
    ("power", "oilcap", "Oil Capacity", "#a09e9c"),
    ("power", "coalcap", "Coal Capacity", "#4e3b37"),
]

_GREEN_OR_BROWN = [
    # sector, technology, green_or_brown
    ("automotive", "electric", "green"),
    ("automotive", "hybrid", "green"),
    ("automotive", "fuelcell", "green"),
    ("automotive", "ice", "brown"),
    ("coal", "coal", "brown"),
    ("oil&gas", "gas", "brown"),
    ("oil&gas", "oil", "brown"),
    ("power", "renewablescap", "green"),
    ("power", "hydrocap", "green"),
    ("power", "nuclearcap", "green"),
    ("power", "gascap", "brown"),
    ("power", "oilcap", "brown"),
    ("power", "coalcap", "brown"),
]

_PALETTE_COLOURS = [
    # label, hex
    ("dark_blue", "#1b324f"),
    ("green", "#00c082"),
    ("orange", "#ff9623"),
    ("grey", "#d0d7e1"),
    ("dark_purple", "#574099"),
    ("yellow", "#f2e06e"),
    ("soft_blue", "#78c4d6"),
    ("ruby_red", "#a63d57"),
    ("green_blue", "#00a6a1"),
    ("dark_grey", "#6c757d"),
]
# fmt: on


def technology_colours() -> pd.DataFrame:
    """Technology palette with columns: sector, technology, label, hex."""
    return pd.DataFrame(
        _TECHNOLOGY_COLOURS, columns=["sector", "technology", "label", "hex"]
    )


def green_or_brown() -> pd.DataFrame:
    """Technology direction with columns: sector, technology, green_or_brown."""
    return pd.DataFrame(
        _GREEN_OR_BROWN, columns=["sector", "technology", "green_or_brown"]
    )


def palette_colours() -> pd.DataFrame:
    """Generic palette with columns: label, hex."""
    return pd.DataFrame(_PALETTE_COLOURS, columns=["label", "hex"])


class ReferenceData(Model):
    """
    Read-only bundle of reference tables.

    Build one with `ReferenceData.default()`; swap individual tables to test
    or to use a custom palette:

        ```python
        ref = ReferenceData.default()
        ref = ref.model_copy(update={"palette_colours": my_palette})
        ```
    """

    technology_colours: pd.DataFrame
    green_or_brown: pd.DataFrame
    palette_colours: pd.DataFrame

    @classmethod
    def default(cls) -> "ReferenceData":
        return cls(
            technology_colours=technology_colours(),
            green_or_brown=green_or_brown(),
            palette_colours=palette_colours(),
        )

    def direction_of(self, technology: str) -> GreenOrBrown:
        """
        Look up whether `technology` is green or brown.

        Raises:
            UnknownTechnologyError: If the technology has no entry
        """
        table = self.green_or_brown
        matches = table.loc[table["technology"] == technology, "green_or_brown"]
        if matches.empty:
            raise UnknownTechnologyError(technology)
        return GreenOrBrown(matches.iloc[0])

    def palette(self, n: int) -> list:
        """First `n` generic palette colours."""
        return self.palette_colours["hex"].head(n).tolist()


def get_reference_data() -> ReferenceData:
    """Default reference bundle, built fresh on every call."""
    return ReferenceData.default()

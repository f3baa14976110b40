# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Label converters used by the quick plots."""

from __future__ import annotations

import re

import pandas as pd

_SEPARATORS = re.compile(r"[._\-\s]+")

# Technology name fragments with a conventional spelling
_TECH_REPLACEMENTS = [
    (re.compile(r"^ice"), "ICE "),
    (re.compile(r"cap$"), " Capacity"),
    (re.compile(r"_?hdv$"), " HDV"),
    (re.compile(r"fuelcell"), "Fuel Cell"),
]


def identity(x: pd.Series) -> pd.Series:
    return x


def _title_word(word: str) -> str:
    if word.isupper() and len(word) > 1:
        return word
    return word[:1].upper() + word[1:].lower()


def to_title(x: pd.Series) -> pd.Series:
    """
    Title-case free-text labels.

    Separators (`_`, `.`, `-`, whitespace) become single spaces; each word is
    capitalised; all-caps words such as "ICE" or "SDS" are kept as they are.

    Example:
        ```python
        to_title(pd.Series(["corporate_economy"]))  # "Corporate Economy"
        ```
    """

    def convert(value):
        if not isinstance(value, str):
            return value
        words = [w for w in _SEPARATORS.split(value.strip()) if w]
        return " ".join(_title_word(w) for w in words)

    return x.map(convert)


def spell_out_technology(x: pd.Series) -> pd.Series:
    """Turn technology codes into readable labels: "renewablescap" -> "Renewables Capacity"."""

    def convert(value):
        if not isinstance(value, str):
            return value
        label = value.lower()
        for pattern, replacement in _TECH_REPLACEMENTS:
            label = pattern.sub(replacement, label)
        return " ".join(_title_word(w) for w in label.split())

    return x.map(convert)

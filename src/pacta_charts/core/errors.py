# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Exceptions raised when input data cannot be charted.

All of them derive from `PlotDataError`, itself a `ValueError`, so callers
can catch the whole family at once. Each exception keeps the offending
columns or values as attributes so that programmatic callers do not need
to parse the message.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence


def fmt_vector(values: Iterable[object]) -> str:
    """Format values as a Python list literal, e.g. `['a', 'b']`."""
    return "[" + ", ".join(repr(value) for value in values) + "]"


class PlotDataError(ValueError):
    """Base class for all data contract violations."""

    def __init__(self, message: str, hint: Optional[str] = None):
        self.hint = hint
        full = message if hint is None else f"{message}\nℹ {hint}"
        super().__init__(full)


class EmptyInputError(PlotDataError):
    """Input table has zero rows."""

    def __init__(self, name: str = "data"):
        self.name = name
        super().__init__(f"`{name}` must have some rows but has none.")


class MissingColumnsError(PlotDataError):
    """Input table lacks one or more required columns."""

    def __init__(
        self,
        columns: Sequence[str],
        name: str = "data",
        reference: Optional[str] = None,
    ):
        self.columns: List[str] = list(columns)
        self.name = name
        self.reference = reference
        hint = None
        if reference is not None:
            hint = f"Is your data `{name}` structured like `{reference}`?"
        super().__init__(
            f"`{name}` must have all the expected names.\n"
            f"✖ Missing names: {', '.join(self.columns)}.",
            hint=hint,
        )


class MultipleValuesError(PlotDataError):
    """A column that must hold a single value holds several."""

    def __init__(self, column: str, values: Sequence[object], name: str = "data"):
        self.column = column
        self.values = list(values)
        self.name = name
        example = self.values[0]
        super().__init__(
            f"`{name}` must have a single value of `{column}`.\n"
            f"✖ Provided: {', '.join(str(v) for v in self.values)}.",
            hint=(
                f"Do you need to pick one value? E.g. pick {example!r} with: "
                f"`{name}[{name}[{column!r}] == {example!r}]`."
            ),
        )


class NoScenarioError(PlotDataError):
    """A chart that embeds one target trajectory found no scenario metric."""

    def __init__(self, name: str = "data"):
        self.name = name
        super().__init__(f"`{name}['metric']` must have one scenario.\n✖ It has none.")


class MultipleScenariosError(PlotDataError):
    """A chart that embeds one target trajectory found several scenarios."""

    def __init__(
        self,
        values: Sequence[str],
        other_metrics: Sequence[str] = (),
        name: str = "data",
    ):
        self.values = list(values)
        keep = list(other_metrics) + [self.values[0]]
        self.suggestion = f"{name}[{name}['metric'].isin({fmt_vector(keep)})]"
        super().__init__(
            f"`{name}['metric']` must have a single scenario not {len(self.values)}.\n"
            f"✖ Provided: {', '.join(self.values)}.",
            hint=(
                f"Do you need to pick one scenario? E.g. pick {self.values[0]!r} "
                f"with: `{self.suggestion}`."
            ),
        )


class TooManyLinesError(PlotDataError):
    """More metric lines than a line chart can show legibly."""

    def __init__(self, n_lines: int, max_lines: int, column: str, name: str = "data"):
        self.n_lines = n_lines
        self.max_lines = max_lines
        self.column = column
        super().__init__(
            f"`{name}` must have no more than {max_lines} lines.\n"
            f"✖ Found {n_lines} lines in `{column}`.",
            hint=f"Do you need to filter `{name}` to fewer values of `{column}`?",
        )


class DegenerateRangeError(PlotDataError):
    """All plotted values are equal or missing, so the value axis has zero span."""

    def __init__(self, value: Optional[float]):
        self.value = value
        problem = (
            "Every value is missing." if value is None else f"Every value equals {value!r}."
        )
        super().__init__(f"The plotted values must span a range.\n✖ {problem}")


class UnknownTechnologyError(PlotDataError):
    """Technology has no green/brown classification in the reference data."""

    def __init__(self, technology: str):
        self.technology = technology
        super().__init__(
            f"Can't find technology {technology!r} in the green/brown reference data.",
            hint="Is `technology` spelled like in `pacta_charts.data.green_or_brown()`?",
        )


class MissingPortfolioError(PlotDataError):
    """No portfolio value exists at the start year of a trajectory."""

    def __init__(self, year: int):
        self.year = year
        super().__init__(
            f"`data` must have a portfolio value at the start year {year}.\n"
            "✖ Found no non-missing value with `metric_type == 'portfolio'`."
        )


__all__ = [
    "DegenerateRangeError",
    "EmptyInputError",
    "MissingColumnsError",
    "MissingPortfolioError",
    "MultipleScenariosError",
    "MultipleValuesError",
    "NoScenarioError",
    "PlotDataError",
    "TooManyLinesError",
    "UnknownTechnologyError",
    "fmt_vector",
]

"""
Threshold tables mapping a ratio value to a qualitative category.

A table is an ascending list of upper bounds. Each band says whether its
bound belongs to it (``value <= limit``) or to the next band
(``value < limit``); the first matching band wins and values beyond the last
bound fall into ``above``. Bounds are compared with EPS so that a value that
sits on a limit up to representation noise is classified on the documented
side of it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple

from ..config.limits import EPS


@dataclass(frozen=True, slots=True)
class RatioBand:
    """Upper bound of one category."""
    limit: float
    category: Enum
    inclusive: bool = False  # True: value == limit stays in this band

    def contains(self, value: float) -> bool:
        if self.inclusive:
            return value <= self.limit + EPS
        return value < self.limit - EPS


@dataclass(frozen=True, slots=True)
class BandTable:
    """Ordered (upper-bound, category) pairs plus the category above the last bound."""
    name: str
    bands: Tuple[RatioBand, ...]
    above: Enum

    def __post_init__(self) -> None:
        object.__setattr__(self, "bands", tuple(self.bands))
        if not self.bands:
            raise ValueError(f"Band table '{self.name}' needs at least one band.")
        limits = [b.limit for b in self.bands]
        if any(not math.isfinite(x) for x in limits):
            raise ValueError(f"Band table '{self.name}' has a non-finite limit.")
        if any(hi <= lo for lo, hi in zip(limits, limits[1:])):
            raise ValueError(f"Band table '{self.name}' limits must be strictly ascending: {limits}")

    @property
    def categories(self) -> Tuple[Enum, ...]:
        return tuple(b.category for b in self.bands) + (self.above,)

    def classify(self, value: float) -> Enum:
        if not math.isfinite(value):
            raise ValueError(f"Cannot classify non-finite ratio {value} with '{self.name}'.")
        for band in self.bands:
            if band.contains(value):
                return band.category
        return self.above


def make_table(name: str, rows: Sequence[Tuple[float, Enum, bool]], above: Enum) -> BandTable:
    """Build a table from (limit, category, inclusive) rows."""
    return BandTable(
        name=name,
        bands=tuple(RatioBand(limit, category, inclusive) for limit, category, inclusive in rows),
        above=above,
    )

"""
Physical quantities used to describe a hull: Length, Weight and Area.

Each dimension is its own type holding a single magnitude in a canonical SI
unit (meter, kilogram, square meter). Values are built and read through
unit-specific constructors/accessors such as ``Length.from_foot`` or
``Weight.to_long_ton``; no unit tag is stored. Addition and division are only
defined between two values of the same dimension, so ``Length + Weight`` is
rejected by the type checker and raises ``TypeError`` at runtime.

Conversions are plain linear scalings without rounding; round at display time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeVar

# Exact length factors
MM_PER_M = 1000.0
MM_PER_FOOT = 304.8
MM_PER_INCH = 25.4
M_PER_FOOT = MM_PER_FOOT / MM_PER_M
M_PER_INCH = MM_PER_INCH / MM_PER_M

# Weight factors (kilogram based)
G_PER_KG = 1000.0
LB_PER_KG = 2.20462
KG_PER_LONG_TON = 1016.05
KG_PER_SHORT_TON = 907.185

# Area factors derived from the length factors
M2_PER_FOOT2 = M_PER_FOOT * M_PER_FOOT
M2_PER_INCH2 = M_PER_INCH * M_PER_INCH

_Q = TypeVar("_Q", bound="_Quantity")


@dataclass(frozen=True, slots=True, order=True)
class _Quantity:
    """Immutable finite magnitude in the canonical unit of a dimension."""

    value: float = 0.0

    def __post_init__(self) -> None:
        value = float(self.value)
        if not math.isfinite(value):
            raise ValueError(f"{type(self).__name__} magnitude must be finite, got {value}")
        object.__setattr__(self, "value", value)

    def __add__(self: _Q, other: _Q) -> _Q:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __truediv__(self: _Q, other: _Q) -> _Q:
        # Canonical units cancel, so the quotient's magnitude is dimensionless.
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value / other.value)


@dataclass(frozen=True, slots=True, order=True)
class Length(_Quantity):
    """Length, stored in meters."""

    @classmethod
    def from_meter(cls, val: float) -> Length:
        return cls(val)

    def to_meter(self) -> float:
        return self.value

    @classmethod
    def from_millimeter(cls, val: float) -> Length:
        return cls(val / MM_PER_M)

    def to_millimeter(self) -> float:
        return self.value * MM_PER_M

    @classmethod
    def from_inch(cls, val: float) -> Length:
        return cls(val * MM_PER_INCH / MM_PER_M)

    def to_inch(self) -> float:
        return self.value * MM_PER_M / MM_PER_INCH

    @classmethod
    def from_foot(cls, val: float) -> Length:
        return cls(val * MM_PER_FOOT / MM_PER_M)

    def to_foot(self) -> float:
        return self.value * MM_PER_M / MM_PER_FOOT

    @classmethod
    def from_foot_inch(cls, foot: float, inch: float) -> Length:
        """Imperial dimension written as feet and inches, e.g. 15' 4"."""
        return cls.from_foot(foot) + cls.from_inch(inch)


@dataclass(frozen=True, slots=True, order=True)
class Weight(_Quantity):
    """Weight (mass), stored in kilograms."""

    @classmethod
    def from_kilogram(cls, val: float) -> Weight:
        return cls(val)

    def to_kilogram(self) -> float:
        return self.value

    @classmethod
    def from_gram(cls, val: float) -> Weight:
        return cls(val / G_PER_KG)

    def to_gram(self) -> float:
        return self.value * G_PER_KG

    @classmethod
    def from_pound(cls, val: float) -> Weight:
        return cls(val / LB_PER_KG)

    def to_pound(self) -> float:
        return self.value * LB_PER_KG

    @classmethod
    def from_long_ton(cls, val: float) -> Weight:
        return cls(val * KG_PER_LONG_TON)

    def to_long_ton(self) -> float:
        return self.value / KG_PER_LONG_TON

    @classmethod
    def from_short_ton(cls, val: float) -> Weight:
        return cls(val * KG_PER_SHORT_TON)

    def to_short_ton(self) -> float:
        return self.value / KG_PER_SHORT_TON


@dataclass(frozen=True, slots=True, order=True)
class Area(_Quantity):
    """Area, stored in square meters."""

    @classmethod
    def from_meter2(cls, val: float) -> Area:
        return cls(val)

    def to_meter2(self) -> float:
        return self.value

    @classmethod
    def from_foot2(cls, val: float) -> Area:
        return cls(val * M2_PER_FOOT2)

    def to_foot2(self) -> float:
        return self.value / M2_PER_FOOT2

    @classmethod
    def from_inch2(cls, val: float) -> Area:
        return cls(val * M2_PER_INCH2)

    def to_inch2(self) -> float:
        return self.value / M2_PER_INCH2

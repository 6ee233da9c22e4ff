"""
Qualitative categories for the design ratios.

Members are declared from the low end of each ratio to the high end; the enum
value is the label shown in reports.
"""

from __future__ import annotations

from enum import Enum


class _OrderedCategory(Enum):
    """Enum whose members compare by declaration order."""

    @property
    def rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.rank < other.rank


class LengthBeamCategory(_OrderedCategory):
    BEAMY = "Beamy"
    MODERATE_BEAMY = "ModerateBeamy"
    MODERATE = "Moderate"
    MODERATE_NARROW = "ModerateNarrow"
    NARROW = "Narrow"


class DisplacementLengthCategory(_OrderedCategory):
    # Union of the five-band and six-band literature presets
    ULTRALIGHT = "Ultralight"
    LIGHT = "Light"
    MODERATE_LIGHT = "ModerateLight"
    MODERATE = "Moderate"
    MODERATE_HEAVY = "ModerateHeavy"
    HEAVY = "Heavy"
    ULTRAHEAVY = "Ultraheavy"


class SailAreaDisplacementCategory(_OrderedCategory):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

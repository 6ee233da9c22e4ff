"""
Domain models for the sailcalc design-ratio calculator.

These are pure Python/domain classes without any I/O.
"""

from sailcalc_app.models.quantities import Area, Length, Weight
from sailcalc_app.models.boat import Boat, InvalidDimensionError
from sailcalc_app.models.categories import (
    DisplacementLengthCategory,
    LengthBeamCategory,
    SailAreaDisplacementCategory,
)

__all__ = [
    "Area",
    "Length",
    "Weight",
    "Boat",
    "InvalidDimensionError",
    "DisplacementLengthCategory",
    "LengthBeamCategory",
    "SailAreaDisplacementCategory",
]

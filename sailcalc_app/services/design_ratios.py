"""
Nondimensional design ratios of a hull and their qualitative categories.

L/B (length-to-beam) tells narrow from beamy hull forms, D/L
(displacement-to-length) light from heavy, and SA/D (sail-area-to-displacement)
how much sail drives the hull. Comparisons between boats are only meaningful
for hulls of about 25 ft to 75 ft LOA (see services.validation).

Every function reads the Boat and never modifies it; calling it twice on the
same boat returns equal results.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..config.limits import DL_WATERLINE_SCALE, SAD_DISPLACEMENT_EXPONENT
from ..config.ratio_bands import (
    LENGTH_BEAM_BANDS,
    SAIL_AREA_DISPLACEMENT_BANDS,
    get_dl_bands,
)
from ..models import (
    Boat,
    DisplacementLengthCategory,
    LengthBeamCategory,
    SailAreaDisplacementCategory,
)
from .bands import BandTable

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LengthBeamRatio:
    """L/B: LOA over maximum beam."""
    value: float
    category: LengthBeamCategory

    @property
    def label(self) -> str:
        return self.category.value


@dataclass(frozen=True, slots=True)
class DisplacementLengthRatio:
    """D/L: long tons over (DWL in hundreds of feet) cubed."""
    value: float
    category: DisplacementLengthCategory
    table: str = ""  # name of the band table that produced the category

    @property
    def label(self) -> str:
        return self.category.value


@dataclass(frozen=True, slots=True)
class SailAreaDisplacementRatio:
    """SA/D: sail area (m2) over long tons to the 2/3 power."""
    value: float
    category: SailAreaDisplacementCategory

    @property
    def label(self) -> str:
        return self.category.value


def _ratio_quotient(ratio: str, numerator: float, denominator: float) -> float:
    """numerator / denominator, or ValueError when the result is not a finite number."""
    if denominator == 0.0 or not math.isfinite(denominator):
        raise ValueError(f"{ratio} is undefined: denominator {denominator!r} is out of range.")
    value = numerator / denominator
    if not math.isfinite(value):
        raise ValueError(f"{ratio} is undefined: result {value!r} is out of range.")
    return value


def compute_length_beam_ratio(boat: Boat) -> LengthBeamRatio:
    # Same-dimension quotient; meters cancel.
    try:
        value = (boat.loa / boat.b_max).to_meter()
    except (ArithmeticError, ValueError) as exc:
        raise ValueError(f"L/B is undefined for {boat.name}: {exc}") from exc
    category = LENGTH_BEAM_BANDS.classify(value)
    _LOG.debug("L/B for %s: %.4f (%s)", boat.name, value, category.value)
    return LengthBeamRatio(value=value, category=category)  # type: ignore[arg-type]


def compute_displacement_length_ratio(
    boat: Boat,
    bands: BandTable | None = None,
) -> DisplacementLengthRatio:
    """
    D/L = Disp / (0.01 * DWL)^3, displacement in long tons, DWL in feet.

    ``bands`` selects the classification table (default: five-band preset).
    """
    table = bands if bands is not None else get_dl_bands()
    if not all(isinstance(c, DisplacementLengthCategory) for c in table.categories):
        raise ValueError(f"Band table '{table.name}' does not hold D/L categories.")
    long_tons = boat.displacement.to_long_ton()
    try:
        waterline_cubed = (boat.dwl.to_foot() * DL_WATERLINE_SCALE) ** 3
    except OverflowError as exc:
        raise ValueError(f"D/L is undefined: DWL {boat.dwl.to_meter()!r} m is out of range.") from exc
    value = _ratio_quotient("D/L", long_tons, waterline_cubed)
    category = table.classify(value)
    _LOG.debug("D/L for %s: %.2f (%s, %s)", boat.name, value, category.value, table.name)
    return DisplacementLengthRatio(value=value, category=category, table=table.name)  # type: ignore[arg-type]


def compute_sail_area_displacement_ratio(boat: Boat) -> SailAreaDisplacementRatio:
    """SA/D = SA / Disp^(2/3), sail area in m2, displacement in long tons."""
    long_tons = boat.displacement.to_long_ton()
    value = _ratio_quotient("SA/D", boat.sail_area.to_meter2(), long_tons ** SAD_DISPLACEMENT_EXPONENT)
    category = SAIL_AREA_DISPLACEMENT_BANDS.classify(value)
    _LOG.debug("SA/D for %s: %.3f (%s)", boat.name, value, category.value)
    return SailAreaDisplacementRatio(value=value, category=category)  # type: ignore[arg-type]


@dataclass(frozen=True, slots=True)
class Ratios:
    """All design ratios of one boat."""
    length_beam: LengthBeamRatio
    displacement_length: DisplacementLengthRatio
    sail_area_displacement: SailAreaDisplacementRatio

    @classmethod
    def from_boat(cls, boat: Boat, dl_bands: BandTable | None = None) -> "Ratios":
        return cls(
            length_beam=compute_length_beam_ratio(boat),
            displacement_length=compute_displacement_length_ratio(boat, dl_bands),
            sail_area_displacement=compute_sail_area_displacement_ratio(boat),
        )

    def __str__(self) -> str:
        from ..reports.simple_text_report import build_ratios_text

        return build_ratios_text(self)

"""
Simple text-based report builder for a boat and its design ratios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from sailcalc_app.models import Boat
    from sailcalc_app.services.design_ratios import (
        DisplacementLengthRatio,
        LengthBeamRatio,
        Ratios,
        SailAreaDisplacementRatio,
    )

    AnyRatio = Union[LengthBeamRatio, DisplacementLengthRatio, SailAreaDisplacementRatio]

# Decimal places per ratio (literature convention: D/L as an integer)
LB_PRECISION = 2
DL_PRECISION = 0
SAD_PRECISION = 1


def format_ratio(result: "AnyRatio", precision: int) -> str:
    return f"{result.value:.{precision}f} [{result.label}]"


def build_boat_text(boat: "Boat") -> str:
    lines: list[str] = []
    lines.append(f"[{boat.name}]")
    lines.append(f"\tLOA: {boat.loa.to_meter():.2f}m")
    lines.append(f"\tDWL: {boat.dwl.to_meter():.2f}m")
    lines.append(f"\tBeam: {boat.b_max.to_meter():.2f}m")
    lines.append(f"\tDisplacment: {boat.displacement.to_kilogram():,.0f}kg")
    lines.append(f"\tSail area: {boat.sail_area.to_meter2():.2f}m2")
    return "\n".join(lines)


def build_ratios_text(ratios: "Ratios") -> str:
    lines: list[str] = []
    lines.append("[Ratio]")
    lines.append(f"\tL/B: {format_ratio(ratios.length_beam, LB_PRECISION)}")
    lines.append(f"\tD/L: {format_ratio(ratios.displacement_length, DL_PRECISION)}")
    lines.append(f"\tSA/D: {format_ratio(ratios.sail_area_displacement, SAD_PRECISION)}")
    return "\n".join(lines)

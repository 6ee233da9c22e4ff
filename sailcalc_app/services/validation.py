"""
Advisory checks on a boat before its ratios are compared.

Boat setters already reject impossible dimensions. The checks here flag
inputs that are legal but make the ratios unreliable (waterline longer than
the hull, hull outside the length range the literature tables were built on).
They never raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..config.limits import EPS, MAX_COMPARABLE_LOA_FT, MIN_COMPARABLE_LOA_FT
from ..models import Boat


class ValidationSeverity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class ValidationIssue:
    code: str
    severity: ValidationSeverity
    message: str
    value: float | None = None
    limit: float | None = None


@dataclass(slots=True)
class ValidationResult:
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == ValidationSeverity.WARNING for i in self.issues)


def validate_boat(boat: Boat) -> ValidationResult:
    issues: List[ValidationIssue] = []

    # 1. Waterline longer than the hull
    loa_m = boat.loa.to_meter()
    dwl_m = boat.dwl.to_meter()
    if dwl_m > loa_m + EPS:
        issues.append(
            ValidationIssue(
                code="DWL_EXCEEDS_LOA",
                severity=ValidationSeverity.WARNING,
                message=f"DWL {dwl_m:.2f} m is longer than LOA {loa_m:.2f} m.",
                value=dwl_m,
                limit=loa_m,
            )
        )

    # 2. Outside the range where ratio comparisons hold
    loa_ft = boat.loa.to_foot()
    if loa_ft < MIN_COMPARABLE_LOA_FT - EPS:
        issues.append(
            ValidationIssue(
                code="LOA_OUTSIDE_RANGE",
                severity=ValidationSeverity.WARNING,
                message=f"LOA {loa_ft:.1f} ft is shorter than {MIN_COMPARABLE_LOA_FT:.0f} ft; ratio comparisons may not hold.",
                value=loa_ft,
                limit=MIN_COMPARABLE_LOA_FT,
            )
        )
    elif loa_ft > MAX_COMPARABLE_LOA_FT + EPS:
        issues.append(
            ValidationIssue(
                code="LOA_OUTSIDE_RANGE",
                severity=ValidationSeverity.WARNING,
                message=f"LOA {loa_ft:.1f} ft is longer than {MAX_COMPARABLE_LOA_FT:.0f} ft; ratio comparisons may not hold.",
                value=loa_ft,
                limit=MAX_COMPARABLE_LOA_FT,
            )
        )

    valid = not any(i.severity == ValidationSeverity.ERROR for i in issues)
    return ValidationResult(valid=valid, issues=issues)

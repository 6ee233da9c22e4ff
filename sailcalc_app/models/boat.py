from __future__ import annotations

from dataclasses import dataclass
from typing import Type, TypeVar

from ..config.limits import (
    DEFAULT_B_MAX_M,
    DEFAULT_DISPLACEMENT_KG,
    DEFAULT_DWL_M,
    DEFAULT_LOA_M,
    DEFAULT_SAIL_AREA_M2,
)
from .quantities import Area, Length, Weight


@dataclass(slots=True)
class InvalidDimensionError(ValueError):
    field: str
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.field}: {self.message}"


_Q = TypeVar("_Q", Length, Weight, Area)


def _checked(field: str, value: _Q, kind: Type[_Q], allow_zero: bool) -> _Q:
    if not isinstance(value, kind):
        raise TypeError(f"{field} must be a {kind.__name__}, got {type(value).__name__}")
    magnitude = value.value
    if magnitude < 0:
        raise InvalidDimensionError(field, f"must not be negative, got {magnitude}")
    if magnitude == 0 and not allow_zero:
        raise InvalidDimensionError(field, "must be greater than zero")
    return value


class Boat:
    """
    Principal dimensions of one hull design.

    LOA (length overall) is equivalent to length on deck: it includes a
    reverse transom but not a bowsprit, pulpit or other overhanging gear.
    DWL (design waterline, also LWL) excludes a surface-piercing rudder.
    B MAX is the maximum beam.

    Setters reject negative magnitudes, and zero for the fields the ratios
    divide by (DWL, beam, displacement). LOA >= DWL is not enforced.
    """

    __slots__ = ("name", "_loa", "_dwl", "_b_max", "_displacement", "_sail_area")

    def __init__(self, name: str) -> None:
        self.name = name
        self._loa = Length.from_meter(DEFAULT_LOA_M)
        self._dwl = Length.from_meter(DEFAULT_DWL_M)
        self._b_max = Length.from_meter(DEFAULT_B_MAX_M)
        self._displacement = Weight.from_kilogram(DEFAULT_DISPLACEMENT_KG)
        self._sail_area = Area.from_meter2(DEFAULT_SAIL_AREA_M2)

    @property
    def loa(self) -> Length:
        """LOA (length overall)."""
        return self._loa

    @loa.setter
    def loa(self, val: Length) -> None:
        self._loa = _checked("loa", val, Length, allow_zero=True)

    @property
    def dwl(self) -> Length:
        """DWL (design waterline length)."""
        return self._dwl

    @dwl.setter
    def dwl(self, val: Length) -> None:
        self._dwl = _checked("dwl", val, Length, allow_zero=False)

    @property
    def b_max(self) -> Length:
        """B MAX (maximum beam)."""
        return self._b_max

    @b_max.setter
    def b_max(self, val: Length) -> None:
        self._b_max = _checked("b_max", val, Length, allow_zero=False)

    @property
    def displacement(self) -> Weight:
        return self._displacement

    @displacement.setter
    def displacement(self, val: Weight) -> None:
        self._displacement = _checked("displacement", val, Weight, allow_zero=False)

    @property
    def sail_area(self) -> Area:
        return self._sail_area

    @sail_area.setter
    def sail_area(self, val: Area) -> None:
        self._sail_area = _checked("sail_area", val, Area, allow_zero=True)

    def __repr__(self) -> str:
        return (
            f"Boat(name={self.name!r}, loa={self._loa!r}, dwl={self._dwl!r}, b_max={self._b_max!r}, "
            f"displacement={self._displacement!r}, sail_area={self._sail_area!r})"
        )

    def __str__(self) -> str:
        from ..reports.simple_text_report import build_boat_text

        return build_boat_text(self)

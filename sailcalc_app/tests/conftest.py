"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from sailcalc_app.models import Area, Boat, Length, Weight


@pytest.fixture
def default_boat():
    """Boat with the placeholder dinghy dimensions."""
    return Boat("Dinghy")


@pytest.fixture
def cruiser():
    """34 ft cruiser with a 1 ft beam (displacement/sail-area reference case)."""
    boat = Boat("Cruiser")
    boat.loa = Length.from_foot(34.0)
    boat.dwl = Length.from_foot(32.0)
    boat.b_max = Length.from_foot(1.0)
    boat.displacement = Weight.from_pound(15680.0)
    boat.sail_area = Area.from_foot2(704.0)
    return boat


@pytest.fixture
def one_foot_beam_boat():
    """Factory: boat with a 1 ft beam and the given LOA in feet."""
    def _make(loa_ft: float) -> Boat:
        boat = Boat("L/B sample")
        boat.b_max = Length.from_foot(1.0)
        boat.loa = Length.from_foot(loa_ft)
        return boat
    return _make

"""
Literature classification tables for the design ratios.

L/B and SA/D follow the common yacht-design tables. D/L exists in two
incompatible published versions (five bands up to Ultraheavy, six bands
topping out at Heavy); both are kept as named presets and callers pick one.
"""

from __future__ import annotations

from typing import Dict

from ..models.categories import (
    DisplacementLengthCategory as DL,
    LengthBeamCategory as LB,
    SailAreaDisplacementCategory as SAD,
)
from ..services.bands import BandTable, make_table

# L/B (length-to-beam): 3.00 is still Beamy, 3.65 is still Moderate
LENGTH_BEAM_BANDS = make_table(
    "L/B",
    [
        (3.00, LB.BEAMY, True),
        (3.30, LB.MODERATE_BEAMY, False),
        (3.65, LB.MODERATE, True),
        (4.00, LB.MODERATE_NARROW, False),
    ],
    above=LB.NARROW,
)

# D/L (displacement-to-length), five bands
DL_BANDS_FIVE = make_table(
    "D/L five_band",
    [
        (90.0, DL.ULTRALIGHT, False),
        (180.0, DL.LIGHT, False),
        (270.0, DL.MODERATE, False),
        (360.0, DL.HEAVY, True),
    ],
    above=DL.ULTRAHEAVY,
)

# D/L (displacement-to-length), six bands
DL_BANDS_SIX = make_table(
    "D/L six_band",
    [
        (100.0, DL.ULTRALIGHT, False),
        (200.0, DL.LIGHT, True),
        (220.0, DL.MODERATE_LIGHT, False),
        (280.0, DL.MODERATE, True),
        (300.0, DL.MODERATE_HEAVY, True),
    ],
    above=DL.HEAVY,
)

# SA/D (sail-area-to-displacement)
SAIL_AREA_DISPLACEMENT_BANDS = make_table(
    "SA/D",
    [
        (15.0, SAD.LOW, False),
        (20.0, SAD.MODERATE, True),
    ],
    above=SAD.HIGH,
)

DL_PRESETS: Dict[str, BandTable] = {
    "five_band": DL_BANDS_FIVE,
    "six_band": DL_BANDS_SIX,
}

DEFAULT_DL_PRESET = "five_band"


def get_dl_bands(preset: str = DEFAULT_DL_PRESET) -> BandTable:
    """Return the D/L table registered under ``preset``."""
    try:
        return DL_PRESETS[preset]
    except KeyError:
        known = ", ".join(sorted(DL_PRESETS))
        raise ValueError(f"Unknown D/L preset '{preset}' (known: {known}).") from None

"""
Tolerances, validity range and placeholder boat dimensions.

Ratio comparisons follow the usual yacht-design literature (Brewer, Marchaj):
the nondimensional ratios are only meaningful between hulls of roughly
25 ft and 75 ft LOA. See config.ratio_bands for the classification tables.
"""

from __future__ import annotations

# Floating-point tolerance used when comparing a ratio with a band limit
EPS = 1e-9

# LOA range (ft) in which design ratios can be compared between boats
MIN_COMPARABLE_LOA_FT = 25.0
MAX_COMPARABLE_LOA_FT = 75.0

# Placeholder dinghy-scale hull used by Boat(name)
DEFAULT_LOA_M = 4.0
DEFAULT_DWL_M = 3.8
DEFAULT_B_MAX_M = 1.2
DEFAULT_DISPLACEMENT_KG = 80.0
DEFAULT_SAIL_AREA_M2 = 6.0

# D/L reference: waterline length is expressed in hundreds of feet
DL_WATERLINE_SCALE = 0.01

# SA/D exponent applied to displacement in long tons
SAD_DISPLACEMENT_EXPONENT = 2.0 / 3.0

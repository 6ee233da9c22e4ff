"""
Reporting utilities (plain text) for sailcalc.
"""

from sailcalc_app.reports.simple_text_report import (
    build_boat_text,
    build_ratios_text,
    format_ratio,
)

__all__ = [
    "build_boat_text",
    "build_ratios_text",
    "format_ratio",
]

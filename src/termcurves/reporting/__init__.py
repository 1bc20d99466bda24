"""
Reporting module for curves.

Provides:
- Tables of curve values on a time grid
- Tables of market point series
- Console formatting and CSV export
"""

from .curve_report import (
    CurveFormatter,
    curve_table,
    series_table,
    export_to_csv,
    print_curve,
)


__all__ = [
    "CurveFormatter",
    "curve_table",
    "series_table",
    "export_to_csv",
    "print_curve",
]

"""
Curve reporting functionality.

Tabulates curves on an evaluation grid and market point series as pandas
DataFrames, formats them for the console and exports them to CSV. A curve
is only ever called, so any function of one time argument can be reported.
"""

from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

import numpy as np
import pandas as pd

from ..errors import MalformedSeriesError


def curve_table(
    curve: Callable[[float], float],
    start_time: float,
    interval: float,
    points: int = 10,
    value_label: str = "value"
) -> pd.DataFrame:
    """
    Evaluate a curve on an evenly spaced grid.

    The grid has points + 1 times spaced interval / (points + 0.25) apart,
    so the last time stays strictly inside [start_time, start_time + interval].
    A zero interval gives a single row at start_time.

    Args:
        curve: Function of time
        start_time: First grid time
        interval: Length of the grid window
        points: Number of steps
        value_label: Name of the value column

    Returns:
        DataFrame with columns "time" and value_label
    """
    if points < 1:
        raise ValueError(f"Need at least one step, got {points}")

    if interval == 0:
        times = np.array([start_time], dtype=np.float64)
    else:
        step = interval / (points + 0.25)
        times = start_time + step * np.arange(points + 1)

    values = [curve(float(t)) for t in times]
    return pd.DataFrame({"time": times, value_label: values})


def series_table(
    times: Sequence[float],
    values: Sequence[float],
    time_label: str = "time",
    value_label: str = "value"
) -> pd.DataFrame:
    """
    Tabulate a market point series.

    Args:
        times: Times
        values: Values paired with times
        time_label: Name of the time column
        value_label: Name of the value column

    Returns:
        Two-column DataFrame
    """
    if len(times) != len(values):
        raise MalformedSeriesError(
            f"Times and values must have same length ({len(times)} != {len(values)})"
        )
    return pd.DataFrame({time_label: list(times), value_label: list(values)})


class CurveFormatter:
    """
    Formats curve tables for console output.
    """

    def __init__(self, width: int = 60, precision: int = 6, max_rows: int = 60):
        """
        Initialize formatter.

        Args:
            width: Console width
            precision: Decimal precision for floats
            max_rows: Rows shown before truncation
        """
        self.width = width
        self.precision = precision
        self.max_rows = max_rows

    def header(self, title: str) -> str:
        """Create a header line."""
        return f"\n{'='*self.width}\n{title.center(self.width)}\n{'='*self.width}\n"

    def format_table(self, df: pd.DataFrame, title: Optional[str] = None) -> str:
        """Format a curve or series table for console."""
        with pd.option_context(
            'display.max_rows', self.max_rows,
            'display.width', self.width,
            'display.float_format', lambda x: f"{x:.{self.precision}f}"
        ):
            body = df.to_string(index=False)

        if title:
            return self.header(title) + body
        return body


def export_to_csv(
    tables: dict,
    output_dir: Union[str, Path],
    prefix: str = "curve"
) -> List[str]:
    """
    Export tables to CSV files, one per table.

    Args:
        tables: Mapping of table name to DataFrame
        output_dir: Output directory
        prefix: Filename prefix

    Returns:
        List of created file paths
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    created_files = []
    for name, df in tables.items():
        safe_name = name.replace(" ", "_").replace("/", "_")
        filename = output_path / f"{prefix}_{safe_name}.csv"
        df.to_csv(filename, index=False)
        created_files.append(str(filename))

    return created_files


def print_curve(
    curve: Callable[[float], float],
    start_time: float,
    interval: float,
    points: int = 10,
    title: Optional[str] = None,
    formatter: Optional[CurveFormatter] = None
):
    """
    Print a curve table to console.

    Args:
        curve: Function of time
        start_time: First grid time
        interval: Length of the grid window
        points: Number of steps
        title: Optional title
        formatter: Optional custom formatter
    """
    fmt = formatter or CurveFormatter()
    print(fmt.format_table(curve_table(curve, start_time, interval, points), title))


__all__ = [
    "CurveFormatter",
    "curve_table",
    "series_table",
    "export_to_csv",
    "print_curve",
]

#!/usr/bin/env python
"""
TermCurves Demo Script

This script builds every curve of the library on sample market data:
1. Parametric yield and discount curves (Nelson-Siegel, Svensson, Vasicek)
2. Interpolated curves from market points
3. Black and Hull-White volatility curves
4. Forward-pricing curves on an interpolated discount curve
5. Prints the tables and optionally exports them to CSV

Usage:
    python run_demo.py [--output-dir OUTPUT_DIR] [--points N] [--verbose]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Tuple

import numpy as np
import pandas as pd

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from termcurves import EPS
from termcurves.curves import (
    discount_log_lin_interp,
    discount_nelson_siegel,
    discount_vasicek,
    discount_yield_lin_interp,
    forward_carry_lin_interp,
    volatility_var_lin_interp,
    yield_nelson_siegel,
    yield_svensson,
    yield_vasicek,
)
from termcurves.vol import carry_black, volatility_black, volatility_hull_white
from termcurves.forwards import (
    forward_annuity,
    forward_coupon_bond,
    forward_fx_curve,
    forward_libor,
    forward_stock_dividends,
    forward_swap_rate,
)
from termcurves.reporting import CurveFormatter, curve_table, series_table, export_to_csv


INITIAL_TIME = 1.5
SPOT = 100.0


def sample_yield(rate: float, mean_reversion: float, initial_time: float):
    """Yield rate * shape1(lambda (t - t0)) used to generate market points."""
    def uyield(t: float) -> float:
        x = max(mean_reversion * (t - initial_time), EPS)
        return rate * (1 - np.exp(-x)) / x
    return uyield


def sample_times(initial_time: float, count: int, period: float = 0.5) -> List[float]:
    return [initial_time + period * (k + 1) for k in range(count)]


def sample_discount_factors(initial_time: float) -> Tuple[List[float], List[float]]:
    """Twelve half-yearly discount factors."""
    uyield = sample_yield(0.07, 0.22, initial_time)
    times = sample_times(initial_time, 12)
    dfs = [float(np.exp(-uyield(t) * (t - initial_time))) for t in times]
    return times, dfs


def sample_forwards(spot: float, initial_time: float) -> Tuple[List[float], List[float]]:
    """Ten half-yearly forward prices."""
    carry = sample_yield(0.07, 0.22, initial_time)
    times = sample_times(initial_time, 10)
    forwards = [float(spot * np.exp(carry(t) * (t - initial_time))) for t in times]
    return times, forwards


def sample_vols(initial_time: float) -> Tuple[List[float], List[float]]:
    """Ten half-yearly implied volatilities."""
    sigma, lam = 0.035, 0.25
    times = sample_times(initial_time, 10)
    vols = []
    for t in times:
        x = 2.0 * lam * (t - initial_time)
        vols.append(float(sigma * np.sqrt(np.expm1(x) / x)))
    return times, vols


def build_model_curves(t0: float, points: int) -> Dict[str, pd.DataFrame]:
    """Tabulate the parametric curves."""
    print("\n" + "="*60)
    print("Parametric Curves")
    print("="*60)

    ns = yield_nelson_siegel(0.02, 0.04, 0.06, 0.05, t0)
    sv = yield_svensson(0.02, 0.04, 0.06, 0.01, 0.05, 0.3, t0)
    vasicek = yield_vasicek(0.004, 0.1, 0.01, 0.03, t0)

    print(f"  {ns}")
    print(f"  {sv}")
    print(f"  Vasicek long-run yield: {vasicek.long_run_yield*100:.3f}%")

    return {
        "nelson siegel yield": curve_table(ns, t0, 5.0, points, "yield"),
        "nelson siegel discount": curve_table(
            discount_nelson_siegel(0.02, 0.04, 0.06, 0.05, t0), t0, 5.0, points, "discount"
        ),
        "svensson yield": curve_table(sv, t0, 5.0, points, "yield"),
        "vasicek yield": curve_table(vasicek, t0, 10.0, points, "yield"),
        "vasicek discount": curve_table(
            discount_vasicek(0.004, 0.1, 0.01, 0.03, t0), t0, 10.0, points, "discount"
        ),
        "black carry": curve_table(carry_black(0.03, 0.5, 0.2, t0), t0, 5.0, points, "carry"),
        "black volatility": curve_table(
            volatility_black(0.2, 0.5, t0), t0, 5.0, points, "volatility"
        ),
    }


def build_interpolated_curves(t0: float, points: int) -> Dict[str, pd.DataFrame]:
    """Tabulate the curves interpolated from sample market points."""
    print("\n" + "="*60)
    print("Interpolated Curves")
    print("="*60)

    times, dfs = sample_discount_factors(t0)
    fwd_times, forwards = sample_forwards(SPOT, t0)
    vol_times, vols = sample_vols(t0)
    print(f"  Discount factors: {len(times)} points up to {times[-1]}")
    print(f"  Forward prices:   {len(fwd_times)} points up to {fwd_times[-1]}")
    print(f"  Volatilities:     {len(vol_times)} points up to {vol_times[-1]}")

    interval = times[-1] - t0
    return {
        "market discount factors": series_table(times, dfs, "maturity", "discount"),
        "yield linear discount": curve_table(
            discount_yield_lin_interp(times, dfs, 0.07, t0), t0, interval, points, "discount"
        ),
        "log linear discount": curve_table(
            discount_log_lin_interp(times, dfs, t0), t0, interval, points, "discount"
        ),
        "carry linear forward": curve_table(
            forward_carry_lin_interp(SPOT, fwd_times, forwards, t0),
            t0, fwd_times[-1] - t0, points, "forward"
        ),
        "interpolated volatility": curve_table(
            volatility_var_lin_interp(vol_times, vols, t0),
            t0, vol_times[-1] - t0, points, "volatility"
        ),
    }


def build_forward_curves(t0: float, points: int) -> Dict[str, pd.DataFrame]:
    """Tabulate forward-pricing curves on the log-linear discount curve."""
    print("\n" + "="*60)
    print("Forward Curves")
    print("="*60)

    times, dfs = sample_discount_factors(t0)
    discount = discount_log_lin_interp(times, dfs, t0)
    maturity = t0 + 4.0
    foreign = discount_nelson_siegel(0.01, 0.01, 0.0, 0.1, t0)

    bond = forward_coupon_bond(0.05, 0.5, maturity, discount)
    clean = forward_coupon_bond(0.05, 0.5, maturity, discount, clean=True)
    annuity = forward_annuity(0.05, 0.5, maturity, discount)
    stock = forward_stock_dividends(SPOT, [t0 + 0.75, t0 + 1.75, t0 + 2.75], [1.0, 1.0, 1.0], discount)
    swap = forward_swap_rate(0.25, 6, discount)
    libor = forward_libor(0.25, discount)
    fx = forward_fx_curve(1.1, discount, foreign)
    hull_white = volatility_hull_white(0.01, 0.1, t0)

    print(f"  {bond}")
    print(f"  {annuity}")
    print(f"  Hull-White vol of 1Y option on {maturity - t0:.0f}Y bond: "
          f"{hull_white(t0 + 1.0, maturity)*10000:.1f}bp")

    return {
        "coupon bond dirty": curve_table(bond, t0, maturity - t0, points, "price"),
        "coupon bond clean": curve_table(clean, t0, maturity - t0, points, "price"),
        "annuity": curve_table(annuity, t0, maturity - t0, points, "price"),
        "stock forward": curve_table(stock, t0, 2.75, points, "forward"),
        "swap rate": curve_table(swap, t0, swap.max_time - t0, points, "rate"),
        "libor": curve_table(libor, t0, libor.max_time - t0, points, "rate"),
        "fx forward": curve_table(fx, t0, fx.max_time - t0, points, "forward"),
    }


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TermCurves Demo")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory for CSV tables"
    )
    parser.add_argument(
        "--points",
        type=int,
        default=10,
        help="Number of steps in each curve table"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log curve construction",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )

    print("="*60)
    print("TERMCURVES DEMO")
    print(f"Initial Time: {INITIAL_TIME}")
    print("="*60)

    tables = {}
    tables.update(build_model_curves(INITIAL_TIME, args.points))
    tables.update(build_interpolated_curves(INITIAL_TIME, args.points))
    tables.update(build_forward_curves(INITIAL_TIME, args.points))

    formatter = CurveFormatter()
    for name, df in tables.items():
        print(formatter.format_table(df, title=name.title()))

    if args.output_dir:
        files = export_to_csv(tables, args.output_dir)
        print(f"\nExported {len(files)} tables to {args.output_dir}")

    print("\nDemo complete.")


if __name__ == "__main__":
    main()

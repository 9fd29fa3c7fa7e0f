# src/bondpricer/price_yield.py
import logging
import os
from dataclasses import replace
from typing import Optional

import numpy as np
import pandas as pd

from .bonds import BondParams, compute
from .config import settings

logger = logging.getLogger(__name__)


def get_pyplot():
    """Return matplotlib.pyplot, falling back to Agg when there is no display."""
    import matplotlib

    if "DISPLAY" not in os.environ and "MPLBACKEND" not in os.environ:
        matplotlib.use("Agg", force=True)

    import matplotlib.pyplot as plt

    return plt


def price_yield_curve(
    params: BondParams,
    ytm_min: Optional[float] = None,
    ytm_max: Optional[float] = None,
    n_points: int = settings.curve_points,
) -> pd.DataFrame:
    """
    Reprice one bond across a grid of yields.

    Parameters
    ----------
    params : BondParams
        Validated bond; its ``ytm`` is the base point of the approximations.
    ytm_min, ytm_max : float, optional
        Grid bounds. Default to the base yield -/+ ``settings.curve_span``,
        with the lower bound floored at zero.
    n_points : int, optional
        Number of grid points.

    Returns
    -------
    pd.DataFrame
        Columns: ytm, price, modified_duration, convexity, duration_approx,
        convexity_approx. The two approximation columns are the first and
        second order Taylor estimates of price around the base yield.
    """
    lo = max(0.0, params.ytm - settings.curve_span) if ytm_min is None else ytm_min
    hi = params.ytm + settings.curve_span if ytm_max is None else ytm_max
    if lo < 0 or hi <= lo:
        raise ValueError("Yield grid must satisfy 0 <= ytm_min < ytm_max.")
    if n_points < 2:
        raise ValueError("n_points must be at least 2.")

    base = compute(params)
    rows = []
    for y in np.linspace(lo, hi, n_points):
        m = compute(replace(params, ytm=float(y)))
        dy = float(y) - params.ytm
        first = base.price * (1 - base.modified_duration * dy)
        rows.append({
            "ytm": float(y),
            "price": m.price,
            "modified_duration": m.modified_duration,
            "convexity": m.convexity,
            "duration_approx": first,
            "convexity_approx": first + base.price * 0.5 * base.convexity * dy * dy,
        })
    logger.debug("price/yield grid: %d points on [%.4f, %.4f]", n_points, lo, hi)
    return pd.DataFrame(rows)


def plot_price_yield(
    params: BondParams,
    out_path: str = settings.default_plot,
    n_points: int = settings.curve_points,
    show: bool = False,
) -> pd.DataFrame:
    """
    Plot price against yield with the duration and convexity approximations.

    Returns the DataFrame from ``price_yield_curve`` that was plotted.
    """
    df = price_yield_curve(params, n_points=n_points)

    plt = get_pyplot()
    plt.figure(figsize=(7, 5))
    plt.plot(df["ytm"] * 100, df["price"], color="blue", lw=2, label="Price")
    plt.plot(df["ytm"] * 100, df["duration_approx"], color="grey", ls="--", label="Duration approx.")
    plt.plot(df["ytm"] * 100, df["convexity_approx"], color="orange", ls=":", label="Duration + convexity")
    plt.axvline(params.ytm * 100, color="black", lw=0.8)
    plt.xlabel("Yield to Maturity (%)")
    plt.ylabel("Price")
    plt.title("Price / Yield")
    plt.legend()
    plt.grid(True, linestyle="--", alpha=0.6)

    if out_path:
        plt.savefig(out_path, bbox_inches="tight")
        print(f"Saved plot: {out_path}")

    if show:
        plt.show()
    plt.close()

    return df

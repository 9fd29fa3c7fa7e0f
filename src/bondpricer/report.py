from __future__ import annotations
from typing import List

import numpy as np

from .bonds import BondMetrics, BondParams
from .config import settings

HEAVY = "═" * settings.report_width
LIGHT = "─" * settings.report_width
TITLE = (" " * 20 + "BOND ANALYSIS REPORT").ljust(settings.report_width)


def duration_price_change(metrics: BondMetrics, shift: float = settings.report_yield_shift) -> float:
    return -metrics.modified_duration * metrics.price * shift


def convexity_adjustment(metrics: BondMetrics, shift: float = settings.report_yield_shift) -> float:
    return 0.5 * metrics.convexity * metrics.price * shift * shift


def price_as_pct_of_par(params: BondParams, metrics: BondMetrics) -> float:
    return metrics.price / params.face_value * 100


def trading_status(params: BondParams, metrics: BondMetrics) -> str:
    # float noise on a par bond must not read as premium/discount
    if np.isclose(metrics.price, params.face_value, rtol=1e-9, atol=0.0):
        return "par"
    return "premium" if metrics.price > params.face_value else "discount"


def _section(title: str, rows: List[str]) -> List[str]:
    return [f"{title}:", LIGHT, *rows, ""]


def format_report(params: BondParams, metrics: BondMetrics) -> str:
    shift = settings.report_yield_shift
    lines = ["", HEAVY, TITLE, HEAVY, ""]

    lines += _section("BOND PARAMETERS", [
        f"  Face Value              : ${params.face_value:.2f}",
        f"  Coupon Rate             : {params.coupon_rate * 100:.4f}% ({params.coupon_rate:.4f})",
        f"  Yield to Maturity       : {params.ytm * 100:.4f}% ({params.ytm:.4f})",
        f"  Years to Maturity       : {params.periods} years",
        f"  Payment Frequency       : {params.frequency} times per year",
        f"  Total Payments          : {params.total_payments}",
    ])
    lines += _section("PRICING METRICS", [
        f"  Bond Price              : ${metrics.price:.4f}",
        f"  Price as % of Par       : {price_as_pct_of_par(params, metrics):.4f}%",
    ])
    lines += _section("RISK METRICS", [
        f"  Macaulay Duration       : {metrics.macaulay_duration:.4f} years",
        f"  Modified Duration       : {metrics.modified_duration:.4f} years",
        f"  Convexity               : {metrics.convexity:.4f}",
        f"  DV01 (Dollar Duration)  : ${metrics.dv01:.4f}",
    ])
    lines += [
        "INTERPRETATION:",
        LIGHT,
        f"  • A {shift * 100:g}% yield change implies:",
        f"    - Price change (duration): ${duration_price_change(metrics, shift):.2f}"
        f" ({-metrics.modified_duration * shift * 100:.2f}%)",
        f"    - Convexity adjustment   : ${convexity_adjustment(metrics, shift):.2f}",
        f"  • Bond is trading at a {trading_status(params, metrics)}",
        HEAVY,
        "",
    ]
    return "\n".join(lines) + "\n"


def print_report(params: BondParams, metrics: BondMetrics) -> None:
    print(format_report(params, metrics), end="")

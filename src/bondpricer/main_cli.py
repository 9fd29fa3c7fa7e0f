# src/bondpricer/main_cli.py
import argparse
import logging
import os
from typing import List, Optional

import pandas as pd

# package-relative imports (works when installed as bondpricer)
from .bonds import BondMetrics, BondParams, compute
from .config import settings
from .price_yield import plot_price_yield
from .report import print_report, trading_status
from .validation import BondInputError, parse_bond_params

logger = logging.getLogger(__name__)


# ---------- helpers ----------
def _require_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if not os.path.isdir(parent):
        raise SystemExit(f"Error: directory not found: {parent}")


def _write_csv(params: BondParams, metrics: BondMetrics, out: str) -> None:
    _require_dir(out)
    row = {
        "face_value": params.face_value,
        "coupon_rate": params.coupon_rate,
        "ytm": params.ytm,
        "years": params.periods,
        "frequency": params.frequency,
        **metrics.as_dict(),
        "status": trading_status(params, metrics),
    }
    pd.DataFrame([row]).to_csv(out, index=False)
    print(f"Saved: {out}")


# ---------- command ----------
def run(args: argparse.Namespace) -> None:
    try:
        params = parse_bond_params(args.face_value, args.coupon_rate, args.ytm, args.years, args.frequency)
    except BondInputError as e:
        logger.debug("rejected %s=%r", e.reason.name, e.value)
        raise SystemExit(f"Error: {e}")

    metrics = compute(params)
    print_report(params, metrics)

    if args.out:
        _write_csv(params, metrics, args.out)
    if args.plot:
        _require_dir(args.plot)
        plot_price_yield(params, out_path=args.plot)


# ---------- cli ----------
def build_parser() -> argparse.ArgumentParser:
    freqs = ", ".join(str(f) for f in settings.supported_frequencies)
    p = argparse.ArgumentParser(
        prog="bondpricer",
        description="Bond price, duration, convexity and DV01 from yield to maturity",
    )
    # kept as strings: validation owns parsing so each field gets its own message
    p.add_argument("face_value", help="Face value of the bond (e.g., 1000)")
    p.add_argument("coupon_rate", help="Annual coupon rate as decimal (e.g., 0.05 for 5%%)")
    p.add_argument("ytm", help="Yield to maturity as decimal (e.g., 0.06 for 6%%)")
    p.add_argument("years", help=f"Years to maturity, 1 to {settings.max_years} (e.g., 10)")
    p.add_argument("frequency", help=f"Payment frequency per year ({freqs})")
    p.add_argument("--out", default=None, help="Optional output CSV filename for the metrics")
    p.add_argument("--plot", default=None, help=f"Optional PNG filename for the price/yield chart (e.g., {settings.default_plot})")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    p = build_parser()
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(args)


if __name__ == "__main__":
    main()

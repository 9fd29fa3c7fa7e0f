from __future__ import annotations
import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BondParams:
    face_value: float        # Face value (par / redemption amount)
    coupon_rate: float       # Annual nominal coupon rate as decimal (e.g., 0.05)
    ytm: float               # Annual nominal yield to maturity as decimal
    periods: int             # Years to maturity
    frequency: int = 2       # Coupon payments per year (1, 2, 4 or 12)

    @property
    def total_payments(self) -> int:
        return self.periods * self.frequency


@dataclass(frozen=True)
class BondMetrics:
    price: float
    macaulay_duration: float     # years
    modified_duration: float     # years
    convexity: float
    dv01: float                  # price change per 1bp
    yield_to_maturity: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def cash_flows(params: BondParams) -> List[float]:
    coupon_pmt = params.face_value * (params.coupon_rate / params.frequency)
    flows = [coupon_pmt] * params.total_payments
    flows[-1] += params.face_value
    return flows


def price_from_ytm(params: BondParams, ytm: Optional[float] = None) -> float:
    """Price by direct exponentiation of each period's discount factor."""
    y = (params.ytm if ytm is None else ytm) / params.frequency
    return sum(cf / ((1 + y) ** t) for t, cf in enumerate(cash_flows(params), start=1))


def compute(params: BondParams) -> BondMetrics:
    """
    Price, durations, convexity and DV01 of a fixed-coupon bond.

    All metrics are accumulated in one pass over the n = periods * frequency
    payment dates, carrying the discount factor forward instead of raising
    (1 + y) to each power.

    Parameters
    ----------
    params : BondParams
        Already validated inputs. No checks are made here: out-of-domain
        inputs give meaningless numbers rather than an error.

    Returns
    -------
    BondMetrics
        Metrics in float64, unrounded.
    """
    fv = params.face_value
    freq = params.frequency
    c = params.coupon_rate / freq
    y = params.ytm / freq
    n = params.periods * freq
    coupon_pmt = fv * c

    price = 0.0
    weighted_pv = 0.0
    convexity_sum = 0.0

    discount = 1.0 / (1.0 + y)
    pv_factor = discount
    for t in range(1, n + 1):
        cf = coupon_pmt + fv if t == n else coupon_pmt
        pv = cf * pv_factor

        price += pv
        weighted_pv += t * pv
        convexity_sum += t * (t + 1) * pv

        pv_factor *= discount

    # float64 division so a zero price yields inf/nan instead of raising
    p = np.float64(price)
    with np.errstate(divide="ignore", invalid="ignore"):
        mac_dur = weighted_pv / (p * freq)
        # (1 + ytm / freq) rather than (1 + y): keeps parity with the reference figures
        mod_dur = mac_dur / (1.0 + params.ytm / freq)
        convex = convexity_sum / (p * freq * freq * (1.0 + y) * (1.0 + y))
    dv01 = mod_dur * p / 10000.0

    metrics = BondMetrics(
        price=float(p),
        macaulay_duration=float(mac_dur),
        modified_duration=float(mod_dur),
        convexity=float(convex),
        dv01=float(dv01),
        yield_to_maturity=params.ytm,
    )
    logger.debug("computed %s -> %s", params, metrics)
    return metrics

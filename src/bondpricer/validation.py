from __future__ import annotations
import logging
import re
from enum import Enum
from typing import Optional

import numpy as np

from .bonds import BondParams
from .config import settings

logger = logging.getLogger(__name__)


class InputError(Enum):
    FACE_VALUE = "Invalid face value. Must be positive number."
    COUPON_RATE = "Invalid coupon rate. Must be between 0 and 1."
    YTM = "Invalid YTM. Must be non-negative."
    YEARS = f"Invalid years to maturity. Must be between 1 and {settings.max_years}."
    FREQUENCY = "Invalid frequency. Must be {}.".format(
        ", ".join(str(f) for f in settings.supported_frequencies[:-1])
        + f", or {settings.supported_frequencies[-1]}"
    )


class BondInputError(ValueError):
    """Raised when a command-line value falls outside the bond input domain."""

    def __init__(self, reason: InputError, value: str) -> None:
        super().__init__(reason.value)
        self.reason = reason
        self.value = value


# leading whitespace and a sign only; no digit separators or trailing text
_INT_RE = re.compile(r"\s*[+-]?[0-9]+")


def _to_float(text: str) -> Optional[float]:
    if "_" in text or text != text.rstrip():
        return None
    try:
        x = float(text)
    except (TypeError, ValueError):
        return None
    return x if np.isfinite(x) else None


def _to_int(text: str) -> Optional[int]:
    if _INT_RE.fullmatch(text) is None:
        return None
    return int(text, 10)


def parse_bond_params(
    face_value: str,
    coupon_rate: str,
    ytm: str,
    years: str,
    frequency: str,
) -> BondParams:
    """
    Turn the five raw command-line strings into a validated BondParams.

    Checks run in argument order and the first failure is raised as a
    BondInputError whose ``reason`` names the offending field.
    """
    fv = _to_float(face_value)
    if fv is None or fv <= 0:
        raise BondInputError(InputError.FACE_VALUE, face_value)

    c = _to_float(coupon_rate)
    if c is None or c < 0 or c > 1:
        raise BondInputError(InputError.COUPON_RATE, coupon_rate)

    y = _to_float(ytm)
    if y is None or y < 0:
        raise BondInputError(InputError.YTM, ytm)

    n = _to_int(years)
    if n is None or n <= 0 or n > settings.max_years:
        raise BondInputError(InputError.YEARS, years)

    f = _to_int(frequency)
    if f is None or f not in settings.supported_frequencies:
        raise BondInputError(InputError.FREQUENCY, frequency)

    params = BondParams(face_value=fv, coupon_rate=c, ytm=y, periods=n, frequency=f)
    logger.debug("parsed %s", params)
    return params

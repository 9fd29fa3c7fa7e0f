from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Settings:
    # Input domain
    supported_frequencies: Tuple[int, ...] = (1, 2, 4, 12)
    max_years: int = 100

    # Report
    report_yield_shift: float = 0.01   # 1% move used in the interpretation block

    # Price/yield curve defaults
    curve_span: float = 0.03           # +/- around the base yield
    curve_points: int = 61

    # Output
    report_width: int = 63
    default_plot: str = "price_yield.png"

settings = Settings()

import pytest

from bondpricer.bonds import BondParams, compute
from bondpricer.report import (
    convexity_adjustment,
    duration_price_change,
    format_report,
    price_as_pct_of_par,
    trading_status,
)


def _report(coupon: float, ytm: float, years: int = 10, freq: int = 1) -> str:
    params = BondParams(face_value=1000.0, coupon_rate=coupon, ytm=ytm, periods=years, frequency=freq)
    return format_report(params, compute(params))


def test_par_report_layout() -> None:
    text = _report(0.05, 0.05)
    for section in ("BOND ANALYSIS REPORT", "BOND PARAMETERS:", "PRICING METRICS:", "RISK METRICS:", "INTERPRETATION:"):
        assert section in text
    assert "  Face Value              : $1000.00" in text
    assert "  Coupon Rate             : 5.0000% (0.0500)" in text
    assert "  Total Payments          : 10" in text
    assert "  Bond Price              : $1000.0000" in text
    assert "  Price as % of Par       : 100.0000%" in text
    assert "  Macaulay Duration       : 8.1078 years" in text
    assert "  Modified Duration       : 7.7217 years" in text
    assert "  • A 1% yield change implies:" in text
    assert "    - Price change (duration): $-77.22 (-7.72%)" in text
    assert "  • Bond is trading at a par" in text


def test_status_reads_premium_and_discount() -> None:
    assert "trading at a premium" in _report(0.07, 0.05)
    assert "trading at a discount" in _report(0.03, 0.05, years=5, freq=2)


def test_par_status_tolerates_float_noise() -> None:
    params = BondParams(face_value=1000.0, coupon_rate=0.0425, ytm=0.0425, periods=37, frequency=12)
    assert trading_status(params, compute(params)) == "par"


def test_presentation_figures() -> None:
    params = BondParams(face_value=1000.0, coupon_rate=0.06, ytm=0.08, periods=5, frequency=2)
    m = compute(params)
    assert duration_price_change(m) == pytest.approx(-m.modified_duration * m.price * 0.01)
    assert convexity_adjustment(m) == pytest.approx(0.5 * m.convexity * m.price * 0.0001)
    assert convexity_adjustment(m) > 0
    assert price_as_pct_of_par(params, m) == pytest.approx(m.price / 10)


def test_title_line_matches_reference_layout() -> None:
    lines = _report(0.05, 0.05).splitlines()
    title = lines[2]
    assert title == " " * 20 + "BOND ANALYSIS REPORT" + " " * 23
    assert len(title) == len(lines[1]) == 63

import numpy as np
import pytest

from bondpricer.bonds import BondParams, compute
from bondpricer.price_yield import plot_price_yield, price_yield_curve

PARAMS = BondParams(face_value=1000.0, coupon_rate=0.05, ytm=0.06, periods=10, frequency=2)


def test_curve_columns_and_monotone_price() -> None:
    df = price_yield_curve(PARAMS, n_points=21)
    assert list(df.columns) == [
        "ytm", "price", "modified_duration", "convexity", "duration_approx", "convexity_approx",
    ]
    assert len(df) == 21
    assert np.isclose(df["ytm"].iloc[0], 0.03)
    assert np.isclose(df["ytm"].iloc[-1], 0.09)
    assert (np.diff(df["price"].to_numpy()) < 0).all()


def test_approximations_meet_price_at_base_yield() -> None:
    df = price_yield_curve(PARAMS, n_points=61)
    row = df.iloc[(df["ytm"] - PARAMS.ytm).abs().idxmin()]
    base = compute(PARAMS).price
    assert row["price"] == pytest.approx(base)
    assert row["duration_approx"] == pytest.approx(base)


def test_convexity_improves_on_duration_away_from_base() -> None:
    df = price_yield_curve(PARAMS, n_points=11)
    for _, row in df.iloc[[0, -1]].iterrows():
        assert abs(row["convexity_approx"] - row["price"]) < abs(row["duration_approx"] - row["price"])
        # positive convexity: price sits above the duration line
        assert row["price"] > row["duration_approx"]


def test_lower_bound_floored_at_zero() -> None:
    low = BondParams(face_value=100.0, coupon_rate=0.01, ytm=0.01, periods=5, frequency=1)
    df = price_yield_curve(low, n_points=5)
    assert df["ytm"].min() == 0.0


def test_rejects_bad_grid() -> None:
    with pytest.raises(ValueError, match="ytm_min < ytm_max"):
        price_yield_curve(PARAMS, ytm_min=0.05, ytm_max=0.05)
    with pytest.raises(ValueError, match="at least 2"):
        price_yield_curve(PARAMS, n_points=1)


def test_plot_writes_png(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("MPLBACKEND", "Agg")
    out = tmp_path / "curve.png"
    df = plot_price_yield(PARAMS, out_path=str(out), n_points=15)
    assert out.exists()
    assert len(df) == 15

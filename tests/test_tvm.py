"""Tests for the time value of money solver."""

import math

import pytest

from freedom_calculators.calculators import tvm
from freedom_calculators.calculators.tvm import SolveFor, TVMInputs
from freedom_calculators.exceptions import UnsolvableError

FV_20Y = 297876.5715


def test_future_value_of_savings_plan():
    """$5,000 now plus $6,000 a year for 20 years at 8%."""
    assert tvm.future_value(20, 0.08, -5000, -6000) == pytest.approx(297876.57, abs=0.01)


def test_future_value_zero_rate():
    assert tvm.future_value(10, 0.0, -100, -10) == 200


def test_present_value_inverts_future_value():
    assert tvm.present_value(20, 0.08, -6000, FV_20Y) == pytest.approx(-5000, abs=0.01)


def test_payment_inverts_future_value():
    assert tvm.payment(20, 0.08, -5000, FV_20Y) == pytest.approx(-6000, abs=0.01)


def test_payment_zero_rate():
    assert tvm.payment(10, 0.0, -1000, 3000) == -200


def test_closed_forms_with_vanishing_rate():
    assert tvm.payment(10, 1e-18, -1000, 3000) == pytest.approx(-200)
    assert tvm.future_value(10, 1e-18, -100, -10) == pytest.approx(200)
    assert tvm.present_value(10, 1e-18, -10, 200) == pytest.approx(-100)


def test_solve_with_vanishing_rate_succeeds():
    result = tvm.solve(TVMInputs(10, 1e-16, -1000, 0, 3000, SolveFor.PAYMENT))
    assert result.ok
    assert result.value == pytest.approx(-200)


def test_public_names_exist():
    for name in tvm.__all__:
        assert hasattr(tvm, name)
    assert {"DEFAULT_INPUTS", "STORAGE_KEY", "validate", "calculate"} <= set(tvm.__all__)


def test_payment_requires_periods():
    with pytest.raises(UnsolvableError):
        tvm.payment(0, 0.05, -1000, 0)


def test_solve_for_rate_recovers_rate():
    assert tvm.solve_for_rate(20, -5000, -6000, FV_20Y) == pytest.approx(8.0, abs=1e-3)


def test_solve_for_rate_lump_sum_doubling():
    """$1,000 that doubles in 10 periods grows about 7.18% a period."""
    expected = (2 ** 0.1 - 1) * 100
    assert tvm.solve_for_rate(10, -1000, 0, 2000) == pytest.approx(expected, abs=1e-3)


def test_solve_for_rate_without_root_is_unsolvable():
    # every cash flow is an inflow, so no rate balances the equation
    with pytest.raises(UnsolvableError, match="interest rate"):
        tvm.solve_for_rate(10, 1000, 100, 1000)


def test_solve_for_periods_savings():
    assert tvm.solve_for_periods(0.08, -5000, -6000, FV_20Y) == pytest.approx(20, abs=1e-3)


def test_solve_for_periods_loan_payoff():
    """$10,000 at 1% a month paid $200 a month."""
    expected = math.log(2) / math.log(1.01)
    assert tvm.solve_for_periods(0.01, 10000, -200, 0) == pytest.approx(expected, abs=1e-3)


def test_solve_for_periods_zero_rate():
    assert tvm.solve_for_periods(0.0, -1000, -100, 2000) == 10


@pytest.mark.parametrize("pv, pmt, fv", [(-1000, 0, 2000), (1000, 100, 500)])
def test_solve_for_periods_zero_rate_unsolvable(pv, pmt, fv):
    with pytest.raises(UnsolvableError):
        tvm.solve_for_periods(0.0, pv, pmt, fv)


def test_solve_default_future_value():
    result = tvm.solve(TVMInputs(20, 8, -5000, -6000, 1000000, SolveFor.FUTURE_VALUE))
    assert result.ok
    assert result.solve_for is SolveFor.FUTURE_VALUE
    assert result.value == pytest.approx(297876.57, abs=0.01)


@pytest.mark.parametrize(
    "target, expected",
    [
        (SolveFor.PRESENT_VALUE, -5000),
        (SolveFor.PAYMENT, -6000),
        (SolveFor.INTEREST_RATE, 8.0),
        (SolveFor.PERIODS, 20),
    ],
)
def test_solve_each_variable(target, expected):
    result = tvm.solve(TVMInputs(20, 8, -5000, -6000, FV_20Y, target))
    assert result.ok
    assert result.value == pytest.approx(expected, abs=1e-2)


def test_solve_accepts_string_target():
    result = tvm.solve(TVMInputs(20, 8, -5000, -6000, 0, "future_value"))
    assert result.solve_for is SolveFor.FUTURE_VALUE


def test_solve_reports_failure_without_raising():
    result = tvm.solve(TVMInputs(10, 0, 1000, 100, 1000, SolveFor.INTEREST_RATE))
    assert not result.ok
    assert result.value is None
    assert result.error == "Unable to solve for interest rate with given values"


def test_solve_rejects_rate_at_or_below_minus_100():
    result = tvm.solve(TVMInputs(2.5, -100, -1000, 0, 0, SolveFor.FUTURE_VALUE))
    assert not result.ok
    assert "-100%" in result.error


def test_solve_payment_with_zero_periods_fails_cleanly():
    result = tvm.solve(TVMInputs(0, 5, -1000, 0, 0, SolveFor.PAYMENT))
    assert not result.ok
    assert result.error


def test_solve_for_label():
    assert SolveFor.INTEREST_RATE.label == "Interest Rate (%)"


def test_growth_series_compounds_principal():
    points = tvm.growth_series(2, 10, -1000, 0)
    assert [p["period"] for p in points] == [0, 1, 2]
    assert points[1]["interest"] == pytest.approx(100)
    assert points[2]["interest"] == pytest.approx(210)
    assert points[2]["principal"] == pytest.approx(1000)


def test_growth_series_adds_contributions():
    points = tvm.growth_series(3, 0, -100, -50)
    assert [p["principal"] for p in points] == [100, 150, 200, 250]
    assert all(p["interest"] == 0 for p in points)


def test_growth_series_is_capped():
    assert len(tvm.growth_series(500, 1, -100, -10)) == tvm.CHART_PERIOD_CAP + 1


@pytest.mark.parametrize("periods, rate", [(0, 5), (10, -5)])
def test_growth_series_empty_when_nothing_to_draw(periods, rate):
    assert tvm.growth_series(periods, rate, -100, -10) == []


def test_calculate_defaults():
    out = tvm.calculate(dict(tvm.DEFAULT_INPUTS))
    assert out["result"].ok
    assert out["result"].value == pytest.approx(297876.57, abs=0.01)
    assert len(out["chart"]) == 21


def test_calculate_charts_solved_periods():
    inputs = dict(tvm.DEFAULT_INPUTS, future_value=FV_20Y, solve_for="periods", periods=0)
    out = tvm.calculate(inputs)
    assert out["result"].value == pytest.approx(20, abs=1e-3)
    assert len(out["chart"]) >= 20


def test_calculate_no_chart_on_failure():
    inputs = {
        "periods": 10,
        "interest_rate": 0,
        "present_value": 1000,
        "payment": 100,
        "future_value": 1000,
        "solve_for": "interest_rate",
    }
    out = tvm.calculate(inputs)
    assert not out["result"].ok
    assert out["chart"] == []


def test_future_then_present_value_round_trip():
    fv = tvm.future_value(20, 0.05, -10000, -500)
    assert tvm.present_value(20, 0.05, -500, fv) == pytest.approx(-10000, rel=1e-4)


def test_rate_recovered_from_closed_form_future_value():
    fv = tvm.future_value(20, 0.05, -10000, -500)
    assert tvm.solve_for_rate(20, -10000, -500, fv) == pytest.approx(5.0, abs=1e-3)

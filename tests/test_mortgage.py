"""Tests for the mortgage calculator."""

import pytest

from freedom_calculators.calculators import mortgage
from freedom_calculators.calculators.amortization import monthly_payment


def test_default_mortgage():
    """$300,000 home, 10% down, 7% for 30 years."""
    res = mortgage.calculate(mortgage.DEFAULT_INPUTS)
    assert res["down_payment_amount"] == 30000
    assert res["loan_amount"] == 270000
    assert res["monthly_payment"] == pytest.approx(monthly_payment(270000, 0.07 / 12, 360))
    assert res["monthly_payment"] == pytest.approx(1796.3, abs=0.1)
    assert res["total_paid"] == pytest.approx(270000 + res["total_interest"], abs=1e-6)


def test_yearly_schedule():
    res = mortgage.calculate(mortgage.DEFAULT_INPUTS)
    yearly = res["yearly"]
    assert len(yearly) == 30
    assert yearly[-1].end_balance == 0.0
    assert sum(y.total_principal for y in yearly) == pytest.approx(270000, abs=1e-6)
    assert yearly[0].total_interest > yearly[-1].total_interest


def test_zero_rate_mortgage():
    res = mortgage.calculate({"home_price": 150000, "down_payment_percent": 20, "interest_rate": 0, "loan_term": 10})
    assert res["loan_amount"] == 120000
    assert res["monthly_payment"] == pytest.approx(1000)
    assert res["total_interest"] == 0


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"home_price": "x"}, "Please enter a valid home price"),
        ({"home_price": 0}, "Home price must be greater than 0"),
        ({"down_payment_percent": -1}, "Down payment percentage cannot be negative"),
        ({"down_payment_percent": 100}, "Down payment percentage must be less than 100%"),
        ({"interest_rate": -1}, "Interest rate cannot be negative"),
        ({"loan_term": 0}, "Loan term must be greater than 0"),
    ],
)
def test_validate(overrides, message):
    inputs = dict(mortgage.DEFAULT_INPUTS)
    inputs.update(overrides)
    assert mortgage.validate(inputs) == message

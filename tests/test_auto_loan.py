"""Tests for the auto loan calculator."""

import pytest

from freedom_calculators.calculators import auto_loan


def test_default_loan():
    """$40,000 at 8% for 7 years."""
    res = auto_loan.calculate(auto_loan.DEFAULT_INPUTS)
    assert res["monthly_payment"] == pytest.approx(623.45, abs=0.01)
    assert res["total_interest"] == pytest.approx(12369.7, abs=0.5)
    assert res["total_interest"] == pytest.approx(res["monthly_payment"] * 84 - 40000, abs=1e-6)
    assert res["total_paid"] == pytest.approx(40000 + res["total_interest"], abs=1e-6)
    assert res["interest_share_pct"] == pytest.approx(res["total_interest"] / 400)
    assert res["terms"].total_periods == 84
    assert len(res["schedule"].rows) == 84


def test_fractional_term_rounds_to_months():
    res = auto_loan.calculate({"loan_amount": 6000, "interest_rate": 0, "loan_term": 0.5})
    assert res["terms"].total_periods == 6
    assert res["monthly_payment"] == pytest.approx(1000)


@pytest.mark.parametrize(
    "years, expected",
    [(0, 40000.0), (1, 32000.0), (2, 27000.0), (7, 12000.0)],
)
def test_estimated_vehicle_value(years, expected):
    assert auto_loan.estimated_vehicle_value(40000, years) == expected


def test_default_estimated_value():
    assert auto_loan.calculate(auto_loan.DEFAULT_INPUTS)["estimated_value"] == 12000.0


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"loan_amount": None}, "Please enter a valid loan amount"),
        ({"loan_amount": 0}, "Loan amount must be greater than 0"),
        ({"interest_rate": -0.5}, "Interest rate cannot be negative"),
        ({"loan_term": 0}, "Loan term must be greater than 0"),
        ({"loan_term": 0.01}, "Loan term must be at least one month"),
    ],
)
def test_validate(overrides, message):
    inputs = dict(auto_loan.DEFAULT_INPUTS)
    inputs.update(overrides)
    assert auto_loan.validate(inputs) == message


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"loan_amount": -1, "interest_rate": -1, "loan_term": 0}, "Loan amount must be greater than 0"),
        ({"interest_rate": -1, "loan_term": -2}, "Interest rate cannot be negative"),
    ],
)
def test_validate_reports_first_problem(overrides, message):
    assert auto_loan.validate(dict(auto_loan.DEFAULT_INPUTS, **overrides)) == message

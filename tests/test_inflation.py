"""Tests for the inflation / purchasing power calculator."""

import pytest

from freedom_calculators.calculators import inflation


def test_default_scenario():
    """$10,000 at 3% for 20 years."""
    res = inflation.calculate(inflation.DEFAULT_INPUTS)
    assert res["future_nominal"] == pytest.approx(18061.11, abs=0.01)
    assert res["real_purchasing_power"] == pytest.approx(5536.76, abs=0.01)
    assert res["power_lost"] == pytest.approx(10000 - res["real_purchasing_power"])
    assert res["percentage_lost"] == pytest.approx(res["power_lost"] / 100)


def test_series_runs_from_today_to_horizon():
    res = inflation.calculate(inflation.DEFAULT_INPUTS)
    assert res["years"] == list(range(21))
    assert res["purchasing_power"][0] == pytest.approx(10000)
    assert res["purchasing_power"][-1] == pytest.approx(res["real_purchasing_power"])
    pp = res["purchasing_power"]
    assert all(b < a for a, b in zip(pp, pp[1:]))


def test_zero_years_changes_nothing():
    res = inflation.calculate({"current_amount": 500, "inflation_rate": 4, "years": 0})
    assert res["future_nominal"] == 500
    assert res["power_lost"] == 0
    assert res["purchasing_power"] == [500]


def test_deflation_increases_purchasing_power():
    res = inflation.calculate({"current_amount": 1000, "inflation_rate": -2, "years": 5})
    assert res["real_purchasing_power"] > 1000
    assert res["percentage_lost"] < 0


def test_purchasing_power_series_matches_closed_form():
    series = inflation.purchasing_power_series(1000, 10, 2)
    assert series.tolist() == pytest.approx([1000, 1000 / 1.1, 1000 / 1.21])


@pytest.mark.parametrize(
    "inputs, message",
    [
        ({"current_amount": 0, "inflation_rate": 3, "years": 20}, "Current amount must be greater than 0"),
        ({"current_amount": 100, "inflation_rate": -100, "years": 20}, "Inflation rate must be greater than -100%"),
        ({"current_amount": 100, "inflation_rate": 3, "years": -1}, "Number of years cannot be negative"),
        ({"current_amount": None, "inflation_rate": 3, "years": 1}, "Please enter a valid Current Amount"),
    ],
)
def test_validate(inputs, message):
    assert inflation.validate(inputs) == message


def test_defaults_are_valid():
    assert inflation.validate(inflation.DEFAULT_INPUTS) is None

"""Tests for display formatting."""

import pytest

from freedom_calculators import formatters
from freedom_calculators.calculators.tvm import SolveFor, TVMResult


@pytest.mark.parametrize(
    "amount, decimals, expected",
    [
        (1234.56, False, "$1,235"),
        (1234.56, True, "$1,234.56"),
        (-1234.5, True, "-$1,234.50"),
        (-1234.56, False, "-$1,235"),
        (0, False, "$0"),
        (-0.2, False, "$0"),
        (1000000, False, "$1,000,000"),
    ],
)
def test_format_currency(amount, decimals, expected):
    assert formatters.format_currency(amount, include_decimals=decimals) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(1234567, "1,234,567"), ("1,234.5", "1,234.5"), ("", ""), (None, ""), ("abc", "")],
)
def test_format_number_with_commas(value, expected):
    assert formatters.format_number_with_commas(value) == expected


def test_format_percentage():
    assert formatters.format_percentage(3) == "3%"
    assert formatters.format_percentage(44.6324, 1) == "44.6%"
    assert formatters.format_percentage(None) == ""


@pytest.mark.parametrize(
    "months, expected",
    [(40, "3 years, 4 months"), (12, "1 year"), (1, "1 month"), (0, "0 months"), (25, "2 years, 1 month")],
)
def test_format_months(months, expected):
    assert formatters.format_months(months) == expected


def test_format_months_over_cap():
    assert formatters.format_months(None, 600) == "More than 50 years (600+ months)"
    assert formatters.format_months(None).startswith("Never")


@pytest.mark.parametrize(
    "result, expected",
    [
        (TVMResult(SolveFor.INTEREST_RATE, 8.0), "8.00%"),
        (TVMResult(SolveFor.PERIODS, 19.96), "20.0 periods"),
        (TVMResult(SolveFor.FUTURE_VALUE, 297876.57), "$297,877"),
        (TVMResult(SolveFor.PRESENT_VALUE, -5000.0), "$5,000"),
        (TVMResult(SolveFor.PAYMENT, error="Unable to solve"), "N/A"),
    ],
)
def test_format_tvm_result(result, expected):
    assert formatters.format_tvm_result(result) == expected

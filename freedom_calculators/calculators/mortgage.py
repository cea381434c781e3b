"""Mortgage payment with down payment and yearly amortization."""

from __future__ import annotations

from typing import Dict, Optional

from .. import validation
from .amortization import LoanTerms, amortize, summarize_by_year

STORAGE_KEY = "mortgage-calculator"

DEFAULT_INPUTS = {
    "home_price": 300000,
    "down_payment_percent": 10,
    "interest_rate": 7.0,
    "loan_term": 30,
}


def validate(inputs: Dict) -> Optional[str]:
    return validation.validate_mortgage(inputs)


def calculate(inputs: Dict) -> Dict:
    """Finance ``home_price`` less the down payment over ``loan_term`` years.

    Returns the down payment, the financed amount, the level monthly payment,
    totals, and both monthly and yearly schedules.
    """
    price = float(inputs["home_price"])
    down_pct = float(inputs["down_payment_percent"])
    rate = float(inputs["interest_rate"])
    term_years = float(inputs["loan_term"])

    down_payment = price * down_pct / 100
    loan_amount = price - down_payment
    terms = LoanTerms(principal=loan_amount, periodic_rate=rate / 100 / 12, total_periods=round(term_years * 12))
    schedule = amortize(terms)
    return {
        "down_payment_amount": down_payment,
        "loan_amount": loan_amount,
        "monthly_payment": schedule.payment,
        "total_interest": schedule.total_interest,
        "total_paid": schedule.total_paid,
        "terms": terms,
        "schedule": schedule,
        "yearly": summarize_by_year(schedule.rows),
    }


__all__ = ["DEFAULT_INPUTS", "STORAGE_KEY", "validate", "calculate"]

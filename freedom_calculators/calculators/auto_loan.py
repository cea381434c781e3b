"""Auto loan payment, total cost and depreciation estimate.

Example
-------

>>> res = calculate({"loan_amount": 40000, "interest_rate": 8, "loan_term": 7})
>>> round(res["monthly_payment"], 2)
623.45
>>> res["estimated_value"]
12000.0
"""

from __future__ import annotations

import math
from typing import Dict, Optional

from .. import validation
from .amortization import LoanTerms, amortize

STORAGE_KEY = "autoloan-calculator"

DEFAULT_INPUTS = {
    "loan_amount": 40000,
    "interest_rate": 8,
    "loan_term": 7,
}

FIRST_YEAR_DEPRECIATION = 0.20
LATER_YEAR_DEPRECIATION = 0.15


def validate(inputs: Dict) -> Optional[str]:
    return validation.validate_auto_loan(inputs)


def estimated_vehicle_value(price: float, years: float) -> float:
    """Rough resale value after ``years``: 20 % off in year one, 15 % a year
    after that, rounded down to the nearest $500."""
    value = float(price)
    if years > 0:
        value *= 1 - FIRST_YEAR_DEPRECIATION
        if years > 1:
            value *= (1 - LATER_YEAR_DEPRECIATION) ** (years - 1)
    return math.floor(value / 500) * 500.0


def calculate(inputs: Dict) -> Dict:
    amount = float(inputs["loan_amount"])
    rate = float(inputs["interest_rate"])
    term_years = float(inputs["loan_term"])

    terms = LoanTerms(principal=amount, periodic_rate=rate / 100 / 12, total_periods=round(term_years * 12))
    schedule = amortize(terms)
    return {
        "monthly_payment": schedule.payment,
        "total_interest": schedule.total_interest,
        "total_paid": schedule.total_paid,
        "interest_share_pct": schedule.total_interest / amount * 100,
        "estimated_value": estimated_vehicle_value(amount, term_years),
        "terms": terms,
        "schedule": schedule,
    }


__all__ = ["DEFAULT_INPUTS", "STORAGE_KEY", "validate", "calculate", "estimated_vehicle_value"]

"""Credit card payoff.

Revolving balances have no fixed term: the card holder pays either a fixed
amount each month or the issuer's minimum (interest plus 1 % of the balance,
never less than a stated dollar minimum).  The schedule runs until the card
is paid off or the 50 year cap is reached.
"""

from __future__ import annotations

from typing import Dict, Optional

from .. import validation
from .amortization import (
    PERIOD_CAP,
    PaymentPolicy,
    compute_balance_driven_schedule,
    summarize_by_year,
)

STORAGE_KEY = "creditcard-calculator"

DEFAULT_INPUTS = {
    "balance": 5000,
    "apr": 29.99,
    "payment_type": "minimum",
    "fixed_payment": 150,
    "minimum_payment": 15,
}

PAYMENT_TYPES = {
    "minimum": "Interest + 1% of Balance",
    "fixed": "Fixed Payment Amount",
}


def validate(inputs: Dict) -> Optional[str]:
    return validation.validate_credit_card(inputs)


def calculate(inputs: Dict, period_cap: int = PERIOD_CAP) -> Dict:
    balance = float(inputs["balance"])
    monthly_rate = float(inputs["apr"]) / 100 / 12
    if inputs["payment_type"] == "fixed":
        policy = PaymentPolicy.FIXED_PAYMENT
        payment = float(inputs["fixed_payment"])
    else:
        policy = PaymentPolicy.MINIMUM_PERCENT_OF_BALANCE
        payment = float(inputs["minimum_payment"])

    schedule = compute_balance_driven_schedule(balance, monthly_rate, policy, payment, period_cap)
    return {
        "months_to_payoff": schedule.months_to_payoff,
        "paid_off": schedule.paid_off,
        "period_cap": period_cap,
        "total_interest": schedule.total_interest,
        "total_paid": schedule.total_paid,
        "remaining_balance": schedule.final_balance,
        "schedule": schedule,
        "yearly": summarize_by_year(schedule.rows),
    }


__all__ = ["DEFAULT_INPUTS", "STORAGE_KEY", "PAYMENT_TYPES", "validate", "calculate"]

"""Input validation for the calculator tabs.

Every calculator validates its raw inputs here before any engine runs.  The
``validate_*`` functions return the first user-facing error message, or
``None`` when the inputs are usable.
"""

from __future__ import annotations

import math
import re
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import InvalidInputError

_STRIP = re.compile(r"[,\s$%]")


def is_valid_number(value: Any) -> bool:
    """True for finite ints and floats (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def to_number(value: Any) -> float:
    """Return ``value`` as a float, treating blanks as 0."""
    if value is None or value == "":
        return 0.0
    return float(value)


def parse_number(text: Any, field: str = "value") -> float:
    """Parse user text such as ``"1,234"``, ``"$40,000"`` or ``"7.5%"``."""
    if is_valid_number(text):
        return float(text)
    cleaned = _STRIP.sub("", str(text or ""))
    try:
        number = float(cleaned)
    except ValueError as exc:
        raise InvalidInputError(field, f"Please enter a valid {format_field_name(field)}") from exc
    if not math.isfinite(number):
        raise InvalidInputError(field, f"Please enter a valid {format_field_name(field)}")
    return number


def format_field_name(field: str) -> str:
    """``"interest_rate"`` -> ``"Interest Rate"``."""
    words = re.sub(r"([a-z])([A-Z])", r"\1 \2", field).replace("_", " ").split()
    return " ".join(w[:1].upper() + w[1:] for w in words)


def missing_fields(inputs: Dict[str, Any], required: Iterable[str]) -> List[str]:
    """Names of required fields that are blank or not finite numbers."""
    return [f for f in required if not is_valid_number(inputs.get(f))]


def validate_positive_fields(inputs: Dict[str, Any], required: Iterable[str]) -> List[str]:
    """Names of required fields that are missing, non-numeric, zero or negative."""
    errors = []
    for f in required:
        value = inputs.get(f)
        if not is_valid_number(value) or value <= 0:
            errors.append(f)
    return errors


def require_valid(message: Optional[str], field: str = "inputs") -> None:
    """Raise ``InvalidInputError`` if a validator produced a message."""
    if message:
        raise InvalidInputError(field, message)


# ---------- Per-calculator rules ----------
def validate_inflation(inputs: Dict[str, Any]) -> Optional[str]:
    missing = missing_fields(inputs, ["current_amount", "inflation_rate", "years"])
    if missing:
        return f"Please enter a valid {format_field_name(missing[0])}"
    if inputs["current_amount"] <= 0:
        return "Current amount must be greater than 0"
    if inputs["inflation_rate"] <= -100:
        return "Inflation rate must be greater than -100%"
    if inputs["years"] < 0:
        return "Number of years cannot be negative"
    return None


def validate_compound_interest(inputs: Dict[str, Any]) -> Optional[str]:
    missing = missing_fields(inputs, ["principal", "annual_rate", "years", "monthly_contribution"])
    if missing:
        return f"Please enter a valid {format_field_name(missing[0])}"
    if inputs["principal"] < 0:
        return "Initial investment cannot be negative"
    if inputs["monthly_contribution"] < 0:
        return "Monthly contribution cannot be negative"
    if inputs["principal"] == 0 and inputs["monthly_contribution"] == 0:
        return "Enter an initial investment or a monthly contribution"
    if inputs["annual_rate"] < 0:
        return "Interest rate cannot be negative"
    if inputs["years"] <= 0:
        return "Number of years must be greater than 0"
    if int(inputs.get("compounds_per_year", 12)) not in (1, 2, 4, 12, 365):
        return "Compounding frequency must be annual, semiannual, quarterly, monthly or daily"
    return None


def validate_tvm(inputs: Dict[str, Any]) -> Optional[str]:
    fields = ["periods", "interest_rate", "present_value", "payment", "future_value"]
    solve_for = inputs.get("solve_for")
    if solve_for not in fields:
        return "Please choose a value to solve for"
    for f in fields:
        if f != solve_for and not is_valid_number(inputs.get(f)):
            return f"Please enter a valid {format_field_name(f)}"
    return None


def validate_credit_card(inputs: Dict[str, Any]) -> Optional[str]:
    if not is_valid_number(inputs.get("balance")):
        return "Please enter a valid balance"
    if not is_valid_number(inputs.get("apr")):
        return "Please enter a valid APR"
    if inputs["balance"] <= 0:
        return "Balance must be greater than 0"
    if inputs["apr"] < 0:
        return "APR cannot be negative"
    if inputs.get("payment_type") == "fixed":
        if not is_valid_number(inputs.get("fixed_payment")):
            return "Please enter a valid fixed payment amount"
        if inputs["fixed_payment"] <= 0:
            return "Fixed payment must be greater than 0"
    elif inputs.get("payment_type") == "minimum":
        if not is_valid_number(inputs.get("minimum_payment")):
            return "Please enter a valid minimum payment"
        if inputs["minimum_payment"] <= 0:
            return "Minimum payment must be greater than 0"
    else:
        return "Please choose a payment method"
    return None


def validate_auto_loan(inputs: Dict[str, Any]) -> Optional[str]:
    if not is_valid_number(inputs.get("loan_amount")):
        return "Please enter a valid loan amount"
    if not is_valid_number(inputs.get("interest_rate")):
        return "Please enter a valid interest rate"
    if not is_valid_number(inputs.get("loan_term")):
        return "Please enter a valid loan term"
    not_positive = validate_positive_fields(inputs, ["loan_amount", "loan_term"])
    if "loan_amount" in not_positive:
        return "Loan amount must be greater than 0"
    if inputs["interest_rate"] < 0:
        return "Interest rate cannot be negative"
    if "loan_term" in not_positive:
        return "Loan term must be greater than 0"
    if round(inputs["loan_term"] * 12) < 1:
        return "Loan term must be at least one month"
    return None


def validate_mortgage(inputs: Dict[str, Any]) -> Optional[str]:
    if not is_valid_number(inputs.get("home_price")):
        return "Please enter a valid home price"
    if not is_valid_number(inputs.get("down_payment_percent")):
        return "Please enter a valid down payment percentage"
    if not is_valid_number(inputs.get("interest_rate")):
        return "Please enter a valid interest rate"
    if not is_valid_number(inputs.get("loan_term")):
        return "Please enter a valid loan term"
    not_positive = validate_positive_fields(inputs, ["home_price", "loan_term"])
    if "home_price" in not_positive:
        return "Home price must be greater than 0"
    if inputs["down_payment_percent"] < 0:
        return "Down payment percentage cannot be negative"
    if inputs["down_payment_percent"] >= 100:
        return "Down payment percentage must be less than 100%"
    if inputs["interest_rate"] < 0:
        return "Interest rate cannot be negative"
    if "loan_term" in not_positive:
        return "Loan term must be greater than 0"
    if round(inputs["loan_term"] * 12) < 1:
        return "Loan term must be at least one month"
    return None

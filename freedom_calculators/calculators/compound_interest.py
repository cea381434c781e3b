"""Compound interest growth with monthly contributions.

The balance is stepped month by month: interest is credited at the effective
monthly rate implied by the compounding frequency, then the monthly
contribution is added at month end.  Yearly snapshots feed the table and the
stacked contributions-vs-interest chart.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import numpy as np

from .. import validation

STORAGE_KEY = "compound-calculator"

DEFAULT_INPUTS = {
    "principal": 10000,
    "annual_rate": 7,
    "years": 30,
    "monthly_contribution": 200,
    "compounds_per_year": 12,
}

COMPOUNDING_OPTIONS = {
    1: "Annually",
    2: "Semiannually",
    4: "Quarterly",
    12: "Monthly",
    365: "Daily",
}


def validate(inputs: Dict) -> Optional[str]:
    return validation.validate_compound_interest(inputs)


def effective_annual_rate(annual_rate: float, compounds_per_year: int) -> float:
    """Effective annual yield for a nominal rate in percent."""
    k = int(compounds_per_year)
    return (1 + annual_rate / 100 / k) ** k - 1


def monthly_growth_rate(annual_rate: float, compounds_per_year: int) -> float:
    k = int(compounds_per_year)
    return (1 + annual_rate / 100 / k) ** (k / 12) - 1


def doubling_years(annual_rate: float) -> Optional[float]:
    """Rule of 72 estimate; ``None`` when money never doubles."""
    if annual_rate <= 0:
        return None
    return 72 / annual_rate


def calculate(inputs: Dict) -> Dict:
    principal = float(inputs["principal"])
    annual_rate = float(inputs["annual_rate"])
    years = int(inputs["years"])
    contribution = float(inputs["monthly_contribution"])
    k = int(inputs.get("compounds_per_year", 12))

    r = monthly_growth_rate(annual_rate, k)
    months = years * 12
    balances = np.empty(months + 1)
    deposits = np.empty(months + 1)
    balances[0] = principal
    deposits[0] = principal
    for m in range(1, months + 1):
        balances[m] = balances[m - 1] * (1 + r) + contribution
        deposits[m] = deposits[m - 1] + contribution

    rows: List[Dict[str, float]] = []
    for year in range(0, years + 1):
        idx = year * 12
        rows.append({
            "year": year,
            "contributions": float(deposits[idx]),
            "interest": float(balances[idx] - deposits[idx]),
            "balance": float(balances[idx]),
        })

    final_balance = float(balances[-1])
    total_contributions = float(deposits[-1])
    return {
        "final_balance": final_balance,
        "total_contributions": total_contributions,
        "total_interest": final_balance - total_contributions,
        "effective_annual_rate": effective_annual_rate(annual_rate, k) * 100,
        "doubling_years": doubling_years(annual_rate),
        "rows": rows,
    }


__all__ = [
    "DEFAULT_INPUTS",
    "STORAGE_KEY",
    "COMPOUNDING_OPTIONS",
    "validate",
    "calculate",
    "effective_annual_rate",
    "doubling_years",
]

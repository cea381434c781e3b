"""Inflation and purchasing power.

Shows how a fixed amount of money loses purchasing power over time at a
constant annual inflation rate.

Example
-------

>>> res = calculate({"current_amount": 10000, "inflation_rate": 3, "years": 20})
>>> round(res["future_nominal"], 2)
18061.11
>>> round(res["real_purchasing_power"], 2)
5536.76
"""

from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from .. import validation

STORAGE_KEY = "inflation-calculator"

DEFAULT_INPUTS = {
    "current_amount": 10000,
    "inflation_rate": 3,
    "years": 20,
}


def validate(inputs: Dict) -> Optional[str]:
    return validation.validate_inflation(inputs)


def purchasing_power_series(current_amount: float, inflation_rate: float, years: float) -> np.ndarray:
    """Real value of ``current_amount`` at the end of each year 0..years."""
    steps = np.arange(int(years) + 1)
    return current_amount / np.power(1 + inflation_rate / 100, steps)


def calculate(inputs: Dict) -> Dict:
    """Return nominal/real values and a year-by-year purchasing power series.

    Parameters
    ----------
    inputs : dict
        ``current_amount`` in dollars, ``inflation_rate`` as a percent and
        ``years``.

    Returns
    -------
    dict
        ``future_nominal`` – dollars needed later to match today's amount.
        ``real_purchasing_power`` – today's value of the amount after ``years``.
        ``power_lost`` and ``percentage_lost`` – the erosion in dollars and %.
        ``years`` / ``purchasing_power`` – chart series.
    """
    amount = float(inputs["current_amount"])
    rate = float(inputs["inflation_rate"])
    years = float(inputs["years"])

    factor = (1 + rate / 100) ** years
    future_nominal = amount * factor
    real = amount / factor
    power_lost = amount - real
    series = purchasing_power_series(amount, rate, years)
    return {
        "future_nominal": future_nominal,
        "real_purchasing_power": real,
        "power_lost": power_lost,
        "percentage_lost": power_lost / amount * 100,
        "years": list(range(len(series))),
        "purchasing_power": series.tolist(),
    }


__all__ = ["DEFAULT_INPUTS", "STORAGE_KEY", "validate", "calculate", "purchasing_power_series"]

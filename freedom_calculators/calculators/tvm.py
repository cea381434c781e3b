"""Time value of money solver.

Given any four of the five annuity variables – number of periods ``N``,
rate per period, present value ``PV``, payment ``PMT`` and future value
``FV`` – compute the fifth.  All five are tied together by::

    PV * (1 + r)^N + PMT * ((1 + r)^N - 1) / r + FV = 0

Future value, present value and payment have closed-form solutions.  Rate
and periods appear inside both a power and a geometric series, so they are
found with Newton-Raphson.

Cash flows follow the usual sign convention: money paid out (investments,
payments) is negative and money received is positive.  The solver does not
enforce it.

Example
-------

>>> # $5,000 invested today plus $6,000 a year for 20 years at 8 %
>>> round(future_value(20, 0.08, -5000, -6000), 2)
297876.57

>>> result = solve(TVMInputs(20, 0.0, -5000, -6000, 297876.57, SolveFor.INTEREST_RATE))
>>> round(result.value, 2)
8.0
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, List, Optional

from .. import validation
from ..exceptions import UnsolvableError

logger = logging.getLogger(__name__)

TOLERANCE = 1e-6
MAX_ITERATIONS = 100
RATE_GUESS = 0.10
PERIODS_GUESS = 10.0
RATE_FLOOR = -0.99
ZERO_RATE_NUDGE = 0.001
CHART_PERIOD_CAP = 100


class SolveFor(str, Enum):
    PERIODS = "periods"
    INTEREST_RATE = "interest_rate"
    PRESENT_VALUE = "present_value"
    PAYMENT = "payment"
    FUTURE_VALUE = "future_value"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SolveFor.PERIODS: "Periods (N)",
    SolveFor.INTEREST_RATE: "Interest Rate (%)",
    SolveFor.PRESENT_VALUE: "Present Value (PV)",
    SolveFor.PAYMENT: "Payment (PMT)",
    SolveFor.FUTURE_VALUE: "Future Value (FV)",
}


@dataclass(frozen=True)
class TVMInputs:
    """The five TVM variables.

    ``interest_rate`` is a percentage per period (8 means 8 %).  The field
    named by ``solve_for`` is ignored.
    """

    periods: float
    interest_rate: float
    present_value: float
    payment: float
    future_value: float
    solve_for: SolveFor = SolveFor.FUTURE_VALUE


@dataclass(frozen=True)
class TVMResult:
    """Outcome of a solve: either a value or a reason it could not be found."""

    solve_for: SolveFor
    value: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None


# ---------- Closed forms ----------
def future_value(n: float, rate: float, pv: float, pmt: float) -> float:
    factor = (1 + rate) ** n
    if rate == 0 or factor == 1:
        return -(pv + pmt * n)
    return -(pv * factor + pmt * (factor - 1) / rate)


def present_value(n: float, rate: float, pmt: float, fv: float) -> float:
    factor = (1 + rate) ** n
    if rate == 0 or factor == 1:
        return -(fv + pmt * n)
    return -(fv + pmt * (factor - 1) / rate) / factor


def payment(n: float, rate: float, pv: float, fv: float) -> float:
    if n == 0:
        raise UnsolvableError("Number of periods must be non-zero to solve for payment")
    factor = (1 + rate) ** n
    if rate == 0 or factor == 1:
        return -(pv + fv) / n
    return -(pv * factor + fv) / ((factor - 1) / rate)


# ---------- Root finders ----------
def solve_for_rate(
    n: float,
    pv: float,
    pmt: float,
    fv: float,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> float:
    """Find the rate per period with Newton-Raphson.

    Returns the rate as a percentage.  Raises ``UnsolvableError`` when the
    derivative vanishes or the iteration budget runs out without ``|f(r)|``
    dropping below ``tolerance``.
    """
    rate = RATE_GUESS
    for iteration in range(max_iterations):
        if rate == 0:
            f = pv + pmt * n + fv
            if abs(f) < tolerance:
                return 0.0
            rate = ZERO_RATE_NUDGE
            continue

        factor = (1 + rate) ** n
        f = pv * factor + pmt * (factor - 1) / rate + fv
        growth = n * (1 + rate) ** (n - 1)
        df = pv * growth + pmt * (growth / rate - (factor - 1) / (rate * rate))

        if abs(f) < tolerance:
            logger.debug("rate converged", extra={"iterations": iteration, "rate": rate})
            return rate * 100
        if abs(df) < tolerance:
            break
        rate = rate - f / df
        if rate < RATE_FLOOR:
            rate = RATE_FLOOR

    logger.warning("rate solver did not converge", extra={"n": n, "pv": pv, "pmt": pmt, "fv": fv})
    raise UnsolvableError("Unable to solve for interest rate with given values")


def solve_for_periods(
    rate: float,
    pv: float,
    pmt: float,
    fv: float,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> float:
    """Find the number of periods for a per-period decimal ``rate``.

    A zero rate is solved directly.  Otherwise Newton-Raphson runs from an
    initial guess of 10 periods, keeping the estimate positive.
    """
    if rate == 0:
        if pmt == 0:
            raise UnsolvableError("Unable to solve for periods with given values")
        n = -(pv + fv) / pmt
        if n < 0:
            raise UnsolvableError("Unable to solve for periods with given values")
        return n

    log_growth = math.log(1 + rate)
    n = PERIODS_GUESS
    for iteration in range(max_iterations):
        factor = (1 + rate) ** n
        g = pv * factor + pmt * (factor - 1) / rate + fv
        dg = pv * factor * log_growth + pmt * factor * log_growth / rate

        if abs(g) < tolerance:
            logger.debug("periods converged", extra={"iterations": iteration, "periods": n})
            return n
        if abs(dg) < tolerance:
            break
        n = n - g / dg
        if n <= 0:
            n = 0.1

    logger.warning("periods solver did not converge", extra={"rate": rate, "pv": pv, "pmt": pmt, "fv": fv})
    raise UnsolvableError("Unable to solve for periods with given values")


# ---------- Dispatch ----------
def _solve_periods(inputs: TVMInputs, tolerance: float, max_iterations: int) -> float:
    return solve_for_periods(
        inputs.interest_rate / 100,
        inputs.present_value,
        inputs.payment,
        inputs.future_value,
        tolerance,
        max_iterations,
    )


def _solve_rate(inputs: TVMInputs, tolerance: float, max_iterations: int) -> float:
    return solve_for_rate(
        inputs.periods,
        inputs.present_value,
        inputs.payment,
        inputs.future_value,
        tolerance,
        max_iterations,
    )


def _solve_pv(inputs: TVMInputs, tolerance: float, max_iterations: int) -> float:
    return present_value(inputs.periods, inputs.interest_rate / 100, inputs.payment, inputs.future_value)


def _solve_pmt(inputs: TVMInputs, tolerance: float, max_iterations: int) -> float:
    return payment(inputs.periods, inputs.interest_rate / 100, inputs.present_value, inputs.future_value)


def _solve_fv(inputs: TVMInputs, tolerance: float, max_iterations: int) -> float:
    return future_value(inputs.periods, inputs.interest_rate / 100, inputs.present_value, inputs.payment)


SOLVERS: Dict[SolveFor, Callable[[TVMInputs, float, int], float]] = {
    SolveFor.PERIODS: _solve_periods,
    SolveFor.INTEREST_RATE: _solve_rate,
    SolveFor.PRESENT_VALUE: _solve_pv,
    SolveFor.PAYMENT: _solve_pmt,
    SolveFor.FUTURE_VALUE: _solve_fv,
}

_FAILURE_MESSAGES = {
    SolveFor.PERIODS: "Unable to solve for periods with given values",
    SolveFor.INTEREST_RATE: "Unable to solve for interest rate with given values",
}


def solve(
    inputs: TVMInputs,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> TVMResult:
    """Solve for ``inputs.solve_for`` and return a tagged ``TVMResult``.

    Failures never raise: they come back as a result with ``error`` set.
    """
    target = SolveFor(inputs.solve_for)
    if target is not SolveFor.INTEREST_RATE and inputs.interest_rate <= -100:
        return TVMResult(target, error="Interest rate must be greater than -100%")

    fallback = _FAILURE_MESSAGES.get(target, "Calculation error. Please check your inputs.")
    try:
        value = SOLVERS[target](inputs, tolerance, max_iterations)
    except UnsolvableError as exc:
        return TVMResult(target, error=str(exc) or fallback)
    except (OverflowError, ZeroDivisionError) as exc:
        logger.warning("tvm solve failed", extra={"solve_for": target.value, "reason": str(exc)})
        return TVMResult(target, error=fallback)

    if isinstance(value, complex) or not math.isfinite(value):
        return TVMResult(target, error=fallback)
    return TVMResult(target, value=value)


def growth_series(
    periods: float,
    interest_rate: float,
    present_value: float,
    payment: float,
    cap: int = CHART_PERIOD_CAP,
) -> List[Dict[str, float]]:
    """Per-period principal vs. accumulated interest for the growth chart.

    Uses magnitudes of ``present_value`` and ``payment`` so the chart reads
    as money growing regardless of sign convention.  ``interest_rate`` is a
    percentage per period.  Returns an empty list when there is nothing to
    draw.
    """
    rate = interest_rate / 100
    total_periods = int(math.floor(periods))
    if total_periods <= 0 or rate < 0:
        return []

    balance = abs(present_value)
    contribution = abs(payment)
    interest_total = 0.0
    points = [{"period": 0, "principal": balance, "interest": 0.0}]
    for period in range(1, min(total_periods, cap) + 1):
        earned = balance * rate
        interest_total += earned
        balance = balance + earned + contribution
        points.append({"period": period, "principal": balance - interest_total, "interest": interest_total})
    return points


# ---------- Calculator tab ----------
STORAGE_KEY = "timevalue-calculator"

DEFAULT_INPUTS = {
    "periods": 20,
    "interest_rate": 8,
    "present_value": -5000,
    "payment": -6000,
    "future_value": 1000000,
    "solve_for": SolveFor.FUTURE_VALUE.value,
}


def validate(inputs: Dict) -> Optional[str]:
    return validation.validate_tvm(inputs)


def calculate(
    inputs: Dict,
    tolerance: float = TOLERANCE,
    max_iterations: int = MAX_ITERATIONS,
) -> Dict:
    """Solve the tab's inputs and build chart points on success."""
    tvm_inputs = TVMInputs(
        periods=validation.to_number(inputs.get("periods")),
        interest_rate=validation.to_number(inputs.get("interest_rate")),
        present_value=validation.to_number(inputs.get("present_value")),
        payment=validation.to_number(inputs.get("payment")),
        future_value=validation.to_number(inputs.get("future_value")),
        solve_for=SolveFor(inputs.get("solve_for", SolveFor.FUTURE_VALUE.value)),
    )
    result = solve(tvm_inputs, tolerance=tolerance, max_iterations=max_iterations)
    chart: List[Dict[str, float]] = []
    if result.ok:
        # draw the solved scenario, not the placeholder that was ignored
        solved = replace(tvm_inputs, **{result.solve_for.value: result.value})
        chart = growth_series(solved.periods, solved.interest_rate, solved.present_value, solved.payment)
    return {"result": result, "inputs": tvm_inputs, "chart": chart}


__all__ = [
    "DEFAULT_INPUTS",
    "STORAGE_KEY",
    "SolveFor",
    "TVMInputs",
    "TVMResult",
    "SOLVERS",
    "future_value",
    "present_value",
    "payment",
    "solve_for_rate",
    "solve_for_periods",
    "solve",
    "growth_series",
    "validate",
    "calculate",
]

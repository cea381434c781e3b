"""Amortization and payoff schedules.

This module builds per-period payment schedules for the loan calculators.
Two termination rules are supported:

* **Fixed term** – the payment is solved so the balance is retired in exactly
  ``total_periods`` payments (auto loans and mortgages).
* **Balance driven** – the payment is supplied (or derived from the balance
  each month) and the schedule runs until the balance is gone or a hard
  period cap is reached (credit cards).

Rates are periodic decimals, e.g. an 8 % APR paid monthly is
``0.08 / 12``.  Inputs are expected to be validated by the caller.

Example
-------

>>> result = compute_fixed_term_schedule(40000, 0.08 / 12, 84)
>>> round(result.payment, 2)
623.45
>>> len(result.rows), result.rows[-1].ending_balance
(84, 0.0)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

PERIOD_CAP = 600  # 50 years of monthly payments
PAYOFF_THRESHOLD = 0.01
MINIMUM_PRINCIPAL_SHARE = 0.01  # 1 % of the balance on top of interest


class PaymentPolicy(str, Enum):
    FIXED_TERM = "fixed_term"
    FIXED_PAYMENT = "fixed"
    MINIMUM_PERCENT_OF_BALANCE = "minimum"


@dataclass(frozen=True)
class LoanTerms:
    """Immutable input to a single fixed-term run."""

    principal: float
    periodic_rate: float
    total_periods: int


@dataclass(frozen=True)
class PeriodRow:
    """One payment period of a schedule."""

    index: int
    payment: float
    principal_portion: float
    interest_portion: float
    ending_balance: float

    @property
    def year(self) -> int:
        return math.ceil(self.index / 12)


@dataclass(frozen=True)
class YearSummary:
    year: int
    total_payment: float
    total_principal: float
    total_interest: float
    end_balance: float


@dataclass(frozen=True)
class AmortizationResult:
    """Rows plus totals for one schedule.

    ``paid_off`` is False only for balance-driven schedules that hit the
    period cap; in that case ``months_to_payoff`` is ``None`` and callers
    should report the payoff time as exceeding the cap.
    """

    rows: List[PeriodRow] = field(default_factory=list)
    total_interest: float = 0.0
    total_paid: float = 0.0
    payment: float = 0.0
    paid_off: bool = True
    period_cap: Optional[int] = None

    @property
    def months_to_payoff(self) -> Optional[int]:
        return len(self.rows) if self.paid_off else None

    @property
    def exceeded_cap(self) -> bool:
        return not self.paid_off

    @property
    def final_balance(self) -> float:
        return self.rows[-1].ending_balance if self.rows else 0.0


def monthly_payment(principal: float, periodic_rate: float, total_periods: int) -> float:
    """Return the level payment that retires ``principal`` in ``total_periods``.

    The formula is::

        payment = P * r * (1 + r)^n / ((1 + r)^n - 1)

    which simplifies to ``P / n`` when the rate is zero or too small to
    move ``(1 + r)^n`` off 1.
    """
    if total_periods <= 0:
        raise ValueError("Total periods must be positive")
    if periodic_rate == 0:
        return principal / total_periods
    factor = (1 + periodic_rate) ** total_periods
    if factor == 1:
        # rate too small to register in (1 + r)^n
        return principal / total_periods
    return principal * periodic_rate * factor / (factor - 1)


def compute_fixed_term_schedule(principal: float, periodic_rate: float, total_periods: int) -> AmortizationResult:
    """Amortize ``principal`` over exactly ``total_periods`` level payments.

    The last period pays off whatever balance remains, so the principal
    portions always sum to ``principal`` and the final balance is exactly 0.
    """
    if principal <= 0:
        raise ValueError("Principal must be positive")
    if periodic_rate < 0:
        raise ValueError("Periodic rate cannot be negative")
    total_periods = int(total_periods)
    payment = monthly_payment(principal, periodic_rate, total_periods)

    balance = float(principal)
    total_interest = 0.0
    total_paid = 0.0
    rows: List[PeriodRow] = []
    for period in range(1, total_periods + 1):
        interest = balance * periodic_rate if periodic_rate else 0.0
        if period == total_periods:
            principal_part = balance
            row_payment = principal_part + interest
        else:
            principal_part = payment - interest
            row_payment = payment
        balance = max(0.0, balance - principal_part)
        if period == total_periods:
            balance = 0.0
        total_interest += interest
        total_paid += row_payment
        rows.append(PeriodRow(period, row_payment, principal_part, interest, balance))

    logger.debug(
        "fixed-term schedule built",
        extra={"periods": total_periods, "payment": payment, "total_interest": total_interest},
    )
    return AmortizationResult(
        rows=rows,
        total_interest=total_interest,
        total_paid=total_paid,
        payment=payment,
        paid_off=True,
    )


def amortize(terms: LoanTerms) -> AmortizationResult:
    """Run a fixed-term schedule for ``terms``."""
    return compute_fixed_term_schedule(terms.principal, terms.periodic_rate, terms.total_periods)


def compute_balance_driven_schedule(
    balance: float,
    periodic_rate: float,
    policy: PaymentPolicy,
    payment: float,
    period_cap: int = PERIOD_CAP,
) -> AmortizationResult:
    """Pay down a revolving balance until it is gone or ``period_cap`` is hit.

    Parameters
    ----------
    balance : float
        Starting balance.
    periodic_rate : float
        Interest rate per period as a decimal.
    policy : PaymentPolicy
        ``FIXED_PAYMENT`` pays ``payment`` every period.
        ``MINIMUM_PERCENT_OF_BALANCE`` pays the larger of ``payment`` (the
        stated minimum) and interest plus 1 % of the balance.
    payment : float
        The fixed payment or stated minimum, depending on ``policy``.
    period_cap : int
        Upper bound on the number of periods.  A payment that never covers
        the accruing interest stops here and is reported as not paid off.

    Returns
    -------
    AmortizationResult
        ``payment`` holds the first period's payment.
    """
    policy = PaymentPolicy(policy)
    if policy is PaymentPolicy.FIXED_TERM:
        raise ValueError("Fixed-term schedules are built by compute_fixed_term_schedule")

    current = float(balance)
    total_interest = 0.0
    total_paid = 0.0
    rows: List[PeriodRow] = []
    period = 0
    while current > PAYOFF_THRESHOLD and period < period_cap:
        period += 1
        interest = current * periodic_rate
        if policy is PaymentPolicy.MINIMUM_PERCENT_OF_BALANCE:
            due = max(payment, interest + current * MINIMUM_PRINCIPAL_SHARE)
        else:
            due = payment
        payoff = current + interest
        if due >= payoff:
            due = payoff
            principal_part = current
            current = 0.0
        else:
            principal_part = due - interest
            current = max(0.0, current - principal_part)
            if current <= PAYOFF_THRESHOLD:
                # sweep the sub-cent residual into this payment
                due += current
                principal_part += current
                current = 0.0
        total_interest += interest
        total_paid += due
        rows.append(PeriodRow(period, due, principal_part, interest, current))

    paid_off = current <= PAYOFF_THRESHOLD
    if not paid_off:
        logger.warning(
            "payoff schedule reached period cap",
            extra={"period_cap": period_cap, "remaining_balance": current, "policy": policy.value},
        )
    return AmortizationResult(
        rows=rows,
        total_interest=total_interest,
        total_paid=total_paid,
        payment=rows[0].payment if rows else 0.0,
        paid_off=paid_off,
        period_cap=period_cap,
    )


def compute_schedule(
    principal: float,
    periodic_rate: float,
    policy: PaymentPolicy,
    total_periods: Optional[int] = None,
    payment: Optional[float] = None,
    period_cap: int = PERIOD_CAP,
) -> AmortizationResult:
    """Build a schedule for any ``PaymentPolicy``."""
    policy = PaymentPolicy(policy)
    if policy is PaymentPolicy.FIXED_TERM:
        if total_periods is None:
            raise ValueError("total_periods is required for a fixed-term schedule")
        return compute_fixed_term_schedule(principal, periodic_rate, total_periods)
    if payment is None:
        raise ValueError("payment is required for a balance-driven schedule")
    return compute_balance_driven_schedule(principal, periodic_rate, policy, payment, period_cap)


def summarize_by_year(rows: Sequence[PeriodRow], periods_per_year: int = 12) -> List[YearSummary]:
    """Roll monthly rows up into calendar-free loan years (1, 2, ...)."""
    years: List[YearSummary] = []
    bucket: List[PeriodRow] = []
    current_year = None
    for row in rows:
        year = math.ceil(row.index / periods_per_year)
        if current_year is not None and year != current_year:
            years.append(_summarize(current_year, bucket))
            bucket = []
        current_year = year
        bucket.append(row)
    if bucket:
        years.append(_summarize(current_year, bucket))
    return years


def _summarize(year: int, rows: Sequence[PeriodRow]) -> YearSummary:
    return YearSummary(
        year=year,
        total_payment=sum(r.payment for r in rows),
        total_principal=sum(r.principal_portion for r in rows),
        total_interest=sum(r.interest_portion for r in rows),
        end_balance=rows[-1].ending_balance,
    )


__all__ = [
    "PERIOD_CAP",
    "PaymentPolicy",
    "LoanTerms",
    "PeriodRow",
    "YearSummary",
    "AmortizationResult",
    "monthly_payment",
    "compute_fixed_term_schedule",
    "amortize",
    "compute_balance_driven_schedule",
    "compute_schedule",
    "summarize_by_year",
]

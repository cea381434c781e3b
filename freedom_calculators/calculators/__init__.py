"""Financial calculators.

The ``calculators`` package holds the numeric side of the app.  Two engines
do the real work:

* ``amortization`` – fixed-term and balance-driven payment schedules.
* ``tvm`` – the five-variable time value of money solver.

Each calculator tab has a module exposing ``DEFAULT_INPUTS``,
``STORAGE_KEY``, ``validate(inputs)`` and ``calculate(inputs)``:

* ``inflation`` – purchasing power erosion.
* ``compound_interest`` – growth with monthly contributions.
* ``tvm`` – time value of money.
* ``credit_card`` – revolving balance payoff.
* ``auto_loan`` – car loan with a depreciation estimate.
* ``mortgage`` – home loan with down payment and yearly schedule.
"""

from . import amortization, tvm, inflation, compound_interest, credit_card, auto_loan, mortgage  # noqa: F401

__all__ = ["amortization", "tvm", "inflation", "compound_interest", "credit_card", "auto_loan", "mortgage"]

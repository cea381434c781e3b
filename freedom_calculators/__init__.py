"""Financial FREED-om Calculators.

A tabbed suite of personal-finance calculators: inflation, compound
interest, time value of money, credit card payoff, auto loan and mortgage,
plus an embedded RPN-12C simulator.  See ``freedom_calculators.calculators``
for the numeric engines and ``freedom_calculators.components`` for the
Streamlit widgets, charts and tables.
"""

__version__ = "1.0.0"

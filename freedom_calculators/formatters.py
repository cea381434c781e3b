"""Display formatting for dollars, percents and periods (USD, en-US)."""

from __future__ import annotations

from typing import Any, Optional

from .calculators.tvm import SolveFor, TVMResult


def format_currency(amount: float, include_decimals: bool = False) -> str:
    """``1234.56`` -> ``"$1,235"`` (or ``"$1,234.56"`` with decimals)."""
    amount = float(amount)
    if include_decimals:
        text = f"${abs(amount):,.2f}"
    else:
        text = f"${abs(amount):,.0f}"
    if amount < 0 and text.strip("$0.,") != "":
        return "-" + text
    return text


def format_number_with_commas(value: Any) -> str:
    """Format a number for an input box; blanks stay blank."""
    if value is None or value == "":
        return ""
    try:
        num = float(str(value).replace(",", ""))
    except ValueError:
        return ""
    if num.is_integer():
        return f"{int(num):,}"
    return f"{num:,}"


def format_percentage(value: Any, decimals: Optional[int] = None) -> str:
    if value is None or value == "":
        return ""
    num = float(value)
    if decimals is None:
        return f"{num:g}%"
    return f"{num:.{decimals}f}%"


def format_months(months: Optional[int], cap: Optional[int] = None) -> str:
    """``40`` -> ``"3 years, 4 months"``.  ``None`` means the cap was hit."""
    if months is None:
        if cap:
            return f"More than {cap // 12} years ({cap}+ months)"
        return "Never (payment does not cover interest)"
    years, rem = divmod(int(months), 12)
    parts = []
    if years:
        parts.append(f"{years} year{'s' if years != 1 else ''}")
    if rem or not years:
        parts.append(f"{rem} month{'s' if rem != 1 else ''}")
    return ", ".join(parts)


def format_tvm_result(result: TVMResult) -> str:
    """Render a solve as currency, a rate or a period count."""
    if not result.ok:
        return "N/A"
    if result.solve_for is SolveFor.INTEREST_RATE:
        return f"{result.value:.2f}%"
    if result.solve_for is SolveFor.PERIODS:
        return f"{result.value:.1f} periods"
    return format_currency(abs(result.value))

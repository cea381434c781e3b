# components/charts.py
# Plotly chart helpers used across the calculator tabs.
# All functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

from typing import Dict, List, Sequence

import plotly.graph_objects as go

from ..calculators.amortization import PeriodRow


def _layout(fig: go.Figure, title: str, xaxis_title: str, yaxis_title: str = "Dollars") -> go.Figure:
    fig.update_layout(
        title=title,
        template="plotly_white",
        height=380,
        margin=dict(l=10, r=10, t=40, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title=xaxis_title,
        yaxis_title=yaxis_title,
        yaxis_tickprefix="$",
        yaxis_tickformat=",.0f",
    )
    return fig


def _fit(series: Sequence[float], n: int) -> List[float]:
    arr = list(series)
    if len(arr) < n:
        arr += [0.0] * (n - len(arr))
    return arr[:n]


# ---------- Inflation ----------
def purchasing_power_chart(years: Sequence[int],
                           values: Sequence[float],
                           title: str = "Purchasing Power Over Time") -> go.Figure:
    """Filled area of what today's money is worth each year."""
    fig = go.Figure(go.Scatter(
        x=list(years), y=_fit(values, len(years)), mode="lines", fill="tozeroy",
        name="Purchasing power",
        hovertemplate="Year %{x}<br>$%{y:,.0f}<extra></extra>",
    ))
    return _layout(fig, title, "Year")


# ---------- Compound interest ----------
def compound_growth_chart(rows: Sequence[Dict[str, float]],
                          title: str = "Growth Over Time") -> go.Figure:
    """Stacked area: money put in vs. interest earned."""
    years = [r["year"] for r in rows]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=years, y=[r["contributions"] for r in rows], mode="lines", name="Contributions",
        stackgroup="one", hovertemplate="Year %{x}<br>$%{y:,.0f}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=years, y=[r["interest"] for r in rows], mode="lines", name="Interest",
        stackgroup="one", hovertemplate="Year %{x}<br>$%{y:,.0f}<extra></extra>",
    ))
    return _layout(fig, title, "Year")


# ---------- Loans / credit card ----------
def payment_breakdown_chart(rows: Sequence[PeriodRow],
                            title: str = "Payment Breakdown Over Time") -> go.Figure:
    """Stacked area of principal vs. interest in each monthly payment."""
    months = [r.index for r in rows]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=months, y=[r.principal_portion for r in rows], mode="lines", name="Principal",
        stackgroup="one", hovertemplate="Month %{x}<br>$%{y:,.2f}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=months, y=[r.interest_portion for r in rows], mode="lines", name="Interest",
        stackgroup="one", hovertemplate="Month %{x}<br>$%{y:,.2f}<extra></extra>",
    ))
    return _layout(fig, title, "Month")


def balance_chart(rows: Sequence[PeriodRow],
                  starting_balance: float,
                  title: str = "Remaining Balance") -> go.Figure:
    """Balance line from month 0 to payoff."""
    months = [0] + [r.index for r in rows]
    balances = [starting_balance] + [r.ending_balance for r in rows]
    fig = go.Figure(go.Scatter(
        x=months, y=balances, mode="lines", name="Balance",
        hovertemplate="Month %{x}<br>$%{y:,.0f}<extra></extra>",
    ))
    return _layout(fig, title, "Month")


# ---------- Time value of money ----------
def tvm_growth_chart(points: Sequence[Dict[str, float]],
                     title: str = "Growth of Principal and Interest") -> go.Figure:
    """Stacked area of principal paid in vs. interest accumulated per period."""
    periods = [p["period"] for p in points]
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=periods, y=[p["principal"] for p in points], mode="lines", name="Principal",
        stackgroup="one", hovertemplate="Period %{x}<br>$%{y:,.0f}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=periods, y=[p["interest"] for p in points], mode="lines", name="Interest",
        stackgroup="one", hovertemplate="Period %{x}<br>$%{y:,.0f}<extra></extra>",
    ))
    return _layout(fig, title, "Period")

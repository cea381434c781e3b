# components/forms.py
# One input form per calculator tab. Each returns a plain inputs dict that the
# matching calculator module validates and calculates.
import streamlit as st

from ..calculators import compound_interest, credit_card, tvm

# Stable widget keys so stored inputs can be pushed back into the widgets
WIDGET_KEYS = {
    "inflation": {
        "current_amount": "in_infl_amount",
        "inflation_rate": "in_infl_rate",
        "years": "in_infl_years",
    },
    "compound": {
        "principal": "in_ci_principal",
        "annual_rate": "in_ci_rate",
        "years": "in_ci_years",
        "monthly_contribution": "in_ci_contrib",
        "compounds_per_year": "in_ci_compounds",
    },
    "tvm": {
        "periods": "in_tvm_n",
        "interest_rate": "in_tvm_rate",
        "present_value": "in_tvm_pv",
        "payment": "in_tvm_pmt",
        "future_value": "in_tvm_fv",
        "solve_for": "in_tvm_solve_for",
    },
    "credit_card": {
        "balance": "in_cc_balance",
        "apr": "in_cc_apr",
        "payment_type": "in_cc_payment_type",
        "fixed_payment": "in_cc_fixed",
        "minimum_payment": "in_cc_minimum",
    },
    "auto_loan": {
        "loan_amount": "in_auto_amount",
        "interest_rate": "in_auto_rate",
        "loan_term": "in_auto_term",
    },
    "mortgage": {
        "home_price": "in_mtg_price",
        "down_payment_percent": "in_mtg_down",
        "interest_rate": "in_mtg_rate",
        "loan_term": "in_mtg_term",
    },
}


def _d(form, key, fallback):
    return st.session_state.get("form_defaults", {}).get(form, {}).get(key, fallback)


def _clamp(value, lo=None, hi=None):
    # widgets refuse a starting value outside their bounds
    if lo is not None:
        value = max(lo, value)
    if hi is not None:
        value = min(hi, value)
    return value


def _money(form, key, label, fallback, help=None, min_value=None, disabled=False):
    return st.number_input(
        label,
        min_value=min_value,
        value=_clamp(float(_d(form, key, fallback)), min_value),
        step=100.0,
        format="%.2f",
        key=WIDGET_KEYS[form][key],
        help=help,
        disabled=disabled,
    )


def _pct(form, key, label, fallback, help=None, min_value=None, disabled=False):
    return st.number_input(
        label,
        min_value=min_value,
        value=_clamp(float(_d(form, key, fallback)), min_value),
        step=0.25,
        format="%.2f",
        key=WIDGET_KEYS[form][key],
        help=help,
        disabled=disabled,
    )


def reset_widgets(form):
    """Drop widget state so the next run rebuilds from ``form_defaults``."""
    for widget_key in WIDGET_KEYS[form].values():
        st.session_state.pop(widget_key, None)


def inflation_form(defaults):
    f = "inflation"
    current_amount = _money(f, "current_amount", "Current amount ($)", defaults["current_amount"],
                            help="Money you have today.")
    inflation_rate = _pct(f, "inflation_rate", "Annual inflation rate (%)", defaults["inflation_rate"],
                          help="Long-run US inflation has averaged roughly 3%.")
    years = st.number_input("Number of years", min_value=0, max_value=100,
                            value=_clamp(int(_d(f, "years", defaults["years"])), 0, 100), step=1,
                            key=WIDGET_KEYS[f]["years"])
    return {
        "current_amount": float(current_amount),
        "inflation_rate": float(inflation_rate),
        "years": int(years),
    }


def compound_interest_form(defaults):
    f = "compound"
    principal = _money(f, "principal", "Initial investment ($)", defaults["principal"], min_value=0.0)
    monthly_contribution = _money(f, "monthly_contribution", "Monthly contribution ($)",
                                  defaults["monthly_contribution"], min_value=0.0,
                                  help="Added at the end of every month.")
    annual_rate = _pct(f, "annual_rate", "Annual interest rate (%)", defaults["annual_rate"], min_value=0.0)
    years = st.number_input("Years to grow", min_value=1, max_value=100,
                            value=_clamp(int(_d(f, "years", defaults["years"])), 1, 100), step=1,
                            key=WIDGET_KEYS[f]["years"])
    options = list(compound_interest.COMPOUNDING_OPTIONS)
    current = int(_d(f, "compounds_per_year", defaults["compounds_per_year"]))
    compounds = st.selectbox(
        "Compounding",
        options,
        index=options.index(current) if current in options else options.index(12),
        format_func=compound_interest.COMPOUNDING_OPTIONS.get,
        key=WIDGET_KEYS[f]["compounds_per_year"],
    )
    return {
        "principal": float(principal),
        "annual_rate": float(annual_rate),
        "years": int(years),
        "monthly_contribution": float(monthly_contribution),
        "compounds_per_year": int(compounds),
    }


def tvm_form(defaults):
    f = "tvm"
    options = [s.value for s in tvm.SolveFor]
    current = _d(f, "solve_for", defaults["solve_for"])
    solve_for = st.radio(
        "Solve for",
        options,
        index=options.index(current) if current in options else options.index("future_value"),
        format_func=lambda v: tvm.SolveFor(v).label,
        horizontal=True,
        key=WIDGET_KEYS[f]["solve_for"],
    )
    st.caption("Money you pay out is negative; money you receive is positive.")
    c1, c2 = st.columns(2)
    with c1:
        periods = st.number_input("Periods (N)", value=float(_d(f, "periods", defaults["periods"])),
                                  step=1.0, key=WIDGET_KEYS[f]["periods"],
                                  disabled=solve_for == "periods")
        interest_rate = _pct(f, "interest_rate", "Interest rate per period (%)", defaults["interest_rate"],
                             disabled=solve_for == "interest_rate")
        present_value = _money(f, "present_value", "Present value (PV)", defaults["present_value"],
                               disabled=solve_for == "present_value")
    with c2:
        payment = _money(f, "payment", "Payment (PMT)", defaults["payment"],
                         disabled=solve_for == "payment")
        future_value = _money(f, "future_value", "Future value (FV)", defaults["future_value"],
                              disabled=solve_for == "future_value")
    return {
        "periods": float(periods),
        "interest_rate": float(interest_rate),
        "present_value": float(present_value),
        "payment": float(payment),
        "future_value": float(future_value),
        "solve_for": solve_for,
    }


def credit_card_form(defaults):
    f = "credit_card"
    balance = _money(f, "balance", "Card balance ($)", defaults["balance"])
    apr = _pct(f, "apr", "APR (%)", defaults["apr"], help="Annual percentage rate on the card.")
    options = list(credit_card.PAYMENT_TYPES)
    current = _d(f, "payment_type", defaults["payment_type"])
    payment_type = st.radio(
        "Payment method",
        options,
        index=options.index(current) if current in options else 0,
        format_func=credit_card.PAYMENT_TYPES.get,
        horizontal=True,
        key=WIDGET_KEYS[f]["payment_type"],
    )
    fixed_payment = _money(f, "fixed_payment", "Fixed monthly payment ($)", defaults["fixed_payment"],
                           disabled=payment_type != "fixed")
    minimum_payment = _money(f, "minimum_payment", "Minimum payment floor ($)", defaults["minimum_payment"],
                             help="Issuers never ask for less than this, even on small balances.",
                             disabled=payment_type != "minimum")
    return {
        "balance": float(balance),
        "apr": float(apr),
        "payment_type": payment_type,
        "fixed_payment": float(fixed_payment),
        "minimum_payment": float(minimum_payment),
    }


def auto_loan_form(defaults):
    f = "auto_loan"
    loan_amount = _money(f, "loan_amount", "Loan amount ($)", defaults["loan_amount"])
    interest_rate = _pct(f, "interest_rate", "Interest rate (%)", defaults["interest_rate"])
    loan_term = st.number_input("Loan term (years)", value=float(_d(f, "loan_term", defaults["loan_term"])),
                                step=1.0, key=WIDGET_KEYS[f]["loan_term"])
    return {
        "loan_amount": float(loan_amount),
        "interest_rate": float(interest_rate),
        "loan_term": float(loan_term),
    }


def mortgage_form(defaults):
    f = "mortgage"
    home_price = _money(f, "home_price", "Home price ($)", defaults["home_price"])
    down_payment_percent = _pct(f, "down_payment_percent", "Down payment (%)", defaults["down_payment_percent"],
                                help="20% down avoids private mortgage insurance on most loans.")
    interest_rate = _pct(f, "interest_rate", "Interest rate (%)", defaults["interest_rate"])
    terms = [10, 15, 20, 30]
    current = int(_d(f, "loan_term", defaults["loan_term"]))
    loan_term = st.selectbox(
        "Loan term (years)",
        terms,
        index=terms.index(current) if current in terms else terms.index(30),
        key=WIDGET_KEYS[f]["loan_term"],
    )
    return {
        "home_price": float(home_price),
        "down_payment_percent": float(down_payment_percent),
        "interest_rate": float(interest_rate),
        "loan_term": int(loan_term),
    }

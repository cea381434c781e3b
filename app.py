# app.py
import logging

import streamlit as st
import streamlit.components.v1 as components

from freedom_calculators.calculators import (
    auto_loan,
    compound_interest,
    credit_card,
    inflation,
    mortgage,
    tvm,
)
from freedom_calculators.components.charts import (
    balance_chart,
    compound_growth_chart,
    payment_breakdown_chart,
    purchasing_power_chart,
    tvm_growth_chart,
)
from freedom_calculators.components.forms import (
    auto_loan_form,
    compound_interest_form,
    credit_card_form,
    inflation_form,
    mortgage_form,
    reset_widgets,
    tvm_form,
)
from freedom_calculators.components.tables import (
    build_pdf,
    frame_to_csv,
    growth_frame,
    money_format,
    schedule_frame,
    yearly_frame,
)
from freedom_calculators.config import settings
from freedom_calculators.exceptions import InvalidInputError
from freedom_calculators.formatters import (
    format_currency,
    format_months,
    format_percentage,
    format_tvm_result,
)
from freedom_calculators.logging_config import setup_logging
from freedom_calculators.storage import CalculatorStore
from freedom_calculators.validation import require_valid

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


# ---------- Page config ----------
st.set_page_config(
    page_title=settings.app_title,
    page_icon="💵",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# Hide Streamlit's default menu and footer
HIDE_STREAMLIT_STYLE = """
    <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
    </style>
"""
st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)

st.markdown(
    """
<style>
.block-container {
    padding: 1.5rem 2rem;
    max-width: 1400px;
    margin: auto;
}

/* Cards for metrics and charts */
div[data-testid="stMetric"] {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 1rem;
    box-shadow: 0 2px 8px rgba(0,0,0,0.05);
    border: 1px solid #E6ECE9;
}
div.stPlotlyChart {
    background: #FFFFFF;
    border-radius: 12px;
    padding: 0.75rem;
    border: 1px solid #E6ECE9;
    box-shadow: 0 2px 8px rgba(0,0,0,0.05);
}

/* Buttons */
button[kind="primary"] {
    background-color: #18453B;
    color: #FFFFFF;
    border-radius: 8px;
    font-weight: 500;
    border: none;
}
button[kind="primary"]:hover {
    background-color: #2E6B5E;
}

h1, h2, h3, h4 {
    color: #1A2521;
    font-weight: 600;
}

div[data-testid="stDataFrame"] {
    border-radius: 12px;
    overflow: hidden;
    box-shadow: 0 2px 8px rgba(0,0,0,0.05);
}

@media (max-width: 600px) {
    .block-container {
        padding: 1rem;
    }
    div.stPlotlyChart {
        padding: 0.5rem 0;
    }
}
</style>
""",
    unsafe_allow_html=True,
)

# ---------- Session boot ----------
st.session_state.setdefault("form_defaults", {})   # form -> last stored inputs
st.session_state.setdefault("results", {})         # form -> calculate() output

store = CalculatorStore(settings.storage_dir)


def _prepare(form, module):
    """Load stored inputs for ``form`` once per session."""
    if form not in st.session_state["form_defaults"]:
        st.session_state["form_defaults"][form] = store.load(module.STORAGE_KEY, module.DEFAULT_INPUTS)
    return module.DEFAULT_INPUTS


def _reset(form, module):
    store.clear(module.STORAGE_KEY)
    reset_widgets(form)
    st.session_state["form_defaults"][form] = dict(module.DEFAULT_INPUTS)
    st.session_state["results"].pop(form, None)


def _run(form, module, inputs, **kwargs):
    """Validate, persist and calculate; returns the result dict or None."""
    try:
        require_valid(module.validate(inputs))
    except InvalidInputError as exc:
        st.session_state["results"].pop(form, None)
        logger.info("input rejected", extra={"calculator": form, "reason": exc.message})
        st.error(exc.message)
        return None
    store.save(module.STORAGE_KEY, inputs)
    st.session_state["form_defaults"][form] = dict(inputs)
    result = module.calculate(inputs, **kwargs)
    logger.info("calculated", extra={"calculator": form})
    st.session_state["results"][form] = result
    return result


def _controls(form, module, inputs, **kwargs):
    """Calculate / Reset buttons. Calculates on first visit as well."""
    c1, c2, _ = st.columns([1, 1, 4])
    clicked = c1.button("Calculate", type="primary", key=f"calc_{form}")
    c2.button("Reset to defaults", key=f"reset_{form}", on_click=_reset, args=(form, module))
    if clicked or form not in st.session_state["results"]:
        return _run(form, module, inputs, **kwargs)
    return st.session_state["results"][form]


def _downloads(form, title, inputs, summary, frame):
    d1, d2, _ = st.columns([1, 1, 4])
    d1.download_button(
        "⬇️ CSV",
        data=frame_to_csv(frame),
        file_name=f"{form}.csv",
        mime="text/csv",
        key=f"csv_{form}",
    )
    d2.download_button(
        "⬇️ PDF report",
        data=build_pdf(title, inputs, summary, frame),
        file_name=f"{form}.pdf",
        mime="application/pdf",
        key=f"pdf_{form}",
    )


def _lesson(text):
    st.info(f"**Key lesson:** {text}")


FORMS = {
    "inflation": inflation,
    "compound": compound_interest,
    "tvm": tvm,
    "credit_card": credit_card,
    "auto_loan": auto_loan,
    "mortgage": mortgage,
}


def _forget_all():
    for key in store.keys():
        store.clear(key)
    for form, module in FORMS.items():
        reset_widgets(form)
        st.session_state["form_defaults"][form] = dict(module.DEFAULT_INPUTS)
    st.session_state["results"].clear()
    logger.info("cleared all saved inputs")


# ====== SIDEBAR ======
with st.sidebar:
    st.header("Saved inputs")
    saved = store.keys()
    if saved:
        st.caption("Inputs are remembered for: " + ", ".join(saved))
    else:
        st.caption("Nothing saved yet. Inputs are remembered after each calculation.")
    st.button("Forget all saved inputs", on_click=_forget_all, disabled=not saved, key="forget_all")


# ====== HEADER ======
st.title(settings.app_title)
st.caption("Seven hands-on calculators for Financial Responsibility, Education, Economic Development and Opportunity.")

tabs = st.tabs([
    "Inflation",
    "Compound Interest",
    "Time Value of Money",
    "Credit Card",
    "Auto Loan",
    "Mortgage",
    "RPN-12C",
])

# ====== INFLATION ======
with tabs[0]:
    st.subheader("Inflation Calculator")
    st.caption("See how rising prices quietly shrink what your money can buy.")
    defaults = _prepare("inflation", inflation)
    inputs = inflation_form(defaults)
    res = _controls("inflation", inflation, inputs)
    if res:
        m1, m2, m3 = st.columns(3)
        m1.metric("Needed in the future", format_currency(res["future_nominal"]))
        m2.metric("Real purchasing power", format_currency(res["real_purchasing_power"]))
        m3.metric("Purchasing power lost", format_currency(res["power_lost"]),
                  delta=f"-{format_percentage(res['percentage_lost'], 1)}", delta_color="inverse")
        st.markdown(
            f"In {inputs['years']} years you would need **{format_currency(res['future_nominal'])}** to buy what "
            f"**{format_currency(inputs['current_amount'])}** buys today. Left in cash, today's money would "
            f"only buy **{format_currency(res['real_purchasing_power'])}** worth of goods."
        )
        st.plotly_chart(purchasing_power_chart(res["years"], res["purchasing_power"]), use_container_width=True)
        _lesson("Cash sitting still loses value every year. Savings need to earn at least the inflation rate "
                "just to stay even.")

# ====== COMPOUND INTEREST ======
with tabs[1]:
    st.subheader("Compound Interest Calculator")
    st.caption("Interest that earns interest: the engine behind long-term saving.")
    defaults = _prepare("compound", compound_interest)
    inputs = compound_interest_form(defaults)
    res = _controls("compound", compound_interest, inputs)
    if res:
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Final balance", format_currency(res["final_balance"]))
        m2.metric("You contributed", format_currency(res["total_contributions"]))
        m3.metric("Interest earned", format_currency(res["total_interest"]))
        m4.metric("Effective annual rate", format_percentage(res["effective_annual_rate"], 2))
        if res["doubling_years"]:
            st.markdown(f"By the rule of 72 your money doubles roughly every **{res['doubling_years']:.1f} years**.")
        st.plotly_chart(compound_growth_chart(res["rows"]), use_container_width=True)
        df = growth_frame(res["rows"])
        st.dataframe(df.style.format(money_format(df)), use_container_width=True, height=350, hide_index=True)
        _downloads("compound", "Compound Interest Report", inputs, {
            "Final balance": format_currency(res["final_balance"], include_decimals=True),
            "Total contributions": format_currency(res["total_contributions"], include_decimals=True),
            "Interest earned": format_currency(res["total_interest"], include_decimals=True),
        }, df)
        _lesson("Time matters more than timing. Starting ten years earlier can double the ending balance.")

# ====== TIME VALUE OF MONEY ======
with tabs[2]:
    st.subheader("Time Value of Money")
    st.caption("Enter any four of N, rate, PV, PMT and FV to solve for the fifth.")
    defaults = _prepare("tvm", tvm)
    inputs = tvm_form(defaults)
    res = _controls("tvm", tvm, inputs,
                    tolerance=settings.newton_tolerance, max_iterations=settings.newton_max_iterations)
    if res:
        result = res["result"]
        if not result.ok:
            st.error(result.error)
        else:
            st.metric(result.solve_for.label, format_tvm_result(result))
            if res["chart"]:
                st.plotly_chart(tvm_growth_chart(res["chart"]), use_container_width=True)
                if len(res["chart"]) - 1 == tvm.CHART_PERIOD_CAP:
                    st.caption(f"Chart shows the first {tvm.CHART_PERIOD_CAP} periods.")
        _lesson("A dollar today is worth more than a dollar tomorrow because today's dollar can be invested.")

# ====== CREDIT CARD ======
with tabs[3]:
    st.subheader("Credit Card Payoff")
    st.caption("How long a balance lingers, and what it costs, depending on how much you pay.")
    defaults = _prepare("credit_card", credit_card)
    inputs = credit_card_form(defaults)
    res = _controls("credit_card", credit_card, inputs, period_cap=settings.period_cap)
    if res:
        m1, m2, m3 = st.columns(3)
        m1.metric("Time to pay off", format_months(res["months_to_payoff"], res["period_cap"]))
        m2.metric("Total interest", format_currency(res["total_interest"]))
        m3.metric("Total paid", format_currency(res["total_paid"]))
        if not res["paid_off"]:
            st.warning(
                f"This payment never retires the balance within {res['period_cap']} months. "
                f"{format_currency(res['remaining_balance'])} is still owed at the end."
            )
        schedule = res["schedule"]
        c1, c2 = st.columns(2)
        with c1:
            st.plotly_chart(payment_breakdown_chart(schedule.rows), use_container_width=True)
        with c2:
            st.plotly_chart(balance_chart(schedule.rows, inputs["balance"]), use_container_width=True)
        monthly, yearly = st.tabs(["Monthly schedule", "Yearly summary"])
        df = schedule_frame(schedule.rows)
        with monthly:
            st.dataframe(df.style.format(money_format(df)), use_container_width=True, height=350, hide_index=True)
        with yearly:
            ydf = yearly_frame(res["yearly"])
            st.dataframe(ydf.style.format(money_format(ydf)), use_container_width=True, height=350, hide_index=True)
        _downloads("credit_card", "Credit Card Payoff Report", inputs, {
            "Time to pay off": format_months(res["months_to_payoff"], res["period_cap"]),
            "Total interest": format_currency(res["total_interest"], include_decimals=True),
            "Total paid": format_currency(res["total_paid"], include_decimals=True),
        }, df)
        _lesson("Minimum payments shrink as the balance shrinks, so most of each one goes to interest. "
                "A fixed payment above the minimum cuts years off the debt.")

# ====== AUTO LOAN ======
with tabs[4]:
    st.subheader("Auto Loan Calculator")
    st.caption("The real cost of financing a car, and what it is worth when the loan is done.")
    defaults = _prepare("auto_loan", auto_loan)
    inputs = auto_loan_form(defaults)
    res = _controls("auto_loan", auto_loan, inputs)
    if res:
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Monthly payment", format_currency(res["monthly_payment"], include_decimals=True))
        m2.metric("Total interest", format_currency(res["total_interest"]))
        m3.metric("Total paid", format_currency(res["total_paid"]))
        m4.metric("Estimated car value at payoff", format_currency(res["estimated_value"]))
        st.markdown(
            f"Interest adds **{format_percentage(res['interest_share_pct'], 1)}** to the price of the car. "
            f"After {format_months(res['terms'].total_periods)} the car may be worth about "
            f"**{format_currency(res['estimated_value'])}**."
        )
        schedule = res["schedule"]
        c1, c2 = st.columns(2)
        with c1:
            st.plotly_chart(payment_breakdown_chart(schedule.rows), use_container_width=True)
        with c2:
            st.plotly_chart(balance_chart(schedule.rows, res["terms"].principal), use_container_width=True)
        df = schedule_frame(schedule.rows)
        st.dataframe(df.style.format(money_format(df)), use_container_width=True, height=350, hide_index=True)
        _downloads("auto_loan", "Auto Loan Report", inputs, {
            "Monthly payment": format_currency(res["monthly_payment"], include_decimals=True),
            "Total interest": format_currency(res["total_interest"], include_decimals=True),
            "Total paid": format_currency(res["total_paid"], include_decimals=True),
            "Estimated value": format_currency(res["estimated_value"]),
        }, df)
        _lesson("Cars lose value while you pay interest on them. Shorter terms and bigger down payments "
                "keep you from owing more than the car is worth.")

# ====== MORTGAGE ======
with tabs[5]:
    st.subheader("Mortgage Calculator")
    st.caption("Monthly payment, total interest and how the balance falls year by year.")
    defaults = _prepare("mortgage", mortgage)
    inputs = mortgage_form(defaults)
    res = _controls("mortgage", mortgage, inputs)
    if res:
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Monthly payment", format_currency(res["monthly_payment"], include_decimals=True))
        m2.metric("Loan amount", format_currency(res["loan_amount"]))
        m3.metric("Total interest", format_currency(res["total_interest"]))
        m4.metric("Total paid", format_currency(res["total_paid"]))
        st.markdown(
            f"A {format_currency(res['down_payment_amount'])} down payment leaves "
            f"{format_currency(res['loan_amount'])} to borrow. Over {inputs['loan_term']} years you pay "
            f"**{format_currency(res['total_interest'])}** in interest."
        )
        schedule = res["schedule"]
        c1, c2 = st.columns(2)
        with c1:
            st.plotly_chart(payment_breakdown_chart(schedule.rows), use_container_width=True)
        with c2:
            st.plotly_chart(balance_chart(schedule.rows, res["loan_amount"]), use_container_width=True)
        yearly, monthly = st.tabs(["Yearly schedule", "Monthly schedule"])
        ydf = yearly_frame(res["yearly"])
        with yearly:
            st.dataframe(ydf.style.format(money_format(ydf)), use_container_width=True, height=350, hide_index=True)
        with monthly:
            df = schedule_frame(schedule.rows)
            st.dataframe(df.style.format(money_format(df)), use_container_width=True, height=350, hide_index=True)
        _downloads("mortgage", "Mortgage Report", inputs, {
            "Down payment": format_currency(res["down_payment_amount"], include_decimals=True),
            "Loan amount": format_currency(res["loan_amount"], include_decimals=True),
            "Monthly payment": format_currency(res["monthly_payment"], include_decimals=True),
            "Total interest": format_currency(res["total_interest"], include_decimals=True),
        }, ydf)
        _lesson("Early payments are mostly interest. Extra principal in the first years saves the most.")

# ====== RPN-12C ======
with tabs[6]:
    st.subheader("RPN-12C Financial Calculator")
    st.caption("A web version of the classic reverse Polish notation business calculator.")
    st.link_button("Open in new tab", settings.rpn_calculator_url)
    components.iframe(settings.rpn_calculator_url, height=1000, scrolling=True)

# streamlit_app.py
import logging
import os
import sys

import streamlit as st

# `streamlit run` only puts this file's directory on sys.path; the packages live one level up.
CODE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if CODE_ROOT not in sys.path:
    sys.path.insert(0, CODE_ROOT)

from inhand.api.salary_client import api_base, check_salary_service_online
from inhand.core.controller import Failed, RequestController, Succeeded
from inhand.core.form import InputForm
from inhand.core.interpreter import RenderPlan, interpret
from inhand.core.models import BreakdownResult, MismatchResult
from payroll.currency import format_inr, format_lpa, lpa_to_monthly
from payroll.deductions import total_deductions

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="CTC to In-Hand Calculator", page_icon="💰", layout="wide")
st.title("💰 CTC to In-Hand Calculator")
st.caption("Calculate your detailed monthly salary breakdown with all deductions")

if "controller" not in st.session_state:
    st.session_state.controller = RequestController()
    st.session_state.form = InputForm()

controller: RequestController = st.session_state.controller
form: InputForm = st.session_state.form

with st.sidebar:
    st.header("Salary service")
    st.caption(api_base())
    if check_salary_service_online():
        st.success("Online")
    else:
        st.warning("Unreachable. Start the backend server before calculating.")


def _identity_row(result, ctc_label: str):
    cols = st.columns(4)
    for col, (label, value) in zip(
        cols,
        (("Company", result.company), ("Position", result.position), (ctc_label, result.ctc), ("Location", result.location)),
    ):
        col.markdown(f"**{label}:**  \n{value}")


def render_mismatch(result: MismatchResult):
    st.subheader("⚠️ Reality Check Failed")
    _identity_row(result, "CTC")
    st.warning(result.analysis)


def render_research(result: BreakdownResult):
    findings = result.research_findings
    st.subheader("💼 Compensation Research")
    _identity_row(result, "Total CTC")
    st.markdown("#### 🔍 Research Findings")
    st.info(findings.company_policy)
    cols = st.columns(3)
    for col, (label, lpa, suffix) in zip(
        cols,
        (
            ("Estimated Base Salary (Cash)", findings.estimated_base_salary, ""),
            ("Stock Component (RSU)", findings.estimated_stock_component, " (vested annually)"),
            ("Year-end Bonus", findings.estimated_bonus, ""),
        ),
    ):
        col.metric(label, format_inr(lpa_to_monthly(lpa)))
        col.caption(f"{format_lpa(lpa)}{suffix}")


def render_breakdown(result: BreakdownResult, plan: RenderPlan):
    breakdown = result.monthly_breakdown
    st.markdown("### 💵 Monthly Cash Breakdown")
    st.metric("Gross Monthly Cash (Base Salary / 12)", format_inr(breakdown.gross_monthly_cash))

    st.markdown("### 📉 Monthly Deductions")
    lines = ["| Deduction | Amount |", "| --- | ---: |"]
    for row in plan.deduction_rows:
        lines.append(f"| {row.label} | {format_inr(row.amount)} |")
    lines.append(f"| **Total Deductions** | **{format_inr(total_deductions(breakdown.deductions))}** |")
    st.markdown("\n".join(lines))

    st.success(f"✨ Final Monthly In-Hand Salary: **{format_inr(breakdown.final_in_hand_salary)}**")
    st.caption("* Based on Base Salary only. Stock components and bonuses are paid separately.")


def render_result(state: Succeeded):
    result = state.result
    plan = interpret(result)
    if plan.mismatch:
        render_mismatch(result)
        return
    if plan.research:
        render_research(result)
    if plan.breakdown:
        render_breakdown(result, plan)
    if plan.notes:
        st.warning(result.notes)


with st.form("salary_form"):
    left, right = st.columns(2)
    company = left.text_input("Company Name *", value=form.values["company"], key="company", placeholder="e.g., TCS, Amazon, Google")
    position = right.text_input(
        "Job Role/Position *", value=form.values["position"], key="position", placeholder="e.g., SDE 1, Associate, Analyst"
    )
    ctc = left.text_input("Annual CTC *", value=form.values["ctc"], key="ctc", placeholder="e.g., 15,00,000 or 15 LPA")
    location = right.text_input(
        "Work Location *", value=form.values["location"], key="location", placeholder="e.g., Bangalore, Mumbai, Delhi"
    )
    submitted = st.form_submit_button("Calculate Salary Breakdown", use_container_width=True)

if submitted:
    for field, value in (("company", company), ("position", position), ("ctc", ctc), ("location", location)):
        form.update(field, value)
    with st.spinner("Calculating..."):
        controller.submit(form)

state = controller.state
if isinstance(state, Failed):
    st.error(f"❌ {state.message}")
elif isinstance(state, Succeeded):
    render_result(state)

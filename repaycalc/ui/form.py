import streamlit as st

from repaycalc.models import MortgageType, ValidationOutcome
from repaycalc.presets import CURRENCY_SYMBOL, FIELD_LABELS, MORTGAGE_TYPE_LABELS
from repaycalc.rules import field_errors
from repaycalc.state import ERRORS_KEY, clear_all, clear_field_error, submit_form
from repaycalc.utils import format_number_with_commas, sanitize_amount


def _reformat_amount():
    st.session_state["mortgage_amount"] = format_number_with_commas(
        sanitize_amount(st.session_state.get("mortgage_amount", ""))
    )
    clear_field_error("amount")


def _field_error(field: str, errors: dict):
    if field in errors:
        st.error(errors[field].message)


def render_mortgage_form():
    """Loan inputs, mortgage type selector and the calculate / clear actions."""
    flagged = st.session_state.get(ERRORS_KEY, [])
    errors = field_errors(
        ValidationOutcome(
            amount_invalid="amount" in flagged,
            term_invalid="term" in flagged,
            rate_invalid="rate" in flagged,
        )
    )

    head, clear = st.columns([3, 1])
    head.subheader("Mortgage Calculator")
    clear.button("Clear All", key="clear_all", on_click=clear_all)

    st.text_input(
        f"{FIELD_LABELS['amount']} ({CURRENCY_SYMBOL})",
        key="mortgage_amount",
        on_change=_reformat_amount,
    )
    _field_error("amount", errors)

    left, right = st.columns(2)
    with left:
        st.text_input(
            f"{FIELD_LABELS['term']} (Years)",
            key="mortgage_term",
            on_change=clear_field_error,
            args=("term",),
        )
        _field_error("term", errors)
    with right:
        st.text_input(
            f"{FIELD_LABELS['rate']} (%)",
            key="interest_rate",
            on_change=clear_field_error,
            args=("rate",),
        )
        _field_error("rate", errors)

    st.radio(
        "Mortgage Type",
        [t.value for t in MortgageType],
        format_func=lambda v: MORTGAGE_TYPE_LABELS[MortgageType(v)],
        key="mortgage_type",
    )
    st.button("Calculate Repayments", key="calculate", type="primary", on_click=submit_form)

import streamlit as st

from repaycalc import state


def _fill(amount, term, rate, mortgage_type="repayment"):
    st.session_state.clear()
    state.init_form_state()
    st.session_state["mortgage_amount"] = amount
    st.session_state["mortgage_term"] = term
    st.session_state["interest_rate"] = rate
    st.session_state["mortgage_type"] = mortgage_type


def test_init_form_state_keeps_existing_values():
    st.session_state.clear()
    st.session_state["mortgage_term"] = "30"
    state.init_form_state()
    assert st.session_state["mortgage_term"] == "30"
    assert st.session_state["mortgage_type"] == "repayment"
    assert st.session_state[state.RESULT_KEY] is None


def test_submit_stores_result_from_formatted_amount():
    _fill("£200,000", "25", "5")
    res = state.submit_form()
    assert res.monthly_payment == 1169.18
    stored = st.session_state[state.RESULT_KEY]
    assert stored["monthly_payment"] == 1169.18
    assert stored["principal"] == 200000.0
    assert st.session_state[state.ERRORS_KEY] == []


def test_submit_interest_only():
    _fill("200000", "25", "5", "interestOnly")
    res = state.submit_form()
    assert res.total_repayment == 450000.00
    assert st.session_state[state.RESULT_KEY]["mortgage_type"] == "interestOnly"


def test_invalid_submit_drops_previous_result():
    _fill("200000", "25", "5")
    state.submit_form()
    st.session_state["mortgage_amount"] = "0"
    st.session_state["interest_rate"] = "-1"
    assert state.submit_form() is None
    assert st.session_state[state.RESULT_KEY] is None
    assert st.session_state[state.ERRORS_KEY] == ["amount", "rate"]


def test_clear_field_error_only_removes_that_field():
    _fill("", "", "")
    state.submit_form()
    state.clear_field_error("term")
    assert st.session_state[state.ERRORS_KEY] == ["amount", "rate"]


def test_clear_all_resets_everything():
    _fill("200000", "25", "5", "interestOnly")
    state.submit_form()
    state.clear_all()
    assert st.session_state["mortgage_amount"] == ""
    assert st.session_state["mortgage_term"] == ""
    assert st.session_state["interest_rate"] == ""
    assert st.session_state["mortgage_type"] == "repayment"
    assert st.session_state[state.RESULT_KEY] is None
    assert st.session_state[state.ERRORS_KEY] == []

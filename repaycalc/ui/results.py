import streamlit as st

from repaycalc.calculator import compare_mortgage_types
from repaycalc.presets import EMPTY_RESULTS_MESSAGE, RESULTS_INTRO
from repaycalc.state import RESULT_KEY
from repaycalc.utils import format_money


def render_results():
    """Results panel; shows the empty state until a valid calculation exists."""
    res = st.session_state.get(RESULT_KEY)
    if not res:
        st.subheader("Results shown here")
        st.caption(EMPTY_RESULTS_MESSAGE)
        return

    st.subheader("Your results")
    st.caption(RESULTS_INTRO)
    st.metric("Your monthly repayments", format_money(res["monthly_payment"]))
    st.metric("Total you'll repay over the term", format_money(res["total_repayment"]))

    with st.expander("Compare mortgage types"):
        df = compare_mortgage_types(res["principal"], res["annual_rate_pct"], res["term_years"])
        for col in ["Monthly Payment", "Total Repayment", "Total Interest"]:
            df[col] = df[col].map(format_money)
        st.table(df.set_index("Mortgage Type"))

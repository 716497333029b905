import logging

import streamlit as st

from repaycalc import __version__
from repaycalc.state import init_form_state
from repaycalc.ui.form import render_mortgage_form
from repaycalc.ui.results import render_results

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Mortgage Repayment Calculator", layout="wide")


def render_calculator():
    """Form on the left, results panel on the right."""
    init_form_state()
    form_col, results_col = st.columns(2)
    with form_col:
        render_mortgage_form()
    with results_col:
        render_results()


render_calculator()
st.caption(f"repaycalc v{__version__}")

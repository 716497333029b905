import logging
from typing import Optional

import streamlit as st

from repaycalc.calculator import calculate, parse_number, validate
from repaycalc.models import LoanResult, MortgageType
from repaycalc.presets import FORM_DEFAULTS
from repaycalc.utils import sanitize_amount

logger = logging.getLogger(__name__)

# Keys owned by the calculator form. Widget keys double as field values so
# ``clear_all`` resets the widgets as well.
RESULT_KEY = "calc_result"
ERRORS_KEY = "calc_errors"


def init_form_state() -> None:
    """Seed form fields and result slots without touching existing values."""
    for key, val in FORM_DEFAULTS.items():
        st.session_state.setdefault(key, val)
    st.session_state.setdefault(RESULT_KEY, None)
    st.session_state.setdefault(ERRORS_KEY, [])


def clear_all() -> None:
    """Reset every field to its default and drop results and error flags."""
    for key, val in FORM_DEFAULTS.items():
        st.session_state[key] = val
    st.session_state[RESULT_KEY] = None
    st.session_state[ERRORS_KEY] = []
    logger.info("form cleared")


def clear_field_error(field: str) -> None:
    """Hide one field's message once the user edits that field."""
    errors = st.session_state.get(ERRORS_KEY, [])
    st.session_state[ERRORS_KEY] = [f for f in errors if f != field]


def submit_form() -> Optional[LoanResult]:
    """Validate the current fields and store either a result or the error flags."""
    amount = sanitize_amount(st.session_state.get("mortgage_amount", ""))
    term = st.session_state.get("mortgage_term", "")
    rate = st.session_state.get("interest_rate", "")
    outcome = validate(amount, term, rate)
    if not outcome.is_valid:
        st.session_state[RESULT_KEY] = None
        st.session_state[ERRORS_KEY] = outcome.invalid_fields()
        logger.info("calculation rejected: invalid %s", ", ".join(outcome.invalid_fields()))
        return None

    mortgage_type = MortgageType(st.session_state.get("mortgage_type", MortgageType.REPAYMENT.value))
    result = calculate(parse_number(amount), parse_number(rate), parse_number(term), mortgage_type)
    st.session_state[RESULT_KEY] = {
        **result.model_dump(),
        "principal": parse_number(amount),
        "annual_rate_pct": parse_number(rate),
        "term_years": parse_number(term),
        "mortgage_type": mortgage_type.value,
    }
    st.session_state[ERRORS_KEY] = []
    logger.info("calculated %s repayments", mortgage_type.value)
    return result

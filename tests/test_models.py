import pytest
from pydantic import ValidationError

from repaycalc.models import LoanInput, MortgageType, ValidationOutcome, monthly_rate, period_count


def test_loan_input_derived_values():
    loan = LoanInput(principal=200000, annual_rate_pct=6, term_years=2.5)
    assert loan.mortgage_type is MortgageType.REPAYMENT
    assert loan.monthly_rate == pytest.approx(0.005)
    assert loan.periods == 30.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"principal": 0, "annual_rate_pct": 5, "term_years": 25},
        {"principal": 1000, "annual_rate_pct": -1, "term_years": 25},
        {"principal": 1000, "annual_rate_pct": 5, "term_years": 0},
        {"principal": float("nan"), "annual_rate_pct": 5, "term_years": 25},
        {"principal": 1000, "annual_rate_pct": 5, "term_years": 25, "mortgage_type": "balloon"},
    ],
)
def test_loan_input_rejects_out_of_domain_values(kwargs):
    with pytest.raises(ValidationError):
        LoanInput(**kwargs)


def test_mortgage_type_wire_values():
    assert MortgageType("repayment") is MortgageType.REPAYMENT
    assert MortgageType("interestOnly") is MortgageType.INTEREST_ONLY


def test_validation_outcome_defaults_to_valid():
    assert ValidationOutcome().is_valid
    assert ValidationOutcome(term_invalid=True).invalid_fields() == ["term"]


def test_rate_and_period_helpers_shared_with_loan_input():
    loan = LoanInput(principal=1000, annual_rate_pct=4.5, term_years=7.25)
    assert loan.monthly_rate == monthly_rate(4.5)
    assert loan.periods == period_count(7.25) == 87.0

from __future__ import annotations
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


def monthly_rate(annual_rate_pct) -> float:
    """Nominal annual percentage to a monthly decimal rate."""
    return (float(annual_rate_pct) / 100) / 12


def period_count(term_years) -> float:
    # fractional terms keep their fractional period count
    return float(term_years) * 12


class MortgageType(str, Enum):
    REPAYMENT = "repayment"
    INTEREST_ONLY = "interestOnly"


class LoanInput(BaseModel):
    """Loan parameters for a single calculation request.

    Building the model enforces the calculation domain, so a ``LoanInput`` can
    always be handed to :func:`repaycalc.calculator.calculate_input`.
    """

    model_config = ConfigDict(frozen=True)

    principal: float = Field(gt=0, allow_inf_nan=False)
    annual_rate_pct: float = Field(ge=0, allow_inf_nan=False)
    term_years: float = Field(gt=0, allow_inf_nan=False)
    mortgage_type: MortgageType = MortgageType.REPAYMENT

    @property
    def monthly_rate(self) -> float:
        return monthly_rate(self.annual_rate_pct)

    @property
    def periods(self) -> float:
        return period_count(self.term_years)


class LoanResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_payment: float
    total_repayment: float


class ValidationOutcome(BaseModel):
    """Per-field validity flags; every field is checked independently."""

    model_config = ConfigDict(frozen=True)

    amount_invalid: bool = False
    term_invalid: bool = False
    rate_invalid: bool = False

    @property
    def is_valid(self) -> bool:
        return not (self.amount_invalid or self.term_invalid or self.rate_invalid)

    def invalid_fields(self) -> List[str]:
        """Names of the flagged fields in form order."""
        flags = [
            ("amount", self.amount_invalid),
            ("term", self.term_invalid),
            ("rate", self.rate_invalid),
        ]
        return [name for name, flagged in flags if flagged]

from __future__ import annotations
import logging
import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Union

import pandas as pd

from repaycalc.models import (
    LoanInput,
    LoanResult,
    MortgageType,
    ValidationOutcome,
    monthly_rate,
    period_count,
)
from repaycalc.presets import MONEY_PLACES, MORTGAGE_TYPE_LABELS

logger = logging.getLogger(__name__)

_DECIMAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)$")
_QUANTUM = Decimal(1).scaleb(-MONEY_PLACES)
# wide enough for any finite float quantized to cents
_MONEY_CONTEXT = Context(prec=400)


def parse_number(raw) -> float:
    """Parse a raw form value into a float, or ``nan`` if it is not a number.

    Strings must be plain decimals: an optional sign, digits and at most one
    decimal point. Thousands separators, exponents and words such as ``inf``
    are rejected; cleaning them up is the caller's job (see
    :func:`repaycalc.utils.sanitize_amount`).
    """

    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            # int beyond float range
            return math.nan
    else:
        text = str(raw).strip()
        if not _DECIMAL_RE.match(text):
            return math.nan
        value = float(text)
    return value if math.isfinite(value) else math.nan


def validate(raw_amount, raw_term, raw_rate) -> ValidationOutcome:
    """Check the three numeric fields and flag each invalid one.

    Every check runs regardless of the others so the form can show all
    problems at once. A zero rate is valid; zero amount or term is not.
    """

    amount = parse_number(raw_amount)
    term = parse_number(raw_term)
    rate = parse_number(raw_rate)
    outcome = ValidationOutcome(
        amount_invalid=math.isnan(amount) or amount <= 0,
        term_invalid=math.isnan(term) or term <= 0,
        rate_invalid=math.isnan(rate) or rate < 0,
    )
    logger.debug("validated amount=%r term=%r rate=%r -> %s", raw_amount, raw_term, raw_rate, outcome)
    return outcome


def round_money(value: float) -> float:
    """Round to two places, half away from zero.

    The float's shortest decimal form is rounded, so ``10.125`` gives
    ``10.13`` and ``1.005`` gives ``1.01``.
    """

    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    return float(exact.quantize(_QUANTUM, rounding=ROUND_HALF_UP, context=_MONEY_CONTEXT))


def calculate(
    principal: float,
    annual_rate_pct: float,
    term_years: float,
    mortgage_type: Union[MortgageType, str] = MortgageType.REPAYMENT,
) -> LoanResult:
    """Monthly payment and total repaid over the term.

    Callers must run :func:`validate` first: ``principal`` and ``term_years``
    must be positive and ``annual_rate_pct`` non-negative. Nothing is
    re-checked here.

    * ``REPAYMENT`` – level annuity payment ``P r (1+r)^n / ((1+r)^n - 1)``,
      or ``P / n`` when the rate is zero.
    * ``INTEREST_ONLY`` – ``P r`` each month with the principal repaid as a
      lump sum at the end of the term.

    Totals are taken from the unrounded monthly payment; both figures are
    rounded with :func:`round_money` at the end.
    """

    mortgage_type = MortgageType(mortgage_type)
    P = float(principal)
    r = monthly_rate(annual_rate_pct)
    n = period_count(term_years)

    if mortgage_type is MortgageType.REPAYMENT:
        # (1+r)^n - 1 via expm1/log1p keeps precision for tiny rates
        try:
            growth_less_one = math.expm1(n * math.log1p(r))
        except OverflowError:
            growth_less_one = math.inf
        if r == 0 or growth_less_one == 0:
            payment = P / n
        elif math.isinf(growth_less_one):
            # the annuity factor has converged to r
            payment = P * r
        else:
            payment = P * (r / growth_less_one) * (growth_less_one + 1)
        total = payment * n
    else:
        payment = P * r
        total = payment * n + P

    result = LoanResult(monthly_payment=round_money(payment), total_repayment=round_money(total))
    logger.debug(
        "calculated %s P=%s R=%s T=%s -> %s", mortgage_type.value, P, annual_rate_pct, term_years, result
    )
    return result


def calculate_input(loan: LoanInput) -> LoanResult:
    """Typed entry point; ``LoanInput`` already guarantees the domain."""

    return calculate(loan.principal, loan.annual_rate_pct, loan.term_years, loan.mortgage_type)


def compare_mortgage_types(principal, annual_rate_pct, term_years) -> pd.DataFrame:
    """Summarize both mortgage types side by side for the same loan."""

    rows = []
    for mortgage_type in MortgageType:
        res = calculate(principal, annual_rate_pct, term_years, mortgage_type)
        rows.append(
            {
                "Mortgage Type": MORTGAGE_TYPE_LABELS[mortgage_type],
                "Monthly Payment": res.monthly_payment,
                "Total Repayment": res.total_repayment,
            }
        )
    df = pd.DataFrame(rows, columns=["Mortgage Type", "Monthly Payment", "Total Repayment"])
    df["Total Interest"] = (df["Total Repayment"] - float(principal)).round(MONEY_PLACES)
    return df

from repaycalc.models import MortgageType

CURRENCY_SYMBOL = "£"
MONEY_PLACES = 2

MORTGAGE_TYPE_LABELS = {
    MortgageType.REPAYMENT: "Repayment",
    MortgageType.INTEREST_ONLY: "Interest Only",
}

# Raw form values on first load and after "Clear All".
FORM_DEFAULTS = {
    "mortgage_amount": "",
    "mortgage_term": "",
    "interest_rate": "",
    "mortgage_type": MortgageType.REPAYMENT.value,
}

FIELD_LABELS = {"amount": "Mortgage Amount", "term": "Mortgage Term", "rate": "Interest Rate"}
REQUIRED_MESSAGE = "This field is required"

RESULTS_INTRO = (
    "Your results are shown below based on the information you provided. "
    "To adjust the results, edit the form and click \"calculate repayments\" again."
)
EMPTY_RESULTS_MESSAGE = (
    "Complete the form and click \"calculate repayments\" to see what your monthly "
    "repayments would be."
)

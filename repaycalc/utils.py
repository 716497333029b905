"""Assorted input and display helpers used by the form."""
import math
import re

from repaycalc.calculator import parse_number
from repaycalc.presets import CURRENCY_SYMBOL, MONEY_PLACES

_NOT_AMOUNT_CHARS = re.compile(r"[^0-9.]")


def sanitize_amount(text):
    """Keep only digits and dots from a typed amount (``"£200,000"`` -> ``"200000"``)."""
    if text is None:
        return ""
    return _NOT_AMOUNT_CHARS.sub("", str(text))


def format_number_with_commas(value):
    """Thousands separators with up to two decimals, ``""`` if not a number."""
    if value is None or value == "":
        return ""
    number = parse_number(value)
    if math.isnan(number):
        return ""
    text = f"{number:,.{MONEY_PLACES}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_money(value):
    """Currency figure for the results panel, always two decimals."""
    return f"{CURRENCY_SYMBOL}{value:,.{MONEY_PLACES}f}"

from __future__ import annotations
from typing import Dict, Literal

from pydantic import BaseModel

from repaycalc.models import ValidationOutcome
from repaycalc.presets import FIELD_LABELS, REQUIRED_MESSAGE


class FieldError(BaseModel):
    field: Literal["amount", "term", "rate"]
    label: str
    message: str


def field_errors(outcome: ValidationOutcome) -> Dict[str, FieldError]:
    """Message for every flagged field, keyed by field name."""
    return {
        name: FieldError(field=name, label=FIELD_LABELS[name], message=REQUIRED_MESSAGE)
        for name in outcome.invalid_fields()
    }

# finance_visualizer/core/transaction_validator.py
"""
Validation of transaction payloads before they reach the store.

Every failing field is reported at once so the form can render all of
its errors in a single round trip.
"""

from collections.abc import Mapping
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from finance_visualizer.core.exceptions import ValidationError
from finance_visualizer.schemas.transaction_schema import (
    TRANSACTION_FIELDS,
    TransactionCreate,
    TransactionUpdate,
)

# Messages for pydantic's own type errors (value errors carry their own text)
TYPE_MESSAGES = {
    "amount": "Amount must be a number",
    "description": "Description must be text",
    "category": "Category must be text",
    "date": "Date must be a valid date",
}


def _field_errors(exc: PydanticValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "payload"
        if field in errors:
            continue
        if err["type"] == "value_error":
            errors[field] = str(err["ctx"]["error"])
        elif err["type"] == "missing":
            errors[field] = f"{field.capitalize()} is required"
        else:
            errors[field] = TYPE_MESSAGES.get(field, err["msg"])
    return errors


def _require_mapping(payload: Any) -> None:
    if not isinstance(payload, Mapping):
        raise ValidationError({"payload": "Transaction payload must be a JSON object"})


def validate(payload: Any) -> TransactionCreate:
    """
    Validate a complete transaction payload.

    Raises ValidationError naming every invalid or missing field.
    Unknown keys such as "_id" are ignored.
    """
    _require_mapping(payload)
    try:
        return TransactionCreate.model_validate(dict(payload))
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from e


def validate_partial(payload: Any) -> Dict[str, Any]:
    """
    Validate only the fields present in an edit payload.

    Returns the cleaned subset (description trimmed, date parsed).
    """
    _require_mapping(payload)
    if not any(field in payload for field in TRANSACTION_FIELDS):
        raise ValidationError({"payload": "No transaction fields to update"})
    try:
        fields = TransactionUpdate.model_validate(dict(payload))
    except PydanticValidationError as e:
        raise ValidationError(_field_errors(e)) from e
    return fields.model_dump(exclude_unset=True)

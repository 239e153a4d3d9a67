"""
Tests for transaction payload validation
"""
import datetime as dt

import pytest

from finance_visualizer.core.exceptions import ValidationError
from finance_visualizer.core.transaction_validator import validate, validate_partial


def field_errors(payload, partial=False) -> dict:
    with pytest.raises(ValidationError) as exc_info:
        (validate_partial if partial else validate)(payload)
    return exc_info.value.errors


def test_valid_payload_is_accepted(valid_payload):
    fields = validate(valid_payload)

    assert fields.amount == -42.5
    assert fields.description == "Groceries"
    assert fields.category == "Food & Dining"
    assert fields.date == dt.date(2024, 1, 5)


def test_income_and_expense_amounts_both_valid(valid_payload):
    assert validate({**valid_payload, "amount": 1200}).amount == 1200.0
    assert validate({**valid_payload, "amount": -0.01}).amount == -0.01
    assert validate({**valid_payload, "amount": "19.99"}).amount == 19.99


def test_description_is_trimmed(valid_payload):
    fields = validate({**valid_payload, "description": "  Rent  "})
    assert fields.description == "Rent"


def test_browser_datetime_string_keeps_calendar_date(valid_payload):
    fields = validate({**valid_payload, "date": "2024-03-15T00:00:00.000Z"})
    assert fields.date == dt.date(2024, 3, 15)


def test_date_and_datetime_objects_accepted(valid_payload):
    assert validate({**valid_payload, "date": dt.date(2024, 2, 29)}).date == dt.date(2024, 2, 29)
    assert validate({**valid_payload, "date": dt.datetime(2024, 2, 29, 18, 30)}).date == dt.date(2024, 2, 29)


def test_unknown_keys_ignored(valid_payload):
    fields = validate({**valid_payload, "_id": "abc", "id": "def"})
    assert set(fields.model_dump()) == {"amount", "description", "category", "date"}


def test_missing_description_rejected(valid_payload):
    payload = dict(valid_payload)
    del payload["description"]
    errors = field_errors(payload)
    assert errors == {"description": "Description is required"}


@pytest.mark.parametrize("description", ["", "   ", None])
def test_blank_description_rejected(valid_payload, description):
    errors = field_errors({**valid_payload, "description": description})
    assert errors["description"] == "Description is required"


@pytest.mark.parametrize("category", ["Groceries", "food", "housing", "food & dining", ""])
def test_category_outside_fixed_set_rejected(valid_payload, category):
    errors = field_errors({**valid_payload, "category": category})
    assert list(errors) == ["category"]
    assert errors["category"].startswith("Category must be one of: Housing")


@pytest.mark.parametrize("value", ["not-a-date", "2024-02-30", "", 20240105, None, "20240105", "2024-W01-1", "2024-005"])
def test_unparseable_date_rejected(valid_payload, value):
    errors = field_errors({**valid_payload, "date": value})
    assert "date" in errors


@pytest.mark.parametrize("amount", [0, 0.001, -0.009])
def test_amount_below_minimum_rejected(valid_payload, amount):
    errors = field_errors({**valid_payload, "amount": amount})
    assert errors["amount"] == "Amount must be at least 0.01"


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_amount_rejected(valid_payload, amount):
    errors = field_errors({**valid_payload, "amount": amount})
    assert errors["amount"] == "Amount must be a finite number"


@pytest.mark.parametrize("amount", ["abc", True, [1]])
def test_non_numeric_amount_rejected(valid_payload, amount):
    errors = field_errors({**valid_payload, "amount": amount})
    assert errors["amount"] == "Amount must be a number"


def test_every_failing_field_reported():
    errors = field_errors({"amount": 0, "description": " ", "category": "Misc", "date": "not-a-date"})
    assert set(errors) == {"amount", "description", "category", "date"}


def test_empty_payload_reports_all_required_fields():
    errors = field_errors({})
    assert errors == {
        "amount": "Amount is required",
        "description": "Description is required",
        "category": "Category is required",
        "date": "Date is required",
    }


@pytest.mark.parametrize("payload", [None, [], "amount=5", 12])
def test_non_object_payload_rejected(payload):
    assert field_errors(payload) == {"payload": "Transaction payload must be a JSON object"}


def test_validation_error_message_names_fields():
    err = ValidationError({"date": "Date must be a valid date", "amount": "Amount is required"})
    assert str(err) == "Invalid transaction fields: amount, date"


# -----------------------------
# Partial (edit) payloads
# -----------------------------
def test_partial_returns_only_present_fields():
    assert validate_partial({"amount": -5}) == {"amount": -5.0}
    assert validate_partial({"description": " Bus pass ", "date": "2024-04-01"}) == {
        "description": "Bus pass",
        "date": dt.date(2024, 4, 1),
    }


def test_partial_full_payload(valid_payload):
    fields = validate_partial(valid_payload)
    assert fields == {
        "amount": -42.5,
        "description": "Groceries",
        "category": "Food & Dining",
        "date": dt.date(2024, 1, 5),
    }


def test_partial_applies_same_rules():
    errors = field_errors({"category": "Gambling", "amount": 0}, partial=True)
    assert set(errors) == {"category", "amount"}


def test_partial_explicit_null_rejected():
    errors = field_errors({"description": None}, partial=True)
    assert errors == {"description": "Description is required"}


@pytest.mark.parametrize("payload", [{}, {"_id": "65a0c0ffee0000000000abcd"}, {"note": "x"}])
def test_partial_without_known_fields_rejected(payload):
    assert field_errors(payload, partial=True) == {"payload": "No transaction fields to update"}


def test_space_separated_datetime_accepted(valid_payload):
    fields = validate({**valid_payload, "date": "2024-03-15 18:45:00"})
    assert fields.date == dt.date(2024, 3, 15)

"""
Stock Manager Backend — Request Schema Tests
=============================================

What we test:
    ✅ Each field validator accepts and rejects the right values
    ✅ Every failure is reported, one error per field, with the API message
    ✅ Coercion (quantity → int, date_checked → aware datetime, note → None)
    ✅ Absent fields fail like empty ones; an explicit null note is refused
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from stock_manager.schemas.inventory import (
    CategoryIn,
    ComponentIn,
    SubCategoryIn,
    SubComponentIn,
    parse_iso8601,
)


def messages(exc_info) -> dict:
    return {err["loc"][0]: err["msg"] for err in exc_info.value.errors()}


def component(**overrides) -> dict:
    body = {
        "reference": "LM317",
        "quantity": 12,
        "date_checked": "2024-02-01",
        "category": "c",
        "sub_category": "s",
    }
    body.update(overrides)
    return body


class TestRequiredFields:

    def test_accepts_text(self):
        assert CategoryIn(category_name="Resistors").category_name == "Resistors"

    @pytest.mark.parametrize("value", ["", None, 42])
    def test_rejects_empty_and_non_strings(self, value):
        with pytest.raises(ValidationError) as exc_info:
            CategoryIn.model_validate({"category_name": value})
        assert messages(exc_info) == {"category_name": "Category name is required"}

    def test_absent_field_gets_the_same_message(self):
        with pytest.raises(ValidationError) as exc_info:
            SubCategoryIn.model_validate({})
        assert [err["loc"][0] for err in exc_info.value.errors()] == ["sub_category_name", "parent"]
        assert messages(exc_info)["parent"] == "Parent category UUID is required"


class TestQuantity:

    @pytest.mark.parametrize("value, expected", [(0, 0), (7, 7), ("12", 12)])
    def test_accepts(self, value, expected):
        assert ComponentIn.model_validate(component(quantity=value)).quantity == expected

    @pytest.mark.parametrize("value", [-1, "-1", 1.5, "1.5", "ten", True, None, 2**31, "9" * 5000])
    def test_rejects(self, value):
        with pytest.raises(ValidationError) as exc_info:
            ComponentIn.model_validate(component(quantity=value))
        assert messages(exc_info) == {"quantity": "Quantity must be a non-negative integer"}


class TestDateChecked:

    @pytest.mark.parametrize(
        "value", ["2024-01-15", "2024-01-15T10:30:00", "2024-01-15T10:30:00Z", "2024-01-15T10:30:00+02:00"]
    )
    def test_accepts(self, value):
        assert ComponentIn.model_validate(component(date_checked=value)).date_checked.tzinfo is not None

    @pytest.mark.parametrize("value", ["not-a-date", "15/01/2024", "", 1700000000, None])
    def test_rejects(self, value):
        with pytest.raises(ValidationError) as exc_info:
            ComponentIn.model_validate(component(date_checked=value))
        assert messages(exc_info) == {"date_checked": "Date must be in ISO8601 format"}

    def test_naive_value_is_read_as_utc(self):
        assert parse_iso8601("2024-01-15T10:30:00") == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    def test_offset_is_kept(self):
        assert parse_iso8601("2024-01-15T10:30:00+02:00").utcoffset().total_seconds() == 7200

    def test_garbage_returns_none(self):
        assert parse_iso8601("not-a-date") is None


class TestNote:

    def test_omitted_note_becomes_none(self):
        assert SubComponentIn.model_validate({"super_uuid": "x", "place": "Bin 4"}).note is None

    def test_string_note(self):
        body = {"super_uuid": "x", "place": "Bin 4", "note": "fragile"}
        assert SubComponentIn.model_validate(body).note == "fragile"

    @pytest.mark.parametrize("value", [None, 3, ["a"]])
    def test_rejects_null_and_non_strings(self, value):
        with pytest.raises(ValidationError) as exc_info:
            SubComponentIn.model_validate({"super_uuid": "x", "place": "Bin 4", "note": value})
        assert messages(exc_info) == {"note": "Note must be a string"}


class TestWholeBody:

    def test_collects_every_failure(self):
        with pytest.raises(ValidationError) as exc_info:
            ComponentIn.model_validate({"quantity": -1, "date_checked": "not-a-date"})

        fields = [err["loc"][0] for err in exc_info.value.errors()]
        assert fields == ["reference", "quantity", "date_checked", "category", "sub_category"]

    def test_unknown_fields_are_dropped(self):
        payload = ComponentIn.model_validate(component(ignored=True))
        assert payload.model_dump() == {
            "reference": "LM317",
            "quantity": 12,
            "date_checked": datetime(2024, 2, 1, tzinfo=timezone.utc),
            "category": "c",
            "sub_category": "s",
        }

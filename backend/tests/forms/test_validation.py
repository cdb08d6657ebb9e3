# tests/forms/test_validation.py
import pytest
from pydantic import ValidationError

from pagecraft.forms import (
    FieldValidation,
    FormBuilder,
    FormField,
    FormFieldType,
    validate_field,
    validate_submission,
)


def make_field(field_type=FormFieldType.TEXT, **kwargs):
    kwargs.setdefault("label", "Name")
    return FormField(type=field_type, **kwargs)


class TestRequired:
    @pytest.mark.parametrize("value", [None, "", "   ", [], False])
    def test_blank_values(self, value):
        field = make_field(required=True)
        assert validate_field(field, value) == "Name is required"

    def test_optional_blank_value(self):
        assert validate_field(make_field(), "") is None


class TestLengthAndPattern:
    def test_min_length(self):
        field = make_field(validation=FieldValidation(min_length=3))
        assert validate_field(field, "ab") == "Name must be at least 3 characters"
        assert validate_field(field, "abc") is None

    def test_max_length(self):
        field = make_field(validation=FieldValidation(max_length=3))
        assert validate_field(field, "abcd") == "Name must not exceed 3 characters"

    def test_pattern_must_match_whole_value(self):
        field = make_field(validation=FieldValidation(pattern=r"\d{5}"))
        assert validate_field(field, "12345") is None
        assert validate_field(field, "123456") == "Name has an invalid format"

    def test_min_above_max(self):
        with pytest.raises(ValueError):
            FieldValidation(min_length=4, max_length=2)

    def test_malformed_pattern_rejected_at_configuration(self):
        with pytest.raises(ValidationError):
            FieldValidation(pattern="[0-9")

    def test_malformed_pattern_rejected_on_update(self):
        builder = FormBuilder()
        field = builder.add_field(FormFieldType.TEXT)

        with pytest.raises(ValidationError):
            builder.update_field(field.id, validation={"pattern": "(unclosed"})
        assert builder.get(field.id).validation is None


def test_email():
    field = make_field(FormFieldType.EMAIL, label="Email")
    assert validate_field(field, "someone@example.com") is None
    assert validate_field(field, "not-an-email") == "Please enter a valid email address"


def test_choice_must_be_an_option():
    field = make_field(FormFieldType.SELECT, label="Plan", options=["Basic", "Pro"])
    assert validate_field(field, "Pro") is None
    assert validate_field(field, "Enterprise") == "Plan has an invalid selection"

    checkbox = make_field(FormFieldType.CHECKBOX, label="Extras", options=["A", "B"])
    assert validate_field(checkbox, ["A", "B"]) is None
    assert validate_field(checkbox, ["A", "C"]) == "Extras has an invalid selection"


def test_validate_submission():
    name = make_field(required=True)
    email = make_field(FormFieldType.EMAIL, label="Email")
    notes = make_field(FormFieldType.TEXTAREA, label="Notes")

    errors = validate_submission([name, email, notes], {email.id: "bad"})

    assert errors == {
        name.id: "Name is required",
        email.id: "Please enter a valid email address",
    }
    assert validate_submission([name], {name.id: "Ada"}) == {}

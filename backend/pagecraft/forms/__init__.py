# backend/pagecraft/forms/__init__.py
from .builder import FormBuilder, move, new_form_field
from .models import CHOICE_TYPES, FieldValidation, FormField, FormFieldType
from .validation import validate_field, validate_submission

__all__ = [
    "FormBuilder", "move", "new_form_field",
    "CHOICE_TYPES", "FieldValidation", "FormField", "FormFieldType",
    "validate_field", "validate_submission"
]

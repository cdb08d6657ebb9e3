# backend/pagecraft/forms/validation.py
import re
from typing import Any, Dict, Iterable, Optional

from .models import FormField, FormFieldType

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set)):
        return len(value) == 0
    return False


def validate_field(field: FormField, value: Any) -> Optional[str]:
    """First problem with `value` for `field`, or None when it is acceptable"""
    if _is_blank(value):
        return f"{field.label} is required" if field.required else None

    if isinstance(value, str):
        rules = field.validation
        if rules is not None:
            if rules.min_length is not None and len(value) < rules.min_length:
                return f"{field.label} must be at least {rules.min_length} characters"
            if rules.max_length is not None and len(value) > rules.max_length:
                return f"{field.label} must not exceed {rules.max_length} characters"
            if rules.pattern and re.fullmatch(rules.pattern, value) is None:
                return f"{field.label} has an invalid format"

        if field.type == FormFieldType.EMAIL and not EMAIL_PATTERN.match(value):
            return "Please enter a valid email address"

    if field.is_choice and field.options:
        chosen = value if isinstance(value, (list, tuple, set)) else [value]
        unknown = [choice for choice in chosen if choice not in field.options]
        if unknown:
            return f"{field.label} has an invalid selection"

    return None


def validate_submission(fields: Iterable[FormField], data: Dict[str, Any]) -> Dict[str, str]:
    """Map of field id to error message; empty when the submission is valid"""
    errors: Dict[str, str] = {}
    for field in fields:
        error = validate_field(field, data.get(field.id))
        if error:
            errors[field.id] = error
    return errors

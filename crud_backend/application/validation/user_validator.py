"""
Field validation for user create/update requests.

Rules are an ordered list of (field, predicate, error type, message). Every
field is checked; once a rule fails for a field, that field's later rules are
skipped, so each field contributes at most one error.
"""
from typing import Any, Callable, Dict, List, Mapping, NamedTuple, Sequence, Type

from email_validator import EmailNotValidError, validate_email

from ...domain.constants import UserFields
from ...domain.exceptions import (
    FieldError,
    InvalidFormatError,
    RequiredFieldError,
    ValidationFailedError,
)


class FieldRule(NamedTuple):
    field: str
    predicate: Callable[[Any], bool]
    error_type: Type[FieldError]
    message: str


def is_present(value: Any) -> bool:
    return value is not None and value != ""


def is_text(value: Any) -> bool:
    return isinstance(value, str)


def is_email(value: Any) -> bool:
    if not value or not isinstance(value, str):
        return False
    try:
        # Syntax only: no DNS lookups, and special-use domains (.test, .local) are allowed
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


USER_FIELD_RULES: Sequence[FieldRule] = (
    FieldRule(UserFields.NAME, is_present, RequiredFieldError, "Name is required."),
    FieldRule(UserFields.NAME, is_text, InvalidFormatError, "Name must be text."),
    FieldRule(UserFields.SURNAME, is_present, RequiredFieldError, "Surname is required."),
    FieldRule(UserFields.SURNAME, is_text, InvalidFormatError, "Surname must be text."),
    FieldRule(UserFields.EMAIL, is_present, RequiredFieldError, "Email is required."),
    FieldRule(UserFields.EMAIL, is_email, InvalidFormatError, "Valid email is required."),
    FieldRule(UserFields.JOB_TITLE, is_present, RequiredFieldError, "Job title is required."),
    FieldRule(UserFields.JOB_TITLE, is_text, InvalidFormatError, "Job title must be text."),
)


def _clean(value: Any) -> Any:
    """
    Strip strings and cast scalars to text the way the document schema does
    (42 -> "42", True -> "true"). Lists and objects are returned unchanged
    so the format rules can reject them.
    """
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


def normalize_user_fields(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Trim every editable field and lowercase the email"""
    fields = {name: _clean(raw.get(name)) for name in UserFields.EDITABLE}
    email = fields[UserFields.EMAIL]
    if isinstance(email, str):
        fields[UserFields.EMAIL] = email.lower()
    return fields


def collect_field_errors(
    fields: Mapping[str, Any],
    rules: Sequence[FieldRule] = USER_FIELD_RULES,
) -> List[FieldError]:
    errors: List[FieldError] = []
    failed_fields = set()
    for rule in rules:
        if rule.field in failed_fields:
            continue
        if not rule.predicate(fields.get(rule.field)):
            errors.append(rule.error_type(rule.field, rule.message))
            failed_fields.add(rule.field)
    return errors


def validate_user_fields(raw: Mapping[str, Any]) -> Dict[str, str]:
    """
    Normalize and validate the editable user fields.
    
    Args:
        raw: Incoming fields keyed by wire name (name, surname, email, jobTitle)
        
    Returns:
        The normalized fields
        
    Raises:
        ValidationFailedError: With one FieldError per failing field
    """
    fields = normalize_user_fields(raw)
    errors = collect_field_errors(fields)
    if errors:
        raise ValidationFailedError(errors)
    return dict(fields)

from .user_validator import (
    FieldRule,
    USER_FIELD_RULES,
    collect_field_errors,
    is_email,
    normalize_user_fields,
    validate_user_fields,
)

__all__ = [
    "FieldRule",
    "USER_FIELD_RULES",
    "collect_field_errors",
    "is_email",
    "normalize_user_fields",
    "validate_user_fields",
]

"""
Domain exceptions for the user service.

Every error carries the HTTP status it maps to and renders its own JSON body
through ``to_response()``, so the API layer can translate any of them with a
single handler.
"""
from typing import Any, Dict, List, Optional


class FieldError(Exception):
    """A single field-level validation failure"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldError):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), self.field, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field={self.field!r}, message={self.message!r})"


class RequiredFieldError(FieldError):
    """Field is missing or empty"""


class InvalidFormatError(FieldError):
    """Field is present but malformed"""


class UserServiceError(Exception):
    """Base exception for all user service errors"""

    http_status: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationFailedError(UserServiceError):
    """One or more fields failed validation"""

    http_status = 400

    def __init__(self, errors: List[FieldError], message: str = "Validation failed.") -> None:
        super().__init__(message)
        self.errors = list(errors)

    def to_response(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "errors": [error.to_dict() for error in self.errors],
        }


class UniquenessConflictError(UserServiceError):
    """Another user already holds this email"""

    http_status = 400


class NotFoundError(UserServiceError):
    """No user matches the given identifier"""

    http_status = 404

    def __init__(self, message: str = "User not found.") -> None:
        super().__init__(message)


class PersistenceError(UserServiceError):
    """The document store failed"""

    http_status = 500

    def __init__(self, detail: str, message: str = "Server error", cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.detail = detail
        self.cause = cause

    def __str__(self) -> str:
        return self.detail

    def to_response(self) -> Dict[str, Any]:
        return {"message": self.message, "error": self.detail}

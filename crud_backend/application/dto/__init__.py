from .user_dto import (
    UserFieldsRequest,
    UserResponse,
    MessageResponse,
    FieldErrorResponse,
    ValidationErrorResponse,
    ServerErrorResponse,
    to_user_response,
)

__all__ = [
    "UserFieldsRequest",
    "UserResponse",
    "MessageResponse",
    "FieldErrorResponse",
    "ValidationErrorResponse",
    "ServerErrorResponse",
    "to_user_response",
]

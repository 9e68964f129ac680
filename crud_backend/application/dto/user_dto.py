from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models.user import User


class UserFieldsRequest(BaseModel):
    """
    DTO for create/update request bodies.
    
    Fields are accepted loosely here; presence and format are checked by the
    validation layer so that every violation is reported at once.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")
    
    name: Optional[Any] = None
    surname: Optional[Any] = None
    email: Optional[Any] = None
    job_title: Optional[Any] = Field(default=None, alias="jobTitle")


class UserResponse(BaseModel):
    """DTO for user response"""
    model_config = ConfigDict(populate_by_name=True)
    
    id: str
    name: str
    surname: str
    email: str
    job_title: str = Field(alias="jobTitle")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")
    updated_at: Optional[datetime] = Field(default=None, alias="updatedAt")


class MessageResponse(BaseModel):
    """DTO for plain confirmation/error messages"""
    message: str


class FieldErrorResponse(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """DTO for 400 responses caused by field validation"""
    message: str
    errors: List[FieldErrorResponse]


class ServerErrorResponse(BaseModel):
    message: str
    error: str


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id or "",
        name=user.name,
        surname=user.surname,
        email=user.email,
        job_title=user.job_title,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )

# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.user_dto import (
    MessageResponse,
    ServerErrorResponse,
    UserFieldsRequest,
    UserResponse,
    ValidationErrorResponse,
)
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.base_container import BaseContainer
from .dependencies import get_container


router = APIRouter(tags=["users"])

_ERROR_RESPONSES = {
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ServerErrorResponse},
}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": MessageResponse}}
_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}}


@router.post(
    "/sign-up",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_BAD_REQUEST, **_ERROR_RESPONSES},
)
async def sign_up(
    request: Optional[UserFieldsRequest] = None,
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Register a new user
    
    Args:
        request: name, surname, email and jobTitle
        
    Returns:
        UserResponse with created user information
    """
    create_user_use_case = container.get(CreateUserUseCase)
    return await create_user_use_case.execute(request or UserFieldsRequest())


@router.get("/users", response_model=List[UserResponse], responses=_ERROR_RESPONSES)
async def list_users(container: BaseContainer = Depends(get_container)) -> List[UserResponse]:
    """List every user"""
    list_users_use_case = container.get(ListUsersUseCase)
    return await list_users_use_case.execute()


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={**_NOT_FOUND, **_ERROR_RESPONSES},
)
async def get_user(
    user_id: str,
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """Get a user by ID"""
    get_user_use_case = container.get(GetUserUseCase)
    return await get_user_use_case.execute(user_id)


@router.put(
    "/users/{user_id}",
    response_model=UserResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_ERROR_RESPONSES},
)
async def update_user(
    user_id: str,
    request: Optional[UserFieldsRequest] = None,
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Replace the editable fields of a user
    
    Args:
        user_id: ID of the user
        request: name, surname, email and jobTitle
        
    Returns:
        UserResponse with the updated user
    """
    update_user_use_case = container.get(UpdateUserUseCase)
    return await update_user_use_case.execute(user_id, request or UserFieldsRequest())


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_ERROR_RESPONSES},
)
async def delete_user(
    user_id: str,
    container: BaseContainer = Depends(get_container),
) -> MessageResponse:
    """Delete a user by ID"""
    delete_user_use_case = container.get(DeleteUserUseCase)
    return await delete_user_use_case.execute(user_id)

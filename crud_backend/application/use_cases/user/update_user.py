# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....domain.exceptions import NotFoundError, UniquenessConflictError
from ...dto.user_dto import UserFieldsRequest, UserResponse, to_user_response
from ...validation.user_validator import validate_user_fields

logger = logging.getLogger(__name__)

ANOTHER_USER_MESSAGE = "Another user with this email already exists."


class UpdateUserUseCase:
    """Use case for replacing the editable fields of a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserFieldsRequest) -> UserResponse:
        """
        Update a user
        
        Args:
            user_id: ID of the user to update
            request: Replacement values for name, surname, email and jobTitle
            
        Returns:
            UserResponse with the updated user
            
        Raises:
            ValidationFailedError: If any field is missing or malformed
            UniquenessConflictError: If another user already holds the email
            NotFoundError: If no user has this ID
        """
        fields = validate_user_fields(request.model_dump(by_alias=True))
        
        # Keeping your own email is fine; taking someone else's is not
        conflicting_user = await self.user_repository.find_by_email_excluding_id(
            fields[UserFields.EMAIL], user_id
        )
        if conflicting_user is not None:
            raise UniquenessConflictError(ANOTHER_USER_MESSAGE)
        
        changes = User(
            id=user_id,
            name=fields[UserFields.NAME],
            surname=fields[UserFields.SURNAME],
            email=fields[UserFields.EMAIL],
            job_title=fields[UserFields.JOB_TITLE],
        )
        
        try:
            updated_user = await self.user_repository.update_by_id(user_id, changes)
        except UniquenessConflictError:
            # Lost a race with a concurrent write of the same email
            raise UniquenessConflictError(ANOTHER_USER_MESSAGE)
        
        if updated_user is None:
            raise NotFoundError()
        
        logger.info(f"Updated user {updated_user.id}")
        return to_user_response(updated_user)

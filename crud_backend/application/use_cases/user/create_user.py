# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....domain.exceptions import UniquenessConflictError
from ...dto.user_dto import UserFieldsRequest, UserResponse, to_user_response
from ...validation.user_validator import validate_user_fields

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for registering a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserFieldsRequest) -> UserResponse:
        """
        Register a new user
        
        Args:
            request: Sign-up request with user details
            
        Returns:
            UserResponse with created user information
            
        Raises:
            ValidationFailedError: If any field is missing or malformed
            UniquenessConflictError: If user with email already exists
        """
        fields = validate_user_fields(request.model_dump(by_alias=True))
        
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(fields[UserFields.EMAIL])
        if existing_user is not None:
            raise UniquenessConflictError("User with this email already exists.")
        
        new_user = User(
            id=None,  # Will be set by repository
            name=fields[UserFields.NAME],
            surname=fields[UserFields.SURNAME],
            email=fields[UserFields.EMAIL],
            job_title=fields[UserFields.JOB_TITLE],
        )
        
        saved_user = await self.user_repository.insert(new_user)
        logger.info(f"Created user {saved_user.id}")
        
        return to_user_response(saved_user)

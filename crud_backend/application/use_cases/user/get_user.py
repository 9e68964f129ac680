# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse, to_user_response


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID
        
        Raises:
            NotFoundError: If no user has this ID (malformed IDs included)
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError()
        return to_user_response(user)

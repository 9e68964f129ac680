# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import MessageResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> MessageResponse:
        deleted = await self.user_repository.delete_by_id(user_id)
        if not deleted:
            raise NotFoundError()
        
        logger.info(f"Deleted user {user_id}")
        return MessageResponse(message="User deleted successfully.")

from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    async def ensure_indexes(self) -> None:
        """Prepare storage-side constraints; no-op unless the store needs it"""
        return None

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_by_email_excluding_id(self, email: str, user_id: str) -> Optional[User]:
        """Find a user with this email other than the one identified by user_id"""
        pass
    
    @abstractmethod
    async def insert(self, user: User) -> User:
        """Persist a new user; id and timestamps are assigned by the store"""
        pass
    
    @abstractmethod
    async def find_all(self) -> List[User]:
        """Return every stored user"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def update_by_id(self, user_id: str, user: User) -> Optional[User]:
        """Replace the editable fields of a user; None if no such user"""
        pass
    
    @abstractmethod
    async def delete_by_id(self, user_id: str) -> bool:
        """Delete user by ID; True if a record was removed"""
        pass

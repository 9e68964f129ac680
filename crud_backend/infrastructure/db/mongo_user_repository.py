# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import PersistenceError, UniquenessConflictError
from ...utils.datetime_utils import ensure_utc, utc_now


DUPLICATE_EMAIL_MESSAGE = "User with this email already exists."


def _to_object_id(user_id: Optional[str]) -> Optional[ObjectId]:
    """Parse a user ID; malformed IDs yield None instead of raising"""
    if not user_id:
        return None
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def ensure_indexes(self) -> None:
        """Create the unique email index that backs the uniqueness invariant"""
        try:
            await self.user_collection.create_index(
                [(UserFields.EMAIL, ASCENDING)],
                unique=True,
                name="email_unique",
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error creating user indexes: {str(e)}", cause=e) from e
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Normalized email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        return await self._find_one({UserFields.EMAIL: email}, "Error finding user by email")
    
    async def find_by_email_excluding_id(self, email: str, user_id: str) -> Optional[User]:
        """
        Find a user holding this email other than user_id.
        
        A malformed user_id cannot match any stored record, so nothing is excluded.
        """
        if not email:
            return None
        
        query: Dict[str, Any] = {UserFields.EMAIL: email}
        object_id = _to_object_id(user_id)
        if object_id is not None:
            query[UserFields.MONGO_ID] = {"$ne": object_id}
        
        return await self._find_one(query, "Error finding user by email")
    
    async def insert(self, user: User) -> User:
        """
        Insert a new user, stamping createdAt/updatedAt
        
        Raises:
            UniquenessConflictError: If the unique email index rejects the write
            PersistenceError: On any other storage failure
        """
        if not user:
            raise ValueError("User cannot be None")
        
        timestamp = utc_now()
        user_dict = self._user_to_dict(user)
        user_dict[UserFields.CREATED_AT] = timestamp
        user_dict[UserFields.UPDATED_AT] = timestamp
        
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise UniquenessConflictError(DUPLICATE_EMAIL_MESSAGE) from e
        except PyMongoError as e:
            raise PersistenceError(f"Error saving user: {str(e)}", cause=e) from e
        
        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)
    
    async def find_all(self) -> List[User]:
        """Return all users in natural order"""
        try:
            cursor = self.user_collection.find({})
            users = []
            async for document in cursor:
                users.append(self._document_to_user(document))
            return users
        except PyMongoError as e:
            raise PersistenceError(f"Error listing users: {str(e)}", cause=e) from e
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None if missing or the ID is malformed
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        return await self._find_one({UserFields.MONGO_ID: object_id}, "Error finding user by ID")
    
    async def update_by_id(self, user_id: str, user: User) -> Optional[User]:
        """
        Replace the editable fields of a user and re-stamp updatedAt
        
        Returns:
            Updated User, or None if no user matches user_id
            
        Raises:
            UniquenessConflictError: If the new email collides with another user
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        changes = self._user_to_dict(user)
        changes[UserFields.UPDATED_AT] = utc_now()
        
        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": changes},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise UniquenessConflictError(DUPLICATE_EMAIL_MESSAGE) from e
        except PyMongoError as e:
            raise PersistenceError(f"Error updating user: {str(e)}", cause=e) from e
        
        if document is None:
            return None
        return self._document_to_user(document)
    
    async def delete_by_id(self, user_id: str) -> bool:
        """Delete user by ID; False if nothing was removed"""
        object_id = _to_object_id(user_id)
        if object_id is None:
            return False
        
        try:
            result = await self.user_collection.delete_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error deleting user: {str(e)}", cause=e) from e
        return result.deleted_count > 0
    
    async def _find_one(self, query: Dict[str, Any], error_context: str) -> Optional[User]:
        try:
            document = await self.user_collection.find_one(query)
        except PyMongoError as e:
            raise PersistenceError(f"{error_context}: {str(e)}", cause=e) from e
        if document is None:
            return None
        return self._document_to_user(document)
    
    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise PersistenceError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            surname=document.get(UserFields.SURNAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            job_title=document.get(UserFields.JOB_TITLE, ""),
            created_at=ensure_utc(document.get(UserFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(UserFields.UPDATED_AT)),
        )
    
    def _user_to_dict(self, user: User) -> Dict[str, Any]:
        """Editable fields of a User as a MongoDB document fragment"""
        return {
            UserFields.NAME: user.name,
            UserFields.SURNAME: user.surname,
            UserFields.EMAIL: user.email,
            UserFields.JOB_TITLE: user.job_title,
        }

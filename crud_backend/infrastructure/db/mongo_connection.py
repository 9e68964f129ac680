# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import Settings
from ...domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owns the Motor client for the lifetime of the application.

    Built once at startup, handed to the DI container and closed at shutdown.
    """
    
    def __init__(
        self,
        mongo_uri: str,
        database_name: str,
        users_collection_name: str = "crud",
        timeout_ms: int = 10000,
    ) -> None:
        self.mongo_uri = mongo_uri
        self.database_name = database_name
        self.users_collection_name = users_collection_name
        self.timeout_ms = timeout_ms
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(
            mongo_uri=settings.mongo_uri,
            database_name=settings.mongo_database_name,
            users_collection_name=settings.users_collection_name,
            timeout_ms=settings.mongo_timeout_ms,
        )
    
    async def connect(self) -> AsyncIOMotorDatabase:
        """
        Create the client and verify the server is reachable.
        
        Returns:
            MongoDB database instance
            
        Raises:
            PersistenceError: If MONGO_URI is empty or the server does not answer a ping
        """
        if self._database is not None:
            return self._database
        
        if not self.mongo_uri:
            raise PersistenceError("MONGO_URI not set. Please configure it in your .env file.")
        
        # Explicit timeouts so an unreachable server fails startup fast
        client = AsyncIOMotorClient(
            self.mongo_uri,
            serverSelectionTimeoutMS=self.timeout_ms,
            connectTimeoutMS=self.timeout_ms,
            tz_aware=True,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise PersistenceError(f"Failed to connect to MongoDB: {e}", cause=e) from e
        
        self._client = client
        self._database = client[self.database_name]
        logger.info(f"Connected to MongoDB database '{self.database_name}'")
        return self._database
    
    def get_database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoConnection.connect() must be awaited before use")
        return self._database
    
    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        return self.get_database()[collection_name]
    
    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB
        
        Returns:
            MongoDB collection for users
        """
        return self.get_collection(self.users_collection_name)
    
    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB connection closed")
        self._client = None
        self._database = None

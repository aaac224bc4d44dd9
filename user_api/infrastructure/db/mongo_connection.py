# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings

logger = logging.getLogger(__name__)


class MongoConnection:
    """
    Owns the MongoDB client for the lifetime of the process.
    
    Built once at startup and handed to the DI container; nothing else
    creates a client. Motor connects lazily, so construction never blocks.
    """
    
    def __init__(
        self,
        mongo_uri: str,
        database_name: str,
        users_collection_name: str = "users",
        client: Optional[AsyncIOMotorClient] = None,
    ) -> None:
        self.database_name = database_name
        self.users_collection_name = users_collection_name
        self.client = client if client is not None else AsyncIOMotorClient(mongo_uri)
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        """
        Create a connection from application settings
        
        Args:
            settings: Settings carrying MONGO_URI / MONGO_DB_NAME / MONGO_USERS_COLLECTION
            
        Returns:
            MongoConnection instance
        """
        return cls(
            mongo_uri=settings.mongo_uri,
            database_name=settings.mongo_database_name,
            users_collection_name=settings.mongo_users_collection,
        )
    
    def get_database(self) -> AsyncIOMotorDatabase:
        """
        Get MongoDB database instance
        
        Returns:
            MongoDB database instance
        """
        return self.client[self.database_name]
    
    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB
        
        Returns:
            MongoDB collection for users
        """
        return self.get_database()[self.users_collection_name]
    
    def close(self) -> None:
        """Close the underlying client"""
        self.client.close()
        logger.info(f"MongoDB client for database '{self.database_name}' closed")

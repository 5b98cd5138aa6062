"""
MongoDB connection utilities.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from gamedash.core.config import get_settings

logger = logging.getLogger(__name__)


class Database:
    """
    Short-lived MongoDB connection.

    Use as an async context manager; the client is closed on exit whether
    the block returned normally or raised.
    """
    
    def __init__(self, uri: Optional[str] = None, db_name: Optional[str] = None):
        settings = get_settings()
        self.uri = uri or settings.MONGO_URI
        self.db_name = db_name or settings.MONGO_DB_NAME
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None
    
    async def connect(self) -> "Database":
        """Connect to MongoDB."""
        self.client = AsyncIOMotorClient(self.uri)
        self.db = self.client[self.db_name]
        logger.debug("Connected to MongoDB: %s", self.db_name)
        return self
    
    async def disconnect(self) -> None:
        """Disconnect from MongoDB."""
        if self.client:
            self.client.close()
            self.client = None
            self.db = None
            logger.debug("Disconnected from MongoDB")
    
    async def __aenter__(self) -> "Database":
        return await self.connect()
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()
    
    def get_collection(self, name: str):
        """Get a collection by name."""
        return self.db[name]

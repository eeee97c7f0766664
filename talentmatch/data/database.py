"""
MongoDB connections for TalentMatch.

The CLI reads through a PyMongo client and the HTTP service through a Motor
client; both are created lazily on first use and share one configuration.
"""

from typing import Any, Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from talentmatch.utils.config import DatabaseSettings, get_settings
from talentmatch.utils.logger import get_logger

logger = get_logger(__name__)

CLIENT_OPTIONS: dict[str, Any] = {
    "serverSelectionTimeoutMS": 5000,
    "connectTimeoutMS": 5000,
}
_FORBIDDEN_HOST_CHARS = set(";&|$`")


def build_mongo_uri(db_settings: DatabaseSettings) -> str:
    """
    Connection string for the configured deployment.

    An explicit ``DB_URI`` wins; otherwise host, port and URL-encoded
    credentials are assembled.
    """
    if db_settings.uri:
        return db_settings.uri

    host = db_settings.host.strip()
    if not host or _FORBIDDEN_HOST_CHARS & set(host):
        raise ValueError(f"Invalid database host: {host!r}")

    credentials = ""
    if db_settings.username and db_settings.password:
        credentials = f"{quote_plus(db_settings.username)}:{quote_plus(db_settings.password)}@"

    return f"mongodb://{credentials}{host}:{db_settings.port}"


class DatabaseManager:
    """Owns the sync and async MongoDB clients for one database."""

    def __init__(self, db_settings: Optional[DatabaseSettings] = None) -> None:
        db_settings = db_settings or get_settings().database
        self.db_name = db_settings.name
        self.uri = build_mongo_uri(db_settings)
        self._sync_client: Optional[MongoClient] = None
        self._async_client: Optional[AsyncIOMotorClient] = None

    @property
    def sync_client(self) -> MongoClient:
        if self._sync_client is None:
            logger.info(f"Opening PyMongo client for database '{self.db_name}'")
            self._sync_client = MongoClient(self.uri, **CLIENT_OPTIONS)
        return self._sync_client

    @property
    def async_client(self) -> AsyncIOMotorClient:
        if self._async_client is None:
            logger.info(f"Opening Motor client for database '{self.db_name}'")
            self._async_client = AsyncIOMotorClient(self.uri, **CLIENT_OPTIONS)
        return self._async_client

    def get_sync_collection(self, collection_name: str) -> Any:
        return self.sync_client[self.db_name][collection_name]

    def get_async_collection(self, collection_name: str) -> Any:
        return self.async_client[self.db_name][collection_name]

    def ping(self) -> bool:
        """True when the server answers through the sync client."""
        try:
            self.sync_client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")
            self._sync_client = None
            return False
        return True

    async def ping_async(self) -> bool:
        """True when the server answers through the async client."""
        try:
            await self.async_client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"MongoDB ping failed: {e}")
            return False
        return True

    def close(self) -> None:
        """Close whichever clients were opened."""
        for client in (self._sync_client, self._async_client):
            if client is not None:
                client.close()
        if self._sync_client or self._async_client:
            logger.info("MongoDB clients closed")
        self._sync_client = None
        self._async_client = None


_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Process-wide database manager, created on first call."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager

"""
Read-only repository base shared by the candidate and job repositories.

Each repository maps one collection onto one document model. Lookups come
in a PyMongo flavour for the CLI and a Motor flavour for the HTTP service;
both pass raw documents through ``_prepare`` before validation so that
subclasses can resolve references.
"""

from typing import Any, ClassVar, Generic, Optional, TypeVar

from bson import ObjectId
from bson.errors import InvalidId

from talentmatch.data.database import get_database_manager
from talentmatch.data.models.base import BaseDocument
from talentmatch.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseDocument)
Document = dict[str, Any]


def parse_object_id(id_value: str | ObjectId) -> Optional[ObjectId]:
    """ObjectId for ``id_value``, or None when it is not a valid id."""
    if isinstance(id_value, ObjectId):
        return id_value
    if not isinstance(id_value, str):
        return None
    try:
        return ObjectId(id_value)
    except InvalidId:
        return None


class BaseRepository(Generic[T]):
    """Loads documents of one collection as validated models."""

    collection_name: ClassVar[str]
    model_class: ClassVar[type[BaseDocument]]

    def __init__(self) -> None:
        self._db_manager = get_database_manager()

    def _prepare(self, documents: list[Document]) -> list[Document]:
        return documents

    async def _prepare_async(self, documents: list[Document]) -> list[Document]:
        return documents

    def _validate(self, documents: list[Document]) -> list[T]:
        return [self.model_class.model_validate(doc) for doc in documents]

    def _id_filter(self, id_value: str | ObjectId) -> Optional[Document]:
        object_id = parse_object_id(id_value)
        if object_id is None:
            logger.debug(f"Rejected malformed {self.collection_name} id: {id_value!r}")
            return None
        return {"_id": object_id}

    # Sync (PyMongo)

    def get_by_id(self, id_value: str | ObjectId) -> Optional[T]:
        """Document with the given id, or None when absent or malformed."""
        query = self._id_filter(id_value)
        if query is None:
            return None
        collection = self._db_manager.get_sync_collection(self.collection_name)
        document = collection.find_one(query)
        if document is None:
            return None
        return self._validate(self._prepare([document]))[0]

    def get_all(self) -> list[T]:
        """Every document in the collection, in natural order."""
        collection = self._db_manager.get_sync_collection(self.collection_name)
        documents = list(collection.find())
        logger.debug(f"Loaded {len(documents)} {self.collection_name} documents")
        return self._validate(self._prepare(documents))

    # Async (Motor)

    async def get_by_id_async(self, id_value: str | ObjectId) -> Optional[T]:
        query = self._id_filter(id_value)
        if query is None:
            return None
        collection = self._db_manager.get_async_collection(self.collection_name)
        document = await collection.find_one(query)
        if document is None:
            return None
        return self._validate(await self._prepare_async([document]))[0]

    async def get_all_async(self) -> list[T]:
        collection = self._db_manager.get_async_collection(self.collection_name)
        documents = await collection.find().to_list(length=None)
        logger.debug(f"Loaded {len(documents)} {self.collection_name} documents")
        return self._validate(await self._prepare_async(documents))

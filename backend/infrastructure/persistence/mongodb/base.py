"""Shared plumbing for the MongoDB tracking repositories.

Instants are stored as UTC ISO strings with microseconds so that string
order is chronological order and period queries can use $gte/$lt.
"""

from abc import ABC, abstractmethod
from typing import TypeVar, Generic, Optional, Dict, Any, List, Tuple
from datetime import datetime, timezone
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from domain.shared.errors import RepositoryError, TrackingError
from infrastructure.config import get_mongodb_uri, get_mongodb_database


TEntity = TypeVar("TEntity")

logger = logging.getLogger(__name__)


def create_mongo_client() -> AsyncIOMotorClient[Dict[str, Any]]:
    """
    Create a motor client from MONGODB_URI.

    Raises:
        ValueError: If MONGODB_URI is not configured
    """
    uri = get_mongodb_uri()
    if not uri:
        raise ValueError(
            "MONGODB_URI not configured. "
            "Set MONGODB_URI, MONGODB_USER, "
            "and MONGODB_PASSWORD environment variables."
        )
    return AsyncIOMotorClient(uri, tz_aware=True)


class MongoBaseRepository(ABC, Generic[TEntity]):
    """
    One collection, one aggregate.

    Subclasses map their aggregate with to_document/from_document and
    query through the helpers below, which turn driver failures into
    RepositoryError.
    """

    def __init__(self, client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None):
        if client is None:
            self._client: AsyncIOMotorClient[Dict[str, Any]] = create_mongo_client()
        else:
            self._client = client

        self._db = self._client[get_mongodb_database()]
        self._collection = self._db[self.collection_name]

        logger.info(f"{self.__class__.__name__} bound to '{self.collection_name}'")

    @property
    @abstractmethod
    def collection_name(self) -> str:
        pass

    @abstractmethod
    def to_document(self, entity: TEntity) -> Dict[str, Any]:
        pass

    @abstractmethod
    def from_document(self, doc: Dict[str, Any]) -> TEntity:
        """Rebuild the aggregate; KeyError or TrackingError on bad data."""
        pass

    @property
    def collection(self) -> AsyncIOMotorCollection[Dict[str, Any]]:
        return self._collection

    @staticmethod
    def datetime_to_iso(dt: datetime) -> str:
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.astimezone(timezone.utc).isoformat(timespec="microseconds")

    @staticmethod
    def iso_to_datetime(iso_str: str) -> datetime:
        dt = datetime.fromisoformat(iso_str)
        if dt.tzinfo is None:
            # legacy rows written without offset are UTC
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    def _to_entity(self, doc: Dict[str, Any]) -> TEntity:
        try:
            return self.from_document(doc)
        except (KeyError, TypeError, ValueError, TrackingError) as e:
            logger.error(f"Unreadable {self.collection_name} document {doc.get('_id')}: {e}")
            raise RepositoryError(
                f"corrupt document in {self.collection_name} ({doc.get('_id')}): {e}"
            ) from e

    def _storage_error(self, operation: str, detail: Any, error: PyMongoError) -> RepositoryError:
        logger.error(f"{operation} {self.collection_name} failed ({detail}): {error}")
        return RepositoryError(f"{operation} {self.collection_name} failed: {error}")

    async def _find_one(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
    ) -> Optional[Dict[str, Any]]:
        """First match under `sort`, or None."""
        try:
            doc: Optional[Dict[str, Any]] = await self._collection.find_one(
                filter_dict, sort=sort
            )
            return doc
        except PyMongoError as e:
            raise self._storage_error("find_one on", filter_dict, e) from e

    async def _find_many(
        self,
        filter_dict: Dict[str, Any],
        sort: Optional[List[Tuple[str, int]]] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        try:
            cursor = self._collection.find(filter_dict)
            if sort:
                cursor = cursor.sort(sort)
            if limit:
                cursor = cursor.limit(limit)

            documents: List[Dict[str, Any]] = await cursor.to_list(length=limit)
            return documents
        except PyMongoError as e:
            raise self._storage_error("find on", filter_dict, e) from e

    async def _replace_one(self, document: Dict[str, Any]) -> None:
        """Upsert by _id, last write wins."""
        try:
            await self._collection.replace_one({"_id": document["_id"]}, document, upsert=True)
        except PyMongoError as e:
            raise self._storage_error("save to", document["_id"], e) from e

    async def _update_many(self, filter_dict: Dict[str, Any], update_dict: Dict[str, Any]) -> int:
        try:
            result = await self._collection.update_many(filter_dict, update_dict)
            return int(result.modified_count)
        except PyMongoError as e:
            raise self._storage_error("update on", filter_dict, e) from e

    async def _delete_one(self, filter_dict: Dict[str, Any]) -> int:
        try:
            result = await self._collection.delete_one(filter_dict)
            return int(result.deleted_count)
        except PyMongoError as e:
            raise self._storage_error("delete on", filter_dict, e) from e

    async def _delete_many(self, filter_dict: Dict[str, Any]) -> int:
        try:
            result = await self._collection.delete_many(filter_dict)
            return int(result.deleted_count)
        except PyMongoError as e:
            raise self._storage_error("delete on", filter_dict, e) from e

    async def _count(self, filter_dict: Dict[str, Any]) -> int:
        try:
            return int(await self._collection.count_documents(filter_dict))
        except PyMongoError as e:
            raise self._storage_error("count on", filter_dict, e) from e

    async def close(self) -> None:
        self._client.close()
        logger.info(f"Closed connection for {self.__class__.__name__}")

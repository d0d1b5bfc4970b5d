"""Key-value blob storage for the document collection and preferences."""

import json
import logging
from typing import Any, Dict, Optional

import redis.asyncio as redis

from app.core.config import settings
from app.core.exceptions import PersistenceError
from app.services.retry import retry_with_backoff

logger = logging.getLogger(__name__)


class BlobStore:
    """Best-effort JSON blob storage.

    Subclasses implement raw text reads and writes; failures there raise
    PersistenceError and are logged here instead of reaching callers.
    """

    async def _read(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def _write(self, key: str, text: str) -> None:
        raise NotImplementedError

    async def load(self, key: str, default: Any = None) -> Any:
        """
        Load a JSON value.

        Args:
            key: Blob key.
            default: Value returned when the key is missing or unreadable.

        Returns:
            Stored value or default.
        """
        try:
            text = await self._read(key)
            if text is None:
                return default
            return json.loads(text)
        except (PersistenceError, json.JSONDecodeError) as e:
            logger.error(f"Error loading '{key}' from blob store: {str(e)}")
            return default

    async def save(self, key: str, value: Any) -> bool:
        """
        Save a JSON-serializable value.

        Args:
            key: Blob key.
            value: Value to store.

        Returns:
            True if the value was written.
        """
        try:
            await self._write(key, json.dumps(value))
            return True
        except (PersistenceError, TypeError, ValueError) as e:
            logger.error(f"Error saving '{key}' to blob store: {str(e)}")
            return False

    async def connect(self) -> None:
        """Open the underlying storage."""

    async def disconnect(self) -> None:
        """Close the underlying storage."""


class MemoryBlobStore(BlobStore):
    """In-process blob store holding serialized text."""

    def __init__(self) -> None:
        self._blobs: Dict[str, str] = {}

    async def _read(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    async def _write(self, key: str, text: str) -> None:
        self._blobs[key] = text


class RedisBlobStore(BlobStore):
    """Redis-backed blob store."""

    def __init__(self, client: Optional[redis.Redis] = None) -> None:
        """
        Initialize the Redis blob store.

        Args:
            client: Existing Redis client; created on connect when omitted.
        """
        self.client: Optional[redis.Redis] = client

    async def connect(self) -> None:
        """Connect to Redis, retrying with backoff."""
        try:
            if self.client is None:
                self.client = redis.from_url(
                    settings.redis_url,
                    decode_responses=True,
                    max_connections=settings.redis_pool_size,
                    socket_connect_timeout=5.0,
                )
            await retry_with_backoff(self.client.ping)
        except Exception as e:
            self.client = None
            raise PersistenceError(
                f"Failed to connect to Redis: {str(e)}") from e

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.client:
            await self.client.close()

    async def _read(self, key: str) -> Optional[str]:
        if not self.client:
            return None
        try:
            return await self.client.get(key)
        except Exception as e:
            raise PersistenceError(f"Failed to read blob: {str(e)}") from e

    async def _write(self, key: str, text: str) -> None:
        if not self.client:
            raise PersistenceError("Redis not connected")
        try:
            await self.client.set(key, text)
        except Exception as e:
            raise PersistenceError(f"Failed to write blob: {str(e)}") from e


def create_blob_store() -> BlobStore:
    """Build the blob store selected by settings."""
    if settings.blob_store_backend == "memory":
        return MemoryBlobStore()
    return RedisBlobStore()

"""Dependency injection for services."""

import logging
from typing import Optional

from fastapi import Request

from app.core.exceptions import PersistenceError
from app.services.blob_store import BlobStore, create_blob_store
from app.services.document_store import DocumentStore
from app.services.fallback import ModelFallbackClient
from app.services.llm import LLMService
from app.services.preferences import PreferencesStore

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for the service instances of one application session."""

    def __init__(
        self,
        blob_store: Optional[BlobStore] = None,
        generator: Optional[ModelFallbackClient] = None,
    ) -> None:
        """
        Initialize service container.

        Args:
            blob_store: Persistence collaborator; selected from settings when omitted.
            generator: Fallback client; built on the OpenAI-compatible backend when omitted.
        """
        self.blob_store = blob_store or create_blob_store()
        self.generator = generator or ModelFallbackClient(backend=LLMService())
        self.document_store = DocumentStore(
            generator=self.generator, blob_store=self.blob_store)
        self.preferences = PreferencesStore(blob_store=self.blob_store)

    async def initialize(self) -> None:
        """Initialize all services."""
        try:
            await self.blob_store.connect()
        except PersistenceError as e:
            logger.warning(f"Blob store unavailable, running without persistence: {str(e)}")
        await self.preferences.initialize()
        self.document_store.update_pagination(
            items_per_page=self.preferences.preferences.items_per_page)
        await self.document_store.initialize()

    async def shutdown(self) -> None:
        """Shutdown all services."""
        await self.blob_store.disconnect()


def get_services(request: Request) -> ServiceContainer:
    """Return the container attached to the running application."""
    return request.app.state.services


def get_document_store(request: Request) -> DocumentStore:
    return get_services(request).document_store


def get_preferences_store(request: Request) -> PreferencesStore:
    return get_services(request).preferences


def get_generator(request: Request) -> ModelFallbackClient:
    return get_services(request).generator

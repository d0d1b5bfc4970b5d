"""Persisted user display preferences."""

import logging
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.models.preferences import UserPreferences
from app.services.blob_store import BlobStore

logger = logging.getLogger(__name__)


class PreferencesStore:
    """Holds the display preferences and saves every change."""

    def __init__(self, blob_store: BlobStore, storage_key: Optional[str] = None) -> None:
        self.blob_store = blob_store
        self.storage_key = storage_key or settings.preferences_key
        self.preferences = UserPreferences()

    async def initialize(self) -> None:
        """Load saved preferences, keeping defaults when none are usable."""
        stored = await self.blob_store.load(self.storage_key, None)
        if stored is None:
            return
        try:
            self.preferences = UserPreferences.model_validate(stored)
        except PydanticValidationError as e:
            logger.error(f"Stored preferences are invalid, using defaults: {str(e)}")

    async def update(self, **changes: Any) -> UserPreferences:
        """
        Merge and persist preference changes.

        Args:
            **changes: UserPreferences fields.

        Returns:
            The new preferences.
        """
        merged = {**self.preferences.model_dump(), **changes}
        self.preferences = UserPreferences.model_validate(merged)
        await self.blob_store.save(
            self.storage_key, self.preferences.model_dump(mode="json", by_alias=True))
        return self.preferences

    async def toggle_theme(self) -> UserPreferences:
        theme = "dark" if self.preferences.theme == "light" else "light"
        return await self.update(theme=theme)

    async def set_view_mode(self, view_mode: str) -> UserPreferences:
        return await self.update(view_mode=view_mode)

    async def set_pagination_mode(self, pagination_mode: str) -> UserPreferences:
        return await self.update(pagination_mode=pagination_mode)

    async def set_items_per_page(self, items_per_page: int) -> UserPreferences:
        return await self.update(items_per_page=items_per_page)

    @property
    def is_dark_mode(self) -> bool:
        return self.preferences.theme == "dark"

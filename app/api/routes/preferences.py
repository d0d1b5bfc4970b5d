"""User preference routes."""

from typing import Literal, Optional

from fastapi import APIRouter, Depends
from pydantic import Field

from app.core.dependencies import get_document_store, get_preferences_store
from app.models.document import CamelModel
from app.models.preferences import UserPreferences
from app.services.document_store import DocumentStore
from app.services.preferences import PreferencesStore

router = APIRouter()


class PreferencesUpdate(CamelModel):
    """Partial preference change."""

    theme: Optional[Literal["light", "dark"]] = None
    view_mode: Optional[Literal["grid", "list"]] = None
    pagination_mode: Optional[Literal["infinite", "traditional"]] = None
    items_per_page: Optional[int] = Field(None, ge=1, le=100)


@router.get("", response_model=UserPreferences)
async def get_preferences(
    preferences: PreferencesStore = Depends(get_preferences_store),
) -> UserPreferences:
    return preferences.preferences


@router.put("", response_model=UserPreferences)
async def update_preferences(
    update: PreferencesUpdate,
    preferences: PreferencesStore = Depends(get_preferences_store),
    store: DocumentStore = Depends(get_document_store),
) -> UserPreferences:
    """Merge preference changes; a new page size also applies to the document view."""
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    updated = await preferences.update(**changes)
    if "items_per_page" in changes:
        store.update_pagination(items_per_page=updated.items_per_page)
    return updated


@router.post("/theme/toggle", response_model=UserPreferences)
async def toggle_theme(
    preferences: PreferencesStore = Depends(get_preferences_store),
) -> UserPreferences:
    return await preferences.toggle_theme()

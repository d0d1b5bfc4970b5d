"""User display preference models."""

from typing import Literal

from pydantic import Field

from app.models.document import CamelModel


class UserPreferences(CamelModel):
    """Display preferences persisted per installation."""

    theme: Literal["light", "dark"] = "light"
    view_mode: Literal["grid", "list"] = "grid"
    pagination_mode: Literal["infinite", "traditional"] = "infinite"
    items_per_page: int = Field(default=12, ge=1, le=100)

"""Search and pagination state models."""

from datetime import datetime
from enum import Enum
from typing import Literal, Optional

from pydantic import Field

from app.models.document import CamelModel

TypeFilter = Literal["document", "slide", "spreadsheet", "all"]
CategoryFilter = Literal["business", "personal", "academic", "all"]


class SortBy(str, Enum):
    """Sortable document fields."""

    CREATED_AT = "createdAt"
    TITLE = "title"
    TYPE = "type"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class DateRange(CamelModel):
    """Inclusive creation time window."""

    start: datetime
    end: datetime


class FilterOptions(CamelModel):
    """Optional document filters; "all" disables a filter."""

    type: Optional[TypeFilter] = None
    category: Optional[CategoryFilter] = None
    date_range: Optional[DateRange] = None


class SearchState(CamelModel):
    """Query, filters and ordering driving the derived view."""

    query: str = ""
    filters: FilterOptions = Field(default_factory=FilterOptions)
    sort_by: SortBy = SortBy.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC


class PaginationState(CamelModel):
    """Page-based view metadata, derived from the filtered set."""

    current_page: int = Field(default=1, ge=1)
    total_pages: int = Field(default=1, ge=0)
    total_items: int = Field(default=0, ge=0)
    items_per_page: int = Field(default=12, ge=1)

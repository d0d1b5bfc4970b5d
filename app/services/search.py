"""Filter, sort and slice operations over document collections."""

import math
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from app.models.document import Document
from app.models.search import FilterOptions, SortBy, SortOrder


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 timestamp.

    Args:
        value: Timestamp string, "Z" suffix allowed.

    Returns:
        Timezone-aware datetime, or None when unparseable.
    """
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return None
    return _as_utc(parsed)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _matches_query(document: Document, query: str) -> bool:
    return (
        query in document.title.lower()
        or query in document.content.lower()
        or any(query in tag.lower() for tag in document.tags)
    )


def filter_documents(
    documents: Sequence[Document],
    filters: Optional[FilterOptions] = None,
    query: str = "",
) -> List[Document]:
    """
    Select documents matching the query and every active filter.

    Args:
        documents: Collection to filter.
        filters: Type, category and date range filters.
        query: Case-insensitive substring of title, content or a tag.

    Returns:
        Matching documents in collection order.
    """
    filters = filters or FilterOptions()
    needle = query.lower() if query else ""

    start = end = None
    if filters.date_range:
        start = _as_utc(filters.date_range.start)
        end = _as_utc(filters.date_range.end)

    results = []
    for document in documents:
        if needle and not _matches_query(document, needle):
            continue
        if filters.type and filters.type != "all" and document.type.value != filters.type:
            continue
        if (
            filters.category
            and filters.category != "all"
            and document.category.value != filters.category
        ):
            continue
        if start is not None:
            created = parse_timestamp(document.created_at)
            # Unparseable timestamps are not excluded by the date window
            if created is not None and not start <= created <= end:
                continue
        results.append(document)
    return results


def _sort_key(sort_by: SortBy):
    if sort_by == SortBy.TITLE:
        return lambda doc: doc.title.casefold()
    if sort_by == SortBy.TYPE:
        return lambda doc: doc.type.value.casefold()

    def created_at_key(doc: Document) -> float:
        created = parse_timestamp(doc.created_at)
        return created.timestamp() if created else 0.0

    return created_at_key


def sort_documents(
    documents: Sequence[Document],
    sort_by: SortBy = SortBy.CREATED_AT,
    sort_order: SortOrder = SortOrder.DESC,
) -> List[Document]:
    """
    Return a new list ordered by one field.

    Python's sort is stable in both directions, so ties keep collection order.

    Args:
        documents: Collection to sort.
        sort_by: Field to compare.
        sort_order: Ascending or descending.

    Returns:
        Sorted copy.
    """
    return sorted(
        documents,
        key=_sort_key(SortBy(sort_by)),
        reverse=SortOrder(sort_order) == SortOrder.DESC,
    )


def paginate(documents: Sequence[Document], page: int, items_per_page: int) -> List[Document]:
    """Return the 1-indexed page window."""
    start_idx = (page - 1) * items_per_page
    end_idx = start_idx + items_per_page
    return list(documents[start_idx:end_idx])


def batch(documents: Sequence[Document], batch_number: int, items_per_batch: int) -> List[Document]:
    """Return the cumulative prefix covering the first batch_number batches."""
    end_idx = min(batch_number * items_per_batch, len(documents))
    return list(documents[:end_idx])


def calculate_total_pages(total_items: int, items_per_page: int) -> int:
    """Return the number of pages needed for total_items."""
    return math.ceil(total_items / items_per_page)

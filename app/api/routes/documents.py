"""Document creation, listing and view routes."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Response
from pydantic import Field

from app.core.dependencies import get_document_store, get_generator
from app.models.document import CamelModel, DocumentUpdate, parse_create_request
from app.models.response import (
    DocumentListResponse,
    DocumentResponse,
    DocumentViewResponse,
    GenerateDocumentResponse,
)
from app.models.search import (
    CategoryFilter,
    FilterOptions,
    PaginationState,
    SortBy,
    SortOrder,
    TypeFilter,
)
from app.services.document_store import DocumentStore
from app.services.fallback import ModelFallbackClient
from app.services.search import (
    calculate_total_pages,
    filter_documents,
    paginate,
    sort_documents,
)

router = APIRouter()


class SearchUpdate(CamelModel):
    """Partial search state change."""

    query: Optional[str] = None
    filters: Optional[FilterOptions] = None
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None


class PaginationUpdate(CamelModel):
    """Partial pagination change; totals are always derived."""

    current_page: Optional[int] = Field(None, ge=1)
    items_per_page: Optional[int] = Field(None, ge=1, le=100)


def build_view(store: DocumentStore) -> DocumentViewResponse:
    """Snapshot the store's derived view."""
    return DocumentViewResponse(
        documents=store.displayed_documents,
        paginated_documents=store.paginated_documents,
        has_more=store.has_more,
        pagination=store.pagination,
        search_state=store.search_state,
        is_loading=store.is_loading,
        error=store.error,
        total_documents=store.total_documents,
    )


@router.post("", response_model=GenerateDocumentResponse)
async def create_document(
    payload: Any = Body(None),
    store: DocumentStore = Depends(get_document_store),
    generator: ModelFallbackClient = Depends(get_generator),
) -> GenerateDocumentResponse:
    """
    Generate a document with the ranked models and add it to the store.

    Args:
        payload: Raw body with title, type, prompt and category.

    Returns:
        Generated content, the model that produced it and the stored document.
    """
    request = parse_create_request(payload)
    document = await store.create(request)
    return GenerateDocumentResponse(
        content=document.content,
        model=generator.get_current_model_info(),
        document=document,
    )


@router.get("", response_model=DocumentListResponse)
async def list_documents(
    doc_type: Optional[TypeFilter] = Query(None, alias="type"),
    category: Optional[CategoryFilter] = Query(None),
    search: str = Query(""),
    page: int = Query(1, ge=1),
    limit: int = Query(12, ge=1, le=100),
    sort_by: SortBy = Query(SortBy.CREATED_AT, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
    store: DocumentStore = Depends(get_document_store),
) -> DocumentListResponse:
    """
    List one page of documents without touching the store's own view state.

    Returns:
        Page of documents with pagination metadata.
    """
    filtered = filter_documents(
        store.documents, FilterOptions(type=doc_type, category=category), search)
    ordered = sort_documents(filtered, sort_by, sort_order)
    return DocumentListResponse(
        documents=paginate(ordered, page, limit),
        pagination=PaginationState(
            current_page=page,
            total_pages=calculate_total_pages(len(ordered), limit),
            total_items=len(ordered),
            items_per_page=limit,
        ),
    )


@router.get("/view", response_model=DocumentViewResponse)
async def get_view(store: DocumentStore = Depends(get_document_store)) -> DocumentViewResponse:
    """Return the stateful infinite-scroll and page views."""
    return build_view(store)


@router.put("/view/search", response_model=DocumentViewResponse)
async def update_search(
    update: SearchUpdate, store: DocumentStore = Depends(get_document_store)
) -> DocumentViewResponse:
    """Merge a search change; a new query or filter restarts paging."""
    store.update_search(**update.model_dump(exclude_unset=True))
    return build_view(store)


@router.put("/view/pagination", response_model=DocumentViewResponse)
async def update_pagination(
    update: PaginationUpdate, store: DocumentStore = Depends(get_document_store)
) -> DocumentViewResponse:
    store.update_pagination(**update.model_dump(exclude_unset=True))
    return build_view(store)


@router.post("/view/load-more", response_model=DocumentViewResponse)
async def load_more(store: DocumentStore = Depends(get_document_store)) -> DocumentViewResponse:
    store.load_more()
    return build_view(store)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str, store: DocumentStore = Depends(get_document_store)
) -> DocumentResponse:
    """Get a document by ID."""
    document = store.get(document_id)
    if not document:
        raise HTTPException(status_code=404, detail="Document not found")
    return DocumentResponse(document=document)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: str,
    update: DocumentUpdate,
    store: DocumentStore = Depends(get_document_store),
) -> DocumentResponse:
    """Update a document's title or content."""
    document = await store.update(document_id, update)
    if not document:
        raise HTTPException(status_code=404, detail="Document not found")
    return DocumentResponse(document=document)


@router.delete("/{document_id}", status_code=204)
async def delete_document(
    document_id: str, store: DocumentStore = Depends(get_document_store)
) -> Response:
    """Delete a document; unknown ids succeed as well."""
    await store.delete(document_id)
    return Response(status_code=204)

"""Document collection with a derived filtered, sorted and paginated view."""

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, List, Optional, Union
from uuid import uuid4

from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.core.exceptions import GenerationError, GenerationInProgressError
from app.models.document import CreateDocumentRequest, Document, DocumentUpdate
from app.models.search import PaginationState, SearchState
from app.monitoring.metrics import documents_created_total, documents_deleted_total
from app.services.blob_store import BlobStore
from app.services.fallback import ModelFallbackClient
from app.services.search import (
    batch,
    calculate_total_pages,
    filter_documents,
    paginate,
    sort_documents,
)
from app.services.seed_data import seed_documents
from app.services.tags import extract_tags

logger = logging.getLogger(__name__)


class StoreStatus(str, Enum):
    """Lifecycle of a document store."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    GENERATING = "generating"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DocumentStore:
    """Owns the canonical document collection for one application session.

    The filtered and sorted sequence is recomputed on demand and sliced two
    ways: cumulative batches for infinite scroll and page windows for
    traditional pagination. Callers receive copies, never the stored models.
    """

    def __init__(
        self,
        generator: ModelFallbackClient,
        blob_store: BlobStore,
        storage_key: Optional[str] = None,
        items_per_page: Optional[int] = None,
        items_per_batch: Optional[int] = None,
        seed: Callable[[], List[Document]] = seed_documents,
    ) -> None:
        """
        Initialize the document store.

        Args:
            generator: Fallback client producing document content.
            blob_store: Persistence collaborator.
            storage_key: Blob key for the collection.
            items_per_page: Page size for traditional pagination.
            items_per_batch: Increment for infinite scroll.
            seed: Factory for the collection used when nothing is persisted.
        """
        self.generator = generator
        self.blob_store = blob_store
        self.storage_key = storage_key or settings.documents_key
        self.seed = seed

        self._documents: List[Document] = []
        self.search_state = SearchState()
        self.current_page = 1
        self.items_per_page = items_per_page or settings.items_per_page
        self.current_batch = 1
        self.items_per_batch = items_per_batch or settings.items_per_batch

        self.status = StoreStatus.UNINITIALIZED
        self.is_loading = False
        self.error: Optional[str] = None
        self._save_lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Load the persisted collection, seeding it when nothing usable is stored."""
        if self.status != StoreStatus.UNINITIALIZED:
            return

        stored = await self.blob_store.load(self.storage_key, None)
        documents = self._deserialize(stored) if stored is not None else None
        if documents is None:
            documents = self.seed()
            logger.info(f"Seeded document store with {len(documents)} documents")
        else:
            logger.info(f"Loaded {len(documents)} documents from blob store")

        self._documents = documents
        self.status = StoreStatus.READY

    def _deserialize(self, stored: Any) -> Optional[List[Document]]:
        if not isinstance(stored, list):
            logger.error(
                f"Stored collection under '{self.storage_key}' is not a list, using defaults")
            return None
        try:
            documents = [Document.model_validate(item) for item in stored]
        except PydanticValidationError as e:
            logger.error(
                f"Stored collection under '{self.storage_key}' is invalid, using defaults: {str(e)}")
            return None

        unique = {}
        for document in documents:
            unique.setdefault(document.id, document)
        if len(unique) != len(documents):
            logger.warning(
                f"Dropped {len(documents) - len(unique)} documents with duplicate ids")
        return list(unique.values())

    def _require_ready(self) -> None:
        if self.status == StoreStatus.UNINITIALIZED:
            raise RuntimeError("Document store not initialized")

    async def _persist(self) -> None:
        async with self._save_lock:
            await self.blob_store.save(
                self.storage_key,
                [doc.model_dump(mode="json", by_alias=True)
                 for doc in self._documents],
            )

    def _new_id(self) -> str:
        existing = {doc.id for doc in self._documents}
        doc_id = uuid4().hex
        while doc_id in existing:
            doc_id = uuid4().hex
        return doc_id

    async def create(self, request: CreateDocumentRequest) -> Document:
        """
        Generate and store a new document.

        Args:
            request: Validated create request.

        Returns:
            The new document.

        Raises:
            GenerationInProgressError: If another creation is still running.
            GenerationError: If every generation model failed.
        """
        if self.status == StoreStatus.GENERATING:
            raise GenerationInProgressError(
                "A document is already being generated")
        self._require_ready()

        self.status = StoreStatus.GENERATING
        self.is_loading = True
        self.error = None
        try:
            content = await self.generator.generate_document(request)
        except GenerationError as e:
            self.error = str(e)
            logger.error(f"Failed to create document '{request.title}': {str(e)}")
            raise
        finally:
            self.is_loading = False
            self.status = StoreStatus.READY

        document = Document(
            id=self._new_id(),
            title=request.title,
            type=request.type,
            category=request.category,
            content=content,
            created_at=_utc_now_iso(),
            ai_generated=True,
            tags=extract_tags(
                request.title, request.prompt, request.category.value, request.type.value),
        )
        self._documents.insert(0, document)
        documents_created_total.inc()
        logger.info(f"Created document {document.id}: {document.title}")

        await self._persist()
        return document.model_copy(deep=True)

    async def delete(self, document_id: str) -> bool:
        """
        Remove a document; unknown ids are ignored.

        Args:
            document_id: Id of the document to remove.

        Returns:
            True if a document was removed.
        """
        self._require_ready()
        remaining = [doc for doc in self._documents if doc.id != document_id]
        if len(remaining) == len(self._documents):
            return False

        self._documents = remaining
        documents_deleted_total.inc()
        logger.info(f"Deleted document {document_id}")
        await self._persist()
        return True

    async def update(
        self, document_id: str, updates: Union[DocumentUpdate, dict]
    ) -> Optional[Document]:
        """
        Merge mutable fields into a document.

        Args:
            document_id: Id of the document to update.
            updates: Fields to merge.

        Returns:
            The updated document, or None if the id is unknown.
        """
        self._require_ready()
        if isinstance(updates, dict):
            updates = DocumentUpdate.model_validate(updates)
        changes = updates.model_dump(exclude_unset=True, exclude_none=True)

        for index, document in enumerate(self._documents):
            if document.id == document_id:
                updated = document.model_copy(update=changes)
                self._documents[index] = updated
                await self._persist()
                return updated.model_copy(deep=True)
        return None

    def get(self, document_id: str) -> Optional[Document]:
        """Return a copy of the document, or None if the id is unknown."""
        for document in self._documents:
            if document.id == document_id:
                return document.model_copy(deep=True)
        return None

    def update_search(self, **changes: Any) -> SearchState:
        """
        Merge changes into the search state.

        Providing query or filters restarts both the page and the batch cursor.
        A null query or filters clears it; a null sort field keeps the current one.

        Args:
            **changes: SearchState fields (query, filters, sort_by, sort_order).

        Returns:
            The new search state.
        """
        if "query" in changes and changes["query"] is None:
            changes["query"] = ""
        if "filters" in changes and changes["filters"] is None:
            changes["filters"] = {}
        changes = {key: value for key, value in changes.items() if value is not None}
        merged = {**self.search_state.model_dump(), **changes}
        self.search_state = SearchState.model_validate(merged)
        if "query" in changes or "filters" in changes:
            self.current_page = 1
            self.current_batch = 1
        return self.search_state

    def update_pagination(self, **changes: Any) -> PaginationState:
        """
        Merge page number or page size changes.

        Totals are always derived from the filtered set, so total_items and
        total_pages are ignored.

        Returns:
            The derived pagination state.
        """
        if changes.get("current_page") is not None:
            self.current_page = max(1, int(changes["current_page"]))
        if changes.get("items_per_page") is not None:
            self.items_per_page = max(1, int(changes["items_per_page"]))
        return self.pagination

    def load_more(self) -> bool:
        """
        Grow the infinite-scroll batch by one increment.

        Returns:
            True if more documents were revealed.
        """
        if not self.has_more:
            return False
        self.current_batch += 1
        return True

    def clear_error(self) -> None:
        self.error = None

    def filtered_documents(self) -> List[Document]:
        """Filter and sort the collection under the current search state."""
        state = self.search_state
        filtered = filter_documents(self._documents, state.filters, state.query)
        return sort_documents(filtered, state.sort_by, state.sort_order)

    @property
    def displayed_documents(self) -> List[Document]:
        """Cumulative infinite-scroll prefix."""
        return _snapshot(batch(self.filtered_documents(), self.current_batch, self.items_per_batch))

    @property
    def paginated_documents(self) -> List[Document]:
        """Current page window."""
        return _snapshot(paginate(self.filtered_documents(), self.current_page, self.items_per_page))

    @property
    def has_more(self) -> bool:
        return self.current_batch * self.items_per_batch < len(self.filtered_documents())

    @property
    def pagination(self) -> PaginationState:
        total_items = len(self.filtered_documents())
        return PaginationState(
            current_page=self.current_page,
            total_pages=calculate_total_pages(total_items, self.items_per_page),
            total_items=total_items,
            items_per_page=self.items_per_page,
        )

    @property
    def documents(self) -> List[Document]:
        """Entire collection, newest first."""
        return _snapshot(self._documents)

    @property
    def total_documents(self) -> int:
        return len(self._documents)


def _snapshot(documents: List[Document]) -> List[Document]:
    return [doc.model_copy(deep=True) for doc in documents]

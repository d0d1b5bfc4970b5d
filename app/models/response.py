"""Response models for the HTTP API."""

from typing import List, Optional

from pydantic import Field

from app.models.document import CamelModel, Document
from app.models.search import PaginationState, SearchState


class GenerationModel(CamelModel):
    """Ranked generation backend descriptor."""

    name: str = Field(description="Display name of the model")
    model: str = Field(description="Model identifier sent to the backend")
    available: bool = True


class GenerateDocumentResponse(CamelModel):
    """Result of a successful document generation."""

    success: bool = True
    content: str
    model: GenerationModel
    document: Document


class DocumentResponse(CamelModel):
    """Single document envelope."""

    success: bool = True
    document: Document


class DocumentListResponse(CamelModel):
    """One page of documents with pagination metadata."""

    success: bool = True
    documents: List[Document]
    pagination: PaginationState


class DocumentViewResponse(CamelModel):
    """Stateful derived view held by the document store."""

    success: bool = True
    documents: List[Document]
    paginated_documents: List[Document]
    has_more: bool
    pagination: PaginationState
    search_state: SearchState
    is_loading: bool
    error: Optional[str] = None
    total_documents: int


class ModelListResponse(CamelModel):
    """Ranked generation models and the last one attempted."""

    success: bool = True
    models: List[GenerationModel]
    current_model: Optional[GenerationModel] = None


class ErrorResponse(CamelModel):
    """Failure envelope."""

    success: bool = False
    error: str

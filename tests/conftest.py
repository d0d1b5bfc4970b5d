"""
Test configuration and fixtures for the document service.
"""
import asyncio
from typing import Dict, List, Union

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app.core.dependencies import ServiceContainer
from app.core.exceptions import BackendError
from app.document_service import create_app
from app.models.document import CreateDocumentRequest, Document
from app.models.response import GenerationModel
from app.services.blob_store import MemoryBlobStore
from app.services.document_store import DocumentStore
from app.services.fallback import ModelFallbackClient


class StubBackend:
    """Backend returning a scripted outcome per model id."""

    def __init__(
        self,
        responses: Dict[str, Union[str, Exception]] = None,
        default: Union[str, Exception] = "Generated content.",
        delay: float = 0.0,
    ):
        self.responses = responses or {}
        self.default = default
        self.delay = delay
        self.calls: List[str] = []
        self.prompts: List[str] = []

    async def generate(self, model_id: str, prompt: str) -> str:
        self.calls.append(model_id)
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        outcome = self.responses.get(model_id, self.default)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def models() -> List[GenerationModel]:
    """Three ranked test models."""
    return [
        GenerationModel(name="Primary", model="model-a"),
        GenerationModel(name="Secondary", model="model-b"),
        GenerationModel(name="Tertiary", model="model-c"),
    ]


@pytest.fixture
def backend() -> StubBackend:
    return StubBackend()


@pytest.fixture
def generator(backend, models) -> ModelFallbackClient:
    return ModelFallbackClient(backend=backend, models=models, timeout_seconds=1.0)


@pytest.fixture
def blob_store() -> MemoryBlobStore:
    return MemoryBlobStore()


@pytest_asyncio.fixture
async def document_store(generator, blob_store) -> DocumentStore:
    """Initialized store seeded with the sample documents."""
    store = DocumentStore(
        generator=generator, blob_store=blob_store, items_per_page=2, items_per_batch=2)
    await store.initialize()
    return store


@pytest.fixture
def create_request() -> CreateDocumentRequest:
    return CreateDocumentRequest(
        title="Budget Plan",
        type="spreadsheet",
        category="business",
        prompt="Generate a budget tracking template with income and expense categories",
    )


@pytest.fixture
def make_document():
    """Factory for documents with sensible defaults."""

    def _make(**overrides) -> Document:
        data = {
            "id": "doc-1",
            "title": "Quarterly Report",
            "type": "document",
            "category": "business",
            "content": "Revenue grew across all regions.",
            "created_at": "2025-01-10T09:00:00Z",
            "ai_generated": True,
            "tags": ["quarterly", "report"],
        }
        data.update(overrides)
        return Document(**data)

    return _make


@pytest.fixture
def services(generator, blob_store) -> ServiceContainer:
    return ServiceContainer(blob_store=blob_store, generator=generator)


@pytest.fixture
def client(services) -> TestClient:
    """Test client with the lifespan running against in-memory services."""
    with TestClient(create_app(services)) as test_client:
        yield test_client

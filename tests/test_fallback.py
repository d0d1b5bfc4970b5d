"""Tests for the sequential model fallback client."""

import pytest

from app.core.exceptions import BackendError, GenerationError
from app.models.response import GenerationModel
from app.services.fallback import (
    GENERATION_MODELS,
    FallbackState,
    ModelFallbackClient,
)
from conftest import StubBackend


class TestFallbackState:
    """Tests for the attempt state machine."""

    def test_start(self):
        state = FallbackState.start(3)
        assert state.attempt_index == 0
        assert state.remaining_models == 3
        assert not state.exhausted

    def test_advance_until_exhausted(self):
        error = BackendError("boom")
        state = FallbackState.start(2).advance(error).advance(error)
        assert state.exhausted
        assert state.attempt_index == 2
        assert state.last_error is error

    def test_empty_list_starts_exhausted(self):
        assert FallbackState.start(0).exhausted


def test_default_models_are_ranked_gemini_models():
    assert len(GENERATION_MODELS) == 6
    assert GENERATION_MODELS[0].model == "gemini-2.5-flash"
    assert GENERATION_MODELS[-1].model == "gemini-1.5-flash-8b"


@pytest.mark.asyncio
async def test_first_model_success(generator, backend, create_request):
    content = await generator.generate_document(create_request)

    assert content == "Generated content."
    assert backend.calls == ["model-a"]
    assert generator.get_current_model_info().model == "model-a"


@pytest.mark.asyncio
async def test_falls_back_to_last_model(models, create_request):
    backend = StubBackend(
        responses={
            "model-a": BackendError("quota exceeded"),
            "model-b": BackendError("server error"),
            "model-c": "Income\nExpenses\n",
        }
    )
    client = ModelFallbackClient(backend=backend, models=models)

    content = await client.generate_document(create_request)

    assert content == "Income\nExpenses"
    assert backend.calls == ["model-a", "model-b", "model-c"]
    assert client.get_current_model_info().name == "Tertiary"


@pytest.mark.asyncio
async def test_empty_text_counts_as_failure(models, create_request):
    backend = StubBackend(responses={"model-a": "   \n  ", "model-b": "Real content"})
    client = ModelFallbackClient(backend=backend, models=models)

    content = await client.generate_document(create_request)

    assert content == "Real content"
    assert client.get_current_model_info().model == "model-b"


@pytest.mark.asyncio
async def test_unexpected_backend_exception_falls_back(models, create_request):
    backend = StubBackend(responses={"model-a": RuntimeError("connection reset")})
    client = ModelFallbackClient(backend=backend, models=models)

    assert await client.generate_document(create_request) == "Generated content."
    assert backend.calls == ["model-a", "model-b"]


@pytest.mark.asyncio
async def test_exhaustion_raises_generation_error(models, create_request):
    backend = StubBackend(default=BackendError("unavailable"))
    client = ModelFallbackClient(backend=backend, models=models)

    with pytest.raises(GenerationError) as exc_info:
        await client.generate_document(create_request)

    assert "All AI models failed" in str(exc_info.value)
    assert "unavailable" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, BackendError)
    assert backend.calls == ["model-a", "model-b", "model-c"]
    assert client.get_current_model_info().model == "model-c"


@pytest.mark.asyncio
async def test_cursor_resets_for_each_request(models, create_request):
    backend = StubBackend(responses={"model-a": BackendError("busy")})
    client = ModelFallbackClient(backend=backend, models=models)

    await client.generate_document(create_request)
    assert client.get_current_model_info().model == "model-b"

    backend.responses = {}
    await client.generate_document(create_request)
    assert client.get_current_model_info().model == "model-a"
    assert backend.calls == ["model-a", "model-b", "model-a"]


@pytest.mark.asyncio
async def test_hung_model_times_out_and_falls_back(models, create_request):
    class SlowFirstBackend(StubBackend):
        async def generate(self, model_id, prompt):
            if model_id == "model-a":
                self.delay = 5.0
            else:
                self.delay = 0.0
            return await super().generate(model_id, prompt)

    backend = SlowFirstBackend()
    client = ModelFallbackClient(backend=backend, models=models, timeout_seconds=0.05)

    assert await client.generate_document(create_request) == "Generated content."
    assert client.get_current_model_info().model == "model-b"


@pytest.mark.asyncio
async def test_unavailable_model_is_skipped(create_request):
    backend = StubBackend()
    client = ModelFallbackClient(
        backend=backend,
        models=[
            GenerationModel(name="Retired", model="old", available=False),
            GenerationModel(name="Current", model="new"),
        ],
    )

    await client.generate_document(create_request)
    assert backend.calls == ["new"]


@pytest.mark.asyncio
async def test_no_models_configured(create_request):
    client = ModelFallbackClient(backend=StubBackend(), models=[])

    with pytest.raises(GenerationError, match="No available AI models"):
        await client.generate_document(create_request)
    assert client.get_current_model_info() is None


@pytest.mark.asyncio
async def test_output_is_cleaned(models, create_request):
    backend = StubBackend(default="Plan\n\nDate: March 3, 2024\n\n\n\nDone")
    client = ModelFallbackClient(backend=backend, models=models)

    assert await client.generate_document(create_request) == "Plan\n\nDone"


@pytest.mark.asyncio
async def test_prompt_sent_to_backend(generator, backend, create_request):
    await generator.generate_document(create_request)
    assert 'titled "Budget Plan"' in backend.prompts[0]

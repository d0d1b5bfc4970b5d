"""Sequential multi-model generation with fallback."""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Union

from app.core.config import settings
from app.core.exceptions import BackendError, GenerationError
from app.models.document import CreateDocumentRequest
from app.models.response import GenerationModel
from app.monitoring.metrics import (
    generation_attempts_total,
    generation_errors_total,
    generation_latency_seconds,
    generation_requests_total,
)
from app.services.llm import LLMService
from app.services.metrics_tracker import add_generation_latency_sample
from app.services.prompts import build_prompt, clean_generated_content

logger = logging.getLogger(__name__)

# Ranked by preference
GENERATION_MODELS: List[GenerationModel] = [
    GenerationModel(name="Gemini 2.5 Flash", model="gemini-2.5-flash"),
    GenerationModel(name="Gemini 2.0 Flash Experimental",
                    model="gemini-2.0-flash-exp"),
    GenerationModel(name="Gemini 2.0 Flash", model="gemini-2.0-flash"),
    GenerationModel(name="Gemini 2.0 Flash Lite",
                    model="gemini-2.0-flash-lite"),
    GenerationModel(name="Gemini 1.5 Flash", model="gemini-1.5-flash"),
    GenerationModel(name="Gemini 1.5 Flash 8B", model="gemini-1.5-flash-8b"),
]


@dataclass(frozen=True)
class Success:
    """Attempt that produced usable text."""

    text: str


@dataclass(frozen=True)
class Failure:
    """Attempt that failed or produced nothing."""

    error: Exception


AttemptResult = Union[Success, Failure]


@dataclass(frozen=True)
class FallbackState:
    """Position in the ranked model list for one generation request."""

    attempt_index: int
    remaining_models: int
    last_error: Optional[Exception] = None

    @classmethod
    def start(cls, model_count: int) -> "FallbackState":
        return cls(attempt_index=0, remaining_models=model_count)

    @property
    def exhausted(self) -> bool:
        return self.remaining_models <= 0

    def advance(self, error: Exception) -> "FallbackState":
        return FallbackState(
            attempt_index=self.attempt_index + 1,
            remaining_models=self.remaining_models - 1,
            last_error=error,
        )


class ModelFallbackClient:
    """Tries ranked generation models in order until one returns text."""

    def __init__(
        self,
        backend: LLMService,
        models: Optional[List[GenerationModel]] = None,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        """
        Initialize the fallback client.

        Args:
            backend: Service performing a single model call.
            models: Ranked model list; defaults to GENERATION_MODELS.
            timeout_seconds: Per-attempt timeout.
        """
        self.backend = backend
        self.models = list(models if models is not None else GENERATION_MODELS)
        self.timeout_seconds = timeout_seconds or settings.generation_timeout_seconds
        self._current_index = 0

    def get_available_models(self) -> List[GenerationModel]:
        """Return the ranked model list."""
        return list(self.models)

    def get_current_model_info(self) -> Optional[GenerationModel]:
        """Return the model attempted most recently."""
        if not self.models:
            return None
        return self.models[self._current_index]

    async def generate_document(self, request: CreateDocumentRequest) -> str:
        """
        Generate cleaned document content, falling back through the model list.

        Args:
            request: Validated create request.

        Returns:
            Cleaned generated text.

        Raises:
            GenerationError: If every model fails.
        """
        self._current_index = 0
        generation_requests_total.inc()
        start_time = time.time()
        prompt = build_prompt(request)

        state = FallbackState.start(len(self.models))
        while not state.exhausted:
            model = self.models[state.attempt_index]
            self._current_index = state.attempt_index

            result = await self._attempt(model, prompt)
            if isinstance(result, Success):
                latency = time.time() - start_time
                generation_latency_seconds.observe(latency)
                add_generation_latency_sample(latency)
                logger.info(
                    f"Successfully generated content with {model.name} in {latency:.2f}s")
                return clean_generated_content(result.text)

            state = state.advance(result.error)
            if not state.exhausted:
                logger.warning(
                    f"Falling back from {model.name} to {self.models[state.attempt_index].name}")

        generation_errors_total.inc()
        if state.last_error is None:
            raise GenerationError("No available AI models")
        logger.error(
            f"All {len(self.models)} models failed. Last error: {state.last_error}")
        raise GenerationError(
            f"All AI models failed. Last error: {state.last_error}") from state.last_error

    async def _attempt(self, model: GenerationModel, prompt: str) -> AttemptResult:
        """
        Call one model and tag the outcome.

        Args:
            model: Model descriptor to call.
            prompt: Generation prompt.

        Returns:
            Success with the text, or Failure with the error.
        """
        if not model.available:
            generation_attempts_total.labels(
                model=model.model, outcome="skipped").inc()
            return Failure(BackendError(f"Model {model.model} is unavailable"))

        logger.info(f"Trying model: {model.name} ({model.model})")
        try:
            text = await asyncio.wait_for(
                self.backend.generate(model.model, prompt),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            error: Exception = BackendError(
                f"Model {model.model} timed out after {self.timeout_seconds}s")
        except BackendError as e:
            error = e
        except Exception as e:
            error = BackendError(f"Model {model.model} failed: {str(e)}")
        else:
            if text and text.strip():
                generation_attempts_total.labels(
                    model=model.model, outcome="success").inc()
                return Success(text.strip())
            error = BackendError("Empty response from AI model")

        logger.error(f"Error with model {model.name}: {str(error)}")
        generation_attempts_total.labels(
            model=model.model, outcome="failure").inc()
        return Failure(error)

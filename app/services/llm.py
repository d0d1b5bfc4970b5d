"""OpenAI-compatible generation backend for document content."""

from typing import Optional

from openai import AsyncOpenAI

from app.core.config import settings
from app.core.exceptions import BackendError


class LLMService:
    """Service for generating document text from a single named model."""

    def __init__(self, client: Optional[AsyncOpenAI] = None) -> None:
        """
        Initialize the LLM service.

        Args:
            client: Preconfigured client; built from settings when omitted.
        """
        self.client = client or AsyncOpenAI(
            api_key=settings.gemini_api_key or "not-configured",
            base_url=settings.generation_base_url,
        )
        self.max_tokens = settings.generation_max_tokens

    async def generate(self, model_id: str, prompt: str) -> str:
        """
        Generate text with one model.

        Args:
            model_id: Backend model identifier.
            prompt: Full generation prompt.

        Returns:
            Raw generated text.

        Raises:
            BackendError: If the call fails or returns no text.
        """
        try:
            response = await self.client.chat.completions.create(
                model=model_id,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            raise BackendError(
                f"Model {model_id} request failed: {str(e)}") from e

        if not response.choices:
            raise BackendError(f"Model {model_id} returned no choices")

        content = response.choices[0].message.content
        if not content or not content.strip():
            raise BackendError("Empty response from AI model")
        return content

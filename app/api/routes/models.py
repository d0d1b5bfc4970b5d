"""Generation model introspection routes."""

from fastapi import APIRouter, Depends

from app.core.dependencies import get_generator
from app.models.response import ModelListResponse
from app.services.fallback import ModelFallbackClient

router = APIRouter()


@router.get("", response_model=ModelListResponse)
async def list_models(generator: ModelFallbackClient = Depends(get_generator)) -> ModelListResponse:
    """Return the ranked models and the one attempted most recently."""
    return ModelListResponse(
        models=generator.get_available_models(),
        current_model=generator.get_current_model_info(),
    )

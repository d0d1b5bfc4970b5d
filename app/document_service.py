"""Document Service: dashboard API for generated documents."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from app.api.health import check_all_dependencies, check_readiness
from app.api.routes import documents, models, preferences
from app.core.config import settings
from app.core.dependencies import ServiceContainer
from app.core.exceptions import (
    GenerationError,
    GenerationInProgressError,
    ValidationError,
)
from app.models.response import ErrorResponse

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(by_alias=True),
    )


def create_app(services: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the application around one service container.

    Args:
        services: Container for this session; built from settings when omitted.

    Returns:
        Configured FastAPI application.
    """
    services = services or ServiceContainer()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        await services.initialize()
        logger.info("Document Service started")
        yield
        await services.shutdown()
        logger.info("Document Service stopped")

    app = FastAPI(title="Document Service", lifespan=lifespan)
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(GenerationInProgressError)
    async def generation_in_progress_handler(
        request: Request, exc: GenerationInProgressError
    ) -> JSONResponse:
        return _error(409, str(exc))

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError) -> JSONResponse:
        logger.error(f"Error generating document: {str(exc)}")
        return _error(500, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    app.include_router(documents.router, prefix="/documents", tags=["documents"])
    app.include_router(models.router, prefix="/ai-models", tags=["models"])
    app.include_router(preferences.router, prefix="/preferences", tags=["preferences"])

    @app.get("/metrics")
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/api/metrics")
    async def get_metrics_json() -> dict:
        """
        Get metrics in JSON format for frontend.

        Returns:
            Metrics summary.
        """
        from app.monitoring.metrics import (
            documents_created_total,
            generation_errors_total,
            generation_requests_total,
        )
        from app.services.metrics_tracker import get_generation_latency_samples

        return {
            "generation": {
                "total": generation_requests_total._value.get(),
                "errors": generation_errors_total._value.get(),
                "latency_samples": get_generation_latency_samples(10),
            },
            "documents": {
                "created": documents_created_total._value.get(),
                "stored": services.document_store.total_documents,
            },
        }

    @app.get("/health")
    async def health() -> dict:
        """
        Health check endpoint with dependency verification.

        Returns:
            Health status with service dependencies.
        """
        result = await check_all_dependencies(services.blob_store)
        return {"service": settings.service_name, **result}

    @app.get("/ready")
    async def readiness() -> dict:
        """
        Readiness check endpoint.

        Returns:
            Readiness status.
        """
        result = await check_readiness(services.document_store, services.blob_store)
        return {"service": settings.service_name, **result}

    return app


app = create_app()

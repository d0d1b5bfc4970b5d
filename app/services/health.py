"""Health check service for dependency verification."""

import time
from typing import Any, Dict

from app.core.config import settings
from app.services.blob_store import BlobStore, RedisBlobStore


async def check_blob_store(blob_store: BlobStore) -> Dict[str, Any]:
    """
    Check blob store connectivity and health.

    Args:
        blob_store: BlobStore instance.

    Returns:
        Health status dictionary.
    """
    if not isinstance(blob_store, RedisBlobStore):
        return {"status": "healthy", "backend": "memory", "latency_ms": 0}

    try:
        start_time = time.time()
        if not blob_store.client:
            return {"status": "unhealthy", "backend": "redis", "error": "Not connected", "latency_ms": 0}

        await blob_store.client.ping()
        latency_ms = (time.time() - start_time) * 1000

        return {
            "status": "healthy",
            "backend": "redis",
            "latency_ms": round(latency_ms, 2),
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "backend": "redis",
            "error": str(e),
            "latency_ms": 0,
        }


async def check_generation_backend() -> Dict[str, Any]:
    """
    Check that the generation backend is configured.

    Returns:
        Health status dictionary.
    """
    if not settings.gemini_api_key:
        return {"status": "not_configured", "error": "API key not set"}
    return {"status": "healthy", "base_url": settings.generation_base_url}

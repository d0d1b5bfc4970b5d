"""Health check utilities."""

from typing import Dict

from app.services.blob_store import BlobStore
from app.services.document_store import DocumentStore, StoreStatus
from app.services.health import check_blob_store, check_generation_backend


async def check_all_dependencies(blob_store: BlobStore) -> Dict:
    """
    Check all service dependencies.

    A degraded blob store only costs durability, so it marks the service
    degraded rather than unhealthy.

    Args:
        blob_store: Persistence collaborator.

    Returns:
        Dictionary with overall status and individual service statuses.
    """
    services = {}
    overall_status = "healthy"

    blob_status = await check_blob_store(blob_store)
    services["blob_store"] = blob_status
    if blob_status.get("status") != "healthy":
        overall_status = "degraded"

    generation_status = await check_generation_backend()
    services["generation"] = generation_status
    if generation_status.get("status") != "healthy":
        overall_status = "unhealthy"

    return {"status": overall_status, "services": services}


async def check_readiness(document_store: DocumentStore, blob_store: BlobStore) -> Dict:
    """
    Check service readiness.

    Args:
        document_store: Session document store.
        blob_store: Persistence collaborator.

    Returns:
        Readiness status dictionary.
    """
    blob_status = await check_blob_store(blob_store)
    store_ready = document_store.status != StoreStatus.UNINITIALIZED

    return {
        "ready": store_ready,
        "document_store": document_store.status.value,
        "blob_store": blob_status.get("status") == "healthy",
    }

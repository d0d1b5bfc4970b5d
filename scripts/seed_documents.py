"""Script to write the sample documents into the Redis blob store."""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.core.config import settings
from app.services.blob_store import RedisBlobStore
from app.services.seed_data import SEED_DOCUMENTS


async def seed_blob_store(overwrite: bool = False) -> None:
    """Store the sample documents unless a collection already exists."""
    blob_store = RedisBlobStore()
    await blob_store.connect()

    existing = await blob_store.load(settings.documents_key, None)
    if existing and not overwrite:
        print(f"Collection '{settings.documents_key}' already holds {len(existing)} documents, skipping")
        await blob_store.disconnect()
        return

    saved = await blob_store.save(settings.documents_key, SEED_DOCUMENTS)
    for doc in SEED_DOCUMENTS:
        print(f"Stored document: {doc['title']}")

    await blob_store.disconnect()
    print(f"\nSeeded {len(SEED_DOCUMENTS)} documents" if saved else "\nFailed to seed documents")


if __name__ == "__main__":
    asyncio.run(seed_blob_store(overwrite="--overwrite" in sys.argv))

"""In-memory blob store used for local development and tests."""

from __future__ import annotations

from portfolio.adapters.blob.base import BlobObject, BlobStore


class InMemoryBlobStore(BlobStore):
    def __init__(self, objects: list[BlobObject] | None = None) -> None:
        self.objects = list(objects or [])
        self.list_count = 0

    def list_objects(self) -> list[BlobObject]:
        self.list_count += 1
        return list(self.objects)

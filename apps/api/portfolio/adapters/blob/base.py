"""Blob storage interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class BlobStoreError(Exception):
    """Raised when the blob provider cannot be queried."""


@dataclass(frozen=True, slots=True)
class BlobObject:
    url: str
    pathname: str


class BlobStore(ABC):
    @abstractmethod
    def list_objects(self) -> list[BlobObject]:
        """Return every stored object."""

    def find_object(self, file_name: str) -> BlobObject | None:
        """Return the first object whose pathname or URL contains ``file_name``."""
        for blob in self.list_objects():
            if file_name in blob.pathname or file_name in blob.url:
                return blob
        return None


__all__ = ["BlobObject", "BlobStore", "BlobStoreError"]

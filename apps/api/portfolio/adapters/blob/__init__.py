"""Blob store adapters."""

from .base import BlobObject, BlobStore, BlobStoreError
from .memory import InMemoryBlobStore
from .vercel import VercelBlobStore

__all__ = ["BlobObject", "BlobStore", "BlobStoreError", "InMemoryBlobStore", "VercelBlobStore"]

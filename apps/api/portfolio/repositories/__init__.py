"""Admin content store adapters."""

from .base import ContentStore, ContentStoreError, DuplicateSlugError
from .memory import InMemoryContentStore
from .supabase import SupabaseContentStore

__all__ = [
    "ContentStore",
    "ContentStoreError",
    "DuplicateSlugError",
    "InMemoryContentStore",
    "SupabaseContentStore",
]

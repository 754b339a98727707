"""File-backed content pipeline: frontmatter validation, loading, and queries."""

from .frontmatter import Frontmatter, FrontmatterValidationError, ValidationIssue, split_frontmatter, validate_frontmatter
from .loader import ContentLoader
from .query import categories, filter_by_tags, search

__all__ = [
    "ContentLoader",
    "Frontmatter",
    "FrontmatterValidationError",
    "ValidationIssue",
    "categories",
    "filter_by_tags",
    "search",
    "split_frontmatter",
    "validate_frontmatter",
]

"""Data models for revision fixtures."""

from revision_queries.models.revision import Revision

__all__ = [
    "Revision",
]

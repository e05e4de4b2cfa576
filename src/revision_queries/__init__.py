"""Higher-order query patterns over revision fixtures."""

from revision_queries.errors import (
    FixtureError,
    MalformedFixtureError,
    ResourceNotFoundError,
    RevisionDeserializationError,
)
from revision_queries.loader import load_revisions
from revision_queries.models import Revision
from revision_queries.resources import ResourceLocator

__all__ = [
    "FixtureError",
    "MalformedFixtureError",
    "ResourceLocator",
    "ResourceNotFoundError",
    "Revision",
    "RevisionDeserializationError",
    "load_revisions",
]

"""Exceptions raised while loading revision fixtures."""

from __future__ import annotations


class FixtureError(Exception):
    """Base class for all fixture loading failures."""


class ResourceNotFoundError(FixtureError):
    """The requested fixture does not resolve under the resource root."""

    def __init__(self, name: str, root: object) -> None:
        super().__init__(f"Fixture {name!r} not found under {root}")
        self.name = name
        self.root = root


class MalformedFixtureError(FixtureError):
    """The fixture is not valid JSON or holds no revisions array."""


class RevisionDeserializationError(FixtureError):
    """A selected element could not be turned into a Revision."""

    def __init__(self, index: int, message: str) -> None:
        super().__init__(f"Revision at index {index} is invalid: {message}")
        self.index = index

"""Resource locator that resolves fixture names against a single root directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from revision_queries.errors import ResourceNotFoundError

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

logger = logging.getLogger(__name__)


class ResourceLocator:
    """Open named fixtures found under ``root``.

    Names are relative to the root; absolute paths and names that climb out
    of the root are refused.
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).resolve()

    @classmethod
    def bundled(cls) -> ResourceLocator:
        """Return a locator over the fixtures shipped with the package."""
        return cls(FIXTURES_DIR)

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, name: str) -> Path:
        """Return the path of ``name`` under the root.

        Raises ``ResourceNotFoundError`` if the name escapes the root or no
        such file exists.
        """
        if not name or Path(name).is_absolute():
            raise ResourceNotFoundError(name, self._root)
        path = (self._root / name).resolve()
        if not path.is_relative_to(self._root) or not path.is_file():
            raise ResourceNotFoundError(name, self._root)
        return path

    def open_text(self, name: str) -> TextIO:
        """Open the named fixture as a UTF-8 text stream."""
        path = self.resolve(name)
        logger.debug("Opening resource name=%s path=%s", name, path)
        return path.open(encoding="utf-8")

    def read_text(self, name: str) -> str:
        with self.open_text(name) as stream:
            return stream.read()

    def names(self) -> list[str]:
        """List the JSON fixtures available under the root."""
        if not self._root.is_dir():
            return []
        return sorted(path.name for path in self._root.glob("*.json") if path.is_file())

    def __repr__(self) -> str:
        return f"ResourceLocator({str(self._root)!r})"

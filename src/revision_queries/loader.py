"""Fixture loader that turns a bundled JSON document into a list of revisions."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from revision_queries.config import load_settings
from revision_queries.errors import (
    FixtureError,
    MalformedFixtureError,
    RevisionDeserializationError,
)
from revision_queries.models.revision import Revision
from revision_queries.resources import ResourceLocator

REVISIONS_KEY = "revisions"

logger = logging.getLogger(__name__)


def find_revisions(document: Any) -> list[Any]:
    """Collect every element held under a ``revisions`` key at any depth.

    Equivalent to the JSONPath ``$..revisions.*``: array elements and object
    values are both taken, in document order.

    Raises ``MalformedFixtureError`` if the document has no ``revisions`` key
    or one of them holds a scalar.
    """
    found: list[Any] = []
    matched = False
    stack: list[Any] = [document]
    # Depth-first, children pushed in reverse so document order is kept.
    while stack:
        node = stack.pop()
        if isinstance(node, dict):
            for key, value in node.items():
                if key != REVISIONS_KEY:
                    continue
                matched = True
                if isinstance(value, list):
                    found.extend(value)
                elif isinstance(value, dict):
                    found.extend(value.values())
                else:
                    raise MalformedFixtureError(
                        f"'{REVISIONS_KEY}' holds {type(value).__name__}, expected an array"
                    )
            stack.extend(reversed(list(node.values())))
        elif isinstance(node, list):
            stack.extend(reversed(node))

    if not matched:
        raise MalformedFixtureError(f"No '{REVISIONS_KEY}' key found in document")
    return found


def parse_revisions(items: Iterable[Any]) -> list[Revision]:
    """Deserialize raw revision objects, failing on the first bad element."""
    revisions: list[Revision] = []
    for index, item in enumerate(items):
        try:
            revisions.append(Revision.from_json(item))
        except ValidationError as exc:
            raise RevisionDeserializationError(index, str(exc)) from exc
    return revisions


def load_revisions(name: str, locator: ResourceLocator | None = None) -> list[Revision]:
    """Load the revisions recorded in the named fixture.

    ``locator`` defaults to ``REVISION_QUERIES_FIXTURES_DIR``, or the fixtures
    bundled with the package when that is unset. Any failure raises a
    ``FixtureError`` subclass with the underlying cause chained; no partial
    result is ever returned.
    """
    locator = locator or load_settings().resources.locator()
    try:
        with locator.open_text(name) as stream:
            document = json.load(stream)
    except json.JSONDecodeError as exc:
        raise MalformedFixtureError(f"Fixture {name!r} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise MalformedFixtureError(f"Fixture {name!r} is not UTF-8 text") from exc
    except OSError as exc:
        raise FixtureError(f"Fixture {name!r} could not be read") from exc

    revisions = parse_revisions(find_revisions(document))
    logger.debug("Revisions loaded name=%s count=%d", name, len(revisions))
    return revisions

"""Stateless query patterns over in-memory sequences.

Every function materialises its result, so callers can pass any iterable
(including generators) and get a concrete value back.
"""

from __future__ import annotations

from calendar import Month
from collections import Counter
from collections.abc import Callable, Collection, Hashable, Iterable, Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from revision_queries.models.revision import Revision

T = TypeVar("T")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)

BOT_MARKER = "bot"


def collect(items: Iterable[T]) -> list[T]:
    return list(items)


def transform(items: Iterable[T], func: Callable[[T], R]) -> list[R]:
    """Apply ``func`` to each element, keeping order and length."""
    return [func(item) for item in items]


def select(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Keep the elements satisfying ``predicate``, in their original order."""
    return [item for item in items if predicate(item)]


def unique(items: Iterable[K]) -> list[K]:
    """Drop repeated elements, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def concat_matching(items: Iterable[T], predicate: Callable[[T], bool]) -> str:
    return "".join(str(item) for item in select(items, predicate))


def count_matching(items: Iterable[T], predicate: Callable[[T], bool]) -> int:
    return sum(1 for item in items if predicate(item))


def group_and_count(
    items: Iterable[T],
    key: Callable[[T], K] | None = None,
) -> dict[K, int]:
    """Count the elements falling under each derived key.

    With no ``key`` the elements themselves are the groups.
    """
    keys = items if key is None else (key(item) for item in items)
    return dict(Counter(keys))


def arg_max_by_count(counts: Mapping[K, int]) -> K:
    """Return the key with the largest count.

    Ties go to the key met first when iterating ``counts``. Raises
    ``ValueError`` if ``counts`` is empty.
    """
    if not counts:
        raise ValueError("arg_max_by_count() of an empty mapping")
    return max(counts, key=counts.__getitem__)


def utc_month(timestamp: datetime) -> Month:
    """Return the calendar month of ``timestamp`` as seen in UTC."""
    return Month(timestamp.astimezone(UTC).month)


def is_before(instant: datetime) -> Callable[[Revision], bool]:
    """Build a predicate matching revisions made strictly before ``instant``."""

    def predicate(revision: Revision) -> bool:
        return revision.timestamp < instant

    return predicate


def is_bot(user: str) -> bool:
    """Return True if the display name contains "bot", ignoring case."""
    return BOT_MARKER in user.casefold()


def user_in(names: Collection[str]) -> Callable[[Revision], bool]:
    """Build a predicate matching revisions by whitelisted users."""
    allowed = frozenset(names)

    def predicate(revision: Revision) -> bool:
        return revision.user in allowed

    return predicate


def count_by_utc_month(revisions: Iterable[Revision]) -> dict[Month, int]:
    return group_and_count(revisions, key=lambda revision: utc_month(revision.timestamp))


def most_active_month(revisions: Iterable[Revision]) -> Month:
    """Return the UTC month with the most revisions."""
    return arg_max_by_count(count_by_utc_month(revisions))

"""Generic mutations over the ordered lists nested in posts and profiles.

Every function is pure: it returns a new list and leaves its input alone,
so a rejected mutation never changes the parent document. Lists are kept
newest first.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, TypeVar
from uuid import UUID

from core.exceptions import AppException


class HasId(Protocol):
    @property
    def id(self) -> UUID: ...


T = TypeVar("T")
E = TypeVar("E", bound=HasId)
K = TypeVar("K")


def contains(items: Sequence[T], key: Callable[[T], K], value: K) -> bool:
    """Return True if any item's key equals ``value``."""
    return any(key(item) == value for item in items)


def add_member(
    items: Sequence[T],
    item: T,
    key: Callable[[T], K],
    on_duplicate: Callable[[], AppException],
) -> list[T]:
    """Insert ``item`` at the front of an ordered set.

    Raises the error built by ``on_duplicate`` when an item with the same
    key is already present.
    """
    if contains(items, key, key(item)):
        raise on_duplicate()
    return [item, *items]


def remove_member(
    items: Sequence[T],
    value: K,
    key: Callable[[T], K],
    on_missing: Callable[[], AppException],
) -> list[T]:
    """Drop every item whose key equals ``value``.

    Raises the error built by ``on_missing`` when no item matches.
    """
    if not contains(items, key, value):
        raise on_missing()
    return [item for item in items if key(item) != value]


def prepend(items: Sequence[E], entry: E) -> list[E]:
    """Insert ``entry`` at index 0."""
    return [entry, *items]


def remove_by_id(items: Sequence[E], entry_id: UUID | str) -> list[E]:
    """Drop the entry with ``entry_id``.

    An id that matches nothing leaves the list as it was; callers still
    persist the parent.
    """
    target = str(entry_id)
    return [item for item in items if str(item.id) != target]

"""Small helpers for grouping and indexing sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)

UNLIMITED_BATCH_SIZE = -1
UNLIMITED_BATCH_PER_GROUP_LIMIT = -1


def group_by(items: Iterable[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """Group items into lists keyed by ``key(item)``, keeping input order."""
    result: dict[K, list[T]] = {}
    for item in items:
        result.setdefault(key(item), []).append(item)
    return result


def to_map(items: Iterable[T], key: Callable[[T], K]) -> dict[K, T]:
    """Map ``key(item)`` to item; a later item wins over an earlier one."""
    return {key(item): item for item in items}


def index_set(items: Iterable[K]) -> set[K]:
    """Return the set of distinct items, for fast membership checks."""
    return set(items)
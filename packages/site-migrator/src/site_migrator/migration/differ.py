"""Identity-keyed differ for ordered collections."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


def index_by(items: Iterable[T], key: Callable[[T], str]) -> dict[str, T]:
    """Map identifier -> item in iteration order.

    A repeated identifier keeps the position of its first occurrence and the
    value of its last one.
    """
    index: dict[str, T] = {}
    for item in items:
        index[key(item)] = item
    return index


@dataclass(frozen=True)
class CollectionDiff(Generic[T]):
    """Result of comparing two identity-keyed collections.

    ``added`` follows the new collection's order, ``removed`` the old one's,
    ``common`` the new one's.
    """

    old_index: dict[str, T]
    new_index: dict[str, T]
    added: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()
    common: tuple[str, ...] = ()


def diff_collections(
    old_items: Iterable[T],
    new_items: Iterable[T],
    key: Callable[[T], str],
) -> CollectionDiff[T]:
    """Classify every identifier as added, removed or common."""
    old_index = index_by(old_items, key)
    new_index = index_by(new_items, key)

    added = tuple(i for i in new_index if i not in old_index)
    removed = tuple(i for i in old_index if i not in new_index)
    common = tuple(i for i in new_index if i in old_index)

    return CollectionDiff(
        old_index=old_index,
        new_index=new_index,
        added=added,
        removed=removed,
        common=common,
    )

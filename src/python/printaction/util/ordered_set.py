# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

"""Insertion-ordered sets.

Graph traversals report nodes in the order they were discovered, and the file-request set reports
unmatched files in the order the user asked for them, so both need a set that remembers order.
"""

from __future__ import annotations

from typing import AbstractSet, Any, Hashable, Iterable, Iterator, MutableSet, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class _AbstractOrderedSet(AbstractSet[T]):
    """Common functionality shared between OrderedSet and FrozenOrderedSet."""

    def __init__(self, iterable: Iterable[T] | None = None) -> None:
        # NB: Dictionaries are ordered in Python 3.7+.
        self._items: dict[T, None] = {v: None for v in iterable or ()}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Any) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        name = self.__class__.__name__
        if not self:
            return f"{name}()"
        return f"{name}({list(self)!r})"

    def __eq__(self, other: Any) -> bool:
        """Returns True if other is the same type with the same elements and same order."""
        if not isinstance(other, self.__class__):
            return NotImplemented
        return list(self._items) == list(other._items)


class OrderedSet(_AbstractOrderedSet[T], MutableSet[T]):
    """A mutable set that retains its insertion order."""

    def add(self, key: T) -> None:
        self._items[key] = None

    def discard(self, key: T) -> None:
        """Remove an element. Do not raise an exception if absent.

        The MutableSet mixin uses this to implement `.remove()`, which does raise.
        """
        self._items.pop(key, None)

    def pop_if_present(self, key: T) -> bool:
        """Remove `key`, returning whether it was a member."""
        if key in self._items:
            del self._items[key]
            return True
        return False


class FrozenOrderedSet(_AbstractOrderedSet[T_co], Hashable):  # type: ignore[type-var]
    """An immutable set that retains its insertion order."""

    def __init__(self, iterable: Iterable[T_co] | None = None) -> None:
        super().__init__(iterable)
        self.__hash: int | None = None

    def __hash__(self) -> int:
        if self.__hash is None:
            self.__hash = 0
            for item in self._items.keys():
                self.__hash ^= hash(item)
        return self.__hash

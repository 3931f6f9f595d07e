from __future__ import annotations

__all__ = ["Set"]

import logging
from typing import AbstractSet, Hashable, Iterable, Iterator, MutableSet, TypeVar

from returns import result

from ._exceptions import EmptySetError, NotFoundError
from ._render import quote, render

logger = logging.getLogger(__name__)

Element = TypeVar("Element", bound=Hashable)


class Set(MutableSet[Element]):
    """Unordered collection of unique hashable elements.

    Elements may be of mixed types. Two elements are the same member when they
    compare equal and hash equal, so `1`, `1.0`, and `True` are one member and
    the first one added is the one kept. This differs from sets keyed on both
    type and value, where `1` and `1.0` would be separate members. A string is
    never equal to a number, so `"42"` and `42` are always separate.
    Iteration order is unspecified; use `sorted` or `str` when a deterministic
    order is needed.

    Not safe for concurrent access. Wrap operations in a lock, or use
    `LockedSet`, if the set is shared between threads.
    """

    def __init__(self, *items: Element):
        self._items: dict[Element, None] = {}
        for item in items:
            self.add(item)

    @classmethod
    def from_iterable(cls, items: Iterable[Element]) -> Set[Element]:
        return cls(*items)

    @classmethod
    def _from_iterable(cls, items: Iterable[Element]) -> Set[Element]:
        # Hook used by the MutableSet mixin methods
        return cls(*items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, x: object) -> bool:
        return x in self._items

    def __iter__(self) -> Iterator[Element]:
        return iter(self._items)

    def contains(self, item: Element, /) -> bool:
        return item in self._items

    def add(self, item: Element, /) -> None:
        self._items[item] = None

    def discard(self, item: Element, /) -> None:
        self._items.pop(item, None)

    def remove(self, item: Element, /) -> None:
        """Remove an element that must be present.

        Raises `NotFoundError` if the element is absent. See `discard` for the
        variant that does nothing instead.
        """
        if item not in self._items:
            logger.debug("Failed to remove %r from set of %d elements", item, len(self._items))
            raise NotFoundError(item)
        del self._items[item]

    def pop(self) -> Element:
        """Remove and return an arbitrary element.

        Which element is returned is unspecified. Raises `EmptySetError` if
        the set is empty.
        """
        if len(self._items) == 0:
            logger.debug("Failed to pop from empty set")
            raise EmptySetError()
        item, _ = self._items.popitem()
        return item

    def clear(self) -> None:
        self._items = {}

    def try_remove(self, item: Element, /) -> result.Result[None, NotFoundError]:
        try:
            self.remove(item)
        except NotFoundError as e:
            return result.Failure(e)
        return result.Success(None)

    def try_pop(self) -> result.Result[Element, EmptySetError]:
        try:
            return result.Success(self.pop())
        except EmptySetError as e:
            return result.Failure(e)

    def copy(self) -> Set[Element]:
        return Set(*self._items)

    __copy__ = copy

    def intersect(self, other: AbstractSet[Element], /) -> Set[Element]:
        return Set(*(item for item in self._items if item in other))

    def union(self, other: AbstractSet[Element], /) -> Set[Element]:
        return Set(*self._items, *other)

    def difference(self, other: AbstractSet[Element], /) -> Set[Element]:
        return Set(*(item for item in self._items if item not in other))

    def symmetric_difference(self, other: AbstractSet[Element], /) -> Set[Element]:
        return self.union(other).difference(self.intersect(other))

    def is_subset_of(self, other: AbstractSet[Element], /) -> bool:
        return all(item in other for item in self._items)

    def is_superset_of(self, other: AbstractSet[Element], /) -> bool:
        return all(item in self._items for item in other)

    def is_disjoint(self, other: AbstractSet[Element], /) -> bool:
        return not any(item in other for item in self._items)

    def equals(self, other: AbstractSet[Element], /) -> bool:
        # Sizes match and there are no duplicates, so one direction suffices
        return len(self._items) == len(other) and self.is_subset_of(other)

    def slice(self) -> list[Element]:
        return list(self._items)

    def sorted(self) -> list[str]:
        """Render each element as a string and sort the strings.

        The sort is by code point of the rendered text with no regard for the
        original type, so `2.7`, `32`, and `"alpha"` sort as `"2.7"`, `"32"`,
        `"alpha"`. To sort numbers numerically, sort `slice()` directly.
        """
        return sorted(render(item) for item in self._items)

    def __and__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.intersect(other)

    def __or__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.is_subset_of(other)

    def __ge__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.is_superset_of(other)

    def __eq__(self, other):
        if isinstance(other, AbstractSet):
            return self.equals(other)
        else:
            return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        return f"Set{{{', '.join(sorted(quote(item) for item in self._items))}}}"

    def __repr__(self) -> str:
        return f"Set({', '.join(repr(item) for item in self._items)})"

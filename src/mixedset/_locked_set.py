from __future__ import annotations

__all__ = ["LockedSet"]

import logging
import threading
from typing import AbstractSet, Hashable, Iterable, Iterator, MutableSet, TypeVar

from returns import result

from ._exceptions import EmptySetError, NotFoundError
from ._set import Set

logger = logging.getLogger(__name__)

Element = TypeVar("Element", bound=Hashable)


class LockedSet(MutableSet[Element]):
    """A `Set` that holds a lock for every operation.

    Iteration walks a snapshot taken under the lock, so other threads may
    mutate the set while it is being iterated. To run several operations as
    one atomic step, use the set as a context manager, which holds the lock
    and yields the underlying `Set`:

        with shared as inner:
            if "x" not in inner:
                inner.add("x")
    """

    def __init__(self, *items: Element):
        self._set: Set[Element] = Set(*items)
        self._lock = threading.RLock()

    @classmethod
    def _from_iterable(cls, items) -> LockedSet[Element]:
        return cls(*items)

    @classmethod
    def _wrap(cls, inner: Set[Element]) -> LockedSet[Element]:
        locked = cls()
        locked._set = inner
        return locked

    def __enter__(self) -> Set[Element]:
        self._lock.acquire()
        logger.debug("Acquired lock on set %x for compound operation", id(self))
        return self._set

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self._lock.release()
        logger.debug("Released lock on set %x after compound operation", id(self))

    def _snapshot(self) -> Set[Element]:
        with self._lock:
            return self._set.copy()

    def _operand(self, other: AbstractSet[Element]) -> AbstractSet[Element]:
        # Never hold two locks at once; read the other side under its own lock first
        if isinstance(other, LockedSet):
            return other._snapshot()
        else:
            return other

    def __len__(self) -> int:
        with self._lock:
            return len(self._set)

    def __contains__(self, x: object) -> bool:
        with self._lock:
            return x in self._set

    def __iter__(self) -> Iterator[Element]:
        return iter(self.slice())

    def contains(self, item: Element, /) -> bool:
        with self._lock:
            return self._set.contains(item)

    def add(self, item: Element, /) -> None:
        with self._lock:
            self._set.add(item)

    def discard(self, item: Element, /) -> None:
        with self._lock:
            self._set.discard(item)

    def remove(self, item: Element, /) -> None:
        with self._lock:
            self._set.remove(item)

    def pop(self) -> Element:
        with self._lock:
            return self._set.pop()

    def clear(self) -> None:
        with self._lock:
            self._set.clear()

    def try_remove(self, item: Element, /) -> result.Result[None, NotFoundError]:
        with self._lock:
            return self._set.try_remove(item)

    def try_pop(self) -> result.Result[Element, EmptySetError]:
        with self._lock:
            return self._set.try_pop()

    def copy(self) -> LockedSet[Element]:
        return self._wrap(self._snapshot())

    __copy__ = copy

    def intersect(self, other: AbstractSet[Element], /) -> LockedSet[Element]:
        operand = self._operand(other)
        with self._lock:
            return self._wrap(self._set.intersect(operand))

    def union(self, other: AbstractSet[Element], /) -> LockedSet[Element]:
        operand = self._operand(other)
        with self._lock:
            return self._wrap(self._set.union(operand))

    def difference(self, other: AbstractSet[Element], /) -> LockedSet[Element]:
        operand = self._operand(other)
        with self._lock:
            return self._wrap(self._set.difference(operand))

    def symmetric_difference(self, other: AbstractSet[Element], /) -> LockedSet[Element]:
        operand = self._operand(other)
        with self._lock:
            return self._wrap(self._set.symmetric_difference(operand))

    def is_subset_of(self, other: AbstractSet[Element], /) -> bool:
        operand = self._operand(other)
        with self._lock:
            return self._set.is_subset_of(operand)

    def is_superset_of(self, other: AbstractSet[Element], /) -> bool:
        operand = self._operand(other)
        with self._lock:
            return self._set.is_superset_of(operand)

    def is_disjoint(self, other: AbstractSet[Element], /) -> bool:
        operand = self._operand(other)
        with self._lock:
            return self._set.is_disjoint(operand)

    def equals(self, other: AbstractSet[Element], /) -> bool:
        operand = self._operand(other)
        with self._lock:
            return self._set.equals(operand)

    def slice(self) -> list[Element]:
        with self._lock:
            return self._set.slice()

    def sorted(self) -> list[str]:
        with self._lock:
            return self._set.sorted()

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

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __rsub__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        snapshot = self._snapshot()
        return self._wrap(Set.from_iterable(other).difference(snapshot))

    def _in_place_operand(self, other: Iterable[Element]) -> AbstractSet[Element]:
        if isinstance(other, AbstractSet):
            return self._operand(other)
        else:
            return Set.from_iterable(other)

    def __ior__(self, other: Iterable[Element]) -> LockedSet[Element]:
        operand = self._in_place_operand(other)
        with self._lock:
            self._set |= operand
        return self

    def __iand__(self, other: Iterable[Element]) -> LockedSet[Element]:
        operand = self._in_place_operand(other)
        with self._lock:
            self._set &= operand
        return self

    def __isub__(self, other: Iterable[Element]) -> LockedSet[Element]:
        operand = self._in_place_operand(other)
        with self._lock:
            self._set -= operand
        return self

    def __ixor__(self, other: Iterable[Element]) -> LockedSet[Element]:
        operand = self._in_place_operand(other)
        with self._lock:
            self._set ^= operand
        return self

    def isdisjoint(self, other: Iterable[Element]) -> bool:
        return self.is_disjoint(self._in_place_operand(other))

    def __le__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.is_subset_of(other)

    def __ge__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        return self.is_superset_of(other)

    def __lt__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        operand = self._operand(other)
        with self._lock:
            return len(self._set) < len(operand) and self._set.is_subset_of(operand)

    def __gt__(self, other):
        if not isinstance(other, AbstractSet):
            return NotImplemented
        operand = self._operand(other)
        with self._lock:
            return len(self._set) > len(operand) and self._set.is_superset_of(operand)

    def __eq__(self, other):
        if isinstance(other, AbstractSet):
            return self.equals(other)
        else:
            return NotImplemented

    __hash__ = None

    def __str__(self) -> str:
        with self._lock:
            return str(self._set)

    def __repr__(self) -> str:
        with self._lock:
            return f"Locked{self._set!r}"

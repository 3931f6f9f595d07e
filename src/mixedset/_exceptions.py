__all__ = ["NotFoundError", "EmptySetError"]

from dataclasses import dataclass
from typing import Hashable


@dataclass(frozen=True, slots=True)
class NotFoundError(KeyError):
    item: Hashable

    def __str__(self) -> str:
        return f"Expected set to contain {self.item!r}, but it was not found"


@dataclass(frozen=True, slots=True)
class EmptySetError(KeyError):
    def __str__(self) -> str:
        return "Expected set to have at least one element to pop, but it was empty"

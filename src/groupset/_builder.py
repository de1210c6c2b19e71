from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from groupset._group import Group

T = TypeVar("T")


class GroupBuilder(Generic[T]):
    """Accumulates elements and produces an immutable Group.

    The builder is the only mutable piece; each ``build()`` snapshots the
    elements collected so far, so later additions never reach groups that
    were already built.
    """

    __slots__ = ("_pending",)

    def __init__(self) -> None:
        self._pending: set[T] = set()

    @staticmethod
    def of(*elements: T) -> Group[T]:
        return Group(elements)

    @staticmethod
    def from_iterable(elements: Iterable[T]) -> Group[T]:
        return Group(elements)

    def add(self, element: T) -> GroupBuilder[T]:
        self._pending.add(element)
        return self

    def extend(self, elements: Iterable[T]) -> GroupBuilder[T]:
        self._pending.update(elements)
        return self

    def __len__(self) -> int:
        return len(self._pending)

    def build(self) -> Group[T]:
        return Group(self._pending)

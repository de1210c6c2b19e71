"""Immutable, set-backed collection with set algebra and functional queries.

A Group holds unique elements (by ``==``/``hash``) with no defined iteration
order. Every operation that "changes" a group returns a new one; the receiver
is never mutated, so a group may be shared freely between readers.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

from groupset._errors import EmptyGroupError, NotFoundError, NotSingletonError
from groupset._util import _qualified_name, _stable_order

T = TypeVar("T")
R = TypeVar("R")

Predicate = Callable[[T], bool]

_MISSING: Any = object()


class Group(Generic[T]):
    """An immutable group of unique elements.

    Construct directly from any iterable (duplicates collapse) or with
    ``Group.of(a, b, c)``. Two groups are equal when they hold the same
    elements, whatever order they were built in.
    """

    __slots__ = ("_elements",)

    _elements: frozenset[T]

    def __init__(self, elements: Iterable[T] = ()) -> None:
        backing = elements._elements if isinstance(elements, Group) else frozenset(elements)
        object.__setattr__(self, "_elements", backing)

    @classmethod
    def of(cls, *elements: T) -> Group[T]:
        return cls(elements)

    # ------------------------------------------------------------------
    # size and membership
    # ------------------------------------------------------------------

    def size(self) -> int:
        return len(self._elements)

    def is_empty(self) -> bool:
        return not self._elements

    def includes(self, item: T | Group[T]) -> bool:
        """Membership test for an element, subset test for a group.

        A Group argument is always treated as a subset test; use ``in`` to ask
        whether a group is itself one of the elements.
        """
        if isinstance(item, Group):
            return item._elements <= self._elements
        return item in self

    def contains(self, predicate: Predicate[T]) -> bool:
        """True if at least one element satisfies ``predicate``."""
        return any(predicate(e) for e in self._elements)

    def count_if(self, predicate: Predicate[T]) -> int:
        return sum(1 for e in self._elements if predicate(e))

    # ------------------------------------------------------------------
    # set algebra
    # ------------------------------------------------------------------

    def union(self, other: Group[T]) -> Group[T]:
        return Group(self._elements | other._elements)

    def difference(self, other: Group[T]) -> Group[T]:
        """Elements of this group that are absent from ``other``."""
        return Group(self._elements - other._elements)

    def intersect(self, other: Group[T]) -> Group[T]:
        return Group(self._elements & other._elements)

    # ------------------------------------------------------------------
    # functional queries
    # ------------------------------------------------------------------

    def select(self, predicate: Predicate[T]) -> Group[T]:
        return Group(e for e in self._elements if predicate(e))

    def reject(self, predicate: Predicate[T]) -> Group[T]:
        return Group(e for e in self._elements if not predicate(e))

    def select_one(self, predicate: Predicate[T]) -> T:
        """Return an element satisfying ``predicate``.

        When several elements match, which one is returned is unspecified.

        Raises:
            NotFoundError: no element satisfies ``predicate``.
        """
        for e in self._elements:
            if predicate(e):
                return e
        raise NotFoundError(f"no element satisfies {_qualified_name(predicate)}")

    def select_one_or_default(self, predicate: Predicate[T], default: T) -> T:
        for e in self._elements:
            if predicate(e):
                return e
        return default

    def map(self, function: Callable[[T], R]) -> Group[R]:
        """Apply ``function`` to every element; equal results collapse."""
        return Group(function(e) for e in self._elements)

    def reduce(self, operator: Callable[[Any, T], Any], initial: Any = _MISSING) -> Any:
        """Fold the elements together with ``operator``.

        Iteration order is unspecified, so ``operator`` must be associative
        and commutative for the result to be deterministic (see
        :func:`groupset.check_order_independent`).

        Without ``initial`` the fold starts from an arbitrary element.

        Raises:
            EmptyGroupError: ``initial`` is omitted and the group is empty.
        """
        if initial is _MISSING:
            if not self._elements:
                raise EmptyGroupError("reduce of an empty group with no initial value")
            return functools.reduce(operator, self._elements)
        return functools.reduce(operator, self._elements, initial)

    def to_element(self) -> T:
        """Unwrap a one-element group.

        Raises:
            EmptyGroupError: the group is empty.
            NotSingletonError: the group holds more than one element.
        """
        if not self._elements:
            raise EmptyGroupError("to_element of an empty group")
        if len(self._elements) > 1:
            raise NotSingletonError(len(self._elements))
        (only,) = self._elements
        return only

    def to_frozenset(self) -> frozenset[T]:
        return self._elements

    # ------------------------------------------------------------------
    # protocols
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elements)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._elements
        except TypeError:
            # unhashable values can never be elements
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._elements == other._elements

    def __hash__(self) -> int:
        return hash(self._elements)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._elements <= other._elements

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self._elements >= other._elements

    def __or__(self, other: object) -> Group[T]:
        if not isinstance(other, Group):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> Group[T]:
        if not isinstance(other, Group):
            return NotImplemented
        return self.intersect(other)

    def __sub__(self, other: object) -> Group[T]:
        if not isinstance(other, Group):
            return NotImplemented
        return self.difference(other)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._elements,))

    def __repr__(self) -> str:
        if not self._elements:
            return f"{type(self).__name__}()"
        body = ", ".join(repr(e) for e in _stable_order(self._elements))
        return f"{type(self).__name__}({{{body}}})"

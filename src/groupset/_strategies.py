"""Hypothesis strategies for generating Groups in property tests."""

from __future__ import annotations

import dataclasses
import datetime
import types
from collections.abc import Callable
from typing import Any, Union, get_args, get_origin, get_type_hints

from hypothesis import strategies as st

from groupset._group import Group

_STRATEGY_OVERRIDES: dict[Any, st.SearchStrategy[Any]] = {}

_MAX_DEPTH = 5


def register_element_strategy(tp: Any, strat: st.SearchStrategy[Any]) -> None:
    _STRATEGY_OVERRIDES[tp] = strat


def groups(
    elements: st.SearchStrategy[Any] | None = None,
    *,
    min_size: int = 0,
    max_size: int | None = None,
) -> st.SearchStrategy[Group[Any]]:
    """Groups whose elements are drawn from ``elements`` (integers by default).

    Elements must be hashable; duplicates drawn by ``elements`` are discarded
    rather than collapsing the group below ``min_size``.
    """
    if elements is None:
        elements = st.integers()
    return st.frozensets(elements, min_size=min_size, max_size=max_size).map(Group)


def groups_of(tp: Any, *, min_size: int = 0, max_size: int | None = None) -> st.SearchStrategy[Group[Any]]:
    return groups(element_strategy(tp), min_size=min_size, max_size=max_size)


def element_strategy(tp: Any, *, max_size: int = 10, depth: int = 0) -> st.SearchStrategy[Any]:
    """Resolve a strategy for a hashable element type.

    Registered overrides win, first for the exact type and then for its
    generic origin (so an override for ``Group`` covers ``Group[int]``).

    Raises:
        TypeError: no strategy is known for ``tp``.
    """
    if depth > _MAX_DEPTH:
        return st.none()

    if tp in _STRATEGY_OVERRIDES:
        return _STRATEGY_OVERRIDES[tp]

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is not None and origin in _STRATEGY_OVERRIDES:
        return _STRATEGY_OVERRIDES[origin]

    if tp is None or tp is type(None):
        return st.none()
    if tp is Any:
        return st.one_of(st.none(), st.booleans(), st.integers(), st.text())
    if tp is bool:
        return st.booleans()
    if tp is int:
        return st.integers()
    if tp is float:
        # NaN != NaN would break uniqueness
        return st.floats(allow_nan=False)
    if tp is str:
        return st.text()
    if tp is bytes:
        return st.binary()
    if tp is datetime.date:
        return st.dates()

    def inner(arg: Any) -> st.SearchStrategy[Any]:
        return element_strategy(arg, max_size=max_size, depth=depth + 1)

    if origin is Union or origin is types.UnionType:
        return st.one_of(*[inner(a) for a in args])

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return st.lists(inner(args[0]), max_size=max_size).map(tuple)
        return st.tuples(*[inner(a) for a in args])

    if origin is frozenset:
        (elem,) = args if args else (Any,)
        return st.frozensets(inner(elem), max_size=max_size)

    if tp is Group or origin is Group:
        (elem,) = args if args else (int,)
        return groups(inner(elem), max_size=max_size)

    if isinstance(tp, type) and dataclasses.is_dataclass(tp) and _is_frozen(tp):
        hints = get_type_hints(tp)
        field_strats = {f.name: inner(hints.get(f.name, f.type)) for f in dataclasses.fields(tp)}
        return st.builds(tp, **field_strats)

    raise TypeError(f"no element strategy for {tp!r}; register one with register_element_strategy")


def _is_frozen(tp: type) -> bool:
    params = getattr(tp, "__dataclass_params__", None)
    return bool(params is not None and params.frozen)


class _IntPredicate:
    __slots__ = ("_fn", "_label")

    def __init__(self, label: str, fn: Callable[[int], bool]) -> None:
        self._label = label
        self._fn = fn

    def __call__(self, x: int) -> bool:
        return self._fn(x)

    def __repr__(self) -> str:
        return self._label


def predicates() -> st.SearchStrategy[Callable[[int], bool]]:
    """Simple integer predicates: thresholds, parity and the constants."""
    bounds = st.integers(min_value=-100, max_value=100)
    return st.one_of(
        bounds.map(lambda b: _IntPredicate(f"x >= {b}", lambda x: x >= b)),
        bounds.map(lambda b: _IntPredicate(f"x < {b}", lambda x: x < b)),
        st.integers(min_value=2, max_value=5).map(
            lambda m: _IntPredicate(f"x % {m} == 0", lambda x: x % m == 0)
        ),
        st.sampled_from([
            _IntPredicate("always", lambda x: True),
            _IntPredicate("never", lambda x: False),
        ]),
    )

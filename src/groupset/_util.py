from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Any


def _qualified_name(fn: Callable[..., Any]) -> str:
    module = getattr(fn, "__module__", None)
    name = getattr(fn, "__qualname__", getattr(fn, "__name__", None))
    if name is None:
        return repr(fn)
    return f"{module}.{name}" if module else name


def _stable_order(elements: Iterable[Any]) -> list[Any]:
    items = list(elements)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


def _jsonable(obj: Any) -> Any:
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (list, tuple)):
        return [_jsonable(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return [_jsonable(x) for x in _stable_order(obj)]
    if isinstance(obj, dict):
        return {str(k): _jsonable(v) for k, v in obj.items()}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {"__dataclass__": obj.__class__.__name__, **_jsonable(dataclasses.asdict(obj))}
    to_frozenset = getattr(obj, "to_frozenset", None)
    if callable(to_frozenset):
        return {"__group__": _jsonable(to_frozenset())}
    return repr(obj)

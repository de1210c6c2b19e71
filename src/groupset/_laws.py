"""Order-independence checks for operators passed to ``Group.reduce``.

A group has no iteration order, so a fold is only deterministic when its
operator is commutative and associative. These checks search for a
counterexample with Hypothesis; a clean search is evidence, not proof.
"""

from __future__ import annotations

import dataclasses
import logging
import time
from collections.abc import Callable
from typing import Any

from hypothesis import HealthCheck, find, settings
from hypothesis import strategies as st
from hypothesis.errors import FailedHealthCheck, NoSuchExample, Unsatisfiable

from groupset._strategies import element_strategy
from groupset._util import _jsonable, _qualified_name

logger = logging.getLogger(__name__)

BinaryOperator = Callable[[Any, Any], Any]


@dataclasses.dataclass
class LawResult:
    operator: str
    law: str
    status: str  # "pass" | "fail" | "error"
    details: dict[str, Any]
    duration_s: float = 0.0

    @property
    def holds(self) -> bool:
        return self.status == "pass"

    def to_json(self) -> dict[str, Any]:
        return {
            "operator": self.operator,
            "law": self.law,
            "status": self.status,
            "details": self.details,
            "duration_s": round(self.duration_s, 3),
        }


def _resolve_elements(elements: st.SearchStrategy[Any] | Any) -> st.SearchStrategy[Any]:
    if isinstance(elements, st.SearchStrategy):
        return elements
    return element_strategy(elements)


def _search_settings(max_examples: int) -> settings:
    return settings(
        max_examples=max_examples,
        deadline=None,
        database=None,
        suppress_health_check=[HealthCheck.too_slow, HealthCheck.filter_too_much],
    )


def _check_law(
    operator: BinaryOperator,
    law: str,
    arity: int,
    sides: Callable[[BinaryOperator, tuple[Any, ...]], tuple[Any, Any]],
    elements: st.SearchStrategy[Any] | Any,
    max_examples: int,
) -> LawResult:
    name = _qualified_name(operator)
    strat = _resolve_elements(elements)
    t0 = time.monotonic()

    def violates(args: tuple[Any, ...]) -> bool:
        try:
            left, right = sides(operator, args)
            return not bool(left == right)
        except Exception:
            return True

    try:
        args = find(st.tuples(*([strat] * arity)), violates, settings=_search_settings(max_examples))
    except NoSuchExample:
        return LawResult(name, law, "pass", {"max_examples": max_examples}, duration_s=time.monotonic() - t0)
    except (Unsatisfiable, FailedHealthCheck) as e:
        logger.debug("search for a %s counterexample to %s gave up: %s", law, name, e)
        return LawResult(
            name, law, "error",
            {"error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t0,
        )

    try:
        left, right = sides(operator, args)
    except Exception as e:
        logger.debug("%s raised on %r while checking %s: %s", name, args, law, e)
        return LawResult(
            name, law, "error",
            {"args": _jsonable(args), "error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t0,
        )

    logger.debug("%s is not %s: %r gives %r vs %r", name, law, args, left, right)
    return LawResult(
        name, law, "fail",
        {"args": _jsonable(args), "left": _jsonable(left), "right": _jsonable(right)},
        duration_s=time.monotonic() - t0,
    )


def _commuted(op: BinaryOperator, args: tuple[Any, ...]) -> tuple[Any, Any]:
    a, b = args
    return op(a, b), op(b, a)


def _reassociated(op: BinaryOperator, args: tuple[Any, ...]) -> tuple[Any, Any]:
    a, b, c = args
    return op(op(a, b), c), op(a, op(b, c))


def check_commutative(
    operator: BinaryOperator,
    elements: st.SearchStrategy[Any] | Any,
    *,
    max_examples: int = 200,
) -> LawResult:
    """Search for ``a, b`` with ``operator(a, b) != operator(b, a)``."""
    return _check_law(operator, "commutative", 2, _commuted, elements, max_examples)


def check_associative(
    operator: BinaryOperator,
    elements: st.SearchStrategy[Any] | Any,
    *,
    max_examples: int = 200,
) -> LawResult:
    """Search for ``a, b, c`` where regrouping the operator changes the result."""
    return _check_law(operator, "associative", 3, _reassociated, elements, max_examples)


def check_order_independent(
    operator: BinaryOperator,
    elements: st.SearchStrategy[Any] | Any,
    *,
    max_examples: int = 200,
) -> list[LawResult]:
    """Run every law ``Group.reduce`` relies on.

    ``elements`` is either a Hypothesis strategy or an element type resolved
    through :func:`groupset.element_strategy`.
    """
    return [
        check_commutative(operator, elements, max_examples=max_examples),
        check_associative(operator, elements, max_examples=max_examples),
    ]


def is_order_independent(
    operator: BinaryOperator,
    elements: st.SearchStrategy[Any] | Any,
    *,
    max_examples: int = 200,
) -> bool:
    return all(r.holds for r in check_order_independent(operator, elements, max_examples=max_examples))

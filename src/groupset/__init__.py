from groupset._builder import GroupBuilder
from groupset._errors import EmptyGroupError, NotFoundError, NotSingletonError
from groupset._group import Group
from groupset._laws import (
    LawResult,
    check_associative,
    check_commutative,
    check_order_independent,
    is_order_independent,
)
from groupset._strategies import element_strategy, groups, groups_of, predicates, register_element_strategy

__all__ = [
    "EmptyGroupError",
    "Group",
    "GroupBuilder",
    "LawResult",
    "NotFoundError",
    "NotSingletonError",
    "check_associative",
    "check_commutative",
    "check_order_independent",
    "element_strategy",
    "groups",
    "groups_of",
    "is_order_independent",
    "predicates",
    "register_element_strategy",
]

from __future__ import annotations


class NotFoundError(LookupError):
    """No element of a group satisfied a single-result query."""


class EmptyGroupError(NotFoundError):
    """The operation needs at least one element but the group is empty."""


class NotSingletonError(ValueError):
    """A group expected to hold exactly one element holds several."""

    def __init__(self, size: int) -> None:
        super().__init__(f"expected a group of exactly one element, got {size}")
        self.size = size

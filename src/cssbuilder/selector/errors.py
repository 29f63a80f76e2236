"""Selector builder error types."""

from __future__ import annotations

from cssbuilder.selector.rank import Rank

CARDINALITY_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Raised when a part cannot be appended to a selector chain.

    Attributes:
        part: The rank of the part that was rejected.
        phase: The builder's phase when the part was rejected.
    """

    def __init__(self, message: str, part: Rank, phase: Rank) -> None:
        self.part = part
        self.phase = phase
        super().__init__(message)


class CardinalityViolation(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, part: Rank, phase: Rank) -> None:
        super().__init__(CARDINALITY_MESSAGE, part, phase)


class OrderViolation(SelectorError):
    """A part was appended after a part that must follow it."""

    def __init__(self, part: Rank, phase: Rank) -> None:
        super().__init__(ORDER_MESSAGE, part, phase)

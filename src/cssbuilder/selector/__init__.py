from cssbuilder.selector import facade
from cssbuilder.selector.builder import SelectorBuilder
from cssbuilder.selector.errors import CardinalityViolation, OrderViolation, SelectorError
from cssbuilder.selector.rank import Rank

__all__ = [
    "facade",
    "SelectorBuilder",
    "Rank",
    "SelectorError",
    "CardinalityViolation",
    "OrderViolation",
]

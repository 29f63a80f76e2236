"""Mutable builder that accumulates compound and combined CSS selectors."""

from __future__ import annotations

import logging

from cssbuilder.selector.errors import CardinalityViolation, OrderViolation
from cssbuilder.selector.rank import Rank

log = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector fragments in append order.

    Parts must follow the order element, id, class, attribute, pseudo-class,
    pseudo-element. Element, id and pseudo-element may appear once; class,
    attribute and pseudo-class may repeat. Every part method returns the
    builder so calls can be chained; :meth:`stringify` returns the finished
    selector and resets the builder.

    A builder is not safe to share between threads.
    """

    def __init__(self) -> None:
        self._fragments: list[str] = []
        self._phase = Rank.NONE

    @property
    def phase(self) -> Rank:
        return self._phase

    @property
    def fragments(self) -> list[str]:
        """Return a copy of the fragments appended so far."""
        return list(self._fragments)

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Rank.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Rank.ID, f"#{value}")

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Rank.CLASS, f".{value}")

    def attr(self, value: str) -> SelectorBuilder:
        """Append an attribute selector; *value* goes between the brackets verbatim."""
        return self._append(Rank.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Rank.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Rank.PSEUDO_ELEMENT, f"::{value}")

    # --- composition ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Append ``left``, the space-padded *combinator*, then ``right``.

        Both operands are finalized with :meth:`stringify`. The phase of this
        builder is left untouched.
        """
        self._fragments.append(left.stringify())
        self._fragments.append(f" {combinator} ")
        self._fragments.append(right.stringify())
        return self

    def stringify(self) -> str:
        """Join the fragments, reset the builder and return the selector."""
        result = "".join(self._fragments)
        self._fragments = []
        self._phase = Rank.NONE
        log.debug("Selector built: %r", result)
        return result

    # --- internals ------------------------------------------------------------

    def _append(self, rank: Rank, fragment: str) -> SelectorBuilder:
        if rank.unique and self._phase == rank:
            log.debug("Rejected %s: already present", rank.label)
            raise CardinalityViolation(rank, self._phase)
        if self._phase > rank:
            log.debug("Rejected %s after %s", rank.label, self._phase.label)
            raise OrderViolation(rank, self._phase)
        self._phase = rank
        self._fragments.append(fragment)
        return self

    def __repr__(self) -> str:
        return f"SelectorBuilder(fragments={self._fragments!r}, phase={self._phase.label})"

"""Rank model: ordinal position of each selector part kind."""

from __future__ import annotations

from enum import IntEnum


class Rank(IntEnum):
    """Fixed ordering of compound selector parts.

    ``NONE`` is the phase of a builder that has no part appended yet.
    """

    NONE = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    @property
    def unique(self) -> bool:
        """True if the part may occur at most once in a compound selector."""
        return self in UNIQUE_RANKS


UNIQUE_RANKS = frozenset({Rank.ELEMENT, Rank.ID, Rank.PSEUDO_ELEMENT})

"""Rectangle model: width/height pair with a derived area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    width: float
    height: float

    @property
    def area(self) -> float:
        """Width times height, computed on each access."""
        return self.width * self.height

    def get_area(self) -> float:
        return self.area

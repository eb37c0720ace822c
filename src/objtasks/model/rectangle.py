"""Rectangle model: width/height pair with an on-demand area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle.

    No range validation is done: zero and negative sides are kept as given.
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    """Return a Rectangle with the given sides."""
    return Rectangle(width=width, height=height)

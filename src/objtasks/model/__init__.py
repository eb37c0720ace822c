"""Shape model layer -- public type re-exports."""

from objtasks.model.circle import Circle
from objtasks.model.rectangle import Rectangle, make_rectangle

__all__ = [
    "Rectangle",
    "make_rectangle",
    "Circle",
]

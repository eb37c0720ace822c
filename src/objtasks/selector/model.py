"""Selector model: fragment categories and standard combinators."""

from __future__ import annotations

from enum import Enum, StrEnum


class Category(Enum):
    """Kind of fragment in a compound selector, declared in required order.

    A compound selector reads ``element#id.class[attr]:pseudo-class::pseudo-element``;
    fragments must appear with non-decreasing :attr:`rank`.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {category: index for index, category in enumerate(Category)}


class Combinator(StrEnum):
    """The four standard CSS combinators.

    :meth:`SelectorBuilder.combine` accepts any string; these are offered
    for convenience only.
    """

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

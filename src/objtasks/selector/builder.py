"""Fluent CSS selector builder.

Every call returns a new :class:`Selector`; the receiver is never changed,
so a partial chain can serve as the base for several selectors::

    base = css_selector_builder.element("div").id("main")
    base.class_("container").stringify()   # 'div#main.container'
    base.pseudo_class("hover").stringify()  # 'div#main:hover'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from objtasks.selector.errors import DuplicateFragmentError, OutOfOrderError
from objtasks.selector.model import Category

__all__ = ["Selector", "SelectorBuilder", "css_selector_builder"]

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selector:
    """An immutable, partially or fully built selector.

    Attributes:
        text: The selector text accumulated so far.
        last: Category of the most recent fragment, or None when empty.
        has_element: An element fragment is present.
        has_id: An id fragment is present.
        has_pseudo_element: A pseudo-element fragment is present.
    """

    text: str = ""
    last: Category | None = None
    has_element: bool = False
    has_id: bool = False
    has_pseudo_element: bool = False

    # --- fragments ------------------------------------------------------------

    def element(self, name: str) -> Selector:
        if self.has_element:
            raise DuplicateFragmentError(Category.ELEMENT)
        return self._append(Category.ELEMENT, name, has_element=True)

    def id(self, value: str) -> Selector:
        if self.has_id:
            raise DuplicateFragmentError(Category.ID)
        return self._append(Category.ID, f"#{value}", has_id=True)

    def class_(self, value: str) -> Selector:
        return self._append(Category.CLASS, f".{value}")

    def attr(self, value: str) -> Selector:
        """Append ``[value]``; *value* is used verbatim, e.g. ``'href$=".png"'``."""
        return self._append(Category.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> Selector:
        return self._append(Category.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> Selector:
        if self.has_pseudo_element:
            raise DuplicateFragmentError(Category.PSEUDO_ELEMENT)
        return self._append(Category.PSEUDO_ELEMENT, f"::{value}", has_pseudo_element=True)

    def _append(self, category: Category, fragment: str, **flags: bool) -> Selector:
        if self.last is not None and category.rank < self.last.rank:
            raise OutOfOrderError(category)
        return replace(self, text=self.text + fragment, last=category, **flags)

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


class SelectorBuilder:
    """Entry point for selector chains.

    Each fragment method starts a fresh chain from an empty selector.
    """

    def element(self, name: str) -> Selector:
        return Selector().element(name)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors as ``"<first> <combinator> <second>"``.

        The combinator is used verbatim and the two sides are not checked
        against each other. The result keeps *second*'s fragment state, so
        further fragments extend the right-most compound selector.
        """
        text = f"{first.stringify()} {combinator} {second.stringify()}"
        log.debug("Combined selector: %r", text)
        return replace(second, text=text)


css_selector_builder = SelectorBuilder()

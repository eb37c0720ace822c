"""Selector builder error types."""

from __future__ import annotations

from objtasks.selector.model import Category


class SelectorError(Exception):
    """Base error for invalid selector construction."""

    def __init__(self, message: str, category: Category | None = None):
        self.category = category
        super().__init__(message)


class DuplicateFragmentError(SelectorError):
    """An element, id or pseudo-element was added twice to one selector."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, category: Category):
        super().__init__(self.MESSAGE, category)


class OutOfOrderError(SelectorError):
    """A fragment was added after a fragment that must follow it."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: element, id, "
        "class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, category: Category):
        super().__init__(self.MESSAGE, category)

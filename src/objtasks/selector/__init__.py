"""CSS selector builder: immutable fluent chains with ordering rules."""

from objtasks.selector.builder import Selector, SelectorBuilder, css_selector_builder
from objtasks.selector.errors import DuplicateFragmentError, OutOfOrderError, SelectorError
from objtasks.selector.model import Category, Combinator

__all__ = [
    # builder
    "Selector",
    "SelectorBuilder",
    "css_selector_builder",
    # model
    "Category",
    "Combinator",
    # errors
    "SelectorError",
    "DuplicateFragmentError",
    "OutOfOrderError",
]

from __future__ import annotations

from objtasks.selector import Category, Combinator


class TestCategory:
    def test_rank_order(self) -> None:
        ranks = [c.rank for c in Category]
        assert ranks == [0, 1, 2, 3, 4, 5]

    def test_element_lowest_pseudo_element_highest(self) -> None:
        assert Category.ELEMENT.rank < Category.ID.rank < Category.CLASS.rank
        assert Category.ATTRIBUTE.rank < Category.PSEUDO_CLASS.rank < Category.PSEUDO_ELEMENT.rank


class TestCombinator:
    def test_all_values(self) -> None:
        assert {c.value for c in Combinator} == {" ", ">", "+", "~"}

    def test_is_str(self) -> None:
        assert isinstance(Combinator.CHILD, str)
        assert Combinator.ADJACENT_SIBLING == "+"

"""Tests for the Rectangle model."""

from __future__ import annotations

import dataclasses

import pytest

from objtasks.model import Rectangle, make_rectangle


class TestMakeRectangle:
    def test_fields_match_inputs(self) -> None:
        r = make_rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_returns_rectangle(self) -> None:
        assert isinstance(make_rectangle(1, 2), Rectangle)

    def test_equivalent_to_constructor(self) -> None:
        assert make_rectangle(3, 4) == Rectangle(3, 4)


class TestArea:
    @pytest.mark.parametrize(
        "width,height",
        [(10, 20), (1, 1), (0, 5), (-2, 3), (2.5, 4)],
    )
    def test_area_is_product(self, width, height) -> None:
        assert make_rectangle(width, height).area() == width * height

    def test_area_is_method(self) -> None:
        r = make_rectangle(10, 20)
        assert callable(r.area)
        assert r.area() == 200

    def test_negative_sides_accepted(self) -> None:
        r = make_rectangle(-1, -1)
        assert r.area() == 1


class TestImmutability:
    def test_cannot_assign_width(self) -> None:
        r = make_rectangle(10, 20)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.width = 5  # type: ignore[misc]

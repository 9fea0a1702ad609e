"""Unit tests for the Product entity."""

from __future__ import annotations

import dataclasses

import pytest

from product_filter.catalog import Color, ColorSpecification, Product, Size, SizeSpecification
from product_filter.kernel.errors import InvalidArgumentError, ValidationError


class TestProduct:
    def test_attributes_are_kept(self) -> None:
        p = Product("Apple", Color.GREEN, Size.SMALL)
        assert p.name == "Apple"
        assert p.color is Color.GREEN
        assert p.size is Size.SMALL

    @pytest.mark.parametrize("color", list(Color))
    @pytest.mark.parametrize("size", list(Size))
    def test_any_color_and_size_accepted(self, color: Color, size: Size) -> None:
        p = Product("Thing", color, size)
        assert (p.color, p.size) == (color, size)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Product("", Color.RED, Size.HUGE)
        assert exc_info.value.argument == "name"
        assert exc_info.value.code == "invalid_argument"

    def test_none_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Product(None, Color.RED, Size.HUGE)  # type: ignore[arg-type]

    def test_is_frozen(self) -> None:
        p = Product("Tree", Color.GREEN, Size.LARGE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.name = "Bush"  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        assert Product("Tree", Color.GREEN, Size.LARGE) == Product("Tree", Color.GREEN, Size.LARGE)
        assert Product("Tree", Color.GREEN, Size.LARGE) != Product("Tree", Color.BLUE, Size.LARGE)

    def test_hashable(self) -> None:
        p = Product("House", Color.BLUE, Size.LARGE)
        assert len({p, Product("House", Color.BLUE, Size.LARGE)}) == 1

    def test_replace_revalidates(self) -> None:
        p = Product("House", Color.BLUE, Size.LARGE)
        assert dataclasses.replace(p, color=Color.RED).color is Color.RED
        with pytest.raises(InvalidArgumentError):
            dataclasses.replace(p, name="")


class TestEnums:
    def test_colors(self) -> None:
        assert [c.name for c in Color] == ["RED", "GREEN", "BLUE"]

    def test_sizes(self) -> None:
        assert [s.name for s in Size] == ["SMALL", "MEDIUM", "LARGE", "HUGE"]

    def test_members_are_not_plain_strings(self) -> None:
        assert Color.GREEN != "green"
        assert Size.LARGE != "large"

    def test_string_value_does_not_match_specification(self) -> None:
        tree = Product("Tree", Color.GREEN, Size.LARGE)
        assert not ColorSpecification("green").is_satisfied_by(tree)  # type: ignore[arg-type]
        assert not SizeSpecification("large").is_satisfied_by(tree)  # type: ignore[arg-type]

"""Unit tests for Invariant helpers."""

from __future__ import annotations

import pytest

from product_filter.kernel.ddd import Invariant
from product_filter.kernel.errors import InvalidArgumentError


class TestNotBlank:
    def test_returns_value(self) -> None:
        assert Invariant.not_blank("Apple", "name") == "Apple"

    @pytest.mark.parametrize("value", [None, ""])
    def test_rejects_absent_or_empty(self, value: str | None) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Invariant.not_blank(value, "name")
        assert exc_info.value.argument == "name"

    def test_rejects_non_string(self) -> None:
        with pytest.raises(InvalidArgumentError, match="string"):
            Invariant.not_blank(42, "name")  # type: ignore[arg-type]

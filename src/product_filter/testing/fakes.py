"""Testing fakes – specifications that record how they were evaluated."""
from __future__ import annotations

from typing import Any

from product_filter.kernel.ddd.specification import BaseSpecification


class RecordingSpecification(BaseSpecification[Any]):
    """Returns a fixed answer and remembers every candidate it was asked about.

    Useful for asserting evaluation order and short-circuiting::

        first, second = RecordingSpecification(False), RecordingSpecification(True)
        AndSpecification([first, second]).is_satisfied_by(item)
        assert second.calls == []
    """

    def __init__(self, result: bool, *, name: str = "") -> None:
        self.result = result
        self.name = name or ("always" if result else "never")
        self.calls: list[Any] = []

    def is_satisfied_by(self, candidate: Any) -> bool:
        self.calls.append(candidate)
        return self.result

    def __repr__(self) -> str:
        return f"RecordingSpecification({self.name!r})"


__all__ = ["RecordingSpecification"]

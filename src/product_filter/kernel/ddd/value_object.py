"""ValueObject base class."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ValueObject:
    """Frozen dataclass base whose ``_validate`` hook runs on construction.

    Equality and hashing come from the field values.  Subclasses must also be
    declared ``@dataclass(frozen=True)``.
    """

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise a domain error when field values are not acceptable."""


__all__ = ["ValueObject"]

"""Specification pattern — composable boolean rules over candidates."""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

from product_filter.kernel.errors.domain import InvalidArgumentError

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract base for specifications — provides operator overloads.

    Subclass this and implement ``is_satisfied_by``.

    Example::

        class InStock(BaseSpecification[Product]):
            def is_satisfied_by(self, candidate: Product) -> bool:
                return candidate.stock > 0

        spec = InStock() & ColorSpecification(Color.GREEN)
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    # Named combinators ------------------------------------------------
    def and_(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return AndSpecification((self, other))

    def or_(self, other: "BaseSpecification[T]") -> "OrSpecification[T]":
        return OrSpecification((self, other))

    def not_(self) -> "NotSpecification[T]":
        return NotSpecification(self)

    # Operator overloads -----------------------------------------------
    def __and__(self, other: "BaseSpecification[T]") -> "AndSpecification[T]":
        return self.and_(other)

    def __or__(self, other: "BaseSpecification[T]") -> "OrSpecification[T]":
        return self.or_(other)

    def __invert__(self) -> "NotSpecification[T]":
        return self.not_()


def _collect(specs: Iterable[BaseSpecification[T]] | None, owner: str) -> tuple[BaseSpecification[T], ...]:
    """Snapshot *specs* into a tuple, rejecting anything that is not a specification."""
    if specs is None:
        raise InvalidArgumentError("specs", f"{owner} requires a collection of specifications")
    try:
        members = tuple(specs)
    except TypeError as exc:
        raise InvalidArgumentError(
            "specs", f"{owner} requires a collection of specifications, got {specs!r}"
        ) from exc
    for index, spec in enumerate(members):
        if not isinstance(spec, BaseSpecification):
            raise InvalidArgumentError(
                "specs",
                f"{owner} member {index} is not a specification: {spec!r}",
            )
    return members


class AndSpecification(BaseSpecification[T]):
    """Conjunction of an ordered collection of specifications.

    Members are evaluated left to right and evaluation stops at the first
    member that is not satisfied.  An empty collection is satisfied by every
    candidate.  The collection is copied on construction.
    """

    def __init__(self, specs: Iterable[BaseSpecification[T]]) -> None:
        self._specs = _collect(specs, "AndSpecification")

    @property
    def specs(self) -> tuple[BaseSpecification[T], ...]:
        return self._specs

    def is_satisfied_by(self, candidate: T) -> bool:
        for spec in self._specs:
            if not spec.is_satisfied_by(candidate):
                return False
        return True

    def and_(self, other: BaseSpecification[T]) -> "AndSpecification[T]":
        return AndSpecification((*self._specs, other))

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"AndSpecification({list(self._specs)!r})"


class OrSpecification(BaseSpecification[T]):
    """Disjunction of an ordered collection of specifications.

    Stops at the first satisfied member; an empty collection is never satisfied.
    """

    def __init__(self, specs: Iterable[BaseSpecification[T]]) -> None:
        self._specs = _collect(specs, "OrSpecification")

    @property
    def specs(self) -> tuple[BaseSpecification[T], ...]:
        return self._specs

    def is_satisfied_by(self, candidate: T) -> bool:
        for spec in self._specs:
            if spec.is_satisfied_by(candidate):
                return True
        return False

    def or_(self, other: BaseSpecification[T]) -> "OrSpecification[T]":
        return OrSpecification((*self._specs, other))

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"OrSpecification({list(self._specs)!r})"


class NotSpecification(BaseSpecification[T]):
    """Negation of a specification."""

    def __init__(self, spec: BaseSpecification[T]) -> None:
        if not isinstance(spec, BaseSpecification):
            raise InvalidArgumentError("spec", f"NotSpecification cannot negate {spec!r}")
        self._spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._spec.is_satisfied_by(candidate)

    def not_(self) -> BaseSpecification[T]:  # type: ignore[override]
        return self._spec

    def __repr__(self) -> str:
        return f"NotSpecification({self._spec!r})"


class LambdaSpecification(BaseSpecification[T]):
    """Wraps a plain callable as a specification.

    Example::

        named_a = LambdaSpecification(lambda p: p.name.startswith("A"), name="named_a")
        assert named_a.is_satisfied_by(apple)
    """

    def __init__(
        self,
        predicate: Callable[[T], bool],
        *,
        name: str = "",
    ) -> None:
        if not callable(predicate):
            raise InvalidArgumentError("predicate", "LambdaSpecification requires a callable")
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def __repr__(self) -> str:
        return f"LambdaSpecification({self.name!r})"


__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
]

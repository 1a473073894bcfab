"""Case variants consumed by ``Match.of``.

A case either tests the held value (``PredicateCase``) or supplies a
fallback when nothing else matched (``DefaultCase``). Both satisfy the
``Case`` protocol, so callers may also pass their own implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from casewise.predicates import Predicate

__all__ = [
    "Case",
    "DefaultCase",
    "PredicateCase",
    "by_default",
    "by_predicate",
    "by_type",
]


@runtime_checkable
class Case[T, V](Protocol):
    """Protocol for a single match arm.

    ``Match.of`` never calls ``test`` on a case whose ``is_default`` is
    true; such a case is only applied as the fallback.
    """

    @property
    def is_default(self) -> bool: ...

    def test(self, value: T) -> bool: ...

    def apply(self, value: T) -> V: ...


@dataclass(frozen=True, slots=True)
class PredicateCase[T, V]:
    predicate: Predicate[T]
    transform: Callable[[T], V]

    @property
    def is_default(self) -> bool:
        return False

    def test(self, value: T) -> bool:
        return self.predicate(value)

    def apply(self, value: T) -> V:
        return self.transform(value)


@dataclass(frozen=True, slots=True)
class DefaultCase[T, V]:
    """Fallback arm. Never matches by testing; ``apply`` ignores its input."""

    producer: Callable[[], V]

    @property
    def is_default(self) -> bool:
        return True

    def test(self, value: T) -> bool:
        return False

    def apply(self, value: T) -> V:
        return self.producer()


def by_type[T, V](cls: type[Any], transform: Callable[[T], V]) -> PredicateCase[T, V]:
    """Match values whose runtime type is exactly ``cls``.

    Subclass instances do not match: ``by_type(int, ...)`` rejects ``True``.
    """
    return PredicateCase(lambda v: type(v) is cls, transform)


def by_predicate[T, V](
    predicate: Predicate[T],
    transform: Callable[[T], V],
) -> PredicateCase[T, V]:
    return PredicateCase(predicate, transform)


def by_default[T, V](producer: Callable[[], V]) -> DefaultCase[T, V]:
    return DefaultCase(producer)

"""Predicate combinators for building cases.

Example:
    from casewise import by_predicate, equals_value, match, negate

    match(status).of(
        by_predicate(equals_value("ok"), lambda _: 200),
        by_predicate(negate(equals_value("ok")), lambda _: 500),
    )
"""

from __future__ import annotations

from collections.abc import Callable

__all__ = [
    "Predicate",
    "equals_value",
    "negate",
]

type Predicate[T] = Callable[[T], bool]


def equals_value[T](target: T) -> Predicate[T]:
    """Return a predicate testing equality against ``target``.

    ``Decimal.__eq__`` already compares by numeric value, so
    ``Decimal("2.50")`` equals ``Decimal("2.5")`` and NaN equals nothing.
    Values of unrelated types (``"text"``, ``None``) are simply unequal.
    """
    return lambda v: v == target


def negate[T](predicate: Predicate[T]) -> Predicate[T]:
    return lambda v: not predicate(v)

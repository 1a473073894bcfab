"""Match expressions over plain values.

Example:
    from casewise import by_default, by_predicate, match

    label = match(n).of(
        by_predicate(lambda v: v < 0, lambda _: "neg"),
        by_predicate(lambda v: v == 5, lambda _: "five"),
        by_default(lambda: "other"),
    )
    # Some(value='five') for n == 5, Some(value='other') for n == 100
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from casewise.cases import Case
from casewise.logging import shown
from casewise.result import NoMatchError, Option, Some

__all__ = [
    "Match",
    "match",
]


@dataclass(frozen=True, slots=True)
class Match[T]:
    """Immutable wrapper dispatching one value against ordered cases."""

    value: T

    def of[V](self, *cases: Case[T, V]) -> Option[V]:
        """Evaluate ``cases`` in order and return the first match.

        Default cases are remembered, not applied, while scanning; when
        several are given the last one seen wins. A default is only used
        if no other case matched.

        Args:
            *cases: Cases to try, in priority order.

        Returns:
            ``Some`` with the matched (or default) result, or ``None`` if
            nothing matched and no default was given.
        """
        fallback: Case[T, V] | None = None

        for index, case in enumerate(cases):
            if case.is_default:
                fallback = case
                continue
            if case.test(self.value):
                logger.trace("Case {} matched {}", index, shown(self.value))
                return Some(case.apply(self.value))

        if fallback is not None:
            logger.trace("No case matched {}, using default", shown(self.value))
            return Some(fallback.apply(self.value))

        logger.trace("No case matched {} and no default given", shown(self.value))
        return None

    def get[V](self, *cases: Case[T, V]) -> V:
        """Like ``of``, but unwraps the result.

        Raises:
            NoMatchError: If nothing matched and no default was given.
        """
        result = self.of(*cases)
        if result is None:
            raise NoMatchError(value=self.value)
        return result.value


def match[T](value: T) -> Match[T]:
    return Match(value)

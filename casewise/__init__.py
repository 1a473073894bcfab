"""casewise - match expressions over plain values.

Example:

    from decimal import Decimal

    from casewise import by_default, by_predicate, by_type, equals_value, match

    match(price).of(
        by_predicate(equals_value(Decimal("0")), lambda _: "free"),
        by_type(Decimal, lambda p: f"{p:.2f}"),
        by_default(lambda: "n/a"),
    )
"""

# Cases
from casewise.cases import (
    Case,
    DefaultCase,
    PredicateCase,
    by_default,
    by_predicate,
    by_type,
)

# Logging
from casewise.logging import (
    LogConfig,
    disable_logging,
    enable_logging,
    logging_enabled,
)

# Match expressions
from casewise.match import Match, match

# Predicates
from casewise.predicates import Predicate, equals_value, negate

# Results
from casewise.result import NoMatchError, Option, Some, unwrap, unwrap_or

__all__ = [
    # Cases
    "Case",
    "DefaultCase",
    "PredicateCase",
    "by_default",
    "by_predicate",
    "by_type",
    # Logging
    "LogConfig",
    "disable_logging",
    "enable_logging",
    "logging_enabled",
    # Match expressions
    "Match",
    "match",
    # Predicates
    "Predicate",
    "equals_value",
    "negate",
    # Results
    "NoMatchError",
    "Option",
    "Some",
    "unwrap",
    "unwrap_or",
]

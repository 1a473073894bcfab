"""Dispatch on exact runtime type, with tracing enabled.

by_type matches the exact class only, so True is not treated as an int.
"""

from decimal import Decimal

import casewise as cw


def describe(value: object) -> str:
    return cw.match(value).get(
        cw.by_type(bool, lambda b: "yes" if b else "no"),
        cw.by_type(int, lambda i: f"{i} (int)"),
        cw.by_predicate(cw.equals_value(Decimal("0")), lambda _: "free"),
        cw.by_type(Decimal, lambda d: f"${d:.2f}"),
        cw.by_default(lambda: "unknown"),
    )


if __name__ == "__main__":
    with cw.logging_enabled(cw.LogConfig(level="TRACE")):
        for value in (True, 42, Decimal("0.00"), Decimal("9.5"), "text"):
            print(describe(value))

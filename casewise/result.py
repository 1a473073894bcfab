"""Optional results for match evaluation.

A match either produces a value or it does not. The value is wrapped in
``Some`` so that a transform returning ``None`` stays distinguishable from
"nothing matched":

    match result:
        case Some(value):
            print(f"matched: {value}")
        case None:
            print("no case applied")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = [
    "NoMatchError",
    "Option",
    "Some",
    "unwrap",
    "unwrap_or",
]


@dataclass(frozen=True, slots=True)
class Some[V]:
    """A present result."""

    value: V


type Option[V] = Some[V] | None


_UNSET: Any = object()


class NoMatchError(LookupError):
    """Raised when a value is required but no case produced one.

    ``has_value`` tells a held ``None`` apart from an error raised without
    a held value (by ``unwrap``).
    """

    def __init__(self, *, value: Any = _UNSET) -> None:
        self.has_value = value is not _UNSET
        self.value = value if self.has_value else None
        subject = f" {value!r}" if self.has_value else ""
        super().__init__(f"No case matched{subject} and no default was given")


def unwrap[V](option: Option[V]) -> V:
    """Return the wrapped value.

    Raises:
        NoMatchError: If ``option`` is ``None``.
    """
    if option is None:
        raise NoMatchError()
    return option.value


def unwrap_or[V](option: Option[V], fallback: V) -> V:
    return fallback if option is None else option.value

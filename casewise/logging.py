"""Logging configuration for casewise.

casewise logs through loguru. As a library it is disabled by default;
enable it to trace how match expressions are resolved. Every record is
emitted at TRACE and names the held value through a bounded repr, so
tracing a large payload does not dump it whole.

Example:
    from casewise import LogConfig, logging_enabled, match

    # Scoped: handlers removed on exit
    with logging_enabled(LogConfig(max_repr=40)):
        match(5).of(...)

    # Manual: keep the handler ids for cleanup
    ids = enable_logging(LogConfig(file="casewise.log", console=False))
    ...
    disable_logging(ids)
"""

from __future__ import annotations

import reprlib
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Literal

from loguru import logger

__all__ = [
    "LogConfig",
    "LogLevel",
    "disable_logging",
    "enable_logging",
    "logging_enabled",
    "shown",
]

# Disable by default (library behavior)
logger.disable("casewise")

type LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]

DEFAULT_MAX_REPR = 80

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <5}</level> | "
    "<cyan>{function}</cyan> - <level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <5} | {name}:{line} - {message}"

_value_repr = reprlib.Repr()
_value_repr.maxstring = _value_repr.maxother = DEFAULT_MAX_REPR


@dataclass(frozen=True, slots=True)
class LogConfig:
    """Logging configuration.

    Attributes:
        level: Minimum level for the console handler. Match resolution is
            logged at TRACE, so anything higher silences it.
        max_repr: Longest repr of a held value written to a record; longer
            ones are elided with ``...``.
        console: Whether to log to stderr. Defaults to True.
        file: Path to log file. If provided, every record is appended to it.
    """

    level: LogLevel = "TRACE"
    max_repr: int = DEFAULT_MAX_REPR
    console: bool = True
    file: str | None = None


class _Shown:
    """Defers the repr of a held value until a handler formats the record."""

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __str__(self) -> str:
        return _value_repr.repr(self.value)


def shown(value: Any) -> _Shown:
    return _Shown(value)


def enable_logging(config: LogConfig) -> list[int]:
    """Enable casewise logging and return the ids of the added handlers."""
    _value_repr.maxstring = _value_repr.maxother = config.max_repr
    logger.enable("casewise")
    handler_ids: list[int] = []

    if config.console:
        handler_ids.append(
            logger.add(
                sys.stderr,
                level=config.level,
                format=CONSOLE_FORMAT,
                colorize=True,
                filter="casewise",
            )
        )

    if config.file:
        handler_ids.append(
            logger.add(config.file, level="TRACE", format=FILE_FORMAT, filter="casewise")
        )

    return handler_ids


def disable_logging(handler_ids: list[int]) -> None:
    for hid in handler_ids:
        logger.remove(hid)
    logger.disable("casewise")
    _value_repr.maxstring = _value_repr.maxother = DEFAULT_MAX_REPR


@contextmanager
def logging_enabled(config: LogConfig | None = None) -> Iterator[list[int]]:
    """Enable logging for the duration of the block."""
    handler_ids = enable_logging(config or LogConfig())
    try:
        yield handler_ids
    finally:
        disable_logging(handler_ids)

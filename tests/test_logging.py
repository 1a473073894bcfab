from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from casewise import (
    LogConfig,
    Some,
    by_default,
    by_predicate,
    disable_logging,
    enable_logging,
    logging_enabled,
    match,
)

pytestmark = [pytest.mark.xdist_group("unit")]


@pytest.fixture
def messages():
    captured: list[str] = []
    ids = enable_logging(LogConfig(console=False))
    sink = logger.add(lambda m: captured.append(m.record["message"]), level="TRACE", filter="casewise")
    yield captured
    logger.remove(sink)
    disable_logging(ids)


class TestMatchTracing:
    def test_matched_case(self, messages: list[str]):
        match(5).of(by_predicate(lambda v: v == 5, lambda _: "five"))
        assert messages == ["Case 0 matched 5"]

    def test_default_used(self, messages: list[str]):
        match(1).of(by_default(lambda: "x"))
        assert messages == ["No case matched 1, using default"]

    def test_no_match(self, messages: list[str]):
        match("a").of()
        assert messages == ["No case matched 'a' and no default given"]

    def test_long_value_is_elided(self):
        captured: list[str] = []
        ids = enable_logging(LogConfig(console=False, max_repr=20))
        sink = logger.add(lambda m: captured.append(m.record["message"]), level="TRACE", filter="casewise")
        try:
            match("x" * 500).of()
        finally:
            logger.remove(sink)
            disable_logging(ids)
        [message] = captured
        assert "..." in message
        assert len(message) < 80

    def test_unprintable_value_is_still_traced(self, messages: list[str]):
        class Unprintable:
            def __repr__(self) -> str:
                raise RuntimeError("repr called")

        assert match(Unprintable()).of(by_default(lambda: "x")) == Some("x")
        [message] = messages
        assert message.startswith("No case matched <Unprintable instance at")

    def test_disabled_by_default(self):
        captured: list[str] = []
        sink = logger.add(lambda m: captured.append(m), level="TRACE")
        try:
            match(5).of(by_default(lambda: "x"))
        finally:
            logger.remove(sink)
        assert captured == []


class TestLogConfig:
    def test_defaults(self):
        config = LogConfig()
        assert config.level == "TRACE"
        assert config.max_repr == 80
        assert config.console is True
        assert config.file is None

    def test_console_only(self):
        ids = enable_logging(LogConfig())
        try:
            assert len(ids) == 1
        finally:
            disable_logging(ids)

    def test_console_and_file(self, tmp_path: Path):
        ids = enable_logging(LogConfig(file=str(tmp_path / "casewise.log")))
        try:
            assert len(ids) == 2
        finally:
            disable_logging(ids)

    def test_no_handlers(self):
        ids = enable_logging(LogConfig(console=False))
        disable_logging(ids)
        assert ids == []


class TestHandlers:
    def test_console_output(self, capsys: pytest.CaptureFixture[str]):
        with logging_enabled(LogConfig(level="TRACE")):
            match(-3).of(by_predicate(lambda v: v < 0, lambda _: "neg"))
        assert "Case 0 matched -3" in capsys.readouterr().err

    def test_console_respects_level(self, capsys: pytest.CaptureFixture[str]):
        with logging_enabled(LogConfig(level="INFO")):
            match(-3).of(by_predicate(lambda v: v < 0, lambda _: "neg"))
        assert "matched" not in capsys.readouterr().err

    def test_file_output(self, tmp_path: Path):
        log_file = tmp_path / "casewise.log"
        with logging_enabled(LogConfig(file=str(log_file), console=False)):
            match(7).of(by_default(lambda: "other"))
        assert "No case matched 7, using default" in log_file.read_text()

    def test_disabled_after_context(self, capsys: pytest.CaptureFixture[str]):
        with logging_enabled(LogConfig(level="TRACE")):
            pass
        match(5).of()
        assert capsys.readouterr().err == ""

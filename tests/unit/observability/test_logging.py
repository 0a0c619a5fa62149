"""Unit tests for JsonLoggerFactory, CorrelationProcessor and get_logger."""
from __future__ import annotations

import json
import logging

import pytest
import structlog

from radioking.observability.correlation import CorrelationContext, RequestContext
from radioking.observability.logging import CorrelationProcessor, JsonLoggerFactory, get_logger


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    CorrelationContext.clear()


def _json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# CorrelationProcessor
# ---------------------------------------------------------------------------

class TestCorrelationProcessor:
    def test_no_context_leaves_event_untouched(self) -> None:
        CorrelationContext.clear()
        assert CorrelationProcessor()(None, "info", {"event": "x"}) == {"event": "x"}

    def test_injects_context(self) -> None:
        token = CorrelationContext.set(RequestContext("cid", trace_id="tid", user_id="uid"))
        try:
            event = CorrelationProcessor()(None, "info", {"event": "x"})
        finally:
            CorrelationContext.reset(token)
        assert event == {"event": "x", "correlation_id": "cid", "trace_id": "tid", "user_id": "uid"}

    def test_explicit_value_wins(self) -> None:
        token = CorrelationContext.set(RequestContext("cid"))
        try:
            event = CorrelationProcessor()(None, "info", {"event": "x", "correlation_id": "mine"})
        finally:
            CorrelationContext.reset(token)
        assert event["correlation_id"] == "mine"
        assert "trace_id" not in event


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------

class TestJsonLoggerFactory:
    def test_stdlib_records_rendered_as_json(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure("INFO")
        logging.getLogger("radioking.test").info("playlist.created id=%d", 7)
        [line] = _json_lines(capsys.readouterr().err)
        assert line["event"] == "playlist.created id=7"
        assert line["level"] == "info"
        assert line["logger"] == "radioking.test"
        assert "timestamp" in line

    def test_level_filters(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure(logging.WARNING)
        logging.getLogger("radioking.test").info("hidden")
        logging.getLogger("radioking.test").warning("shown")
        assert [l["event"] for l in _json_lines(capsys.readouterr().err)] == ["shown"]

    def test_correlation_and_contextvars_merged(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure("DEBUG")
        token = CorrelationContext.set(RequestContext("req-1"))
        try:
            with structlog.contextvars.bound_contextvars(user_id="u-9"):
                logging.getLogger("radioking.test").info("hello")
        finally:
            CorrelationContext.reset(token)
        [line] = _json_lines(capsys.readouterr().err)
        assert line["correlation_id"] == "req-1"
        assert line["user_id"] == "u-9"

    def test_exception_info_rendered(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure()
        try:
            raise RuntimeError("kaput")
        except RuntimeError:
            logging.getLogger("radioking.test").exception("failed")
        [line] = _json_lines(capsys.readouterr().err)
        assert "RuntimeError: kaput" in line["exception"]

    def test_console_renderer(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure(json=False)
        logging.getLogger("radioking.test").info("plain output")
        assert "plain output" in capsys.readouterr().err

    def test_replaces_existing_handlers(self, restore_logging) -> None:
        JsonLoggerFactory.configure()
        JsonLoggerFactory.configure()
        assert len(logging.getLogger().handlers) == 1


class TestGetLogger:
    def test_bound_values_rendered(self, restore_logging, capsys) -> None:
        JsonLoggerFactory.configure()
        get_logger("radioking.test", component="consumer").info("app.starting", port=8080)
        [line] = _json_lines(capsys.readouterr().err)
        assert line["event"] == "app.starting"
        assert line["component"] == "consumer"
        assert line["port"] == 8080

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from pubg_api.core.logging import LogLevel, bootstrap_logging, context, get_context, get_logger, shutdown_logging
from pubg_api.core.logging.formatter import ConsoleFormatter, JSONFormatter
from pubg_api.core.logging.levels import register_levels, to_level


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    shutdown_logging()
    logger = logging.getLogger("pubg_api")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def _record(msg: str = "request", **extra) -> logging.LogRecord:
    record = logging.LogRecord("pubg_api.test", logging.INFO, __file__, 10, msg, None, None, func="fn")
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_custom_levels() -> None:
    register_levels()

    assert logging.getLevelName(5) == "TRACE"
    assert logging.getLevelName(25) == "SUCCESS"
    assert to_level("trace") == LogLevel.TRACE
    assert to_level("warning") == logging.WARNING
    assert to_level("nonsense") == logging.INFO
    assert to_level(15) == 15


def test_json_formatter_includes_request_fields_and_context() -> None:
    with context(match_id="abc123"):
        line = JSONFormatter().format(_record(service="pubg-api", url="https://api.pubg.com/status", status=200))

    payload = json.loads(line)
    assert payload["message"] == "request"
    assert payload["service"] == "pubg-api"
    assert payload["url"] == "https://api.pubg.com/status"
    assert payload["status"] == 200
    assert payload["context"] == {"match_id": "abc123"}


def test_console_formatter_plain() -> None:
    line = ConsoleFormatter(color=False).format(_record(method="GET"))

    assert "INFO" in line
    assert "pubg_api.test:fn:10" in line
    assert "method=GET" in line
    assert "\033[" not in line


def test_context_is_restored() -> None:
    with context(platform="steam"):
        with context(match_id="m1"):
            assert get_context() == {"platform": "steam", "match_id": "m1"}
        assert get_context() == {"platform": "steam"}
    assert get_context() == {}


def test_lazy_messages_are_skipped_when_disabled() -> None:
    logging.getLogger("pubg_api").setLevel(logging.WARNING)
    calls = []

    def message() -> str:
        calls.append(1)
        return "expensive"

    get_logger("pubg_api.lazy").debug(message)

    assert calls == []


def test_bootstrap_writes_jsonl(tmp_path: Path) -> None:
    bootstrap_logging(service="test", level="TRACE", console=False, log_dir=tmp_path, log_file_name="t.jsonl")
    log = get_logger("pubg_api.sample", service="test")

    log.trace(lambda: "trace-line")
    log.success("done")
    shutdown_logging()

    lines = [json.loads(line) for line in (tmp_path / "t.jsonl").read_text(encoding="utf-8").splitlines()]
    messages = {(entry["level"], entry["message"]) for entry in lines}
    assert ("TRACE", "trace-line") in messages
    assert ("SUCCESS", "done") in messages
    assert all(entry["service"] == "test" for entry in lines if entry["message"] in {"trace-line", "done"})

import importlib
import json
import logging
import sys
from logging import LogRecord

from pytest import MonkeyPatch

import fix_arm_sdk.logger
from fix_arm_sdk.logger import JsonFormatter, setup_logger


def test_json_formatter() -> None:
    formatter = JsonFormatter({"level": "levelname", "message": "message"}, static_values={"process": "test"})
    record = LogRecord("fix.arm", logging.INFO, __file__, 1, "Read %d page(s)", (3,), None)
    assert json.loads(formatter.format(record)) == {"level": "INFO", "message": "Read 3 page(s)", "process": "test"}


def test_json_formatter_exception() -> None:
    formatter = JsonFormatter({"message": "message"})
    try:
        raise ValueError("boom")
    except ValueError as e:
        record = LogRecord("fix.arm", logging.ERROR, __file__, 1, "failed", (), (type(e), e, e.__traceback__))
    js = json.loads(formatter.format(record))
    assert js["message"] == "failed"
    assert "ValueError: boom" in js["exception"]


def test_setup_logger() -> None:
    setup_logger("test", level="DEBUG")
    assert logging.getLogger("fix.arm").level == logging.DEBUG
    setup_logger("test", level="INFO", json_format=False)
    assert logging.getLogger("fix.arm").level == logging.INFO


def test_import_leaves_level_unset(monkeypatch: MonkeyPatch) -> None:
    arm_log = logging.getLogger("fix.arm")
    arm_log.setLevel(logging.NOTSET)
    importlib.reload(fix_arm_sdk.logger)
    # the host application decides, until setup_logger is called
    assert arm_log.level == logging.NOTSET
    monkeypatch.setattr(sys, "argv", ["test"])
    for name in ("FIX_TRACE", "FIX_VERBOSE", "FIX_QUIET"):
        monkeypatch.delenv(name, raising=False)
    setup_logger("test")
    assert arm_log.level == logging.INFO


def test_trace_level() -> None:
    logger = logging.getLogger("fix.arm")
    assert logging.getLevelName("TRACE") == logging.DEBUG - 5
    assert hasattr(logger, "trace")

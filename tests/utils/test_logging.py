"""Tests for the structured logging setup."""

import json
import logging

import pytest
import structlog

from backoffice.utils.logging import add_service, get_logger, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name in ("sqlalchemy.engine", "httpx", "httpcore", "aiosqlite"):
        logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()


class TestAddService:
    def test_stamps_event(self):
        event = add_service("seed")(None, "info", {"event": "seed_started"})
        assert event["service"] == "seed"

    def test_keeps_explicit_service(self):
        event = add_service("server")(None, "info", {"event": "x", "service": "console"})
        assert event["service"] == "console"


class TestSetupLogging:
    def test_events_reach_the_log_file(self, tmp_path, restore_logging):
        setup_logging(log_dir=str(tmp_path), log_file="seed.log", service="seed")
        get_logger("tests.seed").info("skills_seeded", created=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = (tmp_path / "seed.log").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["event"] == "skills_seeded"
        assert record["created"] == 3
        assert record["service"] == "seed"
        assert record["logger"] == "tests.seed"
        assert record["level"] == "info"

    def test_debug_events_filtered_outside_debug_mode(self, tmp_path, restore_logging):
        setup_logging(log_dir=str(tmp_path))
        get_logger("tests.server").debug("cache_miss")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert (tmp_path / "backoffice.log").read_text(encoding="utf-8") == ""

    def test_quiets_library_loggers(self, tmp_path, restore_logging):
        setup_logging(log_dir=str(tmp_path))
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_unwritable_log_dir_keeps_stdout(self, tmp_path, restore_logging):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        setup_logging(log_dir=str(blocker / "logs"))
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

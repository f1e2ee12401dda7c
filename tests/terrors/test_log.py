"""Tests for logging helpers."""

import logging
from unittest.mock import MagicMock

from terrors.config import TerrorsConfig
from terrors.exceptions import new, wrap
from terrors.log import _RESERVED_LOG_KEYS, error_fields, log_error
from terrors.types import Type


class TestErrorFields:
    def test_wrapped_error(self):
        err = wrap(Type.INTERNAL, new(Type.NOT_EXIST, "file missing"), "load config")
        assert error_fields(err) == {
            "error_category": "internal",
            "error_message": "load config: file missing",
            "error_root_cause": "file missing",
            "error_chain_depth": 3,
        }

    def test_plain_exception(self):
        fields = error_fields(ValueError("bad"))
        assert fields["error_category"] == "unknown"
        assert fields["error_root_cause"] == "bad"
        assert fields["error_chain_depth"] == 1

    def test_truncates_long_messages(self):
        fields = error_fields(new(Type.INVALID, "x" * 20), max_message_length=5)
        assert fields["error_message"] == "xxxxx..."
        assert fields["error_root_cause"] == "xxxxx..."


class TestLogError:
    def test_logs_at_config_level_with_fields(self):
        logger = MagicMock()
        err = new(Type.PERMISSION, "denied")
        log_error(logger, err, "write failed", config=TerrorsConfig(log_level="WARNING"))

        logger.log.assert_called_once()
        args, kwargs = logger.log.call_args
        assert args == (logging.WARNING, "write failed")
        assert kwargs["exc_info"] is None
        assert kwargs["extra"]["error_category"] == "permission"
        assert "error_trace" not in kwargs["extra"]

    def test_explicit_level(self):
        logger = MagicMock()
        log_error(logger, new(Type.INVALID, "x"), "msg", level=logging.INFO, config=TerrorsConfig())
        assert logger.log.call_args[0][0] == logging.INFO

    def test_verbose_adds_trace(self):
        logger = MagicMock()
        err = wrap(Type.INTERNAL, new(Type.NOT_EXIST, "file missing"), "load config")
        log_error(logger, err, "failed", verbose=True, config=TerrorsConfig())

        extra = logger.log.call_args.kwargs["extra"]
        assert extra["error_trace"] == f"{err:+v}"

    def test_verbose_from_config(self):
        logger = MagicMock()
        log_error(logger, new(Type.INVALID, "x"), "failed", config=TerrorsConfig(log_verbose=True))
        assert "error_trace" in logger.log.call_args.kwargs["extra"]

    def test_raised_error_passes_exc_info(self):
        logger = MagicMock()
        try:
            raise new(Type.INTERNAL, "boom")
        except Exception as e:
            log_error(logger, e, "failed", config=TerrorsConfig())
            assert logger.log.call_args.kwargs["exc_info"] is e

    def test_filters_reserved_keys(self):
        logger = MagicMock()
        log_error(
            logger, new(Type.INVALID, "x"), "msg",
            config=TerrorsConfig(), name="dropped", path="/tmp/a",
        )
        extra = logger.log.call_args.kwargs["extra"]
        assert "name" not in extra
        assert extra["path"] == "/tmp/a"
        assert "name" in _RESERVED_LOG_KEYS

    def test_real_logger(self, caplog):
        logger = logging.getLogger("terrors.test")
        with caplog.at_level(logging.ERROR, logger="terrors.test"):
            log_error(logger, new(Type.EXIST, "already there"), "create failed")

        record = caplog.records[0]
        assert record.message == "create failed"
        assert record.error_category == "exist"
        assert record.error_message == "already there"

    def test_caller_fields_take_precedence(self):
        logger = MagicMock()
        log_error(
            logger, new(Type.INTERNAL, "x"), "msg",
            config=TerrorsConfig(), error_category="storage",
        )
        extra = logger.log.call_args.kwargs["extra"]
        assert extra["error_category"] == "storage"
        assert extra["error_message"] == "x"

    def test_default_config_ignores_environment(self, monkeypatch, tmp_path):
        """Without a config argument nothing is read from env or disk."""
        monkeypatch.setenv("TERRORS_CONFIG", str(tmp_path / "missing.yaml"))
        monkeypatch.setenv("TERRORS_LOG_LEVEL", "DEBUG")
        logger = MagicMock()
        log_error(logger, new(Type.INVALID, "x"), "msg")
        assert logger.log.call_args[0][0] == logging.ERROR

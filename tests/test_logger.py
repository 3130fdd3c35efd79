import logging

import pytest

from lootlocker_server.logger import LogLevel, LogLevelLimit, ServerLogger


@pytest.fixture
def py_logger():
    logger = logging.getLogger("lootlocker_server.test")
    logger.setLevel(1)
    return logger


def test_ignore_is_never_emitted():
    logger = ServerLogger(limit=LogLevelLimit.ALL_AS_NORMAL)
    assert logger.should_emit(LogLevel.IGNORE) is False


def test_no_logging_blocks_everything():
    logger = ServerLogger(limit=LogLevelLimit.NO_LOGGING)
    assert not any(logger.should_emit(level) for level in LogLevel)


def test_limit_includes_levels_up_to_it():
    logger = ServerLogger(limit=LogLevelLimit.WARNING)
    assert logger.should_emit(LogLevel.FATAL)
    assert logger.should_emit(LogLevel.ERROR)
    assert logger.should_emit(LogLevel.WARNING)
    assert not logger.should_emit(LogLevel.DISPLAY)
    assert not logger.should_emit(LogLevel.VERBOSE)


def test_disabled_logger_emits_nothing():
    logger = ServerLogger(limit=LogLevelLimit.VERY_VERBOSE, enabled=False)
    assert logger.should_emit(LogLevel.FATAL) is False


def test_log_writes_at_mapped_level(py_logger, caplog):
    logger = ServerLogger(limit=LogLevelLimit.VERY_VERBOSE, logger=py_logger)
    with caplog.at_level(1, logger=py_logger.name):
        assert logger.log("request failed", LogLevel.WARNING) is True
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.WARNING, "request failed")
    ]


def test_filtered_message_is_not_written(py_logger, caplog):
    logger = ServerLogger(limit=LogLevelLimit.ERROR, logger=py_logger)
    with caplog.at_level(1, logger=py_logger.name):
        assert logger.log("details", LogLevel.VERBOSE) is False
    assert caplog.records == []


def test_all_as_normal_rewrites_level_to_display(py_logger, caplog):
    logger = ServerLogger(limit=LogLevelLimit.ALL_AS_NORMAL, logger=py_logger)
    with caplog.at_level(1, logger=py_logger.name):
        logger.log("a", LogLevel.ERROR)
        logger.log("b", LogLevel.VERY_VERBOSE)
    assert [r.levelno for r in caplog.records] == [logging.INFO, logging.INFO]


def test_default_level_is_display(py_logger, caplog):
    logger = ServerLogger(limit=LogLevelLimit.DISPLAY, logger=py_logger)
    with caplog.at_level(1, logger=py_logger.name):
        assert logger.log("hello") is True
    assert caplog.records[0].levelno == logging.INFO
    assert caplog.records[0].getMessage() == "hello"
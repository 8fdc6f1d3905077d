import logging

import pytest

from edgeapi import logger


def test_init_logger_debug_level():
    assert logger.init_logger("DEBUG") == logging.DEBUG
    assert logger.log.level == logging.DEBUG


def test_init_logger_error_level():
    assert logger.init_logger("ERROR") == logging.ERROR
    assert logger.log.getEffectiveLevel() == logging.ERROR


@pytest.mark.parametrize("name", ["INFO", "", "verbose"])
def test_init_logger_defaults_to_info(name):
    assert logger.init_logger(name) == logging.INFO


def test_init_logger_does_not_stack_handlers(capsys):
    assert logger.init_logger("INFO") == logging.INFO
    count = len(logger.log.handlers)
    assert logger.init_logger("INFO") == logging.INFO
    assert len(logger.log.handlers) == count
    logger.log.info("single line message")
    logger.flush_logger()
    assert capsys.readouterr().out.count("single line message") == 1


def test_flushing_log_messages_works(capsys):
    logger.init_logger("INFO")
    logger.log.info("Test flushing log messages")
    logger.flush_logger()
    out = capsys.readouterr().out
    assert "Test flushing log messages" in out


def test_debug_message_filtered_at_info(capsys):
    logger.init_logger("INFO")
    logger.log.debug("hidden debug message")
    logger.flush_logger()
    assert "hidden debug message" not in capsys.readouterr().out


def test_log_error_and_panic_raises_given_error(caplog):
    logger.init_logger("INFO")
    err = ValueError("boom")
    with caplog.at_level(logging.ERROR, logger="edgeapi"):
        with pytest.raises(ValueError) as info:
            logger.log_error_and_panic("failed to connect database", err)
    assert info.value is err
    assert any(r.getMessage() == "failed to connect database" for r in caplog.records)


def test_log_error_and_panic_with_non_exception():
    logger.init_logger("INFO")
    with pytest.raises(RuntimeError, match="web service stopped unexpectedly"):
        logger.log_error_and_panic("web service stopped unexpectedly", "closed")
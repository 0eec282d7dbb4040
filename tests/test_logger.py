"""
Tests for logging setup
"""
import logging
import sys

from behavior_core.utils.logger import get_logger, setup_logger


def test_handler_writes_to_stderr():
    logger = setup_logger('behavior_core.stream_check', level=logging.INFO)

    assert len(logger.handlers) == 1
    assert logger.handlers[0].stream is sys.stderr
    assert logger.propagate is False


def test_log_lines_stay_off_stdout(capsys):
    logger = setup_logger('behavior_core.capture_check', level=logging.INFO)

    logger.info("run finished")

    captured = capsys.readouterr()
    assert captured.out == ''
    assert '[INFO] behavior_core.capture_check: run finished' in captured.err


def test_get_logger_uses_module_name():
    assert get_logger('behavior_core.core.execution.interpreter').name == 'behavior_core.interpreter'

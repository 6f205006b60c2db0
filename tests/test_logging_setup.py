# tests/test_logging_setup.py
import logging

import pytest

from dfa_animator.utils.logging_setup import CONSOLE_FORMAT, QtSignalLogHandler, setup_global_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_signal_handler_emits_formatted_records(qtbot):
    handler = QtSignalLogHandler()
    logger = logging.getLogger("dfa_animator.test_signal")
    logger.addHandler(handler)
    try:
        with qtbot.waitSignal(handler.log_received, timeout=1000) as blocker:
            logger.warning("Construction complete")
    finally:
        logger.removeHandler(handler)

    assert blocker.args == ["WARNING", "[dfa_animator.test_signal] Construction complete"]


def test_signal_handler_respects_level(qtbot):
    handler = QtSignalLogHandler(level=logging.WARNING)
    logger = logging.getLogger("dfa_animator.test_level")
    logger.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        with qtbot.assertNotEmitted(handler.log_received):
            logger.info("not shown")
    finally:
        logger.removeHandler(handler)


def test_setup_global_logging(restore_root_logger, qtbot):
    signal_handler = QtSignalLogHandler()
    root = setup_global_logging(logging.WARNING, signal_handler=signal_handler)

    assert root is logging.getLogger()
    assert len(root.handlers) == 2
    console = root.handlers[0]
    assert isinstance(console, logging.StreamHandler)
    assert console.level == logging.WARNING
    assert console.formatter._fmt == CONSOLE_FORMAT
    assert signal_handler in root.handlers


def test_setup_global_logging_replaces_handlers(restore_root_logger):
    setup_global_logging()
    setup_global_logging()
    assert len(logging.getLogger().handlers) == 1

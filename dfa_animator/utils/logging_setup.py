# dfa_animator/utils/logging_setup.py

import logging
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)

CONSOLE_FORMAT = '%(asctime)s.%(msecs)03d [%(levelname)-8s] [%(name)-20.20s] %(message)s'
CONSOLE_DATE_FORMAT = '%H:%M:%S'


class QtLogSignal(QObject):
    """Signal emitter for thread-safe logging"""
    log_received = pyqtSignal(str, str)  # level name, formatted message


class QtSignalLogHandler(logging.Handler):
    """
    Log handler that re-emits formatted records through a Qt signal, so a
    guide panel or log view can display them without touching the logging
    machinery directly.
    """

    def __init__(self, level: int = logging.INFO):
        super().__init__(level)
        self.log_signal_emitter = QtLogSignal()
        self.setFormatter(logging.Formatter('[%(name)s] %(message)s'))

    @property
    def log_received(self):
        return self.log_signal_emitter.log_received

    def emit(self, record):
        try:
            message = self.format(record)
            self.log_signal_emitter.log_received.emit(record.levelname, message)
        except Exception:
            self.handleError(record)


def setup_global_logging(level: int = logging.INFO,
                         signal_handler: Optional[QtSignalLogHandler] = None) -> logging.Logger:
    """
    Sets up the global root logger with a console handler and, optionally, a
    Qt signal handler for UI log views.
    This is the main entry point for logging setup.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers to prevent duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_formatter = logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATE_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if signal_handler is not None:
        root_logger.addHandler(signal_handler)

    logging.info("Global logging system initialized.")
    return root_logger

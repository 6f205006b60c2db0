# dfa_animator/utils/__init__.py
"""Initializes the 'utils' package."""

from . import config
from .logging_setup import setup_global_logging, QtSignalLogHandler

__all__ = [
    "config",
    "setup_global_logging",
    "QtSignalLogHandler",
]

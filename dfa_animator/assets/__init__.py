# dfa_animator/assets/__init__.py
"""Initializes the 'assets' package and exposes the loaded data constants."""

from .assets import DFA_LIBRARY

__all__ = [
    "DFA_LIBRARY",
]

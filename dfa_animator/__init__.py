# dfa_animator/__init__.py
"""
DFA Animator: builds deterministic finite automata step by step and animates
them over input strings.
"""

from .utils.config import APP_VERSION as __version__

__all__ = ["__version__"]

# tests/conftest.py
import os

# Must be set before the first QApplication is created.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QSettings

from dfa_animator.core.dfa_ir import Automaton, State, Transition


@pytest.fixture
def ends_with_a():
    return Automaton(
        name="Ends with a",
        description="Accepts strings ending in 'a'",
        states=(
            State("q0", 100, 200, initial=True),
            State("q1", 280, 200, accepting=True),
        ),
        transitions=(
            Transition("q0", "q1", "a"),
            Transition("q0", "q0", "b"),
            Transition("q1", "q1", "a"),
            Transition("q1", "q0", "b"),
        ),
        alphabet=("a", "b"),
    )


@pytest.fixture
def even_as():
    return Automaton(
        name="Even number of a's",
        description="Accepts strings with an even number of a's",
        states=(
            State("q0", 100, 200, initial=True, accepting=True),
            State("q1", 280, 200),
        ),
        transitions=(
            Transition("q0", "q1", "a"),
            Transition("q0", "q0", "b"),
            Transition("q1", "q0", "a"),
            Transition("q1", "q1", "b"),
        ),
        alphabet=("a", "b"),
    )


@pytest.fixture
def incomplete():
    """'c' is in the alphabet but nothing reads it."""
    return Automaton(
        name="Incomplete",
        states=(State("q0", initial=True, accepting=True),),
        transitions=(Transition("q0", "q0", "a"), Transition("q0", "q0", "b")),
        alphabet=("a", "b", "c"),
    )


@pytest.fixture
def qsettings(tmp_path):
    settings = QSettings(str(tmp_path / "dfa_animator_test.ini"), QSettings.Format.IniFormat)
    yield settings
    settings.clear()

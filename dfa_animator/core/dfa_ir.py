# dfa_animator/core/dfa_ir.py
"""
Defines the Intermediate Representation (IR) for a Deterministic Finite Automaton.

These data classes are the single source of truth handed to the construction
sequencer, the simulator and the playback controller. They are frozen and hold
tuples, so a loaded automaton can never be edited in place by one component
while another is stepping through it; "changing" an automaton means building
a new value.
"""

from collections import Counter
from dataclasses import dataclass, replace
from typing import Tuple, Optional

from .errors import NoInitialStateError, DuplicateStateIdError

# ==============================================================================
# Atomic IR Components
# ==============================================================================

@dataclass(frozen=True)
class State:
    """A single DFA state. The position is only meaningful to renderers."""
    id: str
    x: float = 0
    y: float = 0
    initial: bool = False
    accepting: bool = False


@dataclass(frozen=True)
class Transition:
    """A single labeled edge, `source --symbol--> target`."""
    source: str
    target: str
    symbol: str

    def __str__(self) -> str:
        return f"{self.source} --{self.symbol}--> {self.target}"

# ==============================================================================
# Root IR Model
# ==============================================================================

@dataclass(frozen=True)
class Automaton:
    """
    The root container for a DFA: its states, transitions and alphabet.

    `steps` holds the optional explanation lines that library automata ship
    with; they describe how the automaton was designed and play no part in
    simulation.
    """
    name: str = "Custom DFA"
    description: str = ""
    states: Tuple[State, ...] = ()
    transitions: Tuple[Transition, ...] = ()
    alphabet: Tuple[str, ...] = ()
    steps: Tuple[str, ...] = ()

    def get_initial_state(self) -> Optional[State]:
        """
        Returns the first state flagged as initial, or None.

        Unlike a lenient editor model there is no fallback to the first state:
        an automaton without an initial state is invalid.
        """
        return next((s for s in self.states if s.initial), None)

    def get_state(self, state_id: str) -> Optional[State]:
        """Convenience method to retrieve a state by its id."""
        return next((s for s in self.states if s.id == state_id), None)

    def copy(self) -> "Automaton":
        """Returns a deep copy; every field, including an empty name, is kept as is."""
        return replace(
            self,
            states=tuple(replace(s) for s in self.states),
            transitions=tuple(replace(t) for t in self.transitions),
            alphabet=tuple(self.alphabet),
            steps=tuple(self.steps),
        )


def validate_automaton(automaton: Automaton) -> None:
    """
    Checks the structural invariants of an automaton.

    Raises:
        NoInitialStateError: zero or more than one state is flagged initial.
        DuplicateStateIdError: two states share an id.

    Completeness and determinism are deliberately not checked here; the
    simulator reports a missing transition when it actually needs one.
    """
    initial_count = sum(1 for s in automaton.states if s.initial)
    if initial_count != 1:
        raise NoInitialStateError(initial_count)

    counts = Counter(s.id for s in automaton.states)
    for state_id, count in counts.items():
        if count > 1:
            raise DuplicateStateIdError(state_id)


def is_valid(automaton: Automaton) -> bool:
    try:
        validate_automaton(automaton)
    except (NoInitialStateError, DuplicateStateIdError):
        return False
    return True

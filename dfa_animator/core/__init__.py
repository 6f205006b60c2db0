# dfa_animator/core/__init__.py
"""Initializes the 'core' package and exposes its key classes."""

from .errors import (
    DFAError, ValidationError, NoInitialStateError, DuplicateStateIdError,
    MissingStatesError, InvalidSymbolError, MissingTransitionError
)
from .dfa_ir import Automaton, State, Transition, validate_automaton, is_valid
from .dfa_parser import parse_dict_to_automaton, automaton_to_dict
from .transition_grouping import (
    TransitionGroup, group_transitions, flatten_groups, has_reverse_group, curve_offset
)
from .construction import ConstructionEvent, StateCreated, TransitionGroupCreated, build_sequence
from .dfa_simulator import (
    SimulationEvent, Started, Consumed, Entered, Accepted, Rejected, TransitionMissing,
    simulate, check_input_alphabet, is_terminal, highlight_for, run_to_completion
)

__all__ = [
    "DFAError",
    "ValidationError",
    "NoInitialStateError",
    "DuplicateStateIdError",
    "MissingStatesError",
    "InvalidSymbolError",
    "MissingTransitionError",
    "Automaton",
    "State",
    "Transition",
    "validate_automaton",
    "is_valid",
    "parse_dict_to_automaton",
    "automaton_to_dict",
    "TransitionGroup",
    "group_transitions",
    "flatten_groups",
    "has_reverse_group",
    "curve_offset",
    "ConstructionEvent",
    "StateCreated",
    "TransitionGroupCreated",
    "build_sequence",
    "SimulationEvent",
    "Started",
    "Consumed",
    "Entered",
    "Accepted",
    "Rejected",
    "TransitionMissing",
    "simulate",
    "check_input_alphabet",
    "is_terminal",
    "highlight_for",
    "run_to_completion",
]

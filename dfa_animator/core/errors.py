# dfa_animator/core/errors.py
"""
Exception hierarchy shared by the DFA model, the simulator and the managers.

Core functions raise these; the playback controller and the managers catch
them at their boundary and report them through signals instead of letting
them propagate into the UI.
"""
from typing import Iterable


class DFAError(Exception):
    """Base class for every error raised by the DFA core."""
    pass


class ValidationError(DFAError):
    """The automaton is structurally malformed and cannot be loaded."""
    pass


class NoInitialStateError(ValidationError):
    def __init__(self, initial_count: int):
        self.initial_count = initial_count
        if initial_count == 0:
            msg = "No initial state defined"
        else:
            msg = f"Expected exactly one initial state, found {initial_count}"
        super().__init__(msg)


class DuplicateStateIdError(ValidationError):
    def __init__(self, state_id: str):
        self.state_id = state_id
        super().__init__(f"Duplicate state id '{state_id}'")


class MissingStatesError(ValidationError):
    def __init__(self, detail: str = "'states' must be a list"):
        super().__init__(f"Invalid DFA data: {detail}")


class InvalidSymbolError(DFAError):
    """An input string contains a character outside the automaton's alphabet."""

    def __init__(self, symbol: str, alphabet: Iterable[str]):
        self.symbol = symbol
        self.alphabet = tuple(alphabet)
        super().__init__(f"Invalid character '{symbol}'. Use only: {', '.join(self.alphabet)}")


class MissingTransitionError(DFAError):
    """The automaton has no transition for the current state and symbol."""

    def __init__(self, state_id: str, symbol: str):
        self.state_id = state_id
        self.symbol = symbol
        super().__init__(f"No transition from {state_id} on '{symbol}'")

# dfa_animator/core/dfa_simulator.py
"""
Provides the core, non-GUI simulation engine for DFAs.

`simulate` walks an automaton over an input string and yields one
`SimulationEvent` per step. The result is a plain generator: it is lazy,
single-consumer and not restartable, so callers that want to replay a run
must call `simulate` again.

Input validation against the alphabet is the caller's job (see
`check_input_alphabet`); the engine only detects the narrower case of a
missing transition, which can also happen for in-alphabet symbols on an
incomplete automaton.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

from .dfa_ir import Automaton, Transition
from .errors import InvalidSymbolError, MissingTransitionError, NoInitialStateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Started:
    state_id: str

    @property
    def message(self) -> str:
        return f"Starting at state {self.state_id}"


@dataclass(frozen=True)
class Consumed:
    transition: Transition
    message: str


@dataclass(frozen=True)
class Entered:
    state_id: str
    message: str


@dataclass(frozen=True)
class Accepted:
    state_id: str
    message: str = "String accepted!"


@dataclass(frozen=True)
class Rejected:
    state_id: str
    message: str = "String rejected!"


@dataclass(frozen=True)
class TransitionMissing:
    """Terminal event for an incomplete automaton: no move from `state_id` on `symbol`."""
    state_id: str
    symbol: str
    error: MissingTransitionError

    @property
    def message(self) -> str:
        return str(self.error)


SimulationEvent = Union[Started, Consumed, Entered, Accepted, Rejected, TransitionMissing]

TERMINAL_EVENTS = (Accepted, Rejected, TransitionMissing)


def is_terminal(event: SimulationEvent) -> bool:
    return isinstance(event, TERMINAL_EVENTS)


def highlight_for(event: SimulationEvent) -> Dict[str, Optional[object]]:
    """The state and/or transition a renderer should highlight for `event`."""
    if isinstance(event, Consumed):
        return {"state": None, "transition": event.transition}
    return {"state": event.state_id, "transition": None}


def check_input_alphabet(automaton: Automaton, text: str) -> None:
    """
    Raises InvalidSymbolError for the first character of `text` that is not in
    the automaton's alphabet.
    """
    alphabet = set(automaton.alphabet)
    for char in text:
        if char not in alphabet:
            raise InvalidSymbolError(char, automaton.alphabet)


def _build_transition_index(automaton: Automaton) -> Dict[Tuple[str, str], Transition]:
    index: Dict[Tuple[str, str], Transition] = {}
    for t in automaton.transitions:
        # First declaration wins if a hand-authored file is not deterministic.
        index.setdefault((t.source, t.symbol), t)
    return index


def simulate(automaton: Automaton, text: str) -> Iterator[SimulationEvent]:
    """
    Steps `automaton` over `text`, yielding simulation events.

    The sequence is `Started`, then `Consumed`/`Entered` pairs for each
    symbol, and finally exactly one terminal event: `Accepted`, `Rejected`,
    or `TransitionMissing` if the walk got stuck (fail-fast, no further
    symbols are read).

    Raises:
        NoInitialStateError: on the first `next()` if the automaton has no
        initial state (callers are expected to validate first).
    """
    initial_state = automaton.get_initial_state()
    if initial_state is None:
        raise NoInitialStateError(0)

    index = _build_transition_index(automaton)
    current = initial_state.id
    yield Started(current)

    for symbol in text:
        transition = index.get((current, symbol))
        if transition is None:
            logger.debug(f"Simulation stuck in '{current}' on '{symbol}'")
            yield TransitionMissing(current, symbol, MissingTransitionError(current, symbol))
            return
        yield Consumed(transition, f"Reading '{symbol}': {transition.source} → {transition.target}")
        current = transition.target
        yield Entered(current, f"Now in state {current}")

    final_state = automaton.get_state(current)
    if final_state is not None and final_state.accepting:
        yield Accepted(current)
    else:
        yield Rejected(current)


def run_to_completion(automaton: Automaton, text: str) -> SimulationEvent:
    """Drains a simulation and returns its terminal event."""
    event: Optional[SimulationEvent] = None
    for event in simulate(automaton, text):
        pass
    return event

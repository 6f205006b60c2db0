# dfa_animator/core/dfa_parser.py
"""
Parses raw DFA data (library entries, saved JSON, pasted text) into the
structured Intermediate Representation defined in dfa_ir.py, and converts it
back.

Saved and pasted automata are untrusted: the only hard requirement here is
that `states` is present and is a list. Individual malformed entries are
skipped with a warning; the structural invariants (single initial state,
unique ids) are enforced separately by `validate_automaton`.
"""
import logging
from typing import Dict, Any, List

from .dfa_ir import Automaton, State, Transition
from .errors import MissingStatesError

logger = logging.getLogger(__name__)

# Fixed key orders used by the exporter; keep them stable so exported files diff cleanly.
AUTOMATON_KEYS = ("name", "description", "states", "transitions", "alphabet", "steps")
STATE_KEYS = ("id", "x", "y", "initial", "accepting")
TRANSITION_KEYS = ("from", "to", "symbol")


def parse_dict_to_automaton(data: Dict[str, Any], name: str = "Custom DFA") -> Automaton:
    """
    Parses a DFA data dictionary into an Automaton.

    Args:
        data: The raw dictionary, in the shape `{name, description, states,
              transitions, alphabet, steps}` with states as `{id, x, y,
              initial, accepting}` and transitions as `{from, to, symbol}`.
        name: Fallback name when the data carries none.

    Returns:
        An Automaton instance.

    Raises:
        MissingStatesError: if `data` is not a dict or `states` is missing or
        not a list.
    """
    if not isinstance(data, dict):
        raise MissingStatesError("expected a JSON object")
    raw_states = data.get("states")
    if not isinstance(raw_states, list):
        raise MissingStatesError()

    # --- Parse States ---
    states: List[State] = []
    for state_data in raw_states:
        if not isinstance(state_data, dict) or "id" not in state_data:
            logger.warning(f"Skipping invalid state data entry: {state_data}")
            continue
        states.append(State(
            id=str(state_data["id"]),
            x=state_data.get("x", 0),
            y=state_data.get("y", 0),
            initial=bool(state_data.get("initial", False)),
            accepting=bool(state_data.get("accepting", False)),
        ))

    # --- Parse Transitions ---
    transitions: List[Transition] = []
    raw_transitions = data.get("transitions") or []
    if not isinstance(raw_transitions, list):
        logger.warning(f"Ignoring non-list 'transitions' value: {raw_transitions!r}")
        raw_transitions = []
    for trans_data in raw_transitions:
        if not isinstance(trans_data, dict) or not all(k in trans_data for k in TRANSITION_KEYS):
            logger.warning(f"Skipping invalid transition data entry: {trans_data}")
            continue
        transitions.append(Transition(
            source=str(trans_data["from"]),
            target=str(trans_data["to"]),
            symbol=str(trans_data["symbol"]),
        ))

    raw_alphabet = data.get("alphabet") or []
    if not isinstance(raw_alphabet, list):
        logger.warning(f"Ignoring non-list 'alphabet' value: {raw_alphabet!r}")
        raw_alphabet = []

    raw_steps = data.get("steps") or []
    if not isinstance(raw_steps, list):
        raw_steps = []

    return Automaton(
        # Only a missing name falls back; an empty one is kept.
        name=str(data["name"]) if data.get("name") is not None else name,
        description=str(data.get("description") or ""),
        states=tuple(states),
        transitions=tuple(transitions),
        alphabet=tuple(str(sym) for sym in raw_alphabet),
        steps=tuple(str(step) for step in raw_steps),
    )


def state_to_dict(state: State) -> Dict[str, Any]:
    data: Dict[str, Any] = {"id": state.id, "x": state.x, "y": state.y}
    # Flags are only written when set, matching how hand-authored files look.
    if state.initial:
        data["initial"] = True
    if state.accepting:
        data["accepting"] = True
    return data


def automaton_to_dict(automaton: Automaton) -> Dict[str, Any]:
    """Converts an Automaton into a plain dict with a fixed key order."""
    data: Dict[str, Any] = {
        "name": automaton.name,
        "description": automaton.description,
        "states": [state_to_dict(s) for s in automaton.states],
        "transitions": [
            {"from": t.source, "to": t.target, "symbol": t.symbol}
            for t in automaton.transitions
        ],
        "alphabet": list(automaton.alphabet),
    }
    if automaton.steps:
        data["steps"] = list(automaton.steps)
    return data

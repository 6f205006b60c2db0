# dfa_animator/core/construction.py
"""
Turns an automaton into the ordered list of steps used to animate its
construction: every state first, in declaration order, then every grouped
transition, in first-seen `(source, target)` order.
"""

from dataclasses import dataclass
from typing import List, Union

from .dfa_ir import Automaton, State
from .transition_grouping import TransitionGroup, group_transitions


@dataclass(frozen=True)
class StateCreated:
    state: State

    @property
    def description(self) -> str:
        desc = f"Creating state {self.state.id}"
        if self.state.initial:
            desc += " (Initial)"
        if self.state.accepting:
            desc += " (Accepting)"
        return desc


@dataclass(frozen=True)
class TransitionGroupCreated:
    group: TransitionGroup

    @property
    def description(self) -> str:
        return f"Adding transition from {self.group.source} to {self.group.target} on '{self.group.label}'"


ConstructionEvent = Union[StateCreated, TransitionGroupCreated]


def build_sequence(automaton: Automaton) -> List[ConstructionEvent]:
    """
    Builds the construction sequence for `automaton`.

    Pure and total: an automaton without states yields an empty list.
    """
    sequence: List[ConstructionEvent] = [StateCreated(state) for state in automaton.states]
    sequence.extend(
        TransitionGroupCreated(group)
        for group in group_transitions(automaton.transitions).values()
    )
    return sequence

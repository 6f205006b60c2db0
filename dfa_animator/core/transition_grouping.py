# dfa_animator/core/transition_grouping.py
"""
Merges parallel transitions (same source and target, different symbols) into
a single labeled edge group.

Renderers draw one arrow per group. A group whose endpoints are equal is a
self-loop; a group whose reverse `(target, source)` group also exists is one
half of a bidirectional pair, and both halves are bent by the same fixed
offset so the two arcs never overlap.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .dfa_ir import Transition
from ..utils.config import BIDIRECTIONAL_CURVE_OFFSET

GroupKey = Tuple[str, str]


@dataclass(frozen=True)
class TransitionGroup:
    source: str
    target: str
    symbols: Tuple[str, ...]

    @property
    def key(self) -> GroupKey:
        return (self.source, self.target)

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target

    @property
    def label(self) -> str:
        return ",".join(self.symbols)


def group_transitions(transitions: Iterable[Transition]) -> Dict[GroupKey, TransitionGroup]:
    """
    Groups transitions by `(source, target)`.

    The returned dict is ordered by the first occurrence of each pair, and each
    group's symbols keep the order in which they were encountered.
    """
    symbols_by_key: Dict[GroupKey, List[str]] = {}
    for t in transitions:
        symbols_by_key.setdefault((t.source, t.target), []).append(t.symbol)
    return {
        key: TransitionGroup(source=key[0], target=key[1], symbols=tuple(symbols))
        for key, symbols in symbols_by_key.items()
    }


def flatten_groups(groups: Dict[GroupKey, TransitionGroup]) -> List[Transition]:
    """Expands groups back into individual transitions, preserving order."""
    return [
        Transition(source=group.source, target=group.target, symbol=symbol)
        for group in groups.values()
        for symbol in group.symbols
    ]


def has_reverse_group(groups: Dict[GroupKey, TransitionGroup], group: TransitionGroup) -> bool:
    if group.is_self_loop:
        return False
    return (group.target, group.source) in groups


def curve_offset(groups: Dict[GroupKey, TransitionGroup], group: TransitionGroup) -> float:
    """Curvature for drawing `group`: the fixed offset for bidirectional pairs, else 0."""
    return BIDIRECTIONAL_CURVE_OFFSET if has_reverse_group(groups, group) else 0

# tests/test_construction.py
from dfa_animator.core.construction import StateCreated, TransitionGroupCreated, build_sequence
from dfa_animator.core.dfa_ir import Automaton
from dfa_animator.core.transition_grouping import TransitionGroup


def test_states_then_groups(ends_with_a):
    sequence = build_sequence(ends_with_a)
    assert sequence == [
        StateCreated(ends_with_a.states[0]),
        StateCreated(ends_with_a.states[1]),
        TransitionGroupCreated(TransitionGroup("q0", "q1", ("a",))),
        TransitionGroupCreated(TransitionGroup("q0", "q0", ("b",))),
        TransitionGroupCreated(TransitionGroup("q1", "q1", ("a",))),
        TransitionGroupCreated(TransitionGroup("q1", "q0", ("b",))),
    ]


def test_parallel_transitions_become_one_step(incomplete):
    sequence = build_sequence(incomplete)
    assert len(sequence) == 2
    assert sequence[1].group.symbols == ("a", "b")


def test_descriptions(ends_with_a, even_as):
    sequence = build_sequence(ends_with_a)
    assert sequence[0].description == "Creating state q0 (Initial)"
    assert sequence[1].description == "Creating state q1 (Accepting)"
    assert sequence[2].description == "Adding transition from q0 to q1 on 'a'"
    assert build_sequence(even_as)[0].description == "Creating state q0 (Initial) (Accepting)"


def test_sequence_is_deterministic(ends_with_a):
    assert build_sequence(ends_with_a) == build_sequence(ends_with_a.copy())


def test_empty_automaton_has_no_steps():
    assert build_sequence(Automaton()) == []

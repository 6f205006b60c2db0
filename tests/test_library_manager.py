# tests/test_library_manager.py
import random

import pytest

from dfa_animator.core.dfa_ir import Automaton, is_valid
from dfa_animator.core.dfa_simulator import Accepted, Rejected, run_to_completion
from dfa_animator.managers.library_manager import AutomatonLibrary, random_test_string


@pytest.fixture(scope="module")
def library():
    return AutomatonLibrary()


def test_builtin_categories(library):
    assert library.categories() == [
        ("basic-patterns", "Basic Patterns"),
        ("length-patterns", "Length Patterns"),
        ("binary-divisibility", "Binary Divisibility"),
    ]
    assert library.category_display_name("length-patterns") == "Length Patterns"
    assert library.category_display_name("nope") is None


def test_builtin_automata_are_valid(library):
    assert len(library) == 8
    for key, _ in library.categories():
        for automaton in library.automata(key):
            assert is_valid(automaton), automaton.name
            assert automaton.steps


def test_lookup(library):
    assert library.get("basic-patterns", "Ends with a").name == "Ends with a"
    assert library.get("length-patterns", "Ends with a") is None
    assert library.find("Binary number divisible by 3").alphabet == ("0", "1")
    assert library.find("missing") is None
    assert library.automata("missing") == []


@pytest.mark.parametrize("name, text, verdict", [
    ("Ends with a", "ba", Accepted),
    ("Starts with a", "ba", Rejected),
    ("Contains 'aa'", "baab", Accepted),
    ("Even Length", "abab", Accepted),
    ("Length divisible by 3", "ab", Rejected),
    ("Binary number divisible by 2", "110", Accepted),
    ("Binary number divisible by 3", "110", Accepted),
    ("Binary number divisible by 3", "111", Rejected),
])
def test_builtin_automata_behave(library, name, text, verdict):
    assert isinstance(run_to_completion(library.find(name), text), verdict)


def test_invalid_entries_are_skipped():
    library = AutomatonLibrary({
        "custom": {
            "name": "Custom",
            "dfas": [
                {"name": "Good", "states": [{"id": "q0", "initial": True}]},
                {"name": "No states"},
                {"name": "Two initial", "states": [{"id": "a", "initial": True}, {"id": "b", "initial": True}]},
                {"name": "Duplicate ids", "states": [{"id": "q0", "initial": True}, {"id": "q0"}]},
            ],
        }
    })
    assert [a.name for a in library.automata("custom")] == ["Good"]


def test_random_test_string_bounds(ends_with_a):
    rng = random.Random(3)
    for _ in range(50):
        text = random_test_string(ends_with_a, rng)
        assert 3 <= len(text) <= 10
        assert set(text) <= {"a", "b"}


def test_random_test_string_is_reproducible(ends_with_a):
    assert random_test_string(ends_with_a, random.Random(11)) == random_test_string(ends_with_a, random.Random(11))


def test_random_test_string_errors(ends_with_a):
    with pytest.raises(ValueError):
        random_test_string(Automaton(name="Empty"))
    with pytest.raises(ValueError):
        random_test_string(ends_with_a, min_length=5, max_length=2)

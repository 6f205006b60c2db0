# dfa_animator/managers/library_manager.py
import logging
import random
from typing import Any, Dict, List, Optional, Tuple

from ..assets import DFA_LIBRARY
from ..core.dfa_ir import Automaton, validate_automaton
from ..core.dfa_parser import parse_dict_to_automaton
from ..core.errors import ValidationError
from ..utils import config

logger = logging.getLogger(__name__)


class AutomatonLibrary:
    """
    Read-only access to the built-in automata, grouped by category.

    Entries are parsed into Automaton values once, up front; entries that fail
    to parse or validate are logged and left out rather than breaking the
    whole library.
    """

    def __init__(self, library_data: Optional[Dict[str, Any]] = None):
        self._categories: Dict[str, Tuple[str, List[Automaton]]] = {}
        self._load(DFA_LIBRARY if library_data is None else library_data)

    def _load(self, library_data: Dict[str, Any]):
        for key, category in library_data.items():
            display_name = category.get("name", key)
            automata = []
            for entry in category.get("dfas", []):
                try:
                    automaton = parse_dict_to_automaton(entry)
                    validate_automaton(automaton)
                except ValidationError as e:
                    logger.error(f"Skipping library entry in '{key}': {e}")
                    continue
                automata.append(automaton)
            self._categories[key] = (display_name, automata)
        logger.info(f"Automaton library loaded: {len(self._categories)} categories, "
                    f"{sum(len(a) for _, a in self._categories.values())} automata.")

    def categories(self) -> List[Tuple[str, str]]:
        """(key, display name) pairs in library order."""
        return [(key, display_name) for key, (display_name, _) in self._categories.items()]

    def category_display_name(self, category_key: str) -> Optional[str]:
        entry = self._categories.get(category_key)
        return entry[0] if entry else None

    def automata(self, category_key: str) -> List[Automaton]:
        entry = self._categories.get(category_key)
        return list(entry[1]) if entry else []

    def get(self, category_key: str, name: str) -> Optional[Automaton]:
        return next((a for a in self.automata(category_key) if a.name == name), None)

    def find(self, name: str) -> Optional[Automaton]:
        """Looks an automaton up by name across all categories."""
        for _, automata in self._categories.values():
            for automaton in automata:
                if automaton.name == name:
                    return automaton
        return None

    def __len__(self) -> int:
        return sum(len(automata) for _, automata in self._categories.values())


def random_test_string(automaton: Automaton, rng: Optional[random.Random] = None,
                       min_length: int = config.RANDOM_TEST_MIN_LENGTH,
                       max_length: int = config.RANDOM_TEST_MAX_LENGTH) -> str:
    """
    Builds a random input string over the automaton's alphabet.

    Raises:
        ValueError: if the automaton has no alphabet or the bounds are inverted.
    """
    if not automaton.alphabet:
        raise ValueError(f"Automaton '{automaton.name}' has no alphabet to draw from.")
    if min_length > max_length:
        raise ValueError(f"min_length ({min_length}) exceeds max_length ({max_length}).")
    rng = rng or random.Random()
    length = rng.randint(min_length, max_length)
    return "".join(rng.choice(automaton.alphabet) for _ in range(length))

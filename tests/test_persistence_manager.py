# tests/test_persistence_manager.py
import json

import pytest

from dfa_animator.core.errors import MissingStatesError, NoInitialStateError, ValidationError
from dfa_animator.managers.persistence_manager import PersistenceManager
from dfa_animator.managers.plugin_manager import PluginManager
from dfa_animator.managers.signal_bus import signal_bus
from dfa_animator.plugins.api import DfaImporterPlugin
from dfa_animator.utils import config


@pytest.fixture
def persistence(qsettings, qtbot):
    return PersistenceManager(settings=qsettings)


def test_save_load_round_trip(persistence, ends_with_a):
    assert persistence.save("mine", ends_with_a) is True
    assert persistence.load("mine") == ends_with_a


def test_save_posts_status_and_list(persistence, ends_with_a, qtbot):
    with qtbot.waitSignal(signal_bus.saved_automata_changed, timeout=1000) as changed:
        with qtbot.waitSignal(signal_bus.status_message_posted, timeout=1000) as status:
            persistence.save("  mine  ", ends_with_a)

    assert changed.args == [["mine"]]
    assert status.args == ["success", 'DFA saved as "mine"']


def test_save_requires_a_name(persistence, ends_with_a, qtbot):
    with qtbot.waitSignal(signal_bus.status_message_posted, timeout=1000) as status:
        assert persistence.save("   ", ends_with_a) is False
    assert status.args == ["error", "Please enter a name for the DFA"]
    assert persistence.list_saved() == []


def test_list_is_sorted(persistence, ends_with_a, even_as):
    persistence.save("zeta", ends_with_a)
    persistence.save("alpha", even_as)
    assert persistence.list_saved() == ["alpha", "zeta"]


def test_saving_again_overwrites(persistence, ends_with_a, even_as):
    persistence.save("mine", ends_with_a)
    persistence.save("mine", even_as)
    assert persistence.list_saved() == ["mine"]
    assert persistence.load("mine") == even_as


def test_delete(persistence, ends_with_a):
    persistence.save("mine", ends_with_a)
    assert persistence.delete("mine") is True
    assert persistence.list_saved() == []
    assert persistence.delete("mine") is False


def test_load_missing_name(persistence):
    assert persistence.load("nothing") is None


def test_stored_data_under_the_shared_key(persistence, qsettings, ends_with_a):
    persistence.save("mine", ends_with_a)
    stored = json.loads(qsettings.value(config.SAVED_AUTOMATA_KEY))
    assert stored["mine"]["name"] == "Ends with a"


@pytest.mark.parametrize("entry", [
    {"states": [{"id": "q0"}]},
    {"states": "q0"},
    "not an object",
])
def test_invalid_saved_data_is_rejected(persistence, qsettings, qtbot, entry):
    qsettings.setValue(config.SAVED_AUTOMATA_KEY, json.dumps({"bad": entry}))
    with qtbot.waitSignal(signal_bus.status_message_posted, timeout=1000) as status:
        assert persistence.load("bad") is None
    assert status.args == ["error", "Invalid DFA data format."]


def test_corrupt_store_is_treated_as_empty(persistence, qsettings, ends_with_a):
    qsettings.setValue(config.SAVED_AUTOMATA_KEY, "{this is not json")
    assert persistence.list_saved() == []
    assert persistence.save("fresh", ends_with_a) is True
    assert persistence.list_saved() == ["fresh"]


def test_import_text(persistence):
    text = json.dumps({
        "name": "Pasted",
        "states": [{"id": "q0", "initial": True, "accepting": True}],
        "transitions": [{"from": "q0", "to": "q0", "symbol": "a"}],
        "alphabet": ["a"],
    })
    automaton = persistence.import_text(text)
    assert automaton.name == "Pasted"
    assert automaton.get_initial_state().id == "q0"


def test_import_text_rejects_empty_input(persistence):
    with pytest.raises(ValidationError, match="Please enter DFA data"):
        persistence.import_text("  ")


def test_import_text_rejects_bad_structure(persistence):
    with pytest.raises(MissingStatesError):
        persistence.import_text('{"name": "No states"}')
    with pytest.raises(MissingStatesError):
        persistence.import_text("states: q0")
    with pytest.raises(NoInitialStateError):
        persistence.import_text('{"states": [{"id": "q0"}]}')


class FixedImporter(DfaImporterPlugin):
    """Ignores its input and always yields the same one-state automaton."""

    name = config.DEFAULT_IMPORTER_NAME
    file_filter = "Any (*)"

    def import_data(self, file_content):
        return {"name": "Fixed", "states": [{"id": "s", "initial": True}]}


def test_import_text_goes_through_the_importer_plugin(qsettings, qtbot):
    plugin_manager = PluginManager()
    plugin_manager.importer_plugins = [FixedImporter()]
    persistence = PersistenceManager(settings=qsettings, plugin_manager=plugin_manager)

    automaton = persistence.import_text("anything at all")
    assert automaton.name == "Fixed"
    assert automaton.get_initial_state().id == "s"


def test_import_text_without_importer(qsettings, qtbot):
    plugin_manager = PluginManager()
    plugin_manager.importer_plugins = []
    persistence = PersistenceManager(settings=qsettings, plugin_manager=plugin_manager)

    with pytest.raises(KeyError):
        persistence.import_text('{"states": [{"id": "q0", "initial": true}]}')

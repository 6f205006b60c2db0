# tests/test_plugins.py
import json

import pytest

from dfa_animator.core.dfa_ir import Automaton
from dfa_animator.core.dfa_parser import automaton_to_dict, parse_dict_to_automaton
from dfa_animator.managers.plugin_manager import PluginManager
from dfa_animator.managers.signal_bus import signal_bus
from dfa_animator.plugins.json_exporter import JsonExporter, export_basename
from dfa_animator.plugins.json_importer import JsonImporter


@pytest.fixture(scope="module")
def plugin_manager():
    return PluginManager()


def test_plugins_are_discovered(plugin_manager):
    assert [p.name for p in plugin_manager.exporter_plugins] == ["DFA JSON"]
    assert [p.name for p in plugin_manager.importer_plugins] == ["DFA JSON"]
    assert isinstance(plugin_manager.get_exporter("DFA JSON"), JsonExporter)
    assert isinstance(plugin_manager.get_importer("DFA JSON"), JsonImporter)
    assert plugin_manager.get_exporter("Graphviz") is None


def test_export_content(plugin_manager, ends_with_a):
    files = plugin_manager.export_automaton(ends_with_a)
    assert list(files) == ["ends-with-a.json"]
    content = files["ends-with-a.json"]
    assert json.loads(content) == automaton_to_dict(ends_with_a)
    assert content.startswith('{\n  "name": "Ends with a",\n  "description"')


def test_export_keeps_non_ascii_text(ends_with_a):
    data = automaton_to_dict(Automaton(name="Zähler", states=ends_with_a.states))
    content = JsonExporter().export(data)["zähler.json"]
    assert "Zähler" in content


def test_export_filename_override(ends_with_a):
    files = JsonExporter().export(automaton_to_dict(ends_with_a), base_filename="saved")
    assert list(files) == ["saved.json"]


@pytest.mark.parametrize("name, expected", [
    ("Ends with a", "ends-with-a"),
    ("  Binary   number ", "binary-number"),
    ("", "custom-dfa"),
])
def test_export_basename(name, expected):
    assert export_basename(name) == expected


def test_unknown_exporter(plugin_manager, ends_with_a):
    with pytest.raises(KeyError):
        plugin_manager.export_automaton(ends_with_a, "Graphviz")


def test_export_import_round_trip(plugin_manager, ends_with_a):
    content = next(iter(plugin_manager.export_automaton(ends_with_a).values()))
    data = plugin_manager.get_importer("DFA JSON").import_data(content)
    assert parse_dict_to_automaton(data) == ends_with_a


@pytest.mark.parametrize("content", ["{broken", "[1, 2]", '{"name": "x"}'])
def test_importer_rejects_bad_content(content):
    assert JsonImporter().import_data(content) is None


def test_plugin_version():
    assert JsonExporter().version == "1.0.0"


def test_export_announces_filename(plugin_manager, ends_with_a, qtbot):
    with qtbot.waitSignal(signal_bus.automaton_exported, timeout=1000) as blocker:
        plugin_manager.export_automaton(ends_with_a, base_filename="saved")
    assert blocker.args == ["saved.json"]

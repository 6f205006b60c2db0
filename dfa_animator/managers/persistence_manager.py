# dfa_animator/managers/persistence_manager.py
import json
import logging
from typing import Dict, List, Optional

from PyQt6.QtCore import QObject, QSettings

from .plugin_manager import PluginManager
from .signal_bus import signal_bus
from ..core.dfa_ir import Automaton, validate_automaton
from ..core.dfa_parser import automaton_to_dict, parse_dict_to_automaton
from ..core.errors import MissingStatesError, ValidationError
from ..utils import config

logger = logging.getLogger(__name__)


class PersistenceManager(QObject):
    """
    Saves and restores named automata in a QSettings key-value store.

    All saved automata live as one JSON object under a single key. Whatever
    comes back out of the store is treated as untrusted and goes through the
    same parse and validation path as pasted text.
    """

    def __init__(self, settings: Optional[QSettings] = None, plugin_manager: Optional[PluginManager] = None, parent=None):
        super().__init__(parent)
        self.settings = settings if settings is not None else QSettings(
            QSettings.Format.IniFormat, QSettings.Scope.UserScope,
            config.ORGANIZATION_NAME, config.APP_NAME
        )
        self.plugin_manager = plugin_manager if plugin_manager is not None else PluginManager()

    def _read_store(self) -> Dict[str, dict]:
        raw = self.settings.value(config.SAVED_AUTOMATA_KEY, "{}")
        try:
            data = json.loads(raw) if isinstance(raw, str) else {}
        except json.JSONDecodeError as e:
            logger.error(f"Saved automata store is corrupt, ignoring it: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error("Saved automata store is not a JSON object, ignoring it.")
            return {}
        return data

    def _write_store(self, data: Dict[str, dict]) -> bool:
        try:
            self.settings.setValue(config.SAVED_AUTOMATA_KEY, json.dumps(data, ensure_ascii=False))
            self.settings.sync()
        except (TypeError, ValueError) as e:
            logger.error(f"Error writing saved automata: {e}", exc_info=True)
            return False
        signal_bus.saved_automata_changed.emit(sorted(data.keys()))
        return True

    def save(self, name: str, automaton: Automaton) -> bool:
        name = (name or "").strip()
        if not name:
            logger.warning("Attempted to save an automaton without a name.")
            signal_bus.status_message_posted.emit("error", "Please enter a name for the DFA")
            return False

        store = self._read_store()
        store[name] = automaton_to_dict(automaton)
        if not self._write_store(store):
            return False
        logger.info(f"Automaton '{automaton.name}' saved as '{name}'.")
        signal_bus.status_message_posted.emit("success", f'DFA saved as "{name}"')
        return True

    def load(self, name: str) -> Optional[Automaton]:
        """Returns the validated automaton saved under `name`, or None."""
        data = self._read_store().get(name)
        if data is None:
            logger.warning(f"No saved automaton named '{name}'.")
            return None
        try:
            automaton = parse_dict_to_automaton(data)
            validate_automaton(automaton)
        except ValidationError as e:
            logger.error(f"Saved automaton '{name}' is invalid: {e}")
            signal_bus.status_message_posted.emit("error", "Invalid DFA data format.")
            return None
        logger.info(f"Loaded saved automaton '{name}'.")
        return automaton

    def list_saved(self) -> List[str]:
        return sorted(self._read_store().keys())

    def delete(self, name: str) -> bool:
        store = self._read_store()
        if name not in store:
            logger.debug(f"Saved automaton '{name}' not found, cannot delete.")
            return False
        del store[name]
        if not self._write_store(store):
            return False
        logger.info(f"Saved automaton '{name}' deleted.")
        return True

    def import_text(self, text: str) -> Automaton:
        """
        Parses pasted JSON text into a validated automaton, using the
        "DFA JSON" importer plugin for the structural check.

        Raises:
            ValidationError: the text is empty, not JSON, has no `states` list,
            or fails validation.
            KeyError: no "DFA JSON" importer was discovered.
        """
        if not text or not text.strip():
            raise ValidationError("Please enter DFA data")
        importer = self.plugin_manager.get_importer(config.DEFAULT_IMPORTER_NAME)
        if importer is None:
            raise KeyError(f"No importer plugin named '{config.DEFAULT_IMPORTER_NAME}'")
        data = importer.import_data(text)
        if data is None:
            raise MissingStatesError("not valid JSON or no 'states' list")
        automaton = parse_dict_to_automaton(data)
        validate_automaton(automaton)
        return automaton

# dfa_animator/managers/plugin_manager.py
import os
import importlib
import inspect
import logging
from typing import Dict, Optional

from .signal_bus import signal_bus
from ..core.dfa_ir import Automaton
from ..core.dfa_parser import automaton_to_dict
from ..plugins.api import DfaExporterPlugin, DfaImporterPlugin
from ..utils import config

logger = logging.getLogger(__name__)
PLUGIN_SUBDIR = "plugins"

class PluginManager:
    def __init__(self):
        self.exporter_plugins = []
        self.importer_plugins = []
        self._discover_plugins()

    def _discover_plugins(self):
        """Dynamically discovers and loads all plugins."""
        self.exporter_plugins.clear()
        self.importer_plugins.clear()

        plugins_path = os.path.join(os.path.dirname(__file__), '..', PLUGIN_SUBDIR)
        if not os.path.isdir(plugins_path):
            logger.warning(f"Plugin directory not found at '{plugins_path}'. No plugins will be loaded.")
            return

        for filename in sorted(os.listdir(plugins_path)):
            if not filename.endswith(".py") or filename.startswith("_") or filename == "api.py":
                continue
            module_name = filename[:-3]
            try:
                module = importlib.import_module(f"..{PLUGIN_SUBDIR}.{module_name}", package=__package__)
            except ImportError as e:
                logger.error(f"Failed to import plugin module '{module_name}': {e}", exc_info=True)
                continue

            for name, obj in inspect.getmembers(module, inspect.isclass):
                # Only pick up classes defined in this module, not re-imported bases
                if obj.__module__ != module.__name__:
                    continue
                if issubclass(obj, DfaExporterPlugin) and obj is not DfaExporterPlugin:
                    self.exporter_plugins.append(obj())
                    logger.debug(f"Loaded exporter plugin: '{obj().name}'")
                elif issubclass(obj, DfaImporterPlugin) and obj is not DfaImporterPlugin:
                    self.importer_plugins.append(obj())
                    logger.debug(f"Loaded importer plugin: '{obj().name}'")

        self.exporter_plugins.sort(key=lambda p: p.name)
        self.importer_plugins.sort(key=lambda p: p.name)

    def get_exporter(self, name: str) -> Optional[DfaExporterPlugin]:
        return next((p for p in self.exporter_plugins if p.name == name), None)

    def get_importer(self, name: str) -> Optional[DfaImporterPlugin]:
        return next((p for p in self.importer_plugins if p.name == name), None)

    def export_automaton(self, automaton: Automaton, exporter_name: str = config.DEFAULT_EXPORTER_NAME, **kwargs) -> Dict[str, str]:
        """
        Runs the named exporter over `automaton`.

        Raises:
            KeyError: no exporter with that name was discovered.
        """
        exporter = self.get_exporter(exporter_name)
        if exporter is None:
            raise KeyError(f"No exporter plugin named '{exporter_name}'")
        files = exporter.export(automaton_to_dict(automaton), **kwargs)
        logger.info(f"Exported '{automaton.name}' with '{exporter_name}': {', '.join(files)}")
        for filename in files:
            signal_bus.automaton_exported.emit(filename)
        return files

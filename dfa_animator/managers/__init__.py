# dfa_animator/managers/__init__.py
"""Initializes the 'managers' package and exposes the application managers."""

from .signal_bus import signal_bus, SignalBus
from .settings_manager import SettingsManager, SettingDefinition
from .library_manager import AutomatonLibrary, random_test_string
from .persistence_manager import PersistenceManager
from .plugin_manager import PluginManager
from .playback_controller import PlaybackController, PlaybackState, PlaybackSession

__all__ = [
    "signal_bus",
    "SignalBus",
    "SettingsManager",
    "SettingDefinition",
    "AutomatonLibrary",
    "random_test_string",
    "PersistenceManager",
    "PluginManager",
    "PlaybackController",
    "PlaybackState",
    "PlaybackSession",
]

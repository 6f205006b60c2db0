# dfa_animator/managers/signal_bus.py
from PyQt6.QtCore import QObject, pyqtSignal

# A central place for all cross-component signals
class SignalBus(QObject):
    """
    A global singleton object for application-wide, decoupled communication.

    Components can emit signals on this bus without needing a direct reference
    to the components that will handle the signal. Playback rendering does not
    go through here; the PlaybackController's own signals carry that.
    """

    # --- UI State & Commands ---
    status_message_posted = pyqtSignal(str, str) # level, message

    # --- Library & Persistence ---
    saved_automata_changed = pyqtSignal(list) # sorted saved names
    automaton_exported = pyqtSignal(str) # suggested filename

    # --- Playback ---
    automaton_loaded = pyqtSignal(object) # Automaton instance
    simulation_finished = pyqtSignal(object) # terminal SimulationEvent

    def __init__(self):
        super().__init__()

# Create a singleton instance for global access throughout the application
signal_bus = SignalBus()

# dfa_animator/managers/playback_controller.py
"""
Drives the two animations of the application: building an automaton one
construction event at a time, and walking it over an input string one
simulation event at a time.

Everything runs on the Qt event loop. The only suspension point is a single
single-shot QTimer; each scheduled step remembers the session generation it
was scheduled under, and a timeout that arrives after `load()` or `cancel()`
bumped the generation is dropped.
"""

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from PyQt6.QtCore import QObject, QTimer, pyqtSignal, pyqtSlot

from .library_manager import random_test_string
from .signal_bus import signal_bus
from ..core.construction import ConstructionEvent, build_sequence
from ..core.dfa_ir import Automaton, validate_automaton
from ..core.dfa_simulator import (
    Accepted, SimulationEvent, TransitionMissing, check_input_alphabet,
    highlight_for, is_terminal, simulate
)
from ..core.errors import DFAError
from ..utils import config

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    """Playback states"""
    IDLE = "idle"
    CONSTRUCTING = "constructing"
    CONSTRUCTION_COMPLETE = "construction_complete"
    SIMULATING = "simulating"
    SIMULATION_COMPLETE = "simulation_complete"


@dataclass
class PlaybackSession:
    """Everything that belongs to one loaded automaton."""
    automaton: Automaton
    construction_sequence: List[ConstructionEvent] = field(default_factory=list)
    current_step_index: int = -1
    simulation: Optional[Iterator[SimulationEvent]] = None
    generation: int = 0

    @property
    def last_index(self) -> int:
        return len(self.construction_sequence) - 1


class PlaybackController(QObject):
    constructionEventRendered = pyqtSignal(object)      # ConstructionEvent
    simulationEventRendered = pyqtSignal(object, dict)  # SimulationEvent, highlight
    visualizationCleared = pyqtSignal()
    guideUpdated = pyqtSignal(str)
    outputPosted = pyqtSignal(str, str)                 # message, level
    errorOccurred = pyqtSignal(object)                  # DFAError
    playbackStateChanged = pyqtSignal(object)           # PlaybackState
    automatonLoaded = pyqtSignal(object)                # Automaton

    def __init__(self, settings_manager=None, parent=None):
        super().__init__(parent)
        self.settings_manager = settings_manager
        self._session: Optional[PlaybackSession] = None
        self._state = PlaybackState.IDLE
        self._pending_generation: Optional[int] = None

        if settings_manager is not None:
            self._speed_ms = settings_manager.speed_ms
            self._auto_play = settings_manager.auto_play
            settings_manager.settingChanged.connect(self._on_setting_changed)
        else:
            self._speed_ms = config.DEFAULT_ANIMATION_SPEED_MS
            self._auto_play = config.DEFAULT_AUTO_PLAY

        self._step_timer = QTimer(self)
        self._step_timer.setSingleShot(True)
        self._step_timer.timeout.connect(self._on_step_timeout)

    # --- Read-only views ---

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def automaton(self) -> Optional[Automaton]:
        return self._session.automaton if self._session else None

    @property
    def current_step_index(self) -> int:
        return self._session.current_step_index if self._session else -1

    @property
    def construction_sequence(self) -> List[ConstructionEvent]:
        return list(self._session.construction_sequence) if self._session else []

    @property
    def speed_ms(self) -> int:
        return self._speed_ms

    @property
    def auto_play(self) -> bool:
        return self._auto_play

    @property
    def is_step_pending(self) -> bool:
        return self._step_timer.isActive()

    # --- Internal helpers ---

    def _set_state(self, new_state: PlaybackState):
        if new_state is self._state:
            return
        logger.debug(f"Playback state: {self._state.value} -> {new_state.value}")
        self._state = new_state
        self.playbackStateChanged.emit(new_state)

    def _stop_timer(self):
        self._step_timer.stop()
        self._pending_generation = None
        if self._session is not None:
            self._session.generation += 1

    def _schedule_step(self, delay_ms: float):
        self._pending_generation = self._session.generation
        self._step_timer.start(max(0, int(delay_ms)))

    def _construction_delay_ms(self) -> float:
        divisor = config.CONSTRUCTION_SPEED_DIVISOR
        if self.settings_manager is not None:
            divisor = self.settings_manager.construction_speed_divisor
        return self._speed_ms / divisor

    def _signal_error(self, error: DFAError):
        logger.warning(f"{type(error).__name__}: {error}")
        self.errorOccurred.emit(error)
        self.outputPosted.emit(str(error), "error")

    def _require_session(self) -> bool:
        if self._session is None:
            logger.warning("Playback operation requested with no automaton loaded.")
            self.outputPosted.emit("Please select a DFA first!", "error")
            return False
        return True

    def _intro_guide(self) -> str:
        automaton = self._session.automaton
        return f"{automaton.name}: {automaton.description}. Press 'Next' to build."

    def _step_guide(self, index: int) -> str:
        sequence = self._session.construction_sequence
        return f"Step {index + 1}/{len(sequence)}: {sequence[index].description}"

    def _construction_state_for_index(self) -> PlaybackState:
        index = self._session.current_step_index
        if index < 0:
            return PlaybackState.IDLE
        if index >= self._session.last_index:
            return PlaybackState.CONSTRUCTION_COMPLETE
        return PlaybackState.CONSTRUCTING

    def _replay_construction(self, up_to_index: int):
        self.visualizationCleared.emit()
        for event in self._session.construction_sequence[:up_to_index + 1]:
            self.constructionEventRendered.emit(event)

    # --- Loading ---

    def load(self, automaton: Automaton) -> bool:
        """
        Makes `automaton` the current one and starts its construction.

        An automaton that fails validation is reported through `errorOccurred`
        and leaves the current session exactly as it was.
        """
        try:
            validate_automaton(automaton)
        except DFAError as e:
            self._signal_error(e)
            return False

        previous_generation = self._session.generation if self._session else 0
        self._stop_timer()

        automaton = automaton.copy()
        self._session = PlaybackSession(
            automaton=automaton,
            construction_sequence=build_sequence(automaton),
            generation=previous_generation + 1,
        )
        logger.info(f"Loaded automaton '{automaton.name}' "
                    f"({len(self._session.construction_sequence)} construction steps).")

        self._set_state(PlaybackState.IDLE)
        self.visualizationCleared.emit()
        self.guideUpdated.emit(self._intro_guide())
        self.automatonLoaded.emit(automaton)
        signal_bus.automaton_loaded.emit(automaton)

        if self._auto_play:
            self._advance_construction()
        return True

    def restart(self) -> bool:
        """Reloads the current automaton from scratch."""
        if not self._require_session():
            return False
        return self.load(self._session.automaton)

    # --- Construction ---

    def step_forward(self) -> bool:
        """
        Renders the next construction event.

        Returns False when nothing was rendered: no automaton, a simulation
        in progress, or construction already complete.
        """
        if not self._require_session():
            return False
        if self._state is PlaybackState.SIMULATING:
            logger.warning("Cannot step construction while a simulation is running.")
            return False
        self._stop_timer()
        return self._advance_construction()

    def _advance_construction(self) -> bool:
        session = self._session
        if session.current_step_index >= session.last_index:
            self._set_state(PlaybackState.CONSTRUCTION_COMPLETE)
            self.guideUpdated.emit("Construction complete! Ready to test strings.")
            return False

        session.current_step_index += 1
        index = session.current_step_index
        event = session.construction_sequence[index]
        logger.debug(f"Construction step {index + 1}/{len(session.construction_sequence)}: {event.description}")
        self.constructionEventRendered.emit(event)
        self.guideUpdated.emit(self._step_guide(index))

        if index >= session.last_index:
            self._set_state(PlaybackState.CONSTRUCTION_COMPLETE)
        else:
            self._set_state(PlaybackState.CONSTRUCTING)
            if self._auto_play:
                self._schedule_step(self._construction_delay_ms())
        return True

    def step_backward(self) -> bool:
        """Undoes the last construction event by redrawing events 0..index-1."""
        if not self._require_session():
            return False
        if self._state is PlaybackState.SIMULATING:
            logger.warning("Cannot step construction while a simulation is running.")
            return False
        if self._session.current_step_index < 0:
            return False

        self._stop_timer()
        self._session.current_step_index -= 1
        index = self._session.current_step_index
        self._replay_construction(index)

        if index < 0:
            self._set_state(PlaybackState.IDLE)
            self.guideUpdated.emit(self._intro_guide())
        else:
            self._set_state(PlaybackState.CONSTRUCTING)
            self.guideUpdated.emit(self._step_guide(index))
        return True

    def reset_visualization(self) -> bool:
        """Drops any running animation and shows the fully built automaton."""
        if not self._require_session():
            return False
        self._stop_timer()
        self._session.simulation = None
        self._session.current_step_index = self._session.last_index
        self._replay_construction(self._session.last_index)
        self._set_state(PlaybackState.CONSTRUCTION_COMPLETE)
        automaton = self._session.automaton
        self.outputPosted.emit("Visualization reset", "info")
        self.guideUpdated.emit(f"{automaton.name}: {automaton.description}")
        return True

    # --- Simulation ---

    def run_simulation(self, text: str) -> bool:
        """
        Starts animating the loaded automaton over `text`.

        Characters outside the alphabet are reported before anything is
        animated; the current playback is left untouched in that case.
        """
        if not self._require_session():
            return False
        text = (text or "").strip()
        try:
            check_input_alphabet(self._session.automaton, text)
        except DFAError as e:
            self._signal_error(e)
            return False

        self._stop_timer()
        self._session.simulation = simulate(self._session.automaton, text)
        self._set_state(PlaybackState.SIMULATING)
        logger.info(f"Simulating '{self._session.automaton.name}' on \"{text}\".")
        self.outputPosted.emit(f'Testing string: "{text}"', "info")
        self._advance_simulation()
        return True

    def run_random_test(self, rng: Optional[random.Random] = None) -> Optional[str]:
        """Runs a random string over the alphabet; returns it, or None if nothing ran."""
        if not self._require_session():
            return None
        min_length, max_length = config.RANDOM_TEST_MIN_LENGTH, config.RANDOM_TEST_MAX_LENGTH
        if self.settings_manager is not None:
            min_length, max_length = self.settings_manager.random_test_lengths()
        try:
            text = random_test_string(self._session.automaton, rng, min_length, max_length)
        except ValueError as e:
            logger.warning(f"Cannot generate a random test: {e}")
            self.outputPosted.emit(str(e), "error")
            return None
        return text if self.run_simulation(text) else None

    def _advance_simulation(self):
        session = self._session
        if session.simulation is None:
            return
        event = next(session.simulation, None)
        if event is None:
            session.simulation = None
            return

        self.simulationEventRendered.emit(event, highlight_for(event))
        if not is_terminal(event):
            self.guideUpdated.emit(event.message)
            self._schedule_step(self._speed_ms)
            return

        session.simulation = None
        self._set_state(PlaybackState.SIMULATION_COMPLETE)
        if isinstance(event, TransitionMissing):
            self.errorOccurred.emit(event.error)
        level = "success" if isinstance(event, Accepted) else "error"
        logger.info(f"Simulation finished in '{event.state_id}': {event.message}")
        self.outputPosted.emit(event.message, level)
        signal_bus.simulation_finished.emit(event)

    # --- Timing ---

    def cancel(self):
        """Stops any scheduled step and drops a running simulation. Safe to call repeatedly."""
        self._stop_timer()
        if self._session is None:
            return
        self._session.simulation = None
        if self._state is PlaybackState.SIMULATING:
            self._set_state(self._construction_state_for_index())
            logger.info("Simulation cancelled.")

    def set_speed(self, speed_ms: int):
        """
        Sets the delay between animation steps. Takes effect from the next
        scheduled step on.

        Raises:
            ValueError: if `speed_ms` is not a positive integer.
        """
        if isinstance(speed_ms, bool) or not isinstance(speed_ms, int) or speed_ms <= 0:
            raise ValueError(f"Animation speed must be a positive integer, got {speed_ms!r}")
        self._speed_ms = speed_ms
        logger.debug(f"Animation speed set to {speed_ms} ms.")
        if self.settings_manager is not None and not self.settings_manager.set("playback_speed_ms", speed_ms):
            logger.warning(f"Animation speed {speed_ms} ms applied but not persisted.")

    def set_speed_preset(self, preset: str):
        """
        Applies one of the named speeds in `config.SPEED_PRESETS`.

        Raises:
            ValueError: for an unknown preset name.
        """
        if preset not in config.SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset '{preset}'. Use one of: {', '.join(config.SPEED_PRESETS)}")
        speed_ms = config.SPEED_PRESETS[preset]
        self.set_speed(speed_ms)
        self.outputPosted.emit(f"Animation speed set to: {config.speed_name(speed_ms)}", "info")

    def set_auto_play(self, enabled: bool):
        """
        Turns automatic construction stepping on or off. Turning it off does
        not recall a step that is already scheduled.
        """
        enabled = bool(enabled)
        if self.settings_manager is not None:
            self.settings_manager.set("playback_auto_play", enabled)
        self._apply_auto_play(enabled)

    def _apply_auto_play(self, enabled: bool):
        self._auto_play = enabled
        if (enabled and self._session is not None
                and self._state is not PlaybackState.SIMULATING
                and self._session.current_step_index < self._session.last_index
                and not self._step_timer.isActive()):
            self._advance_construction()

    @pyqtSlot()
    def _on_step_timeout(self):
        generation = self._pending_generation
        self._pending_generation = None
        if self._session is None or generation != self._session.generation:
            logger.debug("Dropping stale playback step.")
            return
        if self._state is PlaybackState.SIMULATING:
            self._advance_simulation()
        elif self._state is PlaybackState.CONSTRUCTING:
            self._advance_construction()

    @pyqtSlot(str, object)
    def _on_setting_changed(self, key: str, value):
        if key == "playback_speed_ms":
            self._speed_ms = int(value)
        elif key == "playback_auto_play":
            self._apply_auto_play(bool(value))

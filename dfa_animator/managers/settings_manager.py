# dfa_animator/managers/settings_manager.py
import logging
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from PyQt6.QtCore import QObject, pyqtSignal, QSettings, QTimer

from ..utils import config

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True)
class SettingDefinition:
    """A persisted playback setting: its default and the range it must stay in."""
    key: str
    default_value: Any
    description: str = ""
    min_value: Optional[Number] = None
    max_value: Optional[Number] = None

    def accepts(self, value: Any) -> bool:
        if isinstance(self.default_value, bool):
            return isinstance(value, bool)
        # bool is an int subclass; True is not a speed
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if isinstance(self.default_value, int) and not isinstance(value, int):
            return False
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True

    def from_storage(self, raw: Any) -> Any:
        """INI storage hands everything back as strings."""
        if isinstance(self.default_value, bool):
            if isinstance(raw, str):
                return raw.strip().lower() in ("true", "1", "yes")
            return bool(raw)
        return type(self.default_value)(raw)


class SettingsManager(QObject):
    """
    Persists the user's playback preferences in QSettings (INI format).

    Values are validated on the way in and on the way back out of storage; a
    stored value that no longer validates is replaced by its default. Disk
    writes are debounced through a single-shot timer.
    """

    settingChanged = pyqtSignal(str, object)
    settingsReset = pyqtSignal()

    SETTING_DEFINITIONS = {d.key: d for d in (
        SettingDefinition("playback_speed_ms", config.DEFAULT_ANIMATION_SPEED_MS,
                          "Delay between animation steps in milliseconds",
                          config.MIN_ANIMATION_SPEED_MS, config.MAX_ANIMATION_SPEED_MS),
        SettingDefinition("playback_auto_play", config.DEFAULT_AUTO_PLAY,
                          "Advance construction steps automatically"),
        SettingDefinition("construction_speed_divisor", config.CONSTRUCTION_SPEED_DIVISOR,
                          "Construction steps run this many times faster than simulation steps",
                          1.0, 5.0),
        SettingDefinition("random_test_min_length", config.RANDOM_TEST_MIN_LENGTH,
                          "Shortest generated test string", 0, 50),
        SettingDefinition("random_test_max_length", config.RANDOM_TEST_MAX_LENGTH,
                          "Longest generated test string", 1, 50),
    )}

    DEFAULTS = {key: d.default_value for key, d in SETTING_DEFINITIONS.items()}

    SYNC_DELAY_MS = 1000

    def __init__(self, settings: Optional[QSettings] = None, parent=None):
        super().__init__(parent)
        self.settings = settings if settings is not None else QSettings(
            QSettings.Format.IniFormat, QSettings.Scope.UserScope,
            config.ORGANIZATION_NAME, config.APP_NAME
        )
        self._values = {}

        self._sync_timer = QTimer(self)
        self._sync_timer.setSingleShot(True)
        self._sync_timer.setInterval(self.SYNC_DELAY_MS)
        self._sync_timer.timeout.connect(self.settings.sync)

        logger.info(f"Playback settings file: {self.settings.fileName()}")

    def _read(self, definition: SettingDefinition) -> Any:
        raw = self.settings.value(definition.key)
        if raw is None:
            return definition.default_value
        try:
            value = definition.from_storage(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Stored '{definition.key}' value {raw!r} is unreadable ({e}). Using default.")
            return definition.default_value
        if not definition.accepts(value):
            logger.warning(f"Stored '{definition.key}' value {value!r} is out of range. Using default.")
            return definition.default_value
        return value

    def get(self, key: str, default_override=None) -> Any:
        definition = self.SETTING_DEFINITIONS.get(key)
        if definition is None:
            logger.warning(f"Unknown setting key: '{key}'")
            return default_override
        if key not in self._values:
            self._values[key] = self._read(definition)
        return self._values[key]

    def set(self, key: str, value: Any) -> bool:
        """
        Stores `value` and emits settingChanged. Returns False (and changes
        nothing) for unknown keys and values that fail validation.
        """
        definition = self.SETTING_DEFINITIONS.get(key)
        if definition is None:
            logger.warning(f"Unknown setting key: '{key}'. Not setting.")
            return False
        if not definition.accepts(value):
            logger.error(f"Setting '{key}' value {value!r} failed validation. Not setting.")
            return False
        if not self._lengths_consistent(key, value):
            logger.error(f"Setting '{key}' to {value} would leave min length above max length. Not setting.")
            return False

        if self.get(key) == value:
            return True
        self._store(key, value)
        logger.info(f"Setting '{key}' changed to: {value}")
        return True

    def _lengths_consistent(self, key: str, value: Any) -> bool:
        if key == "random_test_min_length":
            return value <= self.get("random_test_max_length")
        if key == "random_test_max_length":
            return self.get("random_test_min_length") <= value
        return True

    def _store(self, key: str, value: Any):
        self._values[key] = value
        self.settings.setValue(key, value)
        self._sync_timer.start()
        self.settingChanged.emit(key, value)

    def reset_to_defaults(self):
        """Restores every default; settingChanged fires once per setting, then settingsReset."""
        logger.info("Resetting playback settings to defaults.")
        for key, default_value in self.DEFAULTS.items():
            self._store(key, default_value)
        self.settingsReset.emit()

    # --- Typed views used by the playback controller ---

    @property
    def speed_ms(self) -> int:
        return self.get("playback_speed_ms")

    @property
    def auto_play(self) -> bool:
        return self.get("playback_auto_play")

    @property
    def construction_speed_divisor(self) -> float:
        return float(self.get("construction_speed_divisor"))

    def random_test_lengths(self) -> Tuple[int, int]:
        return self.get("random_test_min_length"), self.get("random_test_max_length")

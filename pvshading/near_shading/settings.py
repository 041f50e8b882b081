"""
Access to the settings store of the simulation.

The shading model does not know where its settings come from. It only needs
an object that returns the text stored under a key. `SettingsSource` wraps
that single lookup with the policy that applies when a key is missing
(`ErrLevel`) and with the conversion of the text to numbers, booleans,
angles and lengths.
"""
import warnings
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pvshading import magnitude_in
from pvshading.logging import ModuleLogger


logger = ModuleLogger.get_logger(__name__)


class ConfigurationError(Exception):
    """A required setting is missing or its value cannot be parsed. The
    simulation cannot be configured.
    """
    pass


class DefaultedSettingWarning(Warning):
    """An optional setting is missing and its default value is used."""
    pass


class ErrLevel(Enum):
    FATAL = 'fatal'
    WARNING = 'warning'


class SettingsSource(ABC):

    @abstractmethod
    def lookup(self, key: str) -> str | None:
        """Returns the raw text stored under `key`, or None if the store has
        no such key.
        """
        ...

    def get_text(
        self,
        key: str,
        level: ErrLevel = ErrLevel.FATAL,
        default: str | None = None
    ) -> str:
        """Returns the text stored under `key`.

        If the key is missing and `level` is `ErrLevel.FATAL`, a
        `ConfigurationError` is raised. If `level` is `ErrLevel.WARNING`,
        `default` is returned and a `DefaultedSettingWarning` is issued.
        """
        text = self.lookup(key)
        if text is not None and text.strip():
            return text.strip()
        if level is ErrLevel.FATAL or default is None:
            logger.error(f"required setting '{key}' is missing")
            raise ConfigurationError(f"required setting '{key}' is missing")
        logger.warning(f"setting '{key}' is missing; using default '{default}'")
        warnings.warn(
            f"setting '{key}' is missing; the default value '{default}' "
            f"is used.",
            category=DefaultedSettingWarning
        )
        return default

    def get_float(
        self,
        key: str,
        level: ErrLevel = ErrLevel.FATAL,
        default: float | None = None
    ) -> float:
        text = self.get_text(key, level, None if default is None else str(default))
        try:
            return float(text)
        except ValueError:
            raise ConfigurationError(
                f"setting '{key}': '{text}' is not a number"
            ) from None

    def get_int(
        self,
        key: str,
        level: ErrLevel = ErrLevel.FATAL,
        default: int | None = None
    ) -> int:
        text = self.get_text(key, level, None if default is None else str(default))
        try:
            return int(text)
        except ValueError:
            raise ConfigurationError(
                f"setting '{key}': '{text}' is not an integer"
            ) from None

    def get_bool(
        self,
        key: str,
        level: ErrLevel = ErrLevel.FATAL,
        default: bool | None = None
    ) -> bool:
        """Returns the boolean stored under `key`. Only the words 'true' and
        'false' are accepted (case-insensitive).
        """
        text = self.get_text(
            key, level, None if default is None else str(default).lower()
        )
        match text.lower():
            case 'true':
                return True
            case 'false':
                return False
            case _:
                raise ConfigurationError(
                    f"setting '{key}': '{text}' is not a boolean"
                )

    def get_angle(self, key: str, level: ErrLevel = ErrLevel.FATAL) -> float:
        """Returns the angle stored in degrees under `key` in radians."""
        return magnitude_in(self.get_float(key, level), 'deg', 'rad')

    def get_length(
        self,
        key: str,
        unit: str = 'm',
        level: ErrLevel = ErrLevel.FATAL
    ) -> float:
        """Returns the length stored in `unit` under `key` in meters."""
        return magnitude_in(self.get_float(key, level), unit, 'm')


class MappingSettings(SettingsSource):
    """Settings held in memory, e.g. a dict of key-value pairs taken from a
    site file or a user interface. Non-string values are converted with
    `str()`, so that `{'PlaneTilt': 30}` and `{'PlaneTilt': '30'}` are
    equivalent.
    """

    def __init__(self, settings: Mapping[str, Any]) -> None:
        self._settings = dict(settings)

    def lookup(self, key: str) -> str | None:
        value = self._settings.get(key)
        if value is None:
            return None
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)

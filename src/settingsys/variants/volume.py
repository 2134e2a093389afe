"""Audio bus volume setting."""

import math
from typing import List, Optional

from loguru import logger

from ..core.base import SettingsConfigureBase
from ..errors import SubsystemError, UnsupportedOperationError
from ..storage.repository import PersistedValue
from ..subsystems.base import AudioBus, AudioMixer
from .formats import format_volume, parse_float


class VolumeSettings(SettingsConfigureBase[float]):
    """Linear volume of one mixer bus, clamped to [0, 1].

    If the bus cannot be resolved the error is kept in ``subsystem_error``
    and the setting keeps working on its stored value alone.
    """

    continuous = True

    def __init__(self, repository: PersistedValue[float], mixer: AudioMixer, bus_name: str):
        self.name = f"volume ({bus_name})"
        self.bus_name = bus_name
        self.subsystem_error: Optional[SubsystemError] = None
        self._bus: Optional[AudioBus] = None

        try:
            self._bus = mixer.get_bus(bus_name)
        except SubsystemError as e:
            logger.error(f"Failed to initialize {self.name}: {e}")
            self.subsystem_error = e

        super().__init__(repository)

    @property
    def has_bus(self) -> bool:
        """Whether a live bus is attached and valid."""
        return self._bus is not None and self._bus.is_valid()

    @staticmethod
    def clamp(value: float) -> float:
        value = float(value)
        if math.isnan(value):
            return 0.0
        return min(max(value, 0.0), 1.0)

    def set(self, value: float) -> float:
        volume = self.clamp(value)
        if volume != value:
            logger.warning(f"{self.name} {value!r} out of range, clamped to {volume}")

        if self.has_bus:
            try:
                self._bus.set_volume(volume)
            except SubsystemError as e:
                logger.error(f"Failed to apply {self.name}: {e}")
                self.subsystem_error = e

        self.repository.value = volume
        return volume

    def get_current_system(self) -> float:
        """Volume reported by the bus, or the stored value without a bus."""
        if self.has_bus:
            try:
                return self._bus.get_volume()
            except SubsystemError as e:
                logger.warning(f"Failed to read {self.name} from bus, using stored value: {e}")
        return self.repository.value

    def get_options(self) -> List[float]:
        raise UnsupportedOperationError(f"{self.name} does not have predefined options")

    def parse(self, text: str) -> float:
        return parse_float(text, self.name)

    def format(self, value: float) -> str:
        return format_volume(value)

    def _normalize(self, value: float) -> float:
        try:
            return self.clamp(value)
        except (TypeError, ValueError):
            logger.warning(f"Stored {self.name} {value!r} is not a number, using 1.0")
            return 1.0

"""Frame rate cap setting."""

from typing import List

from loguru import logger

from ..core.base import SettingsConfigureBase
from ..storage.repository import PersistedValue
from ..subsystems.base import Display, FrameLimiter
from .formats import format_int, parse_int


class FrameRateSettings(SettingsConfigureBase[int]):
    """Frame cap limited to the refresh rates the display supports.

    Requests for an unsupported rate fall back to the lowest supported one.
    """

    name = "frame rate"

    def __init__(self, repository: PersistedValue[int], display: Display, limiter: FrameLimiter):
        self.limiter = limiter
        self._frame_rates = self._detect_frame_rates(display)
        logger.debug(f"Detected frame rates: {self._frame_rates}")
        super().__init__(repository)

    @staticmethod
    def _detect_frame_rates(display: Display) -> List[int]:
        """Distinct refresh rates of all display modes, rounded, ascending."""
        return sorted({int(round(mode.refresh_rate)) for mode in display.modes()})

    def set(self, value: int) -> int:
        frame_rate = self._accept_option(int(value), self._frame_rates)
        self.limiter.set_target_frame_rate(frame_rate)
        self.repository.value = frame_rate
        logger.debug(f"Frame rate set to {frame_rate}")
        return frame_rate

    def get_current_system(self) -> int:
        return self.limiter.get_target_frame_rate()

    def get_options(self) -> List[int]:
        return list(self._frame_rates)

    def parse(self, text: str) -> int:
        return parse_int(text, self.name)

    def format(self, value: int) -> str:
        return format_int(value)

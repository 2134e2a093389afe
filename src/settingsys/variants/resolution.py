"""Screen resolution setting."""

from typing import List

from loguru import logger

from ..core.base import SettingsConfigureBase
from ..storage.repository import PersistedValue
from ..subsystems.base import Display, Resolution
from .formats import format_resolution, parse_resolution


class ResolutionSettings(SettingsConfigureBase[Resolution]):
    """Screen resolution chosen from the modes the display reports.

    Changing the resolution keeps the current fullscreen state.
    """

    name = "resolution"

    def __init__(self, repository: PersistedValue[Resolution], display: Display):
        self.display = display
        self._resolutions = self._detect_resolutions(display)
        logger.debug(f"Detected resolutions: {[format_resolution(r) for r in self._resolutions]}")
        super().__init__(repository)

    @staticmethod
    def _detect_resolutions(display: Display) -> List[Resolution]:
        # Modes differing only in refresh rate collapse into one resolution
        resolutions = []
        for mode in display.modes():
            if mode.resolution not in resolutions:
                resolutions.append(mode.resolution)
        return resolutions

    def set(self, value: Resolution) -> Resolution:
        resolution = self._accept_option(value, self._resolutions)
        self.display.set_resolution(resolution, self.display.is_fullscreen())
        self.repository.value = resolution
        logger.debug(f"Resolution set to {format_resolution(resolution)}")
        return resolution

    def get_current_system(self) -> Resolution:
        return self.display.get_resolution()

    def get_options(self) -> List[Resolution]:
        return list(self._resolutions)

    def parse(self, text: str) -> Resolution:
        return parse_resolution(text, self.name)

    def format(self, value: Resolution) -> str:
        return format_resolution(value)

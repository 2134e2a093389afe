"""On/off settings: fullscreen and VSync."""

from abc import abstractmethod
from typing import List

from loguru import logger

from ..core.base import SettingsConfigureBase
from ..storage.repository import PersistedValue
from ..subsystems.base import Display, VSyncController
from .formats import format_bool, parse_bool


class ToggleSettings(SettingsConfigureBase[bool]):
    """Base for boolean settings. Options are always ``[True, False]``."""

    def set(self, value: bool) -> bool:
        enabled = bool(value)
        self._apply(enabled)
        self.repository.value = enabled
        logger.debug(f"{self.name} set to {format_bool(enabled)}")
        return enabled

    @abstractmethod
    def _apply(self, enabled: bool) -> None:
        """Push the flag to the live subsystem."""
        pass

    def get_options(self) -> List[bool]:
        return [True, False]

    def get_options_to_string(self) -> List[str]:
        return ["True", "False"]

    def parse(self, text: str) -> bool:
        return parse_bool(text, self.name)

    def format(self, value: bool) -> str:
        return format_bool(value)

    def _normalize(self, value: bool) -> bool:
        return bool(value)


class FullScreenSettings(ToggleSettings):
    name = "fullscreen"

    def __init__(self, repository: PersistedValue[bool], display: Display):
        self.display = display
        super().__init__(repository)

    def _apply(self, enabled: bool) -> None:
        self.display.set_fullscreen(enabled)

    def get_current_system(self) -> bool:
        return self.display.is_fullscreen()


class VSyncSettings(ToggleSettings):
    """VSync on means one vblank per frame; off means count 0."""

    name = "vsync"

    def __init__(self, repository: PersistedValue[bool], vsync: VSyncController):
        self.vsync = vsync
        super().__init__(repository)

    def _apply(self, enabled: bool) -> None:
        self.vsync.set_vsync_count(1 if enabled else 0)

    def get_current_system(self) -> bool:
        return self.vsync.get_vsync_count() > 0

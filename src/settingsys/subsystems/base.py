"""Live subsystem interfaces and value types."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Resolution:
    """Screen resolution in pixels."""
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width} X {self.height}"


@dataclass(frozen=True)
class DisplayMode:
    """A mode reported by the display: resolution plus refresh rate in Hz."""
    width: int
    height: int
    refresh_rate: float

    @property
    def resolution(self) -> Resolution:
        return Resolution(self.width, self.height)


class Display(ABC):
    """Display driver: available modes, active resolution and fullscreen flag."""

    @abstractmethod
    def modes(self) -> List[DisplayMode]:
        """All modes supported by the display, in the driver's order."""
        pass

    @abstractmethod
    def get_resolution(self) -> Resolution:
        pass

    @abstractmethod
    def set_resolution(self, resolution: Resolution, fullscreen: bool) -> None:
        pass

    @abstractmethod
    def is_fullscreen(self) -> bool:
        pass

    @abstractmethod
    def set_fullscreen(self, fullscreen: bool) -> None:
        pass


class FrameLimiter(ABC):
    """Application frame cap."""

    @abstractmethod
    def get_target_frame_rate(self) -> int:
        pass

    @abstractmethod
    def set_target_frame_rate(self, frame_rate: int) -> None:
        pass


class VSyncController(ABC):
    """Vertical sync. A count of 0 disables it; 1 syncs every vblank."""

    @abstractmethod
    def get_vsync_count(self) -> int:
        pass

    @abstractmethod
    def set_vsync_count(self, count: int) -> None:
        pass


class AudioBus(ABC):
    """A mixer bus with a linear volume in [0, 1]."""

    @abstractmethod
    def is_valid(self) -> bool:
        pass

    @abstractmethod
    def get_volume(self) -> float:
        pass

    @abstractmethod
    def set_volume(self, volume: float) -> None:
        pass


class AudioMixer(ABC):
    """Resolves buses by path, e.g. ``"bus:/Music"``."""

    @abstractmethod
    def get_bus(self, name: str) -> AudioBus:
        """Get a bus handle.

        Raises:
            SubsystemError: if the bus does not exist
        """
        pass


class Localization(ABC):
    """Localization engine: loaded languages and the active one."""

    @abstractmethod
    def languages(self) -> List[str]:
        pass

    @abstractmethod
    def get_current_language(self) -> str:
        pass

    @abstractmethod
    def set_current_language(self, language: str) -> None:
        pass

    @abstractmethod
    def device_language(self) -> str:
        """Language reported by the operating system."""
        pass

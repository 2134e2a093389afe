"""In-process subsystem implementations.

These hold state in memory and behave like the real drivers for everything
the settings layer observes. The CLI runs on them and tests use them as fakes.
"""

import re
from typing import Dict, Iterable, List, Optional

from loguru import logger

from ..errors import SubsystemError
from .base import (
    AudioBus,
    AudioMixer,
    Display,
    DisplayMode,
    FrameLimiter,
    Localization,
    Resolution,
    VSyncController,
)

_MODE_PATTERN = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*@\s*(\d+(?:\.\d+)?)\s*$")


def parse_display_mode(text: str) -> DisplayMode:
    """Parse a mode written as ``"<width>x<height>@<hz>"``."""
    match = _MODE_PATTERN.match(text)
    if not match:
        raise ValueError(f"Invalid display mode: {text!r} (expected '<width>x<height>@<hz>')")
    width, height, rate = match.groups()
    return DisplayMode(int(width), int(height), float(rate))


class SimulatedDisplay(Display):
    """Display with a fixed list of modes. Starts at the last (largest) mode."""

    def __init__(self, modes: Iterable[DisplayMode], fullscreen: bool = False):
        self._modes = list(modes)
        self._resolution = self._modes[-1].resolution if self._modes else Resolution(0, 0)
        self._fullscreen = fullscreen

    @classmethod
    def from_strings(cls, modes: Iterable[str], fullscreen: bool = False) -> "SimulatedDisplay":
        return cls([parse_display_mode(mode) for mode in modes], fullscreen=fullscreen)

    def modes(self) -> List[DisplayMode]:
        return list(self._modes)

    def get_resolution(self) -> Resolution:
        return self._resolution

    def set_resolution(self, resolution: Resolution, fullscreen: bool) -> None:
        self._resolution = resolution
        self._fullscreen = fullscreen

    def is_fullscreen(self) -> bool:
        return self._fullscreen

    def set_fullscreen(self, fullscreen: bool) -> None:
        self._fullscreen = fullscreen


class SimulatedFrameLimiter(FrameLimiter):
    """Frame cap; -1 means uncapped."""

    def __init__(self, target_frame_rate: int = -1):
        self._target = target_frame_rate

    def get_target_frame_rate(self) -> int:
        return self._target

    def set_target_frame_rate(self, frame_rate: int) -> None:
        self._target = frame_rate


class SimulatedVSync(VSyncController):
    def __init__(self, count: int = 0):
        self._count = count

    def get_vsync_count(self) -> int:
        return self._count

    def set_vsync_count(self, count: int) -> None:
        self._count = count


class SimulatedAudioBus(AudioBus):
    def __init__(self, volume: float = 1.0):
        self._volume = volume
        self.valid = True

    def is_valid(self) -> bool:
        return self.valid

    def get_volume(self) -> float:
        if not self.valid:
            raise SubsystemError("Audio bus handle is no longer valid")
        return self._volume

    def set_volume(self, volume: float) -> None:
        if not self.valid:
            raise SubsystemError("Audio bus handle is no longer valid")
        self._volume = volume


class SimulatedAudioMixer(AudioMixer):
    """Mixer with a fixed set of bus paths."""

    def __init__(self, bus_names: Iterable[str]):
        self._buses: Dict[str, SimulatedAudioBus] = {name: SimulatedAudioBus() for name in bus_names}

    def get_bus(self, name: str) -> SimulatedAudioBus:
        bus = self._buses.get(name)
        if bus is None:
            raise SubsystemError(f"Audio bus not found: {name}")
        return bus


class SimulatedLocalization(Localization):
    """Localization engine with a static language table."""

    def __init__(self, languages: Iterable[str], device_language: str, current: Optional[str] = None):
        self._languages = list(languages)
        self._device_language = device_language
        self._current = current if current is not None else device_language

    def languages(self) -> List[str]:
        return list(self._languages)

    def get_current_language(self) -> str:
        return self._current

    def set_current_language(self, language: str) -> None:
        if language != self._current:
            logger.debug(f"Active language changed: {self._current} -> {language}")
        self._current = language

    def device_language(self) -> str:
        return self._device_language

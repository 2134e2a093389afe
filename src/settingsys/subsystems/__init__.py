"""Live subsystem interfaces and simulated implementations."""

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
from .simulated import (
    SimulatedAudioBus,
    SimulatedAudioMixer,
    SimulatedDisplay,
    SimulatedFrameLimiter,
    SimulatedLocalization,
    SimulatedVSync,
    parse_display_mode,
)

__all__ = [
    "AudioBus",
    "AudioMixer",
    "Display",
    "DisplayMode",
    "FrameLimiter",
    "Localization",
    "Resolution",
    "VSyncController",
    "SimulatedAudioBus",
    "SimulatedAudioMixer",
    "SimulatedDisplay",
    "SimulatedFrameLimiter",
    "SimulatedLocalization",
    "SimulatedVSync",
    "parse_display_mode",
]

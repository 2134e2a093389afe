"""Concrete setting variants."""

from .frame_rate import FrameRateSettings
from .language import LanguageSettings
from .resolution import ResolutionSettings
from .toggles import FullScreenSettings, ToggleSettings, VSyncSettings
from .volume import VolumeSettings

__all__ = [
    "FrameRateSettings",
    "FullScreenSettings",
    "LanguageSettings",
    "ResolutionSettings",
    "ToggleSettings",
    "VSyncSettings",
    "VolumeSettings",
]

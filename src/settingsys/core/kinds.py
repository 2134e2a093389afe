"""Setting kinds used as directory keys."""

from enum import Enum


class SettingsType(str, Enum):
    """Identifies which configurable aspect a configuration governs."""

    FRAME_RATE = "frame_rate"
    FULLSCREEN = "fullscreen"
    LANGUAGE = "language"
    RESOLUTION = "resolution"
    VSYNC = "vsync"
    MASTER_VOLUME = "master_volume"
    MUSIC_VOLUME = "music_volume"

    @property
    def label(self) -> str:
        """Human readable name, e.g. "Master Volume"."""
        if self is SettingsType.VSYNC:
            return "VSync"
        return self.value.replace("_", " ").title()

"""Startup wiring: repositories, variants and the settings directory."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from loguru import logger

from .config import AppConfig
from .core import SettingsConfigureBase, SettingsDirectory, SettingsType
from .storage import JsonValueRepository
from .subsystems import (
    AudioMixer,
    Display,
    FrameLimiter,
    Localization,
    Resolution,
    SimulatedAudioMixer,
    SimulatedDisplay,
    SimulatedFrameLimiter,
    SimulatedLocalization,
    SimulatedVSync,
    VSyncController,
)
from .variants import (
    FrameRateSettings,
    FullScreenSettings,
    LanguageSettings,
    ResolutionSettings,
    VolumeSettings,
    VSyncSettings,
)


@dataclass
class Subsystems:
    """Live subsystem handles the variants are built on."""
    display: Display
    frame_limiter: FrameLimiter
    vsync: VSyncController
    mixer: AudioMixer
    localization: Localization


def create_simulated_subsystems(config: AppConfig) -> Subsystems:
    """Build in-process subsystems from config."""
    return Subsystems(
        display=SimulatedDisplay.from_strings(config.display_modes),
        frame_limiter=SimulatedFrameLimiter(),
        vsync=SimulatedVSync(),
        mixer=SimulatedAudioMixer([config.master_bus, config.music_bus]),
        localization=SimulatedLocalization(config.languages, config.device_language),
    )


def _decode_resolution(raw: Any) -> Resolution:
    width, height = raw
    return Resolution(int(width), int(height))


def create_directory(config: AppConfig, subsystems: Subsystems) -> SettingsDirectory:
    """Create one JSON-backed configuration per setting kind."""
    storage_dir = Path(config.storage_dir)
    logger.info(f"Loading settings from {storage_dir}")

    def repository(kind: SettingsType, default: Any, **codec) -> JsonValueRepository:
        return JsonValueRepository(kind.value, default, storage_dir, **codec)

    configurations: Dict[SettingsType, SettingsConfigureBase[Any]] = {
        SettingsType.FRAME_RATE: FrameRateSettings(
            repository(SettingsType.FRAME_RATE, 60),
            subsystems.display,
            subsystems.frame_limiter,
        ),
        SettingsType.FULLSCREEN: FullScreenSettings(
            repository(SettingsType.FULLSCREEN, True),
            subsystems.display,
        ),
        SettingsType.LANGUAGE: LanguageSettings(
            repository(SettingsType.LANGUAGE, ""),
            subsystems.localization,
        ),
        SettingsType.RESOLUTION: ResolutionSettings(
            repository(
                SettingsType.RESOLUTION,
                Resolution(1920, 1080),
                encode=lambda value: [value.width, value.height],
                decode=_decode_resolution,
            ),
            subsystems.display,
        ),
        SettingsType.VSYNC: VSyncSettings(
            repository(SettingsType.VSYNC, False),
            subsystems.vsync,
        ),
        SettingsType.MASTER_VOLUME: VolumeSettings(
            repository(SettingsType.MASTER_VOLUME, 1.0),
            subsystems.mixer,
            config.master_bus,
        ),
        SettingsType.MUSIC_VOLUME: VolumeSettings(
            repository(SettingsType.MUSIC_VOLUME, 1.0),
            subsystems.mixer,
            config.music_bus,
        ),
    }

    return SettingsDirectory(configurations)

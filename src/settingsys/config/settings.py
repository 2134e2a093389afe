"""Application configuration and logging setup."""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from loguru import logger


def _default_storage_dir() -> str:
    """Per-user config directory for the platform."""
    if os.name == "nt":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return str(base / "settingsys")


@dataclass
class AppConfig:
    """Main application configuration."""
    # Where persisted setting values live, one JSON file per setting
    storage_dir: str = field(default_factory=_default_storage_dir)

    # Logging configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Simulated display, as "<width>x<height>@<hz>"
    display_modes: List[str] = field(default_factory=lambda: [
        "1280x720@60",
        "1920x1080@60",
        "1920x1080@144",
        "2560x1440@144",
    ])

    # Localization
    languages: List[str] = field(default_factory=lambda: ["English", "Spanish", "French", "German"])
    device_language: str = "English"

    # Audio bus paths
    master_bus: str = "bus:/"
    music_bus: str = "bus:/Music"

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "storage_dir": self.storage_dir,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "display_modes": list(self.display_modes),
            "languages": list(self.languages),
            "device_language": self.device_language,
            "master_bus": self.master_bus,
            "music_bus": self.music_bus,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create config from dictionary. Missing keys keep their defaults."""
        config = cls()
        for key, value in data.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"Unknown config key: {key}")
        return config


def load_config(config_file: Optional[str] = None) -> AppConfig:
    """Load config from file and environment variables.

    Environment variables override file values.
    """
    load_dotenv()

    config = AppConfig()

    if config_file and Path(config_file).exists():
        with open(config_file, "r", encoding="utf-8") as f:
            config = AppConfig.from_dict(json.load(f))
        logger.debug(f"Config loaded from {config_file}")

    if os.getenv("SETTINGSYS_STORAGE_DIR"):
        config.storage_dir = os.getenv("SETTINGSYS_STORAGE_DIR")

    if os.getenv("SETTINGSYS_LOG_LEVEL"):
        config.log_level = os.getenv("SETTINGSYS_LOG_LEVEL")

    if os.getenv("SETTINGSYS_LOG_FILE"):
        config.log_file = os.getenv("SETTINGSYS_LOG_FILE")

    if os.getenv("SETTINGSYS_DEVICE_LANGUAGE"):
        config.device_language = os.getenv("SETTINGSYS_DEVICE_LANGUAGE")

    return config


def save_config(config: AppConfig, config_file: str) -> None:
    """Save config to file."""
    config_path = Path(config_file)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Route loguru output to stderr at ``level`` and optionally to a file."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    if log_file:
        logger.add(log_file, level="DEBUG", rotation="1 MB", retention=3)

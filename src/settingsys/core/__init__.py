"""Core settings abstractions."""

from .base import SettingsConfigureBase
from .directory import SettingsDirectory
from ..errors import (
    ParseError,
    SettingNotFoundError,
    SettingsError,
    StorageError,
    SubsystemError,
    UnsupportedOperationError,
)
from .kinds import SettingsType

__all__ = [
    "SettingsConfigureBase",
    "SettingsDirectory",
    "SettingsType",
    "SettingsError",
    "ParseError",
    "UnsupportedOperationError",
    "SettingNotFoundError",
    "SubsystemError",
    "StorageError",
]

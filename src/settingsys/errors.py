"""Error types raised by settings configurations."""


class SettingsError(Exception):
    """Base class for all settings errors."""


class ParseError(SettingsError, ValueError):
    """Text input could not be parsed into a setting value."""

    def __init__(self, setting: str, text: str, expected: str):
        self.setting = setting
        self.text = text
        self.expected = expected
        super().__init__(f"Invalid value for {setting}: {text!r} (expected {expected})")


class UnsupportedOperationError(SettingsError, NotImplementedError):
    """The operation is not available for this setting, e.g. options of a continuous domain."""


class SettingNotFoundError(SettingsError, KeyError):
    """No configuration is registered for the requested kind."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(kind)

    def __str__(self) -> str:
        return f"No setting registered for kind: {self.kind}"


class SubsystemError(SettingsError):
    """A live subsystem handle could not be obtained or used."""


class StorageError(SettingsError):
    """A persisted value could not be written."""

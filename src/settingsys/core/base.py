"""Base settings configuration interface."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from loguru import logger

from ..storage.repository import PersistedValue

T = TypeVar("T")


class SettingsConfigureBase(ABC, Generic[T]):
    """Base class for configuring one application setting.

    A configuration owns exactly one persisted value cell. It validates values
    against the option universe of its variant, applies them to a live
    subsystem and writes the accepted value to the cell. Persisting is a
    separate step so batch updates can defer it; the only public ways to
    persist are ``set_and_save``, ``set_and_save_from_string`` and
    ``reset_and_save``, which means every saved value went through ``set``.

    Subclasses assign their subsystem handles before calling
    ``super().__init__`` because the constructor resolves the default and
    applies it immediately.
    """

    # Display name used in log and error messages
    name: str = "setting"

    # True when the value domain cannot be enumerated (e.g. volume)
    continuous: bool = False

    def __init__(self, repository: PersistedValue[T]):
        self.repository = repository
        self._default_value = self._resolve_default(repository.value)
        self.set(self._default_value)

    @property
    def default_value(self) -> T:
        """Default resolved at construction."""
        return self._default_value

    # -- abstract interface --------------------------------------------------

    @abstractmethod
    def set(self, value: T) -> T:
        """Validate and apply ``value`` without persisting it.

        Returns the value that was actually accepted, which differs from
        ``value`` when the variant clamps or falls back.
        """
        pass

    @abstractmethod
    def get_current_system(self) -> T:
        """Query the live subsystem for its current value."""
        pass

    @abstractmethod
    def get_options(self) -> List[T]:
        """Return the legal values of this setting."""
        pass

    @abstractmethod
    def parse(self, text: str) -> T:
        """Parse text into a value. Raises ParseError on malformed input."""
        pass

    @abstractmethod
    def format(self, value: T) -> str:
        """Format a value in the canonical text form accepted by ``parse``."""
        pass

    # -- shared operations ---------------------------------------------------

    def set_and_save(self, value: T) -> T:
        """Apply ``value`` and persist the result."""
        accepted = self.set(value)
        self._save()
        return accepted

    def set_from_string(self, text: str) -> T:
        """Parse ``text`` and apply it. State is untouched if parsing fails."""
        return self.set(self.parse(text))

    def set_and_save_from_string(self, text: str) -> T:
        """Parse ``text``, apply it and persist the result."""
        accepted = self.set_from_string(text)
        self._save()
        return accepted

    def get_current_memory(self) -> T:
        """Return the value this configuration last applied."""
        return self.repository.value

    def get_current_system_to_string(self) -> str:
        return self.format(self.get_current_system())

    def get_current_memory_to_string(self) -> str:
        return self.format(self.get_current_memory())

    def get_options_to_string(self) -> List[str]:
        return [self.format(option) for option in self.get_options()]

    def reset_and_save(self) -> T:
        """Restore the default value and persist it."""
        value = self._reset()
        self._save()
        logger.info(f"{self.name} reset to default: {self.format(value)}")
        return value

    # -- internals -----------------------------------------------------------

    def _reset(self) -> T:
        return self.set(self._default_value)

    def _save(self) -> None:
        self.repository.save()
        logger.debug(f"{self.name} saved: {self.repository.value!r}")

    def _resolve_default(self, stored: T) -> T:
        """Pick the default from the stored value and the option universe."""
        options = [] if self.continuous else self.get_options()
        if options and stored not in options:
            fallback = self._fallback(options)
            logger.warning(f"Stored {self.name} {stored!r} is not available, defaulting to {fallback!r}")
            return fallback
        return self._normalize(stored)

    def _normalize(self, value: T) -> T:
        """Bring a stored value into the domain. Identity unless overridden."""
        return value

    def _fallback(self, options: List[T]) -> T:
        """Option used when a requested value is unavailable."""
        return options[0]

    def _accept_option(self, value: T, options: List[T]) -> T:
        """Return ``value`` if it is an option, otherwise the fallback option.

        An empty option list means the subsystem reported nothing to validate
        against, so the value is accepted as-is.
        """
        if not options or value in options:
            return value
        fallback = self._fallback(options)
        logger.warning(f"{self.name} {value!r} is not available, using {fallback!r}")
        return fallback

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.repository.value!r}, default={self._default_value!r})"

"""Persisted value cells backing settings configurations."""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Generic, Optional, TypeVar

from loguru import logger

from ..errors import StorageError

T = TypeVar("T")


class PersistedValue(ABC, Generic[T]):
    """A single named, typed storage slot.

    ``value`` is the in-memory copy; ``save()`` makes it durable.
    """

    def __init__(self, name: str, default: T):
        self.name = name
        self.default = default

    @property
    @abstractmethod
    def value(self) -> T:
        pass

    @value.setter
    @abstractmethod
    def value(self, value: T) -> None:
        pass

    @abstractmethod
    def save(self) -> None:
        """Persist the current value."""
        pass


class MemoryValueRepository(PersistedValue[T]):
    """Cell that lives only in memory. Counts saves instead of writing."""

    def __init__(self, name: str, default: T, initial: Optional[T] = None):
        super().__init__(name, default)
        self._value = default if initial is None else initial
        self.save_count = 0

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    def save(self) -> None:
        self.save_count += 1


class JsonValueRepository(PersistedValue[T]):
    """Cell stored as ``<directory>/<name>.json`` with body ``{"value": ...}``.

    The file is read once on construction. A missing or unreadable file
    leaves the cell at ``default``.
    """

    def __init__(
        self,
        name: str,
        default: T,
        directory: Path,
        encode: Optional[Callable[[T], Any]] = None,
        decode: Optional[Callable[[Any], T]] = None,
    ):
        super().__init__(name, default)
        self.path = Path(directory) / f"{name}.json"
        self._encode = encode or (lambda value: value)
        self._decode = decode or (lambda raw: raw)
        self._value = self._load()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    def _load(self) -> T:
        if not self.path.exists():
            logger.debug(f"No stored value for '{self.name}', using default {self.default!r}")
            return self.default

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            value = self._decode(data["value"])
            logger.debug(f"Loaded '{self.name}' from {self.path}: {value!r}")
            return value
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Failed to load '{self.name}' from {self.path}, using default: {e}")
            return self.default

    def save(self) -> None:
        """Write the value atomically (temp file, then replace).

        Raises:
            StorageError: if the file cannot be written
        """
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump({"value": self._encode(self._value)}, f, indent=2)
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp.exists():
                tmp.unlink()
            raise StorageError(f"Failed to save '{self.name}' to {self.path}: {e}") from e
        logger.debug(f"Saved '{self.name}' to {self.path}")

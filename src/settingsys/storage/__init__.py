"""Persistence for setting values."""

from .repository import PersistedValue, MemoryValueRepository, JsonValueRepository

__all__ = ["PersistedValue", "MemoryValueRepository", "JsonValueRepository"]

"""Directory of settings configurations keyed by setting kind."""

from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple

from loguru import logger

from .base import SettingsConfigureBase
from ..errors import SettingNotFoundError
from .kinds import SettingsType


class SettingsDirectory:
    """Read-only lookup of configurations by kind.

    The mapping is fixed when the directory is built at startup.
    """

    def __init__(self, configurations: Mapping[SettingsType, SettingsConfigureBase[Any]]):
        self._configurations: Mapping[SettingsType, SettingsConfigureBase[Any]] = MappingProxyType(
            dict(configurations)
        )
        logger.info(f"Settings directory ready: {[kind.value for kind in self._configurations]}")

    def get(self, kind: SettingsType) -> SettingsConfigureBase[Any]:
        """Get the configuration for a kind.

        Raises:
            SettingNotFoundError: if no configuration is registered for ``kind``
        """
        try:
            return self._configurations[kind]
        except KeyError:
            raise SettingNotFoundError(kind) from None

    @property
    def kinds(self) -> List[SettingsType]:
        """Registered kinds in registration order."""
        return list(self._configurations)

    def items(self) -> List[Tuple[SettingsType, SettingsConfigureBase[Any]]]:
        return list(self._configurations.items())

    def reset_all_and_save(self) -> Dict[SettingsType, Any]:
        """Reset every configuration to its default and persist it.

        Returns:
            Mapping of kind to the value that was applied
        """
        results = {}
        for kind, configuration in self._configurations.items():
            results[kind] = configuration.reset_and_save()
        logger.info(f"Reset {len(results)} settings to defaults")
        return results

    def __getitem__(self, kind: SettingsType) -> SettingsConfigureBase[Any]:
        return self.get(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._configurations

    def __len__(self) -> int:
        return len(self._configurations)

    def __iter__(self) -> Iterator[SettingsType]:
        return iter(self._configurations)

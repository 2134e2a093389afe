"""Interface language setting."""

from typing import List

from loguru import logger

from ..core.base import SettingsConfigureBase
from ..errors import ParseError, SubsystemError
from ..storage.repository import PersistedValue
from ..subsystems.base import Localization


class LanguageSettings(SettingsConfigureBase[str]):
    """Active language, one of those loaded by the localization engine.

    Unknown languages fall back to the device language when it is available,
    otherwise to the first loaded language.
    """

    name = "language"

    def __init__(self, repository: PersistedValue[str], localization: Localization):
        self.localization = localization
        self._languages = localization.languages()
        if not self._languages:
            raise SubsystemError("No languages found in localization sources")
        super().__init__(repository)

    def _fallback(self, options: List[str]) -> str:
        device_language = self.localization.device_language()
        if device_language in options:
            return device_language
        return options[0]

    def set(self, value: str) -> str:
        language = self._accept_option(value, self._languages)
        self.localization.set_current_language(language)
        self.repository.value = language
        logger.debug(f"Language set to {language}")
        return language

    def get_current_system(self) -> str:
        return self.localization.get_current_language()

    def get_options(self) -> List[str]:
        return list(self._languages)

    def parse(self, text: str) -> str:
        if text is None or not text.strip():
            raise ParseError(self.name, text, "a language name")
        return text.strip()

    def format(self, value: str) -> str:
        return value

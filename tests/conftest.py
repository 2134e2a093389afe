"""Shared fixtures: simulated subsystems and memory-backed cells."""

import pytest

from settingsys.storage import MemoryValueRepository
from settingsys.subsystems import (
    SimulatedAudioMixer,
    SimulatedDisplay,
    SimulatedFrameLimiter,
    SimulatedLocalization,
    SimulatedVSync,
)

DISPLAY_MODES = [
    "1280x720@60",
    "1920x1080@59.94",
    "1920x1080@144",
    "2560x1440@144",
]


@pytest.fixture
def display():
    return SimulatedDisplay.from_strings(DISPLAY_MODES)


@pytest.fixture
def limiter():
    return SimulatedFrameLimiter()


@pytest.fixture
def vsync():
    return SimulatedVSync()


@pytest.fixture
def mixer():
    return SimulatedAudioMixer(["bus:/", "bus:/Music"])


@pytest.fixture
def localization():
    return SimulatedLocalization(["English", "Spanish", "French"], device_language="Spanish")


@pytest.fixture
def make_repo():
    """Factory for memory cells: make_repo(initial, default=None)."""
    def _make(initial, default=None):
        return MemoryValueRepository("test", initial if default is None else default, initial=initial)
    return _make

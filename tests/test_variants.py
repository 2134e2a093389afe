"""Tests for the concrete setting variants."""

import pytest

from settingsys.core import ParseError, SubsystemError, UnsupportedOperationError
from settingsys.storage import MemoryValueRepository
from settingsys.subsystems import Resolution, SimulatedAudioMixer, SimulatedLocalization
from settingsys.variants import (
    FrameRateSettings,
    FullScreenSettings,
    LanguageSettings,
    ResolutionSettings,
    VolumeSettings,
    VSyncSettings,
)


# -- frame rate ---------------------------------------------------------------

def test_frame_rate_options_are_distinct_rounded_refresh_rates(make_repo, display, limiter):
    """Test 59.94 Hz rounds to 60 and duplicates collapse."""
    settings = FrameRateSettings(make_repo(60), display, limiter)

    assert settings.get_options() == [60, 144]


def test_frame_rate_unknown_stored_value_uses_first_option(make_repo, display, limiter):
    """Test a stored rate the display cannot do is replaced on startup."""
    settings = FrameRateSettings(make_repo(75), display, limiter)

    assert settings.default_value == 60
    assert settings.get_current_memory() == 60
    assert limiter.get_target_frame_rate() == 60


def test_frame_rate_set_falls_back_for_unsupported_rate(make_repo, display, limiter):
    """Test an unavailable rate falls back to the first option."""
    settings = FrameRateSettings(make_repo(144), display, limiter)

    assert settings.set(30) == 60
    assert settings.get_current_memory() == 60
    assert settings.get_current_system() == 60


def test_frame_rate_set_from_string(make_repo, display, limiter):
    """Test frame rate text is a plain integer."""
    settings = FrameRateSettings(make_repo(60), display, limiter)

    settings.set_from_string(" 144 ")

    assert settings.get_current_memory() == 144
    assert settings.get_current_system_to_string() == "144"


def test_frame_rate_rejects_non_numeric_text(make_repo, display, limiter):
    """Test bad text leaves the stored and live value alone."""
    repo = make_repo(144)
    settings = FrameRateSettings(repo, display, limiter)

    with pytest.raises(ParseError):
        settings.set_from_string("not-a-number")

    assert settings.get_current_memory() == 144
    assert limiter.get_target_frame_rate() == 144
    assert repo.save_count == 0


@pytest.mark.parametrize("text", ["", "60.5", "sixty", "6 0"])
def test_frame_rate_parse_errors(make_repo, display, limiter, text):
    """Test malformed integers are rejected."""
    settings = FrameRateSettings(make_repo(60), display, limiter)

    with pytest.raises(ParseError):
        settings.parse(text)


def test_frame_rate_rejects_oversized_integer_text(make_repo, display, limiter):
    """Test a digit string too long to convert is a parse error."""
    repo = make_repo(60)
    settings = FrameRateSettings(repo, display, limiter)

    with pytest.raises(ParseError):
        settings.set_from_string("9" * 5000)

    assert settings.get_current_memory() == 60
    assert limiter.get_target_frame_rate() == 60


def test_frame_rate_round_trips_every_option(make_repo, display, limiter):
    """Test parse(format(v)) == v over the option universe."""
    settings = FrameRateSettings(make_repo(60), display, limiter)

    for option in settings.get_options():
        assert settings.parse(settings.format(option)) == option


# -- resolution ---------------------------------------------------------------

def test_resolution_options_collapse_refresh_rates(make_repo, display):
    """Test each resolution appears once, in display order."""
    settings = ResolutionSettings(make_repo(Resolution(1920, 1080)), display)

    assert settings.get_options() == [
        Resolution(1280, 720),
        Resolution(1920, 1080),
        Resolution(2560, 1440),
    ]
    assert settings.get_options_to_string() == ["1280 X 720", "1920 X 1080", "2560 X 1440"]


@pytest.mark.parametrize("text", ["1920 X 1080", "1920x1080", " 1920  x 1080 ", "1920X1080"])
def test_resolution_accepts_text_case_and_space_insensitive(make_repo, display, text):
    """Test the X separator is case-insensitive and whitespace is ignored."""
    settings = ResolutionSettings(make_repo(Resolution(1280, 720)), display)

    settings.set_from_string(text)

    assert settings.get_current_memory() == Resolution(1920, 1080)
    assert display.get_resolution() == Resolution(1920, 1080)


@pytest.mark.parametrize("text", ["1920x1080x1", "1920", "", "   ", "wide X tall", "1920 by 1080"])
def test_resolution_rejects_malformed_text(make_repo, display, text):
    """Test anything but exactly two integers is a parse error."""
    settings = ResolutionSettings(make_repo(Resolution(1280, 720)), display)

    with pytest.raises(ParseError):
        settings.set_from_string(text)

    assert settings.get_current_memory() == Resolution(1280, 720)


def test_resolution_rejects_oversized_integer_text(make_repo, display):
    """Test a width too long to convert is a parse error."""
    settings = ResolutionSettings(make_repo(Resolution(1280, 720)), display)

    with pytest.raises(ParseError):
        settings.set_from_string("9" * 5000 + " X 1080")

    assert settings.get_current_memory() == Resolution(1280, 720)


def test_resolution_round_trips_every_option(make_repo, display):
    """Test parse(format(v)) == v over the option universe."""
    settings = ResolutionSettings(make_repo(Resolution(1280, 720)), display)

    for option in settings.get_options():
        assert settings.parse(settings.format(option)) == option


def test_resolution_unknown_stored_value_uses_first_option(make_repo, display):
    """Test the first applied value is the first detected resolution."""
    settings = ResolutionSettings(make_repo(Resolution(800, 600)), display)

    assert settings.default_value == Resolution(1280, 720)
    assert display.get_resolution() == Resolution(1280, 720)


def test_resolution_set_keeps_fullscreen_flag(make_repo, display):
    """Test changing the resolution does not leave fullscreen."""
    display.set_fullscreen(True)
    settings = ResolutionSettings(make_repo(Resolution(1280, 720)), display)

    settings.set(Resolution(2560, 1440))

    assert display.is_fullscreen() is True
    assert settings.get_current_system() == Resolution(2560, 1440)


# -- toggles ------------------------------------------------------------------

def test_fullscreen_options(make_repo, display):
    """Test boolean options and their text form."""
    settings = FullScreenSettings(make_repo(True), display)

    assert settings.get_options() == [True, False]
    assert settings.get_options_to_string() == ["True", "False"]


def test_fullscreen_applies_to_display(make_repo, display):
    """Test the flag reaches the display and reads back from it."""
    settings = FullScreenSettings(make_repo(False), display)

    settings.set_from_string("true")

    assert display.is_fullscreen() is True
    assert settings.get_current_system_to_string() == "True"
    assert settings.get_current_memory() is True


@pytest.mark.parametrize("text", ["yes", "1", "", "Truth"])
def test_toggle_rejects_non_boolean_text(make_repo, vsync, text):
    """Test only True/False are accepted."""
    settings = VSyncSettings(make_repo(False), vsync)

    with pytest.raises(ParseError):
        settings.set_from_string(text)

    assert settings.get_current_memory() is False


@pytest.mark.parametrize("settings_class", [FullScreenSettings, VSyncSettings])
def test_toggles_round_trip_every_option(make_repo, display, vsync, settings_class):
    """Test parse(format(v)) == v for both boolean values."""
    subsystem = display if settings_class is FullScreenSettings else vsync
    settings = settings_class(make_repo(True), subsystem)

    for option in settings.get_options():
        assert settings.parse(settings.format(option)) is option


def test_vsync_maps_to_vblank_count(make_repo, vsync):
    """Test VSync on is count 1, off is count 0."""
    settings = VSyncSettings(make_repo(True), vsync)
    assert vsync.get_vsync_count() == 1

    settings.set_from_string(" FALSE ")

    assert vsync.get_vsync_count() == 0
    assert settings.get_current_system() is False


def test_vsync_reads_any_positive_count_as_enabled(make_repo, vsync):
    """Test a count changed out of band shows in the system value only."""
    settings = VSyncSettings(make_repo(False), vsync)

    vsync.set_vsync_count(2)

    assert settings.get_current_system() is True
    assert settings.get_current_memory() is False


# -- volume -------------------------------------------------------------------

def test_volume_clamps_out_of_range(make_repo, mixer):
    """Test values outside [0, 1] are clamped rather than rejected."""
    settings = VolumeSettings(make_repo(0.5), mixer, "bus:/")

    assert settings.set(1.5) == 1.0
    assert settings.get_current_memory() == 1.0

    settings.set(-0.2)
    assert settings.get_current_memory() == 0.0
    assert mixer.get_bus("bus:/").get_volume() == 0.0


def test_volume_clamps_stored_value_on_startup(make_repo, mixer):
    """Test an out-of-range stored volume starts clamped."""
    settings = VolumeSettings(make_repo(3.0), mixer, "bus:/Music")

    assert settings.default_value == 1.0
    assert settings.get_current_system() == 1.0


def test_volume_has_no_options(make_repo, mixer):
    """Test continuous volume reports options as unsupported."""
    settings = VolumeSettings(make_repo(0.5), mixer, "bus:/")

    with pytest.raises(UnsupportedOperationError):
        settings.get_options()

    with pytest.raises(UnsupportedOperationError):
        settings.get_options_to_string()


def test_volume_text_format(make_repo, mixer):
    """Test volume text is two-decimal fixed point."""
    settings = VolumeSettings(make_repo(0.5), mixer, "bus:/")

    assert settings.get_current_memory_to_string() == "0.50"

    settings.set_from_string("0.25")
    assert settings.get_current_system_to_string() == "0.25"


@pytest.mark.parametrize("value", [0.0, 0.05, 0.25, 0.5, 0.99, 1.0])
def test_volume_two_decimal_values_round_trip(make_repo, mixer, value):
    """Test values with two decimals survive format then parse."""
    settings = VolumeSettings(make_repo(0.5), mixer, "bus:/")

    assert settings.parse(settings.format(value)) == value


@pytest.mark.parametrize("text", ["loud", "", "nan", "inf", "0,5"])
def test_volume_rejects_bad_text(make_repo, mixer, text):
    """Test non-numeric and non-finite text is a parse error."""
    settings = VolumeSettings(make_repo(0.5), mixer, "bus:/")

    with pytest.raises(ParseError):
        settings.set_from_string(text)

    assert settings.get_current_memory() == 0.5


def test_volume_degrades_without_bus(make_repo):
    """Test a missing bus is reported but the setting keeps working."""
    mixer = SimulatedAudioMixer([])
    settings = VolumeSettings(make_repo(0.4), mixer, "bus:/Missing")

    assert isinstance(settings.subsystem_error, SubsystemError)
    assert settings.has_bus is False

    settings.set(0.8)

    assert settings.get_current_memory() == 0.8
    assert settings.get_current_system() == 0.8


def test_volume_uses_memory_when_bus_becomes_invalid(make_repo, mixer):
    """Test an invalidated bus handle falls back to the stored value."""
    settings = VolumeSettings(make_repo(0.3), mixer, "bus:/")
    mixer.get_bus("bus:/").valid = False

    settings.set(0.6)

    assert settings.get_current_system() == 0.6


def test_volume_non_numeric_stored_value_defaults_to_full():
    """Test garbage in storage does not break construction."""
    repo = MemoryValueRepository("master_volume", 1.0, initial="loud")
    settings = VolumeSettings(repo, SimulatedAudioMixer(["bus:/"]), "bus:/")

    assert settings.get_current_memory() == 1.0


# -- language -----------------------------------------------------------------

def test_language_keeps_known_stored_value(make_repo, localization):
    """Test a loaded language is applied as stored."""
    settings = LanguageSettings(make_repo("French"), localization)

    assert settings.default_value == "French"
    assert localization.get_current_language() == "French"


def test_language_unknown_stored_value_uses_device_language(make_repo, localization):
    """Test an unknown language falls back to the device language."""
    settings = LanguageSettings(make_repo("Klingon"), localization)

    assert settings.default_value == "Spanish"
    assert settings.get_current_system() == "Spanish"


def test_language_falls_back_to_first_when_device_language_missing(make_repo):
    """Test the first language is used if the device language is not loaded."""
    localization = SimulatedLocalization(["English", "German"], device_language="Japanese")
    settings = LanguageSettings(make_repo("Klingon"), localization)

    assert settings.default_value == "English"


def test_language_set_unknown_falls_back(make_repo, localization):
    """Test setting an unloaded language applies the fallback."""
    settings = LanguageSettings(make_repo("English"), localization)

    assert settings.set_from_string("German") == "Spanish"
    assert settings.get_current_memory() == "Spanish"


def test_language_options(make_repo, localization):
    """Test options are the loaded languages, unchanged as text."""
    settings = LanguageSettings(make_repo("English"), localization)

    assert settings.get_options() == ["English", "Spanish", "French"]
    assert settings.get_options_to_string() == ["English", "Spanish", "French"]


def test_language_requires_loaded_languages(make_repo):
    """Test construction fails when no languages are available."""
    localization = SimulatedLocalization([], device_language="English")

    with pytest.raises(SubsystemError):
        LanguageSettings(make_repo("English"), localization)


def test_language_rejects_blank_text(make_repo, localization):
    """Test an empty language name is a parse error."""
    settings = LanguageSettings(make_repo("English"), localization)

    with pytest.raises(ParseError):
        settings.set_from_string("  ")

    assert settings.get_current_memory() == "English"


def test_language_round_trips_every_option(make_repo, localization):
    """Test parse(format(v)) == v over the loaded languages."""
    settings = LanguageSettings(make_repo("English"), localization)

    for option in settings.get_options():
        assert settings.parse(settings.format(option)) == option


def test_language_ignores_surrounding_whitespace(make_repo, localization):
    """Test padded text selects the language instead of the fallback."""
    settings = LanguageSettings(make_repo("English"), localization)

    assert settings.set_from_string(" French ") == "French"
    assert localization.get_current_language() == "French"

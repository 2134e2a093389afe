"""Basic usage example for settingsys."""

from settingsys.bootstrap import create_directory, create_simulated_subsystems
from settingsys.config import load_config, configure_logging
from settingsys.core import SettingsType, ParseError, UnsupportedOperationError


def main():
    """Basic usage example."""

    # Load config and set up logging
    config = load_config()
    configure_logging(config.log_level, config.log_file)

    # Build every setting on top of the simulated subsystems
    directory = create_directory(config, create_simulated_subsystems(config))

    resolution = directory[SettingsType.RESOLUTION]
    print(f"Resolution options: {resolution.get_options_to_string()}")
    print(f"Stored resolution: {resolution.get_current_memory_to_string()}")

    # Change and persist in one step
    resolution.set_and_save_from_string("1280 X 720")

    # Batch update: apply several values, then save each once
    volume = directory[SettingsType.MASTER_VOLUME]
    music = directory[SettingsType.MUSIC_VOLUME]
    volume.set(0.8)
    music.set(1.5)  # clamped to 1.0
    volume.set_and_save(volume.get_current_memory())
    music.set_and_save(music.get_current_memory())

    try:
        volume.get_options()
    except UnsupportedOperationError as e:
        print(f"Volume is continuous: {e}")

    try:
        directory[SettingsType.FRAME_RATE].set_from_string("fast")
    except ParseError as e:
        print(f"Rejected: {e}")

    # Back to defaults
    directory.reset_all_and_save()


if __name__ == "__main__":
    main()

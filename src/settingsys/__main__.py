"""Allow running with ``python -m settingsys``."""

from .cli import main

if __name__ == "__main__":
    main()

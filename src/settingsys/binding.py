"""Toolkit-agnostic binding of a configuration to a UI control.

A slider, toggle or dropdown needs three things: the value to show first,
the choices to offer, and a callback for user edits. ``bind`` produces them
for any configuration; wiring them to a concrete widget is up to the caller.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .core import SettingsConfigureBase, UnsupportedOperationError


@dataclass
class SettingBinding:
    """What a control needs from a configuration."""
    initial: Any
    options: Optional[List[Any]]  # None for continuous settings
    on_change: Callable[[Any], Any]


def bind(
    configuration: SettingsConfigureBase[Any],
    as_text: bool = False,
    save_on_change: bool = False,
) -> SettingBinding:
    """Bind a configuration to a control.

    Args:
        configuration: The setting to bind
        as_text: Exchange values as strings (dropdowns, text fields)
        save_on_change: Persist on every change instead of leaving it to the caller

    Returns:
        SettingBinding whose ``on_change`` applies the control's value
    """
    try:
        options = configuration.get_options_to_string() if as_text else configuration.get_options()
    except UnsupportedOperationError:
        options = None

    if as_text:
        initial = configuration.get_current_memory_to_string()
        on_change = configuration.set_and_save_from_string if save_on_change else configuration.set_from_string
    else:
        initial = configuration.get_current_memory()
        on_change = configuration.set_and_save if save_on_change else configuration.set

    return SettingBinding(initial=initial, options=options, on_change=on_change)

"""Command-line interface for settingsys."""

import json
from pathlib import Path
from typing import Optional, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from loguru import logger

from .bootstrap import create_directory, create_simulated_subsystems
from .config import AppConfig, configure_logging, load_config, save_config
from .core import SettingsDirectory, SettingsError, SettingsType, UnsupportedOperationError

app = typer.Typer(
    name="settingsys",
    help="Inspect and change persisted application settings",
    add_completion=False
)
console = Console()


def _open_directory(config_file: Optional[str]) -> Tuple[AppConfig, SettingsDirectory]:
    """Load config, set up logging and build every setting."""
    config = load_config(config_file)
    configure_logging(config.log_level, config.log_file)
    try:
        directory = create_directory(config, create_simulated_subsystems(config))
    except (SettingsError, ValueError) as e:
        console.print(f"[red]✗ Failed to load settings: {e}[/red]")
        logger.error(f"Startup error: {e}")
        raise typer.Exit(1)
    return config, directory


def _fail(action: str, error: Exception) -> None:
    console.print(f"[red]✗ {action} failed: {error}[/red]")
    logger.error(f"{action} error: {error}")
    raise typer.Exit(1)


@app.command("list")
def list_settings(
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file"),
):
    """List every setting with its stored, live and default value."""

    config, directory = _open_directory(config_file)

    table = Table(title="Settings")
    table.add_column("Kind", style="cyan")
    table.add_column("Stored", style="green")
    table.add_column("System")
    table.add_column("Default", style="dim")

    for kind, configuration in directory.items():
        table.add_row(
            kind.value,
            configuration.get_current_memory_to_string(),
            configuration.get_current_system_to_string(),
            configuration.format(configuration.default_value),
        )

    console.print(table)
    console.print(f"Storage: {config.storage_dir}")


@app.command()
def show(
    kind: SettingsType = typer.Argument(..., help="Setting to show"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file"),
):
    """Show one setting in detail."""

    _, directory = _open_directory(config_file)
    configuration = directory.get(kind)

    try:
        options = ", ".join(configuration.get_options_to_string())
    except UnsupportedOperationError:
        options = "continuous"

    console.print(Panel.fit(
        f"[bold blue]{kind.label}[/bold blue]\n"
        f"Stored: {configuration.get_current_memory_to_string()}\n"
        f"System: {configuration.get_current_system_to_string()}\n"
        f"Default: {configuration.format(configuration.default_value)}\n"
        f"Options: {options}",
        title="Setting"
    ))


@app.command("set")
def set_value(
    kind: SettingsType = typer.Argument(..., help="Setting to change"),
    value: str = typer.Argument(..., help="New value in the setting's text format"),
    no_save: bool = typer.Option(False, "--no-save", help="Apply without persisting"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file"),
):
    """Change a setting from text, e.g. `set resolution "1920 X 1080"`."""

    _, directory = _open_directory(config_file)
    configuration = directory.get(kind)

    try:
        if no_save:
            accepted = configuration.set_from_string(value)
        else:
            accepted = configuration.set_and_save_from_string(value)
    except SettingsError as e:
        _fail("Set", e)

    text = configuration.format(accepted)
    if accepted != configuration.parse(value):
        console.print(f"[yellow]⚠ {value!r} is not available, adjusted to {text}[/yellow]")

    suffix = "" if no_save else " and saved"
    console.print(f"[green]✓ {kind.label} set to {text}{suffix}[/green]")


@app.command()
def options(
    kind: SettingsType = typer.Argument(..., help="Setting to list options for"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file"),
):
    """List the values a setting accepts."""

    _, directory = _open_directory(config_file)
    configuration = directory.get(kind)

    try:
        values = configuration.get_options_to_string()
    except UnsupportedOperationError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return

    current = configuration.get_current_memory_to_string()
    table = Table(title=f"{kind.label} Options")
    table.add_column("Value", style="cyan")
    table.add_column("Current", justify="center")
    for option in values:
        table.add_row(option, "✓" if option == current else "")

    console.print(table)


@app.command()
def reset(
    kind: Optional[SettingsType] = typer.Argument(None, help="Setting to reset"),
    all_settings: bool = typer.Option(False, "--all", help="Reset every setting"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file"),
):
    """Restore defaults and save them."""

    if kind is None and not all_settings:
        console.print("[yellow]Please specify a setting or --all[/yellow]")
        raise typer.Exit(1)

    _, directory = _open_directory(config_file)

    try:
        if all_settings:
            directory.reset_all_and_save()
            console.print(f"[green]✓ Reset {len(directory)} settings to defaults[/green]")
        else:
            configuration = directory.get(kind)
            value = configuration.reset_and_save()
            console.print(f"[green]✓ {kind.label} reset to {configuration.format(value)}[/green]")
    except SettingsError as e:
        _fail("Reset", e)


@app.command()
def config(
    show: bool = typer.Option(False, "--show", help="Show current configuration"),
    save: Optional[str] = typer.Option(None, "--save", help="Save configuration to file"),
    load: Optional[str] = typer.Option(None, "--load", help="Load configuration from file"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to configuration file"),
):
    """Show or save the application configuration."""

    if load:
        if not Path(load).exists():
            console.print(f"[red]✗ Configuration file not found: {load}[/red]")
            raise typer.Exit(1)
        config_file = load

    app_config = load_config(config_file)

    if show or load:
        title = "Loaded Configuration" if load else "Current Configuration"
        console.print(Panel.fit(json.dumps(app_config.to_dict(), indent=2), title=title))

        table = Table(title="Setting Files")
        table.add_column("Kind", style="cyan")
        table.add_column("Path")
        table.add_column("Saved", justify="center")
        for kind in SettingsType:
            path = Path(app_config.storage_dir) / f"{kind.value}.json"
            table.add_row(kind.value, str(path), "✓" if path.exists() else "")
        console.print(table)

    elif save:
        save_config(app_config, save)
        console.print(f"[green]✓ Configuration saved to: {save}[/green]")

    else:
        console.print("[yellow]Please specify --show, --save, or --load[/yellow]")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

"""Configuration management modules."""

from .settings import AppConfig, configure_logging, load_config, save_config

__all__ = ["AppConfig", "configure_logging", "load_config", "save_config"]

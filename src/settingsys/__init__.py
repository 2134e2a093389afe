"""Typed application settings: validate, apply to a live subsystem, persist."""

__version__ = "0.1.0"

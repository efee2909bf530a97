"""Utilities - timezones and logging."""

from homegame.utilities.logging import setup_logging

__all__ = ["setup_logging"]

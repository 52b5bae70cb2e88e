"""Configuration."""
from vqplot.config.settings import Settings, settings

__all__ = ["Settings", "settings"]

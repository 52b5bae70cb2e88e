"""
Application settings.

Centralizes configuration using Pydantic BaseSettings. This keeps defaults
in one place and allows overriding via environment variables.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PALETTE = [
    "#990000", "#009900", "#000099", "#999900", "#990099", "#009999",
]

PaletteOverflow = Literal["wrap", "error"]

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application configuration."""

    # Output
    output_dir: Path = Path(".")
    image_width: int = Field(800, gt=0)
    image_height: int = Field(600, gt=0)

    # Terminal canvas (character cells)
    terminal_width: int = Field(80, gt=0)
    terminal_height: int = Field(40, gt=0)

    # Per-file colours
    palette: List[str] = Field(default_factory=lambda: list(DEFAULT_PALETTE), min_length=1)
    palette_overflow: PaletteOverflow = "wrap"

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="VQPLOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


# Singleton instance
settings = Settings()

"""vqplot - per-frame video quality report charts."""

__version__ = "0.1.0"

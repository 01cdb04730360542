"""Utility helpers shared across the image2asset codebase."""

from .config import CATALOG_DIRNAME, BuildConfig, load_config
from .logging import configure_logging, get_logger
from .paths import is_within, normalise_path

__all__ = [
    "CATALOG_DIRNAME",
    "BuildConfig",
    "load_config",
    "configure_logging",
    "get_logger",
    "is_within",
    "normalise_path",
]

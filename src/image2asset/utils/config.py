"""Configuration helpers for image2asset."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, field_validator

from .paths import normalise_path

CATALOG_DIRNAME = "Images.xcassets"


class BuildConfig(BaseModel):
    """Settings for a single catalog build."""

    input_path: Path
    output_path: Path
    verbose: bool = False

    @field_validator("input_path", "output_path")
    @classmethod
    def _normalise(cls, value: Path) -> Path:
        return normalise_path(value)

    @property
    def catalog_path(self) -> Path:
        return self.output_path / CATALOG_DIRNAME


def load_config(path: Optional[Path] = None, **overrides: Any) -> BuildConfig:
    """Load configuration from a YAML file, letting ``overrides`` win.

    Overrides that are ``None`` are ignored so unset command line options fall
    back to the file. A missing file is treated as empty.
    """

    data: Dict[str, Any] = {}
    if path is not None and path.exists():
        loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        data.update(loaded)
    data.update({key: value for key, value in overrides.items() if value is not None})
    return BuildConfig(**data)

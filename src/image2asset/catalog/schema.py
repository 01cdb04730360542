"""Pydantic models describing image entries and the ``Contents.json`` descriptor."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

from .naming import icon_name, imageset_name, is_valid_file_name

DEFAULT_IDIOM = "universal"
DEFAULT_AUTHOR = "xcode"
DEFAULT_VERSION = 1


class ImageEntry(BaseModel):
    """An SVG file discovered under the input root."""

    source_path: Path
    file_name: str
    icon_name: str

    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, value: str) -> str:
        if not is_valid_file_name(value):
            raise ValueError(f"illegal file name {value!r}")
        return value

    @classmethod
    def from_source(cls, source_path: Path) -> "ImageEntry":
        name = source_path.name
        return cls(source_path=source_path, file_name=name, icon_name=icon_name(name))

    @property
    def imageset_name(self) -> str:
        return imageset_name(self.icon_name)


class ContentsImage(BaseModel):
    filename: str
    idiom: str = DEFAULT_IDIOM


class ContentsInfo(BaseModel):
    author: str = DEFAULT_AUTHOR
    version: int = DEFAULT_VERSION


class Contents(BaseModel):
    """The metadata descriptor written as ``Contents.json`` in every imageset."""

    images: List[ContentsImage]
    info: ContentsInfo = Field(default_factory=ContentsInfo)

    @classmethod
    def for_file(cls, filename: str) -> "Contents":
        return cls(images=[ContentsImage(filename=filename)])

    def as_record(self) -> Dict[str, Any]:
        return self.model_dump()

    def to_json(self) -> str:
        """Serialise to the two-space indented form Xcode writes."""

        return json.dumps(self.as_record(), indent=2) + "\n"


class BuildSummary(BaseModel):
    """Outcome of a completed catalog build."""

    catalog_path: Path
    handled: int = 0
    skipped: int = 0
    imagesets: List[str] = Field(default_factory=list)

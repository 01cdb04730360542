from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from image2asset.catalog import Contents, ImageEntry


def test_contents_json_shape() -> None:
    text = Contents.for_file("star.svg").to_json()
    assert text.endswith("\n")
    assert json.loads(text) == {
        "images": [{"filename": "star.svg", "idiom": "universal"}],
        "info": {"author": "xcode", "version": 1},
    }


def test_image_entry_from_nested_source() -> None:
    entry = ImageEntry.from_source(Path("icons/menu/close_x.svg"))
    assert entry.file_name == "close_x.svg"
    assert entry.icon_name == "close_x"
    assert entry.imageset_name == "close_x.imageset"


def test_image_entry_rejects_illegal_name() -> None:
    with pytest.raises(ValidationError, match="illegal file name"):
        ImageEntry.from_source(Path("my icon.svg"))

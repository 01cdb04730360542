"""File-name rules for images that can enter the catalog."""
from __future__ import annotations

import re
from typing import Tuple

SVG_EXTENSION = "svg"
IMAGESET_SUFFIX = ".imageset"

_VALID_FILE_NAME = re.compile(r"[A-Za-z0-9_]+\.svg")


def split_name(file_name: str) -> Tuple[str, str]:
    """Split ``file_name`` on its last dot into ``(stem, extension)``.

    A name without a dot has an empty extension. Unlike :attr:`PurePath.suffix`
    a leading dot counts, so ``".svg"`` splits into ``("", "svg")``.
    """

    stem, dot, extension = file_name.rpartition(".")
    if not dot:
        return file_name, ""
    return stem, extension


def is_svg(file_name: str) -> bool:
    return split_name(file_name)[1] == SVG_EXTENSION


def is_valid_file_name(file_name: str) -> bool:
    """Return ``True`` for names made of ``[A-Za-z0-9_]`` followed by ``.svg``."""

    return _VALID_FILE_NAME.fullmatch(file_name) is not None


def icon_name(file_name: str) -> str:
    return split_name(file_name)[0]


def imageset_name(name: str) -> str:
    return f"{name}{IMAGESET_SUFFIX}"

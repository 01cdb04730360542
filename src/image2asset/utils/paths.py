"""Path utility helpers."""
from __future__ import annotations

from pathlib import Path, PurePath


def normalise_path(path: Path) -> Path:
    """Return an absolute path with ``~`` expanded and separators unified."""

    return Path(str(path).replace("\\", "/")).expanduser().resolve()


def is_within(path: Path, root: Path) -> bool:
    """Return ``True`` if ``path`` is ``root`` or lies underneath it."""

    try:
        PurePath(path).relative_to(root)
    except ValueError:
        return False
    return True

"""Build an Xcode asset catalog from a tree of SVG files."""
from __future__ import annotations

import os
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

from pydantic import ValidationError

from ..utils.config import BuildConfig
from ..utils.logging import get_logger
from ..utils.paths import is_within
from .errors import CatalogIOError, DirectoryNotFoundError, DuplicateIconNameError, InvalidFileNameError
from .naming import is_svg
from .schema import BuildSummary, Contents, ImageEntry

LOGGER = get_logger(__name__)
CONTENTS_FILENAME = "Contents.json"


@contextmanager
def _io(action: str, path: Path) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise CatalogIOError(f"Failed to {action} {path}: {exc}") from exc


class CatalogBuilder:
    """Turn every ``*.svg`` under ``config.input_path`` into an imageset.

    The catalog root is replaced on each build. Any error aborts the build
    and leaves the imagesets written so far in place.
    """

    def __init__(self, config: BuildConfig) -> None:
        self.config = config
        self._emitted: Dict[str, Path] = {}

    @property
    def input_path(self) -> Path:
        return self.config.input_path

    @property
    def catalog_path(self) -> Path:
        return self.config.catalog_path

    def check_input(self) -> None:
        if not self.input_path.is_dir():
            raise DirectoryNotFoundError(f"Directory not exists at '{self.input_path}'!")

    def prepare_output(self) -> Path:
        """Delete and recreate the catalog root."""

        catalog_path = self.catalog_path
        if catalog_path.exists() or catalog_path.is_symlink():
            LOGGER.info("Removing existing catalog at %s", catalog_path)
            with _io("remove", catalog_path):
                if catalog_path.is_dir() and not catalog_path.is_symlink():
                    shutil.rmtree(catalog_path)
                else:
                    catalog_path.unlink()
        with _io("create", catalog_path):
            catalog_path.mkdir(parents=True)
        self._emitted.clear()
        return catalog_path

    def enumerate_entries(self) -> Iterator[Path]:
        """Yield every file and directory below the input root, relative to it.

        Depth-first pre-order with names sorted inside each directory. The
        catalog root is left out when it lies inside the input tree.
        """

        yield from self._walk(self.input_path, Path())

    def _walk(self, directory: Path, relative: Path) -> Iterator[Path]:
        with _io("list", directory):
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda item: item.name)
        for entry in entries:
            path = Path(entry.path)
            if is_within(path, self.catalog_path):
                continue
            rel_path = relative / entry.name
            yield rel_path
            if entry.is_dir(follow_symlinks=False):
                yield from self._walk(path, rel_path)

    def handle(self, source_file: Path) -> bool:
        """Emit the imageset for ``source_file``; return ``False`` if it was skipped."""

        return self._handle(source_file) is not None

    def _handle(self, source_file: Path) -> Optional[ImageEntry]:
        source_path = self.input_path / source_file
        if not is_svg(source_file.name) or source_path.is_dir():
            LOGGER.debug("Skipping %s", source_file)
            return None

        try:
            entry = ImageEntry.from_source(source_file)
        except ValidationError as exc:
            raise InvalidFileNameError(f"File name illegal for '{source_file.name}'!") from exc

        key = entry.icon_name.casefold()
        previous = self._emitted.get(key)
        if previous is not None:
            raise DuplicateIconNameError(
                f"'{source_file}' and '{previous}' both map to {entry.imageset_name}"
            )
        self._emitted[key] = source_file

        LOGGER.debug("Handling %s", source_file)
        imageset_path = self.catalog_path / entry.imageset_name
        with _io("create", imageset_path):
            imageset_path.mkdir(parents=True, exist_ok=True)

        contents_path = imageset_path / CONTENTS_FILENAME
        with _io("write", contents_path):
            if contents_path.exists():
                contents_path.unlink()
            contents_path.write_text(Contents.for_file(entry.file_name).to_json(), encoding="utf-8")

        target_path = imageset_path / entry.file_name
        with _io("copy", source_path):
            if target_path.exists():
                raise FileExistsError(f"{target_path} already exists")
            shutil.copy2(source_path, target_path)
        return entry

    def build(self) -> BuildSummary:
        self.check_input()
        summary = BuildSummary(catalog_path=self.prepare_output())

        LOGGER.info("Enumerating image files under %s", self.input_path)
        for source_file in self.enumerate_entries():
            entry = self._handle(source_file)
            if entry is None:
                summary.skipped += 1
                continue
            summary.handled += 1
            summary.imagesets.append(entry.imageset_name)
        LOGGER.debug("%d entries skipped", summary.skipped)
        return summary


def build_catalog(config: BuildConfig) -> BuildSummary:
    """Convenience wrapper running a single :class:`CatalogBuilder` build."""

    return CatalogBuilder(config).build()

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict

import pytest

SVG_BODY = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"/>\n'


@pytest.fixture(autouse=True)
def _configure_test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """Return a factory writing ``{relative path: text}`` under ``tmp_path / "in"``."""

    def _make(files: Dict[str, str]) -> Path:
        root = tmp_path / "in"
        root.mkdir(exist_ok=True)
        for rel_path, text in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make


def snapshot(root: Path) -> Dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }

from __future__ import annotations

import pytest

from image2asset.catalog.naming import icon_name, imageset_name, is_svg, is_valid_file_name, split_name


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("icon.svg", ("icon", "svg")),
        ("archive.tar.gz", ("archive.tar", "gz")),
        ("Makefile", ("Makefile", "")),
        (".svg", ("", "svg")),
    ],
)
def test_split_name(file_name: str, expected: tuple) -> None:
    assert split_name(file_name) == expected


@pytest.mark.parametrize("file_name", ["a.svg", "Icon_24.svg", "___.svg", "0.svg"])
def test_valid_file_names(file_name: str) -> None:
    assert is_valid_file_name(file_name)


@pytest.mark.parametrize(
    "file_name",
    ["bad name.svg", ".svg", "a.b.svg", "a-b.svg", "ä.svg", "a.SVG", "a.svg\n", "a.svgz"],
)
def test_invalid_file_names(file_name: str) -> None:
    assert not is_valid_file_name(file_name)


def test_extension_check_is_case_sensitive() -> None:
    assert is_svg("logo.svg")
    assert not is_svg("logo.SVG")
    assert not is_svg("svg")


def test_icon_and_imageset_names() -> None:
    assert icon_name("arrow_left.svg") == "arrow_left"
    assert imageset_name("arrow_left") == "arrow_left.imageset"

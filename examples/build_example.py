"""Example script showing how to build a catalog programmatically."""
from __future__ import annotations

from pathlib import Path

from image2asset.catalog import CatalogBuilder
from image2asset.utils import BuildConfig, configure_logging


def main() -> None:
    configure_logging(verbose=True)
    config = BuildConfig(input_path=Path("icons"), output_path=Path("build"))
    summary = CatalogBuilder(config).build()
    print(summary.model_dump_json(indent=2))


if __name__ == "__main__":
    main()

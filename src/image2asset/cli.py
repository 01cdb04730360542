"""Typer-based command line interface for image2asset."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console

from .catalog import CatalogBuilder, CatalogError
from .utils.config import load_config
from .utils.logging import configure_logging

app = typer.Typer(add_completion=False, help="CLI tool to make svg image files into asset catalog.")
console = Console(highlight=False)


@app.command()
def build(
    input_path: Optional[Path] = typer.Option(None, "--input", "-i", help="Images directory to read."),
    output_path: Optional[Path] = typer.Option(None, "--output", "-o", help="A path to save asset catalog file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print all info while execute."),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with default options."),
) -> None:
    if config_path is not None and not config_path.exists():
        raise typer.BadParameter(f"Config {config_path} not found", param_hint="--config")
    try:
        config = load_config(
            config_path,
            input_path=input_path,
            output_path=output_path,
            verbose=verbose or None,
        )
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(config.verbose)
    console.print("👋🏻 Gonna transform all image files into single asset catalog.", markup=False)
    if config.verbose:
        console.print(f"Input: {config.input_path}\nOutput: {config.catalog_path}", markup=False)

    try:
        summary = CatalogBuilder(config).build()
    except CatalogError as exc:
        typer.echo(f"🛑 {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"✅ {summary.handled} files handled.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()

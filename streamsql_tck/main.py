from __future__ import annotations

import sys
from typing import Optional

import typer

from streamsql_tck.catalog import available_catalogs, get_catalog, get_script
from streamsql_tck.config import get_settings
from streamsql_tck.reporter import print_script
from streamsql_tck.utils.logging import configure_logging

app = typer.Typer(help="Streaming SQL TCK fixture catalogs.")


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"log_level={settings.log_level} json_logs={settings.json_logs} "
        f"default_catalog={settings.default_catalog} | "
        f"catalogs={', '.join(available_catalogs())}"
    )


@app.command("list")
def list_scripts(
    catalog: Optional[str] = typer.Option(
        None,
        "--catalog",
        "-c",
        help="Only list scripts of this catalog.",
    ),
) -> None:
    """
    List catalogs and the scripts they contain.
    """
    names = [catalog] if catalog else available_catalogs()
    for name in names:
        try:
            scripts = get_catalog(name)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--catalog") from exc
        typer.echo(f"{name}: {', '.join(scripts)}")


@app.command()
def show(
    script: str = typer.Argument(..., help="Script name, e.g. select_where."),
    catalog: Optional[str] = typer.Option(
        None,
        "--catalog",
        "-c",
        help="Catalog holding the script (default from settings).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Dump the script as JSON."),
) -> None:
    """
    Render one script as tables, or as JSON with --json.
    """
    catalog_name = catalog or get_settings().default_catalog
    try:
        found = get_script(catalog_name, script)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc

    if as_json:
        typer.echo(found.model_dump_json(indent=2))
        return
    print_script(found, title=f"{catalog_name}/{script}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()

"""CLI entry point: renders the status-code catalogue and prints it once."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.table_renderer import render
from core.catalogue import entries
from core.config import AppSettings

app = typer.Typer(add_completion=False, help="Print the HTTP status code reference table.")

_err_console = Console(stderr=True)


def _color_enabled() -> bool:
    # Rich resolves the NO_COLOR convention when the console is built.
    return not Console().no_color


def _write_stdout(text: str) -> None:
    # click strips ANSI codes when stdout is not a terminal (pipes, files).
    typer.echo(text, nl=False)


@app.command()
def show() -> None:
    """Print every known HTTP status code with its description."""

    text = render(entries(), settings=AppSettings(), color=_color_enabled())
    try:
        _write_stdout(text)
    except OSError as exc:
        _err_console.print(f"[red]Error:[/red] could not write to stdout ({exc})")
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()

"""CLI for formatting OctoPrint monitor values."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from octoprint_format.exceptions import InvalidNumberError, InvalidPayloadError

app = typer.Typer(help="OctoPrint monitor formatting helpers.")
console = Console()


def _read_json_file(path: Path) -> str:
    """Read a UTF-8 text file, turning missing or undecodable files into usage errors."""
    if not path.is_file():
        raise typer.BadParameter(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8: {exc}") from exc


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


@app.command()
def duration(
    seconds: str = typer.Argument(..., help="Duration in seconds"),
) -> None:
    """Print a compact duration label (e.g. '1h 1m')."""
    from octoprint_format.formatting import format_duration

    try:
        label = format_duration(seconds)
    except InvalidNumberError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(label)


@app.command("round")
def round_cmd(
    value: str = typer.Argument(..., help="Number to round"),
    decimals: int = typer.Option(1, "--decimals", "-d", min=0, help="Decimal places"),
) -> None:
    """Round a number half away from zero."""
    from octoprint_format.values import round_decimal

    try:
        result = round_decimal(value, decimals)
    except InvalidNumberError as exc:
        raise typer.BadParameter(str(exc)) from exc
    console.print(f"{result:.{decimals}f}")


@app.command("check-json")
def check_json(
    text: Optional[str] = typer.Argument(None, help="JSON text (reads stdin when omitted)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read JSON from a file"),
) -> None:
    """Check that a string is valid JSON. Exits 1 when it is not."""
    from octoprint_format.jsoncheck import is_valid_json

    if file is not None:
        text = _read_json_file(file)
    elif text is None:
        text = sys.stdin.read()

    if is_valid_json(text):
        console.print("[bold green]valid[/]")
        return
    console.print("[bold red]invalid[/]")
    raise typer.Exit(code=1)


@app.command()
def job(
    path: Path = typer.Argument(..., help="Saved /api/job response (JSON file)"),
    decimals: int = typer.Option(1, "--decimals", "-d", min=0, help="Progress decimal places"),
    placeholder: str = typer.Option("-", "--placeholder", help="Shown for missing text values"),
) -> None:
    """Show a job status payload the way the widget displays it."""
    from octoprint_format.config import DisplayConfig
    from octoprint_format.job import summarize_job

    text = _read_json_file(path)
    try:
        payload = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise typer.BadParameter(f"Invalid JSON in {path}: {exc}") from exc

    config = DisplayConfig(progress_decimals=decimals, placeholder=placeholder)
    try:
        summary = summarize_job(payload, config)
    except (InvalidPayloadError, InvalidNumberError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("field", style="dim")
    table.add_column("value")
    table.add_row("File", summary.file_name)
    table.add_row("State", summary.state)
    table.add_row("Progress", f"{summary.progress:.{decimals}f}%")
    table.add_row("Elapsed", summary.elapsed)
    table.add_row("Remaining", summary.remaining)
    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()

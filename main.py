"""collext – CLI entry point."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from collext.config import get_settings
from collext.keys import camelize_keys, snake_case_keys
from collext.truncate import truncate as truncate_text
from collext.values import clear_defaults, has_values, omit_private_fields
from collext.words import latin_words, words as tokenize

load_dotenv()

app = typer.Typer(
    name="collext",
    help="Truncate text, split words and clean up JSON objects.",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    """Configure logging for every command."""
    level = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_json(raw: str, what: str = "input") -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        console.print(f"[red]Invalid JSON {what}: {exc}[/red]")
        raise typer.Exit(code=1)


@app.command()
def truncate(
    text: str = typer.Argument(..., help="Text to shorten."),
    limit: int = typer.Option(..., "--limit", "-l", help="Maximum length before the ellipsis."),
    by_word: bool = typer.Option(False, "--by-word", "-w", help="Only cut on whitespace."),
) -> None:
    """Shorten TEXT to LIMIT characters, adding an ellipsis when cut."""
    console.print(truncate_text(text, limit, by_word=by_word), markup=False, highlight=False, soft_wrap=True)


@app.command()
def words(
    text: str = typer.Argument(..., help="Text to split."),
    latin: bool = typer.Option(False, "--latin", help="Only recognise Latin letters."),
) -> None:
    """Split TEXT into words, one per row."""
    tokens = latin_words(text) if latin else tokenize(text)
    if not tokens:
        console.print("[yellow]No words found.[/yellow]")
        return

    table = Table(title="Words")
    table.add_column("#", justify="right", style="magenta")
    table.add_column("Word", style="cyan")
    for index, token in enumerate(tokens, start=1):
        table.add_row(str(index), token)
    console.print(table)


@app.command("has-values")
def has_values_cmd(
    data: str = typer.Argument(..., help="JSON document to inspect."),
) -> None:
    """Report whether DATA holds any non-null value. Exits 1 when it does not."""
    if has_values(_load_json(data)):
        console.print("[green]yes[/green]")
    else:
        console.print("[red]no[/red]")
        raise typer.Exit(code=1)


@app.command("convert-keys")
def convert_keys(
    data: str = typer.Argument(..., help="JSON document whose keys are renamed."),
    to: str = typer.Option("camel", "--to", help="Target style: camel or snake."),
) -> None:
    """Rename every key in DATA to camelCase or snake_case."""
    converters = {"camel": camelize_keys, "snake": snake_case_keys}
    if to not in converters:
        console.print(f"[red]Unknown style '{to}', expected one of: {', '.join(converters)}[/red]")
        raise typer.Exit(code=1)
    console.print_json(data=converters[to](_load_json(data)))


@app.command("omit-private")
def omit_private(
    data: str = typer.Argument(..., help="JSON document to clean."),
    prefix: Optional[list[str]] = typer.Option(None, "--prefix", "-p", help="Private key prefix (repeatable)."),
) -> None:
    """Strip keys starting with a private prefix ($ and _ by default)."""
    obj = _load_json(data)
    result = omit_private_fields(obj, prefix) if prefix else omit_private_fields(obj)
    console.print_json(data=result)


@app.command("clear-defaults")
def clear_defaults_cmd(
    data: str = typer.Argument(..., help="JSON object to clean."),
    defaults: Optional[str] = typer.Option(None, "--defaults", "-d", help="JSON object of default values."),
) -> None:
    """Drop private, empty and default-valued fields from DATA."""
    obj = _load_json(data)
    if not isinstance(obj, dict):
        console.print("[red]Input must be a JSON object.[/red]")
        raise typer.Exit(code=1)
    default_values = _load_json(defaults, "defaults") if defaults else None
    console.print_json(data=clear_defaults(obj, default_values))


if __name__ == "__main__":
    app()

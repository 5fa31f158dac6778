"""
Command line inspection of attribute values.

Commands:
- hxattrs trigger "<value>": Show the parsed trigger clauses
- hxattrs swap "<value>": Show the parsed swap options
- hxattrs sync "<value>": Show the parsed sync strategy

Each command prints JSON with ``--json``. A parse error prints the caret
snippet to stderr and exits with code 1.
"""

from __future__ import annotations

import json
import logging
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hxattrs import __version__
from hxattrs.config import DEFAULT_CONFIG, ParserConfig, load_config
from hxattrs.errors import ParseError
from hxattrs.ir import SwapOptions, SyncStrategy
from hxattrs.trigger_parser import parse_trigger

app = typer.Typer(
    help="Parse and inspect hypermedia trigger, swap and sync attributes",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

_T = TypeVar("_T")

_state: dict[str, ParserConfig] = {"config": DEFAULT_CONFIG}


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"hxattrs {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    config: Path | None = typer.Option(  # noqa: B008
        None,
        "--config",
        "-c",
        help="pyproject.toml or hxattrs.toml with parser defaults",
    ),
    version: bool = typer.Option(  # noqa: B008
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Parse and inspect hypermedia attributes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    if config is not None:
        try:
            _state["config"] = load_config(config)
        except (ValidationError, tomllib.TOMLDecodeError) as e:
            err_console.print(
                f"[red]Invalid config {escape(str(config))}:[/red] {escape(str(e))}",
                highlight=False,
            )
            raise typer.Exit(code=1)
    else:
        _state["config"] = DEFAULT_CONFIG


def _run(parse: Callable[[], _T]) -> _T:
    try:
        return parse()
    except ParseError as e:
        err_console.print(f"[red]Parse error[/red] at {escape(str(e))}", highlight=False)
        raise typer.Exit(code=1)


def _dump(model: BaseModel | list[Any]) -> str:
    if isinstance(model, list):
        return json.dumps([m.model_dump(mode="json") for m in model], indent=2)
    return model.model_dump_json(indent=2)


@app.command(name="trigger")
def trigger_cmd(
    value: str = typer.Argument(..., help="Trigger attribute value"),
    as_json: bool = typer.Option(False, "--json", help="Print the AST as JSON"),
) -> None:
    """Show the clauses of a trigger attribute."""
    triggers = _run(lambda: parse_trigger(value))
    if as_json:
        typer.echo(_dump(triggers))
        return

    table = Table(title="Triggers")
    table.add_column("#", justify="right")
    table.add_column("Event", style="cyan")
    table.add_column("Poll (ms)", justify="right")
    table.add_column("Modifiers")
    for i, trigger in enumerate(triggers, 1):
        poll = "" if trigger.poll_interval is None else str(trigger.poll_interval)
        mods = " ".join(str(m) for m in trigger.modifiers)
        table.add_row(str(i), trigger.event_name, poll, mods)
    console.print(table)


@app.command(name="swap")
def swap_cmd(
    value: str = typer.Argument(..., help="Swap attribute value"),
    as_json: bool = typer.Option(False, "--json", help="Print the AST as JSON"),
) -> None:
    """Show the options of a swap attribute."""
    options = _run(lambda: SwapOptions.parse(value, _state["config"]))
    if as_json:
        typer.echo(_dump(options))
        return

    table = Table(title="Swap options")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, field_value in options.model_dump(mode="json").items():
        table.add_row(field, str(field_value))
    console.print(table)


@app.command(name="sync")
def sync_cmd(
    value: str = typer.Argument(..., help="Sync attribute value"),
    as_json: bool = typer.Option(False, "--json", help="Print the AST as JSON"),
) -> None:
    """Show the strategy of a sync attribute."""
    strategy = _run(lambda: SyncStrategy.parse(value))
    if as_json:
        typer.echo(_dump(strategy))
        return
    console.print(f"[cyan]{strategy.kind}[/cyan]" + (f" ({strategy.mode})" if strategy.mode else ""))


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()

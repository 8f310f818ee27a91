"""Helpers shared by CLI commands."""

import json
from typing import Any, Callable

import click
from rich.console import Console

from ..client import ElasticAPI
from ..client.results import EMPTY_BODY, Error, Ok, Result, TransportError
from ..client.retry import call_with_retries

console = Console()


def make_api() -> ElasticAPI:
    """API client configured from the environment."""
    return ElasticAPI()


def run(fn: Callable[[], Result]) -> Result:
    """Call ``fn`` with the retry count given to the top-level group."""
    ctx = click.get_current_context()
    retries = (ctx.find_root().obj or {}).get("retries", 0)
    return call_with_retries(fn, attempts=retries + 1)


def parse_json(value: str | None) -> Any:
    """Parse a JSON command argument, or None if not given."""
    if not value:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"Invalid JSON: {e}")


def show_result(result: Result) -> Any:
    """Print a result. Aborts with a non-zero exit code unless it is ``Ok``."""
    if isinstance(result, Ok):
        if result.body == EMPTY_BODY:
            console.print(f"[green]OK[/green] (HTTP {result.status_code})")
        else:
            console.print_json(json.dumps(result.body))
        return result.body

    if isinstance(result, TransportError):
        console.print(f"[red]Transport error:[/red] {result.message}")
    elif isinstance(result, Error):
        console.print(f"[red]HTTP {result.status_code}:[/red] {json.dumps(result.body)}")
    raise click.Abort()

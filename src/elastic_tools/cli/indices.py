"""Index management commands."""

import click

from .common import console, make_api, parse_json, run, show_result


@click.group()
def index():
    """Manage indices (names get the configured prefix and environment)."""
    pass


@index.command("create")
@click.argument("name")
@click.option("--params", "-p", "params_json", help="Settings/mappings as JSON")
def create_index(name: str, params_json: str | None):
    """Create an index."""
    params = parse_json(params_json)
    with make_api() as api:
        show_result(run(lambda: api.indices.create(name, params)))


@index.command("delete")
@click.argument("name")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
def delete_index(name: str, yes: bool):
    """Delete an index."""
    with make_api() as api:
        if not yes:
            click.confirm(f"Delete index '{api.indices.name(name)}'?", abort=True)
        show_result(run(lambda: api.indices.delete(name)))


@index.command("refresh")
@click.argument("name")
def refresh_index(name: str):
    """Refresh an index."""
    with make_api() as api:
        show_result(run(lambda: api.indices.refresh(name)))


@index.command("open")
@click.argument("name")
def open_index(name: str):
    """Open a closed index."""
    with make_api() as api:
        show_result(run(lambda: api.indices.open(name)))


@index.command("close")
@click.argument("name")
def close_index(name: str):
    """Close an index."""
    with make_api() as api:
        show_result(run(lambda: api.indices.close(name)))


@index.command("exists")
@click.argument("name")
def index_exists(name: str):
    """Check if an index exists (exit code 1 if not)."""
    with make_api() as api:
        full_name = api.indices.name(name)
        if api.indices.exists(name):
            console.print(f"[green]{full_name} exists[/green]")
            return
        console.print(f"[yellow]{full_name} does not exist[/yellow]")
        raise SystemExit(1)

"""Bulk command."""

from pathlib import Path

import click

from .common import console, make_api, run, show_result


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def bulk(path: Path):
    """Send an NDJSON file of action/data lines to _bulk.

    Index names in the file are used as written.
    """
    body = path.read_text(encoding="utf-8").rstrip("\n")

    with make_api() as api:
        result = run(lambda: api.http.bulk(body))
        response = show_result(result)

        if isinstance(response, dict) and response.get("errors"):
            failed = [
                item for item in response.get("items", [])
                if next(iter(item.values()), {}).get("error")
            ]
            console.print(f"[red]{len(failed)} item(s) failed[/red]")
            raise click.Abort()

"""Search and count commands."""

import json

import click
from rich.table import Table

from ..client.indices import build_query
from ..client.results import Ok
from .common import console, make_api, parse_json, run, show_result


@click.command()
@click.argument("index")
@click.argument("query_json", required=False)
@click.option("--json", "as_json", is_flag=True, help="Output the raw response as JSON")
def search(index: str, query_json: str | None, as_json: bool):
    """Search an index. QUERY_JSON is a search body, e.g. '{"query": {"match_all": {}}}'."""
    query = build_query(index, parse_json(query_json))

    with make_api() as api:
        result = run(lambda: api.indices.search(query))

        if as_json or not isinstance(result, Ok) or not isinstance(result.body, dict):
            show_result(result)
            return

        hits = result.body.get("hits", {}).get("hits", [])
        if not hits:
            console.print("[yellow]No results found.[/yellow]")
            return

        table = Table(title=f"{len(hits)} hits in {api.indices.name(index)}")
        table.add_column("ID", style="cyan", max_width=36)
        table.add_column("Score", justify="right")
        table.add_column("Source")

        for hit in hits:
            score = hit.get("_score")
            table.add_row(
                str(hit.get("_id", "")),
                f"{score:.3f}" if isinstance(score, (int, float)) else "-",
                json.dumps(hit.get("_source", {}))[:120],
            )

        console.print(table)


@click.command()
@click.argument("index")
@click.argument("query_json", required=False)
def count(index: str, query_json: str | None):
    """Count documents in an index, optionally matching a query."""
    query = build_query(index, parse_json(query_json))

    with make_api() as api:
        result = run(lambda: api.indices.count(query))

        if isinstance(result, Ok) and isinstance(result.body, dict) and "count" in result.body:
            console.print(f"[bold]{result.body['count']}[/bold]")
            return
        show_result(result)

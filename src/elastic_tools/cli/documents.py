"""Document commands."""

import click

from .common import make_api, parse_json, run, show_result


@click.group()
def doc():
    """Manage single documents."""
    pass


@doc.command("get")
@click.argument("index")
@click.argument("doc_type")
@click.argument("doc_id")
def get_document(index: str, doc_type: str, doc_id: str):
    """Get a document."""
    with make_api() as api:
        show_result(run(lambda: api.documents.get(index, doc_type, doc_id)))


@doc.command("put")
@click.argument("index")
@click.argument("doc_type")
@click.argument("data_json")
@click.option("--id", "doc_id", help="Document ID (the store assigns one if omitted)")
def put_document(index: str, doc_type: str, data_json: str, doc_id: str | None):
    """Index a document given as JSON."""
    data = parse_json(data_json)
    with make_api() as api:
        show_result(run(lambda: api.documents.index(index, doc_type, doc_id, data)))


@doc.command("delete")
@click.argument("index")
@click.argument("doc_type")
@click.argument("doc_id")
def delete_document(index: str, doc_type: str, doc_id: str):
    """Delete a document."""
    with make_api() as api:
        show_result(run(lambda: api.documents.delete(index, doc_type, doc_id)))

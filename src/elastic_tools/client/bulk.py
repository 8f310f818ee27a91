"""Bulk create, index and update.

Builds the newline-delimited action/data body the ``_bulk`` endpoint expects:

    {"index": {"_index": "answer", "_type": "answer", "_id": "1"}}
    {"text": "I like using Elastic Search"}
"""

import json
from typing import Any, Iterable

from .http import ElasticHTTP
from .indices import Indices
from .results import Result

# (fully qualified index, document type, id, data)
BulkEntry = tuple[str, str, Any, Any]


def action_line(action: str, index: str, doc_type: str, id: Any) -> str:
    """Encode the action line for one document. ``id`` may be None."""
    meta: dict[str, Any] = {"_index": index, "_type": doc_type}
    if id is not None:
        meta["_id"] = str(id)
    return json.dumps({action: meta})


def bulk_body(action: str, entries: Iterable[BulkEntry]) -> str:
    """Encode entries as NDJSON action/data pairs (no trailing newline)."""
    lines = []
    for index, doc_type, id, data in entries:
        if action == "update":
            data = {"doc": data}
        lines.append(action_line(action, index, doc_type, id))
        lines.append(json.dumps(data))
    return "\n".join(lines)


class Bulk:
    """Bulk operations for one or many documents.

    ``create``/``index``/``update`` take a logical index and an iterable of
    ``(id, data)`` pairs. The ``*_raw`` variants take prepared
    ``(index, type, id, data)`` tuples and use index names verbatim.

    Example:
        bulk.index("answer", "answer", [(1, {"text": "hi"}), (2, {"text": "yo"})])
    """

    def __init__(self, http: ElasticHTTP):
        self.http = http
        self._indices = Indices(http)

    def _entries(self, index: str, doc_type: str, docs: Iterable[tuple[Any, Any]]):
        name = self._indices.name(index)
        return [(name, doc_type, id, data) for id, data in docs]

    def create(self, index: str, doc_type: str, docs: Iterable[tuple[Any, Any]]) -> Result:
        """Create documents, failing per item when an id already exists."""
        return self.create_raw(self._entries(index, doc_type, docs))

    def index(self, index: str, doc_type: str, docs: Iterable[tuple[Any, Any]]) -> Result:
        """Create or replace documents."""
        return self.index_raw(self._entries(index, doc_type, docs))

    def update(self, index: str, doc_type: str, docs: Iterable[tuple[Any, Any]]) -> Result:
        """Partially update existing documents."""
        return self.update_raw(self._entries(index, doc_type, docs))

    def create_raw(self, entries: Iterable[BulkEntry]) -> Result:
        return self.http.bulk(bulk_body("create", entries))

    def index_raw(self, entries: Iterable[BulkEntry]) -> Result:
        return self.http.bulk(bulk_body("index", entries))

    def update_raw(self, entries: Iterable[BulkEntry]) -> Result:
        return self.http.bulk(bulk_body("update", entries))

"""Document-level operations against a named index and document type."""

from typing import Any
from urllib.parse import quote

from .http import ElasticHTTP
from .indices import Indices
from .results import Result

DocumentId = str | int


class Documents:
    """Index, fetch and delete single documents.

    Index names are logical and go through the configured prefix and
    environment tag, exactly as ``Indices`` does.
    """

    def __init__(self, http: ElasticHTTP):
        self.http = http
        self._indices = Indices(http)

    def path(self, index: str, doc_type: str, id: DocumentId | None = None) -> str:
        """URL of a document, or of its type collection when ``id`` is None."""
        path = f"{self._indices.name(index)}/{doc_type}"
        if id is not None:
            path = f"{path}/{quote(str(id), safe='')}"
        return self._indices.url(path)

    def index(self, index: str, doc_type: str, id: DocumentId | None, data: Any) -> Result:
        """Store a document.

        With an id the document is PUT at that id; without one it is POSTed and
        the store assigns the id.
        """
        if id is None:
            return self.http.post(self.path(index, doc_type), body=data)
        return self.http.put(self.path(index, doc_type, id), body=data)

    def update(self, index: str, doc_type: str, id: DocumentId, data: Any) -> Result:
        """Replace a document. Same wire call as ``index``."""
        return self.index(index, doc_type, id, data)

    def get(self, index: str, doc_type: str, id: DocumentId) -> Result:
        return self.http.get(self.path(index, doc_type, id))

    def delete(self, index: str, doc_type: str, id: DocumentId) -> Result:
        return self.http.delete(self.path(index, doc_type, id))

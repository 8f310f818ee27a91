"""The Document API: index/get/search/count pre-wired to one record type.

It takes away the repetition of working with one index. Given a record type:

    class Answer(ElasticDocument):
        doc_type: ClassVar[str] = "answer"
        index_name: ClassVar[str] = "answer"

        text: str = ""

    answers = DocumentAPI(Answer)

Index a new answer (or pass None as the id to let the store pick one):

    answers.index(1, {"text": "This is an answer"})

Every operation takes an optional index as its last argument, overriding the
record type's index for that call:

    answers.index(1, {"text": "This is an answer"}, "explicit_named_index")

Search returns records:

    answers.search({"query": {"match": {"text": "answer"}}})
    # [Answer(id="1", text="This is an answer"), ...]

and ``raw_search`` returns the unprojected result. ``get``/``raw_get``
and ``count``/``raw_count`` work the same way. ``update`` is an alias of
``index``.
"""

import logging
from typing import Any, Generic, TypeVar

from ..client.documents import DocumentId, Documents
from ..client.exceptions import UnexpectedResultError
from ..client.factory import get_default_http
from ..client.http import ElasticHTTP
from ..client.indices import Indices, Query, build_query
from ..client.results import NO_STATUS, Error, Ok, Result, TransportError
from .record import DocumentRecord

logger = logging.getLogger("elastic-tools")

T = TypeVar("T", bound=DocumentRecord)


class _NotFound:
    """Marker returned by ``DocumentAPI.get`` for a missing document."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


def _hits(body: Any) -> list | None:
    if not isinstance(body, dict):
        return None
    hits = body.get("hits")
    if not isinstance(hits, dict):
        return None
    inner = hits.get("hits")
    return inner if isinstance(inner, list) else None


class DocumentAPI(Generic[T]):
    """Document operations for one record type.

    Args:
        record_type: A type implementing ``DocumentRecord``
        http: Request pipeline (defaults to the process-wide one)
    """

    def __init__(self, record_type: type[T], http: ElasticHTTP | None = None):
        self.record_type = record_type
        self.http = http or get_default_http()
        self.documents = Documents(self.http)
        self.indices = Indices(self.http)

    @property
    def doc_type(self) -> str:
        return self.record_type.doc_type

    def es_index(self) -> str:
        """The record type's logical index."""
        return self.record_type.es_index()

    def _resolve(self, index: str | None) -> str:
        return self.es_index() if index is None else index

    def into_record(self, hit: dict[str, Any]) -> T:
        """Project one hit (``{"_id": ..., "_source": {...}}``) into a record."""
        return self.record_type.from_hit(hit["_id"], hit.get("_source") or {})

    def index(self, id: DocumentId | None, data: Any, index: str | None = None) -> Result:
        return self.documents.index(self._resolve(index), self.doc_type, id, data)

    def update(self, id: DocumentId, data: Any, index: str | None = None) -> Result:
        return self.documents.update(self._resolve(index), self.doc_type, id, data)

    def raw_get(self, id: DocumentId, index: str | None = None) -> Result:
        return self.documents.get(self._resolve(index), self.doc_type, id)

    def get(self, id: DocumentId, index: str | None = None) -> T | _NotFound | Result:
        """Fetch one document as a record.

        Returns:
            The record for a found document, ``NOT_FOUND`` for a 404 with
            ``found: false``, and the raw result for anything else.
        """
        result = self.raw_get(id, index)
        body = result.body
        if isinstance(result, Ok) and result.status_code == 200 and isinstance(body, dict):
            if isinstance(body.get("_source"), dict) and "_id" in body:
                return self.into_record(body)
        if isinstance(result, Error) and result.status_code == 404 and isinstance(body, dict):
            if body.get("found") is False:
                return NOT_FOUND
        return result

    def delete(self, id: DocumentId, index: str | None = None) -> Result:
        return self.documents.delete(self._resolve(index), self.doc_type, id)

    def search_query(self, query: Any, index: str | None = None) -> Query:
        return build_query(self._resolve(index), query)

    def raw_search(self, query: Any, index: str | None = None) -> Result:
        return self.indices.search(self.search_query(query, index))

    def search(self, query: Any, index: str | None = None) -> list[T] | Error | TransportError:
        """Search and project every hit into a record.

        ``Error`` and ``TransportError`` results are returned unchanged. Any
        other response that is not a 200 with ``hits.hits`` comes back as a
        ``TransportError`` with reason ``"unexpected_response"``.
        """
        result = self.raw_search(query, index)
        if isinstance(result, (Error, TransportError)):
            return result

        hits = _hits(result.body) if result.status_code == 200 else None
        if hits is None:
            logger.warning(f"Unexpected search response from {self._resolve(index)}: {result!r}")
            return TransportError(
                NO_STATUS,
                f"unexpected search response (HTTP {result.status_code}): no hits.hits in body",
                "unexpected_response",
            )
        return [self.into_record(hit) for hit in hits]

    def raw_count(self, query: Any, index: str | None = None) -> Result:
        return self.indices.count(self.search_query(query, index))

    def count(self, query: Any, index: str | None = None) -> int:
        """Count matching documents.

        Raises:
            UnexpectedResultError: For anything but a 200 with a ``count``.
                This is a contract violation, not a recoverable error.
        """
        result = self.raw_count(query, index)
        if isinstance(result, Ok) and result.status_code == 200 and isinstance(result.body, dict):
            count = result.body.get("count")
            if isinstance(count, int):
                return count
        raise UnexpectedResultError("count expected Ok(200, {count})", result)

    def index_exists(self) -> bool:
        return self.indices.exists(self.es_index())

    def create_index(self, params: Any = None) -> Result:
        """Create the record type's index."""
        return self.indices.create(self.es_index(), params)

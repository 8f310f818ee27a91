"""Map record types onto an index and document type."""

from .api import NOT_FOUND, DocumentAPI
from .record import DocumentRecord, ElasticDocument

__all__ = [
    "DocumentAPI",
    "DocumentRecord",
    "ElasticDocument",
    "NOT_FOUND",
]

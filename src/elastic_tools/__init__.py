"""Elastic Tools - You know, for (Elastic) search. Client library and CLI."""

from elastic_tools.client import ElasticAPI as ElasticClient
from elastic_tools.client.config import ElasticConfig
from elastic_tools.client.exceptions import (
    ElasticAPIError,
    ElasticAuthError,
    ElasticConnectionError,
    ElasticError,
    ElasticNotFoundError,
    UnexpectedResultError,
)
from elastic_tools.client.results import Error, Ok, Result, TransportError
from elastic_tools.document import NOT_FOUND, DocumentAPI, ElasticDocument

try:
    from importlib.metadata import version
    __version__ = version("elastic-tools")
except Exception:
    __version__ = "0.1.0"  # Fallback for development

__all__ = [
    "DocumentAPI",
    "ElasticAPIError",
    "ElasticAuthError",
    "ElasticClient",
    "ElasticConfig",
    "ElasticConnectionError",
    "ElasticDocument",
    "ElasticError",
    "ElasticNotFoundError",
    "Error",
    "NOT_FOUND",
    "Ok",
    "Result",
    "TransportError",
    "UnexpectedResultError",
    "__version__",
]

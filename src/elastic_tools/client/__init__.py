"""Elasticsearch client.

This package provides a thin client for talking to an Elasticsearch (or
OpenSearch) store over HTTP/JSON. Every request returns one of three tagged
results instead of raising:

    Ok(status_code, body)
    Error(status_code, body)          status 400-599
    TransportError(0, message, ...)   no usable response

Requests can be signed for Amazon OpenSearch Service (SigV4) and/or use
basic auth, both configured through ElasticConfig.

Usage:
    from elastic_tools.client import ElasticAPI, ElasticConfig

    # Configure from environment (ELASTIC_* variables)
    es = ElasticAPI()
    es.indices.create("answer")

    # Low-level requests
    es.http.get("/answer/_search", body={"query": {"match_all": {}}})
"""

from .api import ElasticAPI
from .bulk import Bulk
from .config import ElasticConfig
from .documents import Documents
from .exceptions import (
    ElasticAPIError,
    ElasticAuthError,
    ElasticConnectionError,
    ElasticError,
    ElasticNotFoundError,
    UnexpectedResultError,
    raise_for_result,
)
from .factory import create_http, get_default_http
from .http import ElasticHTTP
from .indices import Indices, Query, build_query, index_name
from .results import Error, Ok, Result, TransportError
from .users import Users, is_valid_username

__all__ = [
    # Main API
    "ElasticAPI",
    "ElasticConfig",
    # Pipeline and factory
    "ElasticHTTP",
    "create_http",
    "get_default_http",
    # Results
    "Ok",
    "Error",
    "TransportError",
    "Result",
    # Operation groups
    "Indices",
    "Documents",
    "Bulk",
    "Users",
    "Query",
    "build_query",
    "index_name",
    "is_valid_username",
    # Exceptions
    "ElasticAPIError",
    "ElasticAuthError",
    "ElasticConnectionError",
    "ElasticError",
    "ElasticNotFoundError",
    "UnexpectedResultError",
    "raise_for_result",
]

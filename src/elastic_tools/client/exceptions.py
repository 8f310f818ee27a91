"""Custom exceptions for the Elasticsearch client.

Requests return tagged results rather than raising. These exceptions are for
callers that would rather raise (see ``raise_for_result``) and for contract
violations that are not recoverable.
"""

from typing import Any

from .results import Error, Ok, Result, TransportError


class ElasticError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code:
            return f"HTTP {self.status_code}: {self.message}"
        return self.message


class ElasticConnectionError(ElasticError):
    """Cannot reach the store, or its response could not be decoded."""
    pass


class ElasticAuthError(ElasticError):
    """Authentication failed (401/403)."""
    pass


class ElasticNotFoundError(ElasticError):
    """Index or document not found (404)."""
    pass


class ElasticAPIError(ElasticError):
    """Any other 4xx/5xx reported by the store."""
    pass


class UnexpectedResultError(ElasticError):
    """A result did not have the shape an operation requires.

    This is a contract violation, not a recoverable error.
    """

    def __init__(self, message: str, result: Result):
        super().__init__(message)
        self.result = result

    def __str__(self) -> str:
        return f"{self.message}: {self.result!r}"


def _error_message(body: Any) -> str:
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("reason") or error.get("type") or str(error)
        if error:
            return str(error)
    return str(body) if body else "no details"


def raise_for_result(result: Result) -> Any:
    """Return the body of an ``Ok`` result, raise for anything else.

    Raises:
        ElasticConnectionError: For transport errors
        ElasticAuthError: For 401/403
        ElasticNotFoundError: For 404
        ElasticAPIError: For other 4xx/5xx
    """
    if isinstance(result, Ok):
        return result.body
    if isinstance(result, TransportError):
        raise ElasticConnectionError(result.message)
    if isinstance(result, Error):
        message = _error_message(result.body)
        if result.status_code in (401, 403):
            raise ElasticAuthError(message, result.status_code)
        if result.status_code == 404:
            raise ElasticNotFoundError(message, result.status_code)
        raise ElasticAPIError(message, result.status_code)
    raise TypeError(f"Not a result: {result!r}")

"""Classification of transport outcomes into tagged results."""

import json
import logging
import socket

import httpx

from .results import EMPTY_BODY, NO_STATUS, Error, Ok, Result, TransportError

logger = logging.getLogger("elastic-tools")

_CONNECT_PREFIX = "Could not connect to Elasticsearch"

# reason tag -> human readable message
TRANSPORT_MESSAGES = {
    "connection_refused": f"{_CONNECT_PREFIX}: connection refused",
    "nxdomain": f"{_CONNECT_PREFIX}: could not resolve address",
    "connection_closed": f"{_CONNECT_PREFIX}: connection closed",
    "timeout": f"{_CONNECT_PREFIX}: request timed out",
}


def is_error_status(status_code: int) -> bool:
    """Check if a status code is an application error (400-599 inclusive)."""
    return 400 <= status_code <= 599


def decode_body(content: bytes | str):
    """Decode a response body as JSON.

    An empty body decodes to ``EMPTY_BODY``.

    Raises:
        ValueError: If the body is not valid JSON
    """
    if not content:
        return EMPTY_BODY
    return json.loads(content)


def process_response(response: httpx.Response) -> Result:
    """Turn an HTTP response into ``Ok`` or ``Error``.

    A body that is not valid JSON always yields a ``TransportError``, whatever
    the status code.
    """
    try:
        body = decode_body(response.content)
    except ValueError as e:
        logger.warning(f"Could not decode HTTP {response.status_code} response: {e}")
        return TransportError(NO_STATUS, f"decode failure: {e}", "decode")

    if is_error_status(response.status_code):
        return Error(response.status_code, body)
    return Ok(response.status_code, body)


def _chain(exception: BaseException):
    """Yield the exception and everything it was raised from."""
    seen = set()
    current: BaseException | None = exception
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def transport_reason(exception: BaseException) -> str | None:
    """Map a low-level failure to a known reason tag, or None if unknown."""
    if isinstance(exception, httpx.TimeoutException):
        return "timeout"
    for exc in _chain(exception):
        if isinstance(exc, socket.gaierror):
            return "nxdomain"
        if isinstance(exc, ConnectionRefusedError):
            return "connection_refused"
        if isinstance(exc, (ConnectionResetError, ConnectionAbortedError, BrokenPipeError)):
            return "connection_closed"
        if isinstance(exc, (httpx.RemoteProtocolError, httpx.ReadError, httpx.WriteError)):
            return "connection_closed"
        if isinstance(exc, TimeoutError):
            return "timeout"
    return None


def process_error(exception: Exception) -> TransportError:
    """Turn a transport exception into a ``TransportError``."""
    reason = transport_reason(exception)
    if reason is None:
        return TransportError(NO_STATUS, f"Could not connect: {exception!r}", "unknown")
    return TransportError(NO_STATUS, TRANSPORT_MESSAGES[reason], reason)


def classify(outcome: httpx.Response | Exception) -> Result:
    """Classify a transport outcome.

    Args:
        outcome: The response returned by the transport, or the exception
            it raised

    Returns:
        ``Ok``, ``Error`` or ``TransportError``
    """
    if isinstance(outcome, httpx.Response):
        return process_response(outcome)
    return process_error(outcome)

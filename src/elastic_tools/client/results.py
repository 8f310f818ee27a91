"""Tagged results returned by every request.

A request never raises for an HTTP error or a transport failure. It returns
one of three values instead:

    Ok(status_code, body)            any response outside 400-599
    Error(status_code, body)         400-599, body is the store's error detail
    TransportError(0, message, ...)  no usable HTTP response

Callers check which one they got:

    result = http.get("/answer/_doc/1")
    if isinstance(result, Ok):
        source = result.body["_source"]
    elif isinstance(result, Error) and result.status_code == 404:
        ...
    elif isinstance(result, TransportError):
        print(result.message)
"""

from dataclasses import dataclass, field
from typing import Any, Union

# Status code used when no HTTP response was received
NO_STATUS = 0

# Decoded value of an empty response body (HEAD requests, some DELETEs)
EMPTY_BODY = ""


@dataclass(frozen=True)
class Ok:
    """Transport success with a non-error status."""

    status_code: int
    body: Any = EMPTY_BODY

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Error:
    """HTTP-level application error (status 400-599)."""

    status_code: int
    body: Any = EMPTY_BODY

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class TransportError:
    """Failure before any usable HTTP response was obtained.

    ``reason`` is a short machine-readable tag such as ``"connection_refused"``,
    ``"timeout"`` or ``"decode"``.
    """

    status_code: int = NO_STATUS
    message: str = ""
    reason: str = field(default="unknown", compare=False)

    @property
    def ok(self) -> bool:
        return False

    @property
    def body(self) -> dict[str, str]:
        """Error detail in the same shape the store uses."""
        return {"error": self.message}


Result = Union[Ok, Error, TransportError]


def is_status(result: Result, status_code: int) -> bool:
    """Check if result is an ``Ok`` carrying exactly ``status_code``."""
    return isinstance(result, Ok) and result.status_code == status_code

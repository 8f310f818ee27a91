"""HTTP request pipeline.

This module implements the low-level API for talking to the store. Every
request goes through ``ElasticHTTP.request``, which encodes the body, merges
the URL against the configured base URL, forces the JSON content type,
signs the request when AWS signing is enabled, applies basic auth and the
timeout, and classifies whatever comes back.

For example:

    http = ElasticHTTP()
    http.get("/answer/_search", body={"query": {"match_all": {}}})

returns:

    Ok(200, {"took": 7, "timed_out": False, "hits": {...}})
"""

import json
import logging
import threading
from typing import Any, Mapping

import httpx

from .aws import maybe_sign, resolve_credentials
from .config import ElasticConfig
from .response import classify
from .results import Result

logger = logging.getLogger("elastic-tools")

METHODS = frozenset({"HEAD", "GET", "DELETE", "TRACE", "OPTIONS", "POST", "PUT", "PATCH"})

JSON_CONTENT_TYPE = "application/json"


def encode_body(body: Any) -> bytes:
    """Encode a request body.

    Text is passed through, a non-empty mapping or list is JSON-encoded, and
    anything else (None, empty containers) becomes an empty body.
    """
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    if isinstance(body, (Mapping, list, tuple)) and body:
        return json.dumps(body).encode("utf-8")
    return b""


class ElasticHTTP:
    """Request pipeline for the store.

    Holds an immutable configuration and a lazily created ``httpx.Client``,
    which owns connection pooling. Nothing call-specific is kept on the
    instance, so one instance can serve concurrent callers.

    Usage:
        http = ElasticHTTP(ElasticConfig(base_url="http://localhost:9200"))
        result = http.put("/answer/_doc/1", body={"text": "hi"})
        http.close()

    Or as context manager:
        with ElasticHTTP() as http:
            result = http.head("/answer")
    """

    def __init__(
        self,
        config: ElasticConfig | None = None,
        client: httpx.Client | None = None,
    ):
        """Initialize the pipeline.

        Args:
            config: Endpoint configuration. If None, loads from environment.
            client: Optional pre-configured httpx client (for testing/advanced use).
        """
        self.config = config or ElasticConfig()
        self.config.validate_config()
        self._client = client
        self._credentials = None
        self._lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize the HTTP client (once, even under concurrent first use)."""
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = httpx.Client(timeout=self.config.timeout)
        return self._client

    @property
    def credentials(self):
        """Lazy-resolve signing credentials (only used when signing is enabled)."""
        if self._credentials is None:
            with self._lock:
                if self._credentials is None:
                    self._credentials = resolve_credentials(self.config)
        return self._credentials

    def with_config(self, config: ElasticConfig) -> "ElasticHTTP":
        """Return a pipeline for another configuration sharing this client."""
        return ElasticHTTP(config, client=self._client)

    def __enter__(self) -> "ElasticHTTP":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - close client."""
        self.close()

    def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client:
            self._client.close()
            self._client = None

    def url(self, url: str | httpx.URL) -> str:
        """Merge a path or URL against the configured base URL.

        An absolute URL wins over the base URL. Any other path, with or without
        a leading slash, is appended to the base URL so a path prefix on the
        base (``http://proxy/es``) is kept.
        """
        target = httpx.URL(url)
        if target.is_absolute_url:
            return str(target)
        return str(httpx.URL(self.config.base_url + "/").join(str(target).lstrip("/")))

    def request(
        self,
        method: str,
        url: str | httpx.URL,
        *,
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        basic_auth: tuple[str, str] | None = None,
        timeout: float | None = None,
    ) -> Result:
        """Execute a request and classify the outcome.

        Args:
            method: One of HEAD, GET, DELETE, TRACE, OPTIONS, POST, PUT, PATCH
            url: Path (merged against the base URL) or absolute URL
            body: Mapping/list (JSON-encoded), str/bytes (sent as is) or None
            headers: Extra headers. Content-Type is always application/json.
            basic_auth: (username, password) overriding the configured pair
            timeout: Seconds, overriding the configured timeout

        Returns:
            ``Ok``, ``Error`` or ``TransportError``

        Raises:
            ValueError: If the method is not supported, or basic auth is
                passed while signing is enabled
        """
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")
        if basic_auth and self.config.signing_enabled:
            raise ValueError("basic_auth cannot be combined with AWS signing")

        content = encode_body(body)
        full_url = self.url(url)

        request_headers = httpx.Headers(headers or {})
        request_headers["Content-Type"] = JSON_CONTENT_TYPE
        if self.config.signing_enabled:
            request_headers = maybe_sign(
                self.config,
                request_headers,
                method,
                full_url,
                content,
                credentials=self.credentials,
            )

        auth = basic_auth or self.config.basic_auth
        request_timeout = timeout if timeout is not None else self.config.timeout

        logger.debug(f"{method} {full_url}")
        try:
            response = self.client.request(
                method,
                full_url,
                content=content,
                headers=request_headers,
                auth=auth,
                timeout=request_timeout,
            )
        except httpx.HTTPError as e:
            logger.warning(f"{method} {full_url} failed: {e!r}")
            return classify(e)

        logger.debug(f"{method} {full_url} -> {response.status_code}")
        return classify(response)

    def get(self, url: str, **options) -> Result:
        """Execute GET request. GET may carry a body (search, count)."""
        return self.request("GET", url, **options)

    def post(self, url: str, **options) -> Result:
        """Execute POST request."""
        return self.request("POST", url, **options)

    def put(self, url: str, **options) -> Result:
        """Execute PUT request."""
        return self.request("PUT", url, **options)

    def delete(self, url: str, **options) -> Result:
        """Execute DELETE request."""
        return self.request("DELETE", url, **options)

    def head(self, url: str, **options) -> Result:
        """Execute HEAD request."""
        return self.request("HEAD", url, **options)

    def bulk(self, body: str = "", **options) -> Result:
        """Post newline-delimited action/data lines to ``_bulk``.

        The body is passed through verbatim with a trailing newline added.
        """
        return self.request("POST", "_bulk", body=body + "\n", **options)

"""Pytest configuration and fixtures."""

import httpx
import pytest

from elastic_tools.client.config import ElasticConfig
from elastic_tools.client.http import ElasticHTTP


class Recorder:
    """httpx mock transport handler that records requests.

    Queue responses (or exceptions to raise) with ``respond``/``fail``; when
    the queue is empty every request gets ``200 {}``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._queue: list = []

    def respond(self, status_code: int = 200, json=None, content: bytes | None = None):
        if content is None and json is not None:
            self._queue.append(httpx.Response(status_code, json=json))
        else:
            self._queue.append(httpx.Response(status_code, content=content or b""))
        return self

    def fail(self, exception: Exception):
        self._queue.append(exception)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        item = self._queue.pop(0) if self._queue else httpx.Response(200, json={})
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def config():
    """Create a test config."""
    return ElasticConfig(
        base_url="http://localhost:9200",
        timeout=5.0,
    )


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_http(recorder):
    """Build an ElasticHTTP for a config, wired to the recorder."""

    def _make(config: ElasticConfig) -> ElasticHTTP:
        client = httpx.Client(transport=httpx.MockTransport(recorder))
        return ElasticHTTP(config, client=client)

    return _make


@pytest.fixture
def http(make_http, config):
    """Request pipeline for the test config."""
    return make_http(config)

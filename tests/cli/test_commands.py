"""Tests for CLI commands."""

import json
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner
from tenacity import wait_none

from elastic_tools.cli.main import cli
from elastic_tools.client.api import ElasticAPI
from elastic_tools.client.config import ElasticConfig


@pytest.fixture
def runner():
    """Create Click CLI runner."""
    return CliRunner()


@pytest.fixture
def api(make_http):
    """API wired to the recorder, patched in as the CLI's client."""
    api = ElasticAPI(http=make_http(ElasticConfig(index_prefix="co")))
    with patch("elastic_tools.cli.common.ElasticAPI", return_value=api):
        yield api


class TestIndexCommands:
    """Tests for index commands."""

    def test_create(self, runner, api, recorder):
        recorder.respond(200, json={"acknowledged": True})
        result = runner.invoke(cli, ["index", "create", "answer", "--params", '{"settings": {}}'])
        assert result.exit_code == 0, result.output
        assert (recorder.last.method, recorder.last.url.path) == ("PUT", "/co_answer")
        assert json.loads(recorder.last.content) == {"settings": {}}
        assert "acknowledged" in result.output

    def test_create_invalid_params(self, runner, api, recorder):
        result = runner.invoke(cli, ["index", "create", "answer", "--params", "{nope"])
        assert result.exit_code != 0
        assert recorder.requests == []

    def test_delete_requires_confirmation(self, runner, api, recorder):
        result = runner.invoke(cli, ["index", "delete", "answer"], input="n\n")
        assert result.exit_code != 0
        assert recorder.requests == []

    def test_delete_confirmed(self, runner, api, recorder):
        result = runner.invoke(cli, ["index", "delete", "answer", "--yes"])
        assert result.exit_code == 0, result.output
        assert recorder.last.method == "DELETE"

    def test_exists(self, runner, api, recorder):
        recorder.respond(200)
        result = runner.invoke(cli, ["index", "exists", "answer"])
        assert result.exit_code == 0
        assert "co_answer exists" in result.output

    def test_missing(self, runner, api, recorder):
        recorder.respond(404)
        result = runner.invoke(cli, ["index", "exists", "answer"])
        assert result.exit_code == 1
        assert "does not exist" in result.output

    def test_error_exits_non_zero(self, runner, api, recorder):
        recorder.respond(400, json={"error": {"type": "resource_already_exists_exception"}})
        result = runner.invoke(cli, ["index", "create", "answer"])
        assert result.exit_code == 1
        assert "HTTP 400" in result.output


class TestSearchCommands:
    """Tests for search and count."""

    def test_search_table(self, runner, api, recorder):
        recorder.respond(200, json={"hits": {"hits": [{"_id": "1", "_score": 1.0, "_source": {"text": "hi"}}]}})
        result = runner.invoke(cli, ["search", "answer", '{"query": {"match_all": {}}}'])
        assert result.exit_code == 0, result.output
        assert "1 hits in co_answer" in result.output
        assert (recorder.last.method, recorder.last.url.path) == ("GET", "/co_answer/_search")

    def test_search_no_results(self, runner, api, recorder):
        recorder.respond(200, json={"hits": {"hits": []}})
        result = runner.invoke(cli, ["search", "answer"])
        assert "No results found" in result.output
        assert recorder.last.content == b""

    def test_search_transport_error(self, runner, api, recorder):
        recorder.fail(httpx.ConnectError("refused"))
        result = runner.invoke(cli, ["search", "answer"])
        assert result.exit_code == 1
        assert "Transport error" in result.output

    def test_count(self, runner, api, recorder):
        recorder.respond(200, json={"count": 7})
        result = runner.invoke(cli, ["count", "answer"])
        assert result.exit_code == 0
        assert "7" in result.output

    def test_retries_option(self, runner, api, recorder):
        """Test --retries re-sends after a transport error."""
        recorder.fail(httpx.ConnectError("refused")).respond(200, json={"count": 1})
        with patch("elastic_tools.client.retry.RETRY_CONFIG", {"attempts": 3, "wait": wait_none()}):
            result = runner.invoke(cli, ["--retries", "2", "count", "answer"])
        assert result.exit_code == 0, result.output
        assert len(recorder.requests) == 2


class TestDocumentCommands:
    """Tests for doc commands."""

    def test_put_with_id(self, runner, api, recorder):
        result = runner.invoke(cli, ["doc", "put", "answer", "answer", '{"text": "hi"}', "--id", "1"])
        assert result.exit_code == 0, result.output
        assert (recorder.last.method, recorder.last.url.path) == ("PUT", "/co_answer/answer/1")

    def test_get_not_found(self, runner, api, recorder):
        recorder.respond(404, json={"found": False})
        result = runner.invoke(cli, ["doc", "get", "answer", "answer", "1"])
        assert result.exit_code == 1
        assert "HTTP 404" in result.output


class TestBulkCommand:
    """Tests for bulk."""

    def test_bulk_file(self, runner, api, recorder, tmp_path):
        path = tmp_path / "actions.ndjson"
        path.write_text('{"index": {"_index": "answer", "_id": "1"}}\n{"text": "hi"}\n')
        recorder.respond(200, json={"errors": False, "items": []})
        result = runner.invoke(cli, ["bulk", str(path)])
        assert result.exit_code == 0, result.output
        assert recorder.last.url.path == "/_bulk"
        assert recorder.last.content == b'{"index": {"_index": "answer", "_id": "1"}}\n{"text": "hi"}\n'

    def test_bulk_item_errors(self, runner, api, recorder, tmp_path):
        path = tmp_path / "actions.ndjson"
        path.write_text('{"create": {"_index": "answer", "_id": "1"}}\n{"text": "hi"}')
        recorder.respond(200, json={"errors": True, "items": [{"create": {"status": 409, "error": {"type": "conflict"}}}]})
        result = runner.invoke(cli, ["bulk", str(path)])
        assert result.exit_code == 1
        assert "1 item(s) failed" in result.output


class TestInfoCommand:
    """Tests for info."""

    def test_info(self, runner, api, recorder):
        recorder.respond(200, json={"cluster_name": "docker-cluster"})
        result = runner.invoke(cli, ["info"])
        assert result.exit_code == 0, result.output
        assert "http://localhost:9200" in result.output
        assert "docker-cluster" in result.output

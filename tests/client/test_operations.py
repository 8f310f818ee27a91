"""Tests for document, bulk and user operations."""

import json

import pytest

from elastic_tools.client.api import ElasticAPI
from elastic_tools.client.bulk import Bulk, bulk_body
from elastic_tools.client.config import ElasticConfig
from elastic_tools.client.documents import Documents
from elastic_tools.client.results import Ok
from elastic_tools.client.users import Users, is_valid_username


class TestDocuments:
    """Tests for Documents."""

    @pytest.fixture
    def documents(self, make_http):
        return Documents(make_http(ElasticConfig(index_prefix="co")))

    def test_index_with_id(self, documents, recorder):
        documents.index("answer", "answer", 1, {"text": "hi"})
        assert (recorder.last.method, recorder.last.url.path) == ("PUT", "/co_answer/answer/1")
        assert json.loads(recorder.last.content) == {"text": "hi"}

    def test_index_without_id(self, documents, recorder):
        """Test a missing id lets the store assign one."""
        documents.index("answer", "answer", None, {"text": "hi"})
        assert (recorder.last.method, recorder.last.url.path) == ("POST", "/co_answer/answer")

    def test_update_is_index(self, documents, recorder):
        documents.update("answer", "answer", "1", {"text": "hi"})
        assert (recorder.last.method, recorder.last.url.path) == ("PUT", "/co_answer/answer/1")

    def test_get_and_delete(self, documents, recorder):
        documents.get("answer", "answer", "1")
        documents.delete("answer", "answer", "1")
        assert [(r.method, r.url.path) for r in recorder.requests] == [
            ("GET", "/co_answer/answer/1"),
            ("DELETE", "/co_answer/answer/1"),
        ]

    def test_id_is_escaped(self, documents, recorder):
        documents.get("answer", "answer", "a/b c")
        assert recorder.last.url.raw_path == b"/co_answer/answer/a%2Fb%20c"


class TestBulk:
    """Tests for bulk helpers."""

    def test_index_body(self):
        body = bulk_body("index", [("answer", "answer", 1, {"text": "hi"})])
        assert body.split("\n") == [
            '{"index": {"_index": "answer", "_type": "answer", "_id": "1"}}',
            '{"text": "hi"}',
        ]

    def test_update_wraps_doc(self):
        body = bulk_body("update", [("answer", "answer", 1, {"text": "hi"})])
        assert json.loads(body.split("\n")[1]) == {"doc": {"text": "hi"}}

    def test_missing_id_omitted(self):
        body = bulk_body("create", [("answer", "answer", None, {"text": "hi"})])
        assert json.loads(body.split("\n")[0]) == {"create": {"_index": "answer", "_type": "answer"}}

    def test_index_posts_prefixed_names(self, make_http, recorder):
        bulk = Bulk(make_http(ElasticConfig(index_prefix="co", environment="test")))
        bulk.index("answer", "answer", [(1, {"text": "a"}), (2, {"text": "b"})])

        assert (recorder.last.method, recorder.last.url.path) == ("POST", "/_bulk")
        lines = recorder.last.content.decode().split("\n")
        assert lines[-1] == ""
        assert [json.loads(line) for line in lines[:-1]] == [
            {"index": {"_index": "co_test_answer", "_type": "answer", "_id": "1"}},
            {"text": "a"},
            {"index": {"_index": "co_test_answer", "_type": "answer", "_id": "2"}},
            {"text": "b"},
        ]

    def test_raw_uses_names_verbatim(self, http, recorder):
        Bulk(http).create_raw([("exact_name", "answer", "1", {"text": "a"})])
        first = json.loads(recorder.last.content.decode().split("\n")[0])
        assert first["create"]["_index"] == "exact_name"


class TestUsers:
    """Tests for native realm users."""

    @pytest.mark.parametrize("name", ["a", "elastic", "john doe", "x" * 1024, "!~"])
    def test_valid_names(self, name):
        assert is_valid_username(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", " lead", "trail ", " both ", "x" * 1025, "tab\there", "café"],
    )
    def test_invalid_names(self, name):
        assert is_valid_username(name) is False

    def test_put(self, http, recorder):
        Users(http).put("john doe", "s3cret!", ["reader"], full_name="John Doe")
        assert recorder.last.method == "PUT"
        assert recorder.last.url.raw_path == b"/_security/user/john%20doe"
        assert json.loads(recorder.last.content) == {
            "password": "s3cret!",
            "roles": ["reader"],
            "full_name": "John Doe",
        }

    def test_invalid_name_sends_nothing(self, http, recorder):
        with pytest.raises(ValueError, match="Invalid username"):
            Users(http).delete(" bad")
        assert recorder.requests == []


class TestElasticAPI:
    """Tests for the facade."""

    def test_groups_share_pipeline(self, http):
        api = ElasticAPI(http=http)
        assert api.indices.http is http
        assert api.documents.http is http
        assert api.bulk.http is http
        assert api.config is http.config

    def test_info(self, http, recorder):
        recorder.respond(200, json={"version": {"number": "7.10.2"}})
        assert ElasticAPI(http=http).info() == Ok(200, {"version": {"number": "7.10.2"}})
        assert recorder.last.url.path == "/"

    def test_context_manager_closes(self, http):
        with ElasticAPI(http=http):
            pass
        assert http._client is None

    def test_base_url_path_prefix_for_every_group(self, make_http, recorder):
        """Test index, bulk, user and info calls all go under the base URL's path."""
        api = ElasticAPI(http=make_http(ElasticConfig(base_url="http://proxy.local/es")))
        api.indices.create("answer")
        api.bulk.index("answer", "answer", [(1, {"text": "a"})])
        api.users.get("bob")
        api.info()
        assert [str(r.url) for r in recorder.requests] == [
            "http://proxy.local/es/answer",
            "http://proxy.local/es/_bulk",
            "http://proxy.local/es/_security/user/bob",
            "http://proxy.local/es/",
        ]

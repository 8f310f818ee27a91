"""Index naming and index-level operations."""

from dataclasses import dataclass
from typing import Any

from .config import ElasticConfig
from .http import ElasticHTTP
from .results import Result, is_status


def index_name(
    logical: str,
    prefix: str | None = None,
    environment: str | None = None,
) -> str:
    """Join prefix, environment tag and logical name with underscores.

    Missing or empty components are dropped:

        index_name("answer") == "answer"
        index_name("answer", "co", "dev") == "co_dev_answer"
        index_name("answer", "", "dev") == "dev_answer"
    """
    return "_".join(part for part in (prefix, environment, logical) if part)


@dataclass(frozen=True)
class Query:
    """A query body bound to the logical index it runs against."""

    index: str
    body: Any = None


def build_query(index: str, body: Any) -> Query:
    """Bind a query body to a logical index."""
    return Query(index=index, body=body)


class Indices:
    """Operations on whole indices.

    Every method takes a logical index name and expands it with the configured
    ``index_prefix`` and ``environment``. With ``ELASTIC_INDEX_PREFIX=elastic``
    and ``ELASTIC_ENVIRONMENT=dev``, ``create("answer")`` creates
    ``elastic_dev_answer``.
    """

    def __init__(self, http: ElasticHTTP):
        self.http = http

    @property
    def config(self) -> ElasticConfig:
        return self.http.config

    def name(self, index: str) -> str:
        """Fully qualified name of a logical index."""
        return index_name(index, self.config.index_prefix, self.config.environment)

    def url(self, path: str) -> str:
        """Build a REST URL from an already constructed path (and query string)."""
        return f"{self.config.base_url}/{path}"

    def create(self, index: str, params: Any = None) -> Result:
        """Create an index, optionally with settings, mappings and aliases.

        Example:
            indices.create("answer", {"settings": {"number_of_shards": 2}})
        """
        return self.http.put(self.url(self.name(index)), body=params)

    def delete(self, index: str) -> Result:
        """Delete an index."""
        return self.http.delete(self.url(self.name(index)))

    def refresh(self, index: str) -> Result:
        """Make recent changes to an index visible to search."""
        return self.http.post(self.url(f"{self.name(index)}/_refresh"))

    def exists(self, index: str) -> bool:
        """Check if an index exists.

        True only for a 200 response. A 404, any other status or a transport
        error all count as "does not exist".
        """
        return is_status(self.http.head(self.url(self.name(index))), 200)

    def open(self, index: str) -> Result:
        """Open a closed index."""
        return self.http.post(self.url(f"{self.name(index)}/_open"))

    def close(self, index: str) -> Result:
        """Close an index."""
        return self.http.post(self.url(f"{self.name(index)}/_close"))

    def search(self, query: Query) -> Result:
        return self.http.get(self.url(f"{self.name(query.index)}/_search"), body=query.body)

    def count(self, query: Query) -> Result:
        return self.http.get(self.url(f"{self.name(query.index)}/_count"), body=query.body)

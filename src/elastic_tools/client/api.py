"""High-level API bundling every operation behind one object."""

from typing import Any

from .bulk import Bulk
from .config import ElasticConfig
from .documents import Documents
from .http import ElasticHTTP
from .indices import Indices
from .results import Result
from .users import Users


class ElasticAPI:
    """High-level API for the store.

    Owns a request pipeline and exposes the operation groups built on it.

    Usage:
        # Auto-configure from environment
        with ElasticAPI() as es:
            es.indices.create("answer")
            es.documents.index("answer", "answer", 1, {"text": "hi"})

        # Explicit configuration
        es = ElasticAPI(ElasticConfig(base_url="https://search.example.com"))

        # Inject a custom pipeline (for testing)
        es = ElasticAPI(http=ElasticHTTP(config, client=mock_client))
    """

    def __init__(
        self,
        config: ElasticConfig | None = None,
        http: ElasticHTTP | None = None,
    ):
        """Initialize API client.

        Args:
            config: Configuration (loads from environment if None)
            http: Optional pre-configured pipeline. If provided, config is
                ignored in favour of the pipeline's own.
        """
        self.http = http or ElasticHTTP(config)
        self.config = self.http.config
        self.indices = Indices(self.http)
        self.documents = Documents(self.http)
        self.bulk = Bulk(self.http)
        self.users = Users(self.http)

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
        return False

    def close(self) -> None:
        """Close API client and release resources."""
        self.http.close()

    def info(self) -> Result:
        """Cluster name and version (``GET /``)."""
        return self.http.get("/")

    def document_api(self, record_type: type) -> Any:
        """Document API for a record type, sharing this client's pipeline."""
        from ..document.api import DocumentAPI

        return DocumentAPI(record_type, self.http)

"""Factory for configured request pipelines.

Configuration is explicit: every component takes an ``ElasticHTTP`` built
from an ``ElasticConfig``. For the common single-cluster case a process-wide
default is assembled once from the environment.
"""

import functools

from .config import ElasticConfig
from .http import ElasticHTTP


def create_http(config: ElasticConfig | None = None) -> ElasticHTTP:
    """Create a request pipeline for a configuration.

    Args:
        config: Endpoint configuration. If None, loads from environment.

    Raises:
        ValueError: If the signing configuration is incomplete.

    Example:
        http = create_http(ElasticConfig(base_url="https://search.example.com"))
    """
    return ElasticHTTP(config or ElasticConfig())


@functools.lru_cache(maxsize=1)
def get_default_http() -> ElasticHTTP:
    """Process-wide pipeline built from environment configuration.

    Built on first use and reused afterwards. To change settings build a new
    pipeline with ``create_http`` and pass it explicitly.
    """
    return create_http()
